"""TradeMax – simulador de mercado con chart de velas interactivo."""

__version__ = "0.1.0"
