"""
TradeMax – Shared Module
==========================
Utilidades transversales usadas por todas las capas.

- config/: Settings y datos de referencia del universo
- logging/: Setup de logging

NOTA: Este módulo no contiene lógica de negocio.
"""

from trademax.shared.config.settings import Settings, settings
from trademax.shared.logging.logger import setup_logging, get_logger

__all__ = [
    "Settings",
    "settings",
    "setup_logging",
    "get_logger",
]
