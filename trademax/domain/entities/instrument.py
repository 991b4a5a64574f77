"""
TradeMax – Domain Entities: Instrument
========================================
Datos de referencia (inmutables) y acumulador diario (mutable) de un
instrumento simulado.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class InstrumentInfo:
    """Metadatos de referencia de un ticker."""

    symbol: str
    name: str
    sector: str
    exchange: str

    def to_dict(self) -> dict:
        return {
            "symbol": self.symbol,
            "name": self.name,
            "sector": self.sector,
            "exchange": self.exchange,
        }


@dataclass
class DayStats:
    """
    Acumulador de la sesión: open/high/low del día y volumen acumulado.

    Se crea al arrancar el proceso y nunca se reinicia por calendario.
    """

    open: float
    high: float
    low: float
    volume: int = 0

    def update(self, close: float, volume_increment: int) -> None:
        """Incorporar un nuevo close al acumulador."""
        self.high = max(self.high, close)
        self.low = min(self.low, close)
        self.volume += volume_increment

    def change_pct(self, price: float) -> float:
        """Variación porcentual del precio respecto al open del día."""
        if self.open == 0:
            return 0.0
        return (price - self.open) / self.open * 100.0

    def to_dict(self) -> dict:
        return {
            "open": self.open,
            "high": self.high,
            "low": self.low,
            "volume": self.volume,
        }
