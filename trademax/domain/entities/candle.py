"""
TradeMax – Domain Entity: Candle
==================================
Vela OHLCV inmutable producida por el Candle Aggregator (una por tick).

Decisiones de diseño:
- frozen=True → inmutable una vez añadida al historial.
- Las invariantes OHLC se validan en la construcción; una vela inválida
  nunca llega a existir.
- Se usa dataclass por rendimiento (más ligera que Pydantic para hot-path).
"""

from __future__ import annotations

from dataclasses import dataclass

from trademax.domain.exceptions.domain_errors import InvalidCandleError


@dataclass(frozen=True, slots=True)
class Candle:
    """Vela OHLCV identificada por su número de secuencia."""

    sequence_id: int     # monótono por instrumento, empieza en 0
    open: float
    high: float
    low: float
    close: float
    volume: float

    def __post_init__(self) -> None:
        if self.sequence_id < 0:
            raise InvalidCandleError(
                f"sequence_id negativo: {self.sequence_id}",
                sequence_id=self.sequence_id,
            )
        if self.high < max(self.open, self.close):
            raise InvalidCandleError(
                f"high={self.high} < max(open, close)={max(self.open, self.close)}",
                sequence_id=self.sequence_id,
            )
        if self.low > min(self.open, self.close):
            raise InvalidCandleError(
                f"low={self.low} > min(open, close)={min(self.open, self.close)}",
                sequence_id=self.sequence_id,
            )
        if self.volume < 0:
            raise InvalidCandleError(
                f"volumen negativo: {self.volume}",
                sequence_id=self.sequence_id,
            )

    @property
    def is_up(self) -> bool:
        """Vela alcista (close ≥ open)."""
        return self.close >= self.open

    def to_dict(self) -> dict:
        """Serialización para WebSocket / frontend."""
        return {
            "sequence_id": self.sequence_id,
            "open": self.open,
            "high": self.high,
            "low": self.low,
            "close": self.close,
            "volume": self.volume,
            "is_up": self.is_up,
        }
