"""Domain entities."""
from trademax.domain.entities.candle import Candle
from trademax.domain.entities.instrument import DayStats, InstrumentInfo

__all__ = ["Candle", "DayStats", "InstrumentInfo"]
