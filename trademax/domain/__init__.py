"""
TradeMax – Domain Layer
=========================
Núcleo puro del sistema: random walk, agregación de velas, SMA,
viewport y hit-testing.

- entities/: Candle, CandleHistory, InstrumentInfo, DayStats
- value_objects/: ViewportGeometry, Padding, SmaPoint, HoverSelection, shapes
- services/: Generador, agregador, indicadores, viewport, hit-tester, layout
- exceptions/: Excepciones de dominio

REGLA DE DEPENDENCIA:
Este módulo NO puede importar de application/, infrastructure/ ni
presentation/, ni de frameworks externos (FastAPI, etc.).
"""

from trademax.domain.entities.candle import Candle
from trademax.domain.entities.candle_history import CandleHistory
from trademax.domain.entities.instrument import DayStats, InstrumentInfo
from trademax.domain.value_objects.viewport import (
    HoverSelection,
    Padding,
    SmaPoint,
    ViewportGeometry,
)

__all__ = [
    "Candle",
    "CandleHistory",
    "DayStats",
    "InstrumentInfo",
    "HoverSelection",
    "Padding",
    "SmaPoint",
    "ViewportGeometry",
]
