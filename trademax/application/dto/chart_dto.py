"""
TradeMax – Application DTO: Chart frame
=========================================
Contrato entre el caso de uso de chart y la capa de presentación:
todo lo que el renderer necesita para pintar un frame.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

from trademax.domain.value_objects.chart_shapes import CandleShape, GridLine, VolumeBar
from trademax.domain.value_objects.viewport import SmaPoint, ViewportGeometry


@dataclass
class ChartFrameDTO:
    """Frame completo del chart de un instrumento."""

    symbol: str
    geometry: ViewportGeometry
    sma_period: int
    sma: List[SmaPoint] = field(default_factory=list)
    candles: List[CandleShape] = field(default_factory=list)
    volume_bars: List[VolumeBar] = field(default_factory=list)
    grid: List[GridLine] = field(default_factory=list)
    sma_path: List[Tuple[float, float]] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "symbol": self.symbol,
            "geometry": self.geometry.to_dict(),
            "sma_period": self.sma_period,
            "sma": [{"index": p.index, "value": p.value} for p in self.sma],
            "candles": [s.to_dict() for s in self.candles],
            "volume_bars": [b.to_dict() for b in self.volume_bars],
            "grid": [g.to_dict() for g in self.grid],
            "sma_path": [{"x": x, "y": y} for x, y in self.sma_path],
        }
