"""
TradeMax – Domain Service: Chart Layout
=========================================
Traduce un ViewportGeometry a primitivas dibujables: velas (mecha + cuerpo),
barras de volumen, líneas de grid con etiqueta de precio y la polilínea del
SMA. Solo geometría; colores y estilo son cosa del renderer.
"""

from __future__ import annotations

from typing import Iterable

from trademax.domain.value_objects.chart_shapes import CandleShape, GridLine, VolumeBar
from trademax.domain.value_objects.viewport import SmaPoint, ViewportGeometry

# Separación horizontal entre cuerpos de velas contiguas (px)
BODY_GAP = 1.0
MIN_BODY_SIZE = 1.0


class ChartLayout:
    """Generador stateless de primitivas del chart."""

    @staticmethod
    def _body_width(geometry: ViewportGeometry) -> float:
        return max(MIN_BODY_SIZE, geometry.slot_width - 2 * BODY_GAP)

    @staticmethod
    def candle_shapes(geometry: ViewportGeometry) -> list[CandleShape]:
        body_width = ChartLayout._body_width(geometry)
        shapes = []
        for i, candle in enumerate(geometry.candles):
            y_open = geometry.price_to_y(candle.open)
            y_close = geometry.price_to_y(candle.close)
            shapes.append(
                CandleShape(
                    sequence_id=candle.sequence_id,
                    wick_x=geometry.slot_center(i),
                    wick_top=geometry.price_to_y(candle.high),
                    wick_bottom=geometry.price_to_y(candle.low),
                    body_x=geometry.slot_left(i) + BODY_GAP,
                    body_y=min(y_open, y_close),
                    body_width=body_width,
                    body_height=max(MIN_BODY_SIZE, abs(y_open - y_close)),
                    is_up=candle.is_up,
                )
            )
        return shapes

    @staticmethod
    def volume_bars(geometry: ViewportGeometry) -> list[VolumeBar]:
        body_width = ChartLayout._body_width(geometry)
        baseline = geometry.padding.top + geometry.plot_height
        bars = []
        for i, candle in enumerate(geometry.candles):
            bar_height = geometry.volume_to_height(candle.volume)
            bars.append(
                VolumeBar(
                    sequence_id=candle.sequence_id,
                    x=geometry.slot_left(i) + BODY_GAP,
                    y=baseline - bar_height,
                    width=body_width,
                    height=bar_height,
                    is_up=candle.is_up,
                )
            )
        return bars

    @staticmethod
    def grid_lines(geometry: ViewportGeometry, steps: int = 5) -> list[GridLine]:
        """steps + 1 líneas equiespaciadas, de max_price (arriba) a min_price."""
        x_start = geometry.padding.left
        x_end = geometry.width - geometry.padding.right
        lines = []
        for i in range(steps + 1):
            lines.append(
                GridLine(
                    y=geometry.plot_height / steps * i + geometry.padding.top,
                    x_start=x_start,
                    x_end=x_end,
                    price=geometry.max_price - geometry.price_range / steps * i,
                )
            )
        return lines

    @staticmethod
    def sma_path(
        geometry: ViewportGeometry, sma_points: Iterable[SmaPoint]
    ) -> list[tuple[float, float]]:
        """Vértices (x, y) de la polilínea del SMA en los centros de slot."""
        return [
            (geometry.slot_center(point.index), geometry.price_to_y(point.value))
            for point in sma_points
        ]
