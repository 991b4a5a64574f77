"""Domain value objects."""
from trademax.domain.value_objects.chart_shapes import CandleShape, GridLine, VolumeBar
from trademax.domain.value_objects.viewport import (
    HoverSelection,
    Padding,
    SmaPoint,
    ViewportGeometry,
)

__all__ = [
    "CandleShape",
    "GridLine",
    "VolumeBar",
    "HoverSelection",
    "Padding",
    "SmaPoint",
    "ViewportGeometry",
]
