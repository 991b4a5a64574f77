"""
TradeMax – Domain Value Objects: Viewport
===========================================
Geometría del chart: mapeo dominio (índice de vela, precio, volumen) ↔ píxeles.

- ViewportGeometry es inmutable y se recalcula completa en cada cambio de
  historial o de tamaño de superficie (ver ViewportMapper.recompute).
- Los casos degenerados (rango de precio 0, volumen máximo 0, sin velas)
  se resuelven con ramas explícitas; nunca se propaga NaN/Infinity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Optional

from trademax.domain.entities.candle import Candle


class SmaPoint(NamedTuple):
    """Punto del SMA: índice de vela en el historial y media de closes."""

    index: int
    value: float


@dataclass(frozen=True, slots=True)
class Padding:
    """Márgenes interiores de la superficie en píxeles."""

    top: float = 20.0
    bottom: float = 30.0
    left: float = 10.0
    right: float = 60.0

    def to_dict(self) -> dict:
        return {
            "top": self.top,
            "bottom": self.bottom,
            "left": self.left,
            "right": self.right,
        }


@dataclass(frozen=True, slots=True)
class ViewportGeometry:
    """Resultado puro de ViewportMapper.recompute()."""

    width: float
    height: float
    padding: Padding
    plot_width: float
    plot_height: float
    min_price: float
    max_price: float
    max_volume: float
    volume_band_height: float
    slot_width: float
    candles: tuple[Candle, ...] = ()

    @property
    def candle_count(self) -> int:
        return len(self.candles)

    @property
    def price_range(self) -> float:
        return self.max_price - self.min_price

    @property
    def is_flat(self) -> bool:
        """Dominio degenerado: todos los precios caen en la línea media."""
        return self.price_range == 0

    @property
    def mid_y(self) -> float:
        return self.padding.top + self.plot_height / 2

    def price_to_y(self, price: float) -> float:
        """
        y = plot_height − ((price − min) / (max − min)) × plot_height + top

        Monótona decreciente: mayor precio → menor y.
        """
        price_range = self.price_range
        if price_range == 0:
            return self.mid_y
        ratio = (price - self.min_price) / price_range
        return self.plot_height - ratio * self.plot_height + self.padding.top

    def y_to_price(self, y: float) -> Optional[float]:
        """Inversa de price_to_y. None si el dominio es plano."""
        if self.plot_height == 0 or self.is_flat:
            return None
        ratio = (self.plot_height + self.padding.top - y) / self.plot_height
        return self.min_price + ratio * self.price_range

    def volume_to_height(self, volume: float) -> float:
        """Lineal [0, max_volume] → [0, volume_band_height]."""
        if self.max_volume == 0:
            return 0.0
        return volume / self.max_volume * self.volume_band_height

    def slot_left(self, index: int) -> float:
        """Borde izquierdo del slot de la vela `index`."""
        return self.padding.left + index * self.slot_width

    def slot_center(self, index: int) -> float:
        """Centro del slot: x de la mecha y del punto SMA."""
        return self.slot_left(index) + self.slot_width / 2

    def to_dict(self) -> dict:
        """Serialización para API (sin las velas)."""
        return {
            "width": self.width,
            "height": self.height,
            "padding": self.padding.to_dict(),
            "plot_width": self.plot_width,
            "plot_height": self.plot_height,
            "min_price": self.min_price,
            "max_price": self.max_price,
            "max_volume": self.max_volume,
            "volume_band_height": self.volume_band_height,
            "slot_width": self.slot_width,
            "candle_count": self.candle_count,
        }


@dataclass(frozen=True, slots=True)
class HoverSelection:
    """Vela bajo el puntero más el valor del indicador y el crosshair."""

    index: int
    candle: Candle
    sma: Optional[float]
    crosshair_x: float
    crosshair_y: float

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "candle": self.candle.to_dict(),
            "sma": self.sma,
            "crosshair": {"x": self.crosshair_x, "y": self.crosshair_y},
        }
