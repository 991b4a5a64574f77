"""
TradeMax – Domain Service: Viewport Mapper
============================================
Calcula la geometría del chart para una superficie width × height.

DOMINIO DE PRECIO:
    range      = max(high) − min(low)        sobre las velas visibles
    min_domain = min(low)  − margin × range
    max_domain = max(high) + margin × range

    range == 0 (datos planos) → todos los precios en la línea media.

ESCALA HORIZONTAL:
    slot_width = (width − left − right) / candle_count

ESCALA DE VOLUMEN:
    [0, max_volume] → [0, volume_band_height]

RESIZE:
    recompute() es una función pura de (width, height, candles): el host de
    layout la invoca cuando notifica un nuevo tamaño. Sin estado oculto,
    recalcular con los mismos argumentos da la misma geometría.
"""

from __future__ import annotations

import math
from typing import Sequence

from trademax.domain.entities.candle import Candle
from trademax.domain.exceptions.domain_errors import ValidationError
from trademax.domain.value_objects.viewport import Padding, ViewportGeometry

# Dominio por defecto cuando no hay velas que mostrar
EMPTY_MIN_PRICE = 0.0
EMPTY_MAX_PRICE = 100.0


class ViewportMapper:
    """Configuración fija (padding, banda de volumen, margen) + recompute puro."""

    def __init__(
        self,
        padding: Padding | None = None,
        volume_band_height: float = 50.0,
        price_margin: float = 0.1,
    ) -> None:
        self._padding = padding or Padding()
        self._volume_band_height = volume_band_height
        self._price_margin = price_margin

    @property
    def padding(self) -> Padding:
        return self._padding

    def recompute(
        self,
        width: float,
        height: float,
        candles: Sequence[Candle],
    ) -> ViewportGeometry:
        """Geometría completa para la superficie y el historial dados."""
        if not (math.isfinite(width) and math.isfinite(height)) or width < 0 or height < 0:
            raise ValidationError(
                f"Superficie inválida: {width}x{height}",
                field="surface",
                value=(width, height),
            )

        padding = self._padding
        plot_width = max(0.0, width - padding.left - padding.right)
        plot_height = max(0.0, height - padding.top - padding.bottom)
        visible = tuple(candles)

        if not visible:
            return ViewportGeometry(
                width=width,
                height=height,
                padding=padding,
                plot_width=plot_width,
                plot_height=plot_height,
                min_price=EMPTY_MIN_PRICE,
                max_price=EMPTY_MAX_PRICE,
                max_volume=0.0,
                volume_band_height=self._volume_band_height,
                slot_width=0.0,
                candles=visible,
            )

        lowest = min(c.low for c in visible)
        highest = max(c.high for c in visible)
        price_range = highest - lowest
        margin = price_range * self._price_margin

        return ViewportGeometry(
            width=width,
            height=height,
            padding=padding,
            plot_width=plot_width,
            plot_height=plot_height,
            min_price=lowest - margin,
            max_price=highest + margin,
            max_volume=max(c.volume for c in visible),
            volume_band_height=self._volume_band_height,
            slot_width=plot_width / len(visible),
            candles=visible,
        )
