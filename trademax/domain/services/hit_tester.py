"""
TradeMax – Domain Service: Hit-Tester / Crosshair
===================================================
Invierte la posición horizontal del puntero al índice de vela:

    index = floor((x − left) / slot_width)

Fuera de [0, candle_count) → sin selección (None), nunca un error.
Función pura de (x, geometría): no toca el historial.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional

from trademax.domain.entities.candle import Candle
from trademax.domain.value_objects.viewport import (
    HoverSelection,
    SmaPoint,
    ViewportGeometry,
)


class HitTester:
    """Hit-testing stateless sobre un ViewportGeometry."""

    @staticmethod
    def index_at(pointer_x: float, geometry: ViewportGeometry) -> Optional[int]:
        """Índice de la vela bajo el puntero, o None."""
        if geometry.slot_width <= 0 or geometry.candle_count == 0:
            return None
        if not math.isfinite(pointer_x):
            return None
        index = math.floor((pointer_x - geometry.padding.left) / geometry.slot_width)
        if 0 <= index < geometry.candle_count:
            return index
        return None

    @staticmethod
    def hit_test(pointer_x: float, geometry: ViewportGeometry) -> Optional[Candle]:
        """Vela bajo el puntero, o None."""
        index = HitTester.index_at(pointer_x, geometry)
        if index is None:
            return None
        return geometry.candles[index]

    @staticmethod
    def hover(
        pointer_x: float,
        geometry: ViewportGeometry,
        sma_points: Iterable[SmaPoint] = (),
    ) -> Optional[HoverSelection]:
        """
        Selección completa para tooltip: OHLCV + SMA (si existe en ese
        índice) + coordenadas del crosshair (centro del slot, y del close).
        """
        index = HitTester.index_at(pointer_x, geometry)
        if index is None:
            return None

        candle = geometry.candles[index]
        sma_value = None
        for point in sma_points:
            if point.index == index:
                sma_value = point.value
                break

        return HoverSelection(
            index=index,
            candle=candle,
            sma=sma_value,
            crosshair_x=geometry.slot_center(index),
            crosshair_y=geometry.price_to_y(candle.close),
        )
