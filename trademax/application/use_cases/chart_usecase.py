"""
TradeMax – Chart Use Case
===========================
Lecturas del chart de un instrumento: historial, SMA, viewport,
hit-testing y frame completo de render.

Solo lee el historial commiteado por SimulateTickUseCase; nunca lo muta.
"""

from __future__ import annotations

from typing import Iterator, Optional, Sequence

from trademax.application.dto.chart_dto import ChartFrameDTO
from trademax.application.state.market_state import MarketStateManager
from trademax.domain.entities.candle import Candle
from trademax.domain.services.chart_layout import ChartLayout
from trademax.domain.services.hit_tester import HitTester
from trademax.domain.services.indicator_calculator import IndicatorCalculator
from trademax.domain.services.viewport_mapper import ViewportMapper
from trademax.domain.value_objects.viewport import (
    HoverSelection,
    SmaPoint,
    ViewportGeometry,
)


class ChartUseCase:
    """Fachada de lectura por instrumento sobre el MarketStateManager."""

    def __init__(
        self,
        market_state: MarketStateManager,
        viewport_mapper: ViewportMapper,
        sma_period: int = 20,
        grid_steps: int = 5,
    ) -> None:
        self._market_state = market_state
        self._mapper = viewport_mapper
        self._sma_period = sma_period
        self._grid_steps = grid_steps

    @property
    def sma_period(self) -> int:
        return self._sma_period

    def get_history(self, symbol: str) -> list[Candle]:
        """Copia ordenada del historial acotado."""
        return self._market_state.get(symbol).history.to_list()

    def compute_sma(self, symbol: str, period: int | None = None) -> Iterator[SmaPoint]:
        if period is None:
            period = self._sma_period
        return IndicatorCalculator.sma(self.get_history(symbol), period)

    def compute_viewport(
        self, width: float, height: float, candles: Sequence[Candle]
    ) -> ViewportGeometry:
        """Pura: delega en ViewportMapper.recompute()."""
        return self._mapper.recompute(width, height, candles)

    @staticmethod
    def hit_test(pointer_x: float, geometry: ViewportGeometry) -> Optional[Candle]:
        return HitTester.hit_test(pointer_x, geometry)

    def hover(
        self, symbol: str, pointer_x: float, width: float, height: float
    ) -> Optional[HoverSelection]:
        """Selección bajo el puntero para el tamaño de superficie actual."""
        candles = self.get_history(symbol)
        geometry = self.compute_viewport(width, height, candles)
        sma_points = IndicatorCalculator.sma(candles, self._sma_period)
        return HitTester.hover(pointer_x, geometry, sma_points)

    def build_frame(self, symbol: str, width: float, height: float) -> ChartFrameDTO:
        """Geometría + primitivas dibujables de un frame."""
        candles = self.get_history(symbol)
        geometry = self.compute_viewport(width, height, candles)
        sma_points = list(IndicatorCalculator.sma(candles, self._sma_period))
        return ChartFrameDTO(
            symbol=symbol,
            geometry=geometry,
            sma_period=self._sma_period,
            sma=sma_points,
            candles=ChartLayout.candle_shapes(geometry),
            volume_bars=ChartLayout.volume_bars(geometry),
            grid=ChartLayout.grid_lines(geometry, self._grid_steps),
            sma_path=ChartLayout.sma_path(geometry, sma_points),
        )
