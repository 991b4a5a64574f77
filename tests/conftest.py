"""Shared fixtures for the TradeMax test suite."""

import random

import pytest

from trademax.application.state.market_state import MarketStateManager
from trademax.application.use_cases.chart_usecase import ChartUseCase
from trademax.application.use_cases.simulate_tick_usecase import SimulateTickUseCase
from trademax.domain.entities.candle import Candle
from trademax.domain.entities.instrument import InstrumentInfo
from trademax.domain.services.candle_aggregator import CandleAggregator
from trademax.domain.services.price_generator import RandomWalkGenerator
from trademax.domain.services.viewport_mapper import ViewportMapper


@pytest.fixture
def rng():
    """Seeded random source so every run draws the same sequence."""
    return random.Random(1234)


@pytest.fixture
def make_candles():
    """Factory building a valid candle list from a sequence of closes.

    Each candle opens at the previous close and has wicks of ``wick`` above
    and below the body.
    """

    def _make(closes, wick=0.5, volume=1000, start_id=0):
        candles = []
        previous = closes[0] if closes else 0.0
        for offset, close in enumerate(closes):
            open_ = previous
            candles.append(
                Candle(
                    sequence_id=start_id + offset,
                    open=open_,
                    high=max(open_, close) + wick,
                    low=min(open_, close) - wick,
                    close=close,
                    volume=volume,
                )
            )
            previous = close
        return candles

    return _make


@pytest.fixture
def goog_info():
    return InstrumentInfo("GOOG", "Alphabet Inc.", "Technology", "NASDAQ")


@pytest.fixture
def tsla_info():
    return InstrumentInfo("TSLA", "Tesla Inc.", "Automotive", "NASDAQ")


@pytest.fixture
def market_state():
    return MarketStateManager()


@pytest.fixture
def simulate_tick(rng, market_state, goog_info, tsla_info):
    """SimulateTickUseCase with GOOG and TSLA registered."""
    usecase = SimulateTickUseCase(
        market_state,
        RandomWalkGenerator(rng),
        CandleAggregator(rng),
        window_capacity=60,
    )
    usecase.register(goog_info, 142.50)
    usecase.register(tsla_info, 245.80)
    return usecase


@pytest.fixture
def chart_usecase(market_state, simulate_tick):
    return ChartUseCase(market_state, ViewportMapper(), sma_period=20)
