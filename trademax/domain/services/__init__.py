"""Domain services (puros, sin I/O)."""
from trademax.domain.services.candle_aggregator import CandleAggregator
from trademax.domain.services.chart_layout import ChartLayout
from trademax.domain.services.hit_tester import HitTester
from trademax.domain.services.indicator_calculator import IndicatorCalculator
from trademax.domain.services.price_generator import RandomWalkGenerator
from trademax.domain.services.viewport_mapper import ViewportMapper

__all__ = [
    "CandleAggregator",
    "ChartLayout",
    "HitTester",
    "IndicatorCalculator",
    "RandomWalkGenerator",
    "ViewportMapper",
]
