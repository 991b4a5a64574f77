"""Application use cases."""
from trademax.application.use_cases.chart_usecase import ChartUseCase
from trademax.application.use_cases.simulate_tick_usecase import SimulateTickUseCase

__all__ = ["ChartUseCase", "SimulateTickUseCase"]
