"""Application DTOs."""
from trademax.application.dto.chart_dto import ChartFrameDTO

__all__ = ["ChartFrameDTO"]
