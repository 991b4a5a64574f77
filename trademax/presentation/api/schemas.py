"""
TradeMax – API Schemas (Pydantic)
===================================
Schemas de validación para request/response de la API REST.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str
    service: str


class CandleSchema(BaseModel):
    sequence_id: int
    open: float
    high: float
    low: float
    close: float
    volume: int
    is_up: bool


class CandlesResponse(BaseModel):
    symbol: str
    count: int
    candles: List[CandleSchema]


class SmaPointSchema(BaseModel):
    index: int
    value: float


class SmaResponse(BaseModel):
    symbol: str
    period: int
    count: int
    points: List[SmaPointSchema]


class SubscriptionRequest(BaseModel):
    """Body para suscribir o alternar un instrumento."""
    symbol: str = Field(..., min_length=1)
    toggle: bool = False


class SubscriptionsResponse(BaseModel):
    symbols: List[str]


class HoverResponse(BaseModel):
    symbol: str
    hit: bool
    selection: Optional[dict] = None
