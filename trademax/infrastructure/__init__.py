"""
TradeMax – Infrastructure Layer
=================================
Implementaciones concretas sobre asyncio: EventBus y MarketClock.
"""

from trademax.infrastructure.event_bus import EventBus
from trademax.infrastructure.market_clock import MarketClock

__all__ = ["EventBus", "MarketClock"]
