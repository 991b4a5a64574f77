"""Estado en memoria de la sesión."""
from trademax.application.state.market_state import InstrumentState, MarketStateManager
from trademax.application.state.subscriptions import SubscriptionRegistry

__all__ = ["InstrumentState", "MarketStateManager", "SubscriptionRegistry"]
