"""
TradeMax – Subscription Registry
==================================
Lista de instrumentos que el usuario tiene en pantalla (watchlist).

La simulación sigue corriendo para todo el universo; la suscripción solo
decide qué charts se muestran. El orden de suscripción se conserva.
"""

from __future__ import annotations

from trademax.application.state.market_state import MarketStateManager
from trademax.shared.logging.logger import get_logger

logger = get_logger("subscriptions")


class SubscriptionRegistry:
    """Instrumentos suscritos, validados contra el universo."""

    def __init__(self, market_state: MarketStateManager) -> None:
        self._market_state = market_state
        self._symbols: list[str] = []

    def subscribe(self, symbol: str) -> list[str]:
        # get() lanza UnknownInstrumentError fuera del universo
        self._market_state.get(symbol)
        if symbol not in self._symbols:
            self._symbols.append(symbol)
            logger.info("Suscrito a '%s' (%d activos)", symbol, len(self._symbols))
        return self.symbols

    def unsubscribe(self, symbol: str) -> list[str]:
        self._market_state.get(symbol)
        if symbol in self._symbols:
            self._symbols.remove(symbol)
            logger.info("Desuscrito de '%s' (%d activos)", symbol, len(self._symbols))
        return self.symbols

    def toggle(self, symbol: str) -> list[str]:
        if symbol in self._symbols:
            return self.unsubscribe(symbol)
        return self.subscribe(symbol)

    def is_subscribed(self, symbol: str) -> bool:
        return symbol in self._symbols

    @property
    def symbols(self) -> list[str]:
        return list(self._symbols)
