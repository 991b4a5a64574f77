"""Tests for the in-memory market state and the subscription registry."""

import pytest

from trademax.application.state.subscriptions import SubscriptionRegistry
from trademax.domain.exceptions import UnknownInstrumentError


class TestMarketStateManager:
    """Tests for per-instrument state lookup."""

    def test_registered_symbols_in_order(self, market_state, simulate_tick):
        assert market_state.get_all_symbols() == ["GOOG", "TSLA"]
        assert "GOOG" in market_state
        assert "BTC" not in market_state

    def test_unknown_symbol_raises(self, market_state):
        with pytest.raises(UnknownInstrumentError) as exc_info:
            market_state.get("XYZ")

        assert exc_info.value.code == "UNKNOWN_INSTRUMENT"
        assert exc_info.value.symbol == "XYZ"

    def test_snapshot_fields(self, market_state, simulate_tick):
        snapshot = market_state.get("GOOG").snapshot()

        assert snapshot["symbol"] == "GOOG"
        assert snapshot["price"] == 142.50
        assert snapshot["change_pct"] == 0.0
        assert snapshot["candles_in_buffer"] == 40
        assert snapshot["info"]["exchange"] == "NASDAQ"
        assert set(market_state.snapshot()) == {"GOOG", "TSLA"}

    def test_add_is_idempotent(self, market_state, simulate_tick):
        state = market_state.get("GOOG")

        assert market_state.add(state) is state
        assert len(market_state.states()) == 2


class TestSubscriptionRegistry:
    """Tests for the displayed-instrument list."""

    def test_subscribe_preserves_order(self, market_state, simulate_tick):
        registry = SubscriptionRegistry(market_state)

        registry.subscribe("TSLA")
        symbols = registry.subscribe("GOOG")

        assert symbols == ["TSLA", "GOOG"]
        assert registry.is_subscribed("GOOG")

    def test_subscribe_twice_keeps_one_entry(self, market_state, simulate_tick):
        registry = SubscriptionRegistry(market_state)

        registry.subscribe("GOOG")

        assert registry.subscribe("GOOG") == ["GOOG"]

    def test_toggle(self, market_state, simulate_tick):
        registry = SubscriptionRegistry(market_state)

        assert registry.toggle("GOOG") == ["GOOG"]
        assert registry.toggle("GOOG") == []

    def test_unknown_symbol_rejected(self, market_state, simulate_tick):
        registry = SubscriptionRegistry(market_state)

        with pytest.raises(UnknownInstrumentError):
            registry.subscribe("XYZ")
        with pytest.raises(UnknownInstrumentError):
            registry.unsubscribe("XYZ")

    def test_symbols_returns_copy(self, market_state, simulate_tick):
        registry = SubscriptionRegistry(market_state)
        registry.subscribe("GOOG")

        registry.symbols.append("TSLA")

        assert registry.symbols == ["GOOG"]
