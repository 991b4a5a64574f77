"""Tests for the dependency injection container."""

import pytest

from trademax.container import Container, get_container, init_container, reset_container
from trademax.infrastructure.event_bus import EventBus
from trademax.shared.config.settings import Settings


@pytest.fixture
def settings():
    return Settings(random_seed=7, symbols=["GOOG", "ETH"], window_capacity=50, warmup_candles=45)


class TestContainer:
    """Tests for lazy singletons and overrides."""

    def test_singletons_are_shared(self, settings):
        container = Container(settings=settings)

        assert container.market_state is container.market_state
        assert container.simulate_tick is container.simulate_tick
        assert container.generator._rng is container.aggregator._rng

    def test_simulate_tick_registers_universe(self, settings):
        container = Container(settings=settings)
        container.simulate_tick

        assert container.market_state.get_all_symbols() == ["GOOG", "ETH"]
        assert len(container.market_state.get("ETH").history) == 45

    def test_same_seed_same_market(self, settings):
        first = Container(settings=settings)
        second = Container(settings=settings)

        assert first.simulate_tick.execute() == second.simulate_tick.execute()

    def test_override_and_reset(self, settings):
        container = Container(settings=settings)
        bus = EventBus(max_queue_size=1)

        container.override("event_bus", bus)
        assert container.event_bus is bus

        container.reset()
        assert container.event_bus is not bus

    def test_override_unknown_dependency(self, settings):
        with pytest.raises(ValueError):
            Container(settings=settings).override("nope", object())

    def test_global_container_lifecycle(self, settings):
        container = init_container(settings)

        assert get_container() is container
        reset_container()
        assert get_container() is not container
        reset_container()
