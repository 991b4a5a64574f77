"""
Dependency Injection Container.

Este módulo proporciona el contenedor de inyección de dependencias
que gestiona todas las instancias de servicios, estado y casos de uso.

Clean Architecture: este contenedor vive en la capa más externa y es el único
lugar donde se crean dependencias concretas.
"""

import random
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from trademax.application.state.market_state import MarketStateManager
from trademax.application.state.subscriptions import SubscriptionRegistry
from trademax.application.use_cases.chart_usecase import ChartUseCase
from trademax.application.use_cases.simulate_tick_usecase import SimulateTickUseCase
from trademax.domain.services.candle_aggregator import CandleAggregator
from trademax.domain.services.price_generator import RandomWalkGenerator
from trademax.domain.services.viewport_mapper import ViewportMapper
from trademax.domain.value_objects.viewport import Padding
from trademax.infrastructure.event_bus import EventBus
from trademax.infrastructure.market_clock import MarketClock
from trademax.presentation.websocket.websocket_manager import WebSocketManager
from trademax.shared.config.instruments import INITIAL_PRICES, INSTRUMENT_INFO
from trademax.shared.config.settings import Settings


@dataclass
class Container:
    """
    Contenedor de Inyección de Dependencias.

    Todas las instancias son singletons perezosos: se crean en el primer
    acceso y se comparten entre el reloj, las rutas y el WebSocket.
    """

    settings: Settings = field(default_factory=Settings)

    _rng: Optional[random.Random] = None
    _market_state: Optional[MarketStateManager] = None
    _generator: Optional[RandomWalkGenerator] = None
    _aggregator: Optional[CandleAggregator] = None
    _viewport_mapper: Optional[ViewportMapper] = None
    _simulate_tick: Optional[SimulateTickUseCase] = None
    _chart_usecase: Optional[ChartUseCase] = None
    _event_bus: Optional[EventBus] = None
    _market_clock: Optional[MarketClock] = None
    _ws_manager: Optional[WebSocketManager] = None
    _subscriptions: Optional[SubscriptionRegistry] = None

    # ==================== Domain Services ====================

    @property
    def rng(self) -> random.Random:
        """Fuente aleatoria única de la sesión (seed opcional)."""
        if self._rng is None:
            self._rng = random.Random(self.settings.random_seed)
        return self._rng

    @property
    def generator(self) -> RandomWalkGenerator:
        if self._generator is None:
            self._generator = RandomWalkGenerator(
                self.rng,
                volatility_coefficient=self.settings.volatility_coefficient,
                min_price=self.settings.min_price,
            )
        return self._generator

    @property
    def aggregator(self) -> CandleAggregator:
        if self._aggregator is None:
            s = self.settings
            self._aggregator = CandleAggregator(
                self.rng,
                warmup_candles=s.warmup_candles,
                warmup_volume=s.warmup_volume,
                wick_factor=s.wick_factor,
                volume_min=s.volume_min,
                volume_max=s.volume_max,
                day_volume_increment=s.day_volume_increment,
                initial_day_volume=s.initial_day_volume,
            )
        return self._aggregator

    @property
    def viewport_mapper(self) -> ViewportMapper:
        if self._viewport_mapper is None:
            s = self.settings
            self._viewport_mapper = ViewportMapper(
                padding=Padding(
                    top=s.padding_top,
                    bottom=s.padding_bottom,
                    left=s.padding_left,
                    right=s.padding_right,
                ),
                volume_band_height=s.volume_band_height,
                price_margin=s.price_margin,
            )
        return self._viewport_mapper

    # ==================== State ====================

    @property
    def market_state(self) -> MarketStateManager:
        if self._market_state is None:
            self._market_state = MarketStateManager()
        return self._market_state

    @property
    def subscriptions(self) -> SubscriptionRegistry:
        if self._subscriptions is None:
            self._subscriptions = SubscriptionRegistry(self.market_state)
        return self._subscriptions

    # ==================== Use Cases ====================

    @property
    def simulate_tick(self) -> SimulateTickUseCase:
        """SimulateTickUseCase con el universo ya registrado."""
        if self._simulate_tick is None:
            usecase = SimulateTickUseCase(
                self.market_state,
                self.generator,
                self.aggregator,
                window_capacity=self.settings.window_capacity,
            )
            usecase.register_universe(self.settings.symbols, INSTRUMENT_INFO, INITIAL_PRICES)
            self._simulate_tick = usecase
        return self._simulate_tick

    @property
    def chart_usecase(self) -> ChartUseCase:
        if self._chart_usecase is None:
            self._chart_usecase = ChartUseCase(
                self.market_state,
                self.viewport_mapper,
                sma_period=self.settings.sma_period,
                grid_steps=self.settings.grid_steps,
            )
        return self._chart_usecase

    # ==================== Infrastructure ====================

    @property
    def event_bus(self) -> EventBus:
        if self._event_bus is None:
            self._event_bus = EventBus(max_queue_size=self.settings.event_bus_max_queue_size)
        return self._event_bus

    @property
    def market_clock(self) -> MarketClock:
        if self._market_clock is None:
            self._market_clock = MarketClock(
                self.simulate_tick,
                self.market_state,
                self.event_bus,
                interval=self.settings.tick_interval_seconds,
            )
        return self._market_clock

    @property
    def ws_manager(self) -> WebSocketManager:
        if self._ws_manager is None:
            self._ws_manager = WebSocketManager(self.event_bus)
        return self._ws_manager

    # ==================== Lifecycle ====================

    def reset(self) -> None:
        """Resetea todas las instancias (útil para tests)."""
        self._rng = None
        self._market_state = None
        self._generator = None
        self._aggregator = None
        self._viewport_mapper = None
        self._simulate_tick = None
        self._chart_usecase = None
        self._event_bus = None
        self._market_clock = None
        self._ws_manager = None
        self._subscriptions = None

    def override(self, name: str, instance: Any) -> None:
        """
        Override una dependencia (útil para tests con mocks).

        Args:
            name: Nombre de la dependencia (ej: 'event_bus')
            instance: Instancia a usar
        """
        attr_name = f"_{name}"
        if hasattr(self, attr_name):
            setattr(self, attr_name, instance)
        else:
            raise ValueError(f"Unknown dependency: {name}")


# ==================== Global Container ====================

_container: Optional[Container] = None


def get_container() -> Container:
    """Instancia global del contenedor (singleton)."""
    global _container
    if _container is None:
        _container = Container()
    return _container


def reset_container() -> None:
    """Resetea el contenedor global."""
    global _container
    if _container is not None:
        _container.reset()
    _container = None


def init_container(settings: Optional[Settings] = None) -> Container:
    """
    Inicializa el contenedor con configuración específica.

    Args:
        settings: Configuración opcional. Si es None, usa valores por defecto.
    """
    global _container
    if settings is None:
        settings = Settings()
    _container = Container(settings=settings)
    return _container
