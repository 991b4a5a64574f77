"""
TradeMax – Simulate Tick Use Case
===================================
Avanza el random walk y el agregador UN paso por instrumento.

FLUJO (por instrumento, dentro de un tick):
  InstrumentState.price
       │
       ├── RandomWalkGenerator.next_price()   → nuevo close
       ├── CandleAggregator.append()          → vela + evicción FIFO
       ├── CandleAggregator.update_day_stats()
       └── InstrumentState.price = close      → commit

ORDEN GARANTIZADO:
- execute() es síncrono y sin I/O: todos los instrumentos quedan
  commiteados antes de que el MarketClock publique nada, así el Viewport
  Mapper y el SMA nunca leen un historial a medio actualizar.
"""

from __future__ import annotations

from typing import Mapping

from trademax.application.state.market_state import InstrumentState, MarketStateManager
from trademax.domain.entities.candle import Candle
from trademax.domain.entities.candle_history import CandleHistory
from trademax.domain.entities.instrument import InstrumentInfo
from trademax.domain.exceptions.domain_errors import UnknownInstrumentError
from trademax.domain.services.candle_aggregator import CandleAggregator
from trademax.domain.services.price_generator import RandomWalkGenerator
from trademax.shared.logging.logger import get_logger

logger = get_logger("simulate_tick")


class SimulateTickUseCase:
    """
    Caso de uso: simular un tick de mercado para el universo.

    Uso:
        usecase.register_universe(symbols, INSTRUMENT_INFO, INITIAL_PRICES)
        candles = usecase.execute()      # {symbol: Candle}
        candle = usecase.tick("GOOG")    # un solo instrumento
    """

    def __init__(
        self,
        market_state: MarketStateManager,
        generator: RandomWalkGenerator,
        aggregator: CandleAggregator,
        window_capacity: int = 60,
    ) -> None:
        self._market_state = market_state
        self._generator = generator
        self._aggregator = aggregator
        self._window_capacity = window_capacity
        self._ticks_executed = 0

    @property
    def ticks_executed(self) -> int:
        return self._ticks_executed

    # ─── Registro ───────────────────────────────────────────────────────

    def register(self, info: InstrumentInfo, price: float) -> InstrumentState:
        """Crear el estado de un instrumento y sembrar su warm-up."""
        if info.symbol in self._market_state:
            return self._market_state.get(info.symbol)

        price = max(self._generator.min_price, price)
        history = CandleHistory(self._window_capacity)
        self._aggregator.seed(history, price)
        state = InstrumentState(
            info=info,
            price=price,
            day_stats=self._aggregator.new_day_stats(price),
            history=history,
        )
        return self._market_state.add(state)

    def register_universe(
        self,
        symbols: list[str],
        info: Mapping[str, InstrumentInfo],
        prices: Mapping[str, float],
    ) -> None:
        """Registrar el universo fijo de la sesión."""
        for symbol in symbols:
            if symbol not in info or symbol not in prices:
                raise UnknownInstrumentError(symbol)
            self.register(info[symbol], prices[symbol])
        logger.info("Universo registrado: %s", ", ".join(symbols))

    # ─── Tick ───────────────────────────────────────────────────────────

    def tick(self, symbol: str) -> Candle:
        """Avanzar un instrumento un paso y devolver la vela añadida."""
        state = self._market_state.get(symbol)
        previous = state.price
        volatility = self._generator.volatility(previous)
        close = self._generator.next_price(previous)

        candle = self._aggregator.append(state.history, close, volatility)
        self._aggregator.update_day_stats(state.day_stats, close)
        state.price = close
        state.total_ticks += 1

        logger.debug(
            "Vela %s #%d O=%.5f H=%.5f L=%.5f C=%.5f V=%d",
            symbol,
            candle.sequence_id,
            candle.open,
            candle.high,
            candle.low,
            candle.close,
            candle.volume,
        )
        return candle

    def execute(self) -> dict[str, Candle]:
        """Un tick completo del reloj: todos los instrumentos, en orden."""
        candles = {
            symbol: self.tick(symbol)
            for symbol in self._market_state.get_all_symbols()
        }
        self._ticks_executed += 1
        return candles
