"""
TradeMax – Market Clock (timer de simulación)
===============================================
Task asyncio periódico que dispara un tick de mercado cada
`tick_interval_seconds` y publica el resultado en el EventBus.

SECUENCIA POR TICK:
  1. SimulateTickUseCase.execute()   → síncrono: genera + agrega + commit
  2. EventBus.publish("candle")      → solo después del commit
  3. EventBus.publish("price_snapshot")

Los handlers HTTP/WS corren entre ticks (en los await) y siempre ven un
historial completo; nunca hay un await entre append y evicción.

CICLO DE VIDA:
  start() → idempotente, lanza el task
  stop()  → cancela y espera el task; no queda trabajo periódico vivo
"""

from __future__ import annotations

import asyncio
import time
from typing import Optional

from trademax.application.ports.event_publisher import IEventPublisher
from trademax.application.state.market_state import MarketStateManager
from trademax.application.use_cases.simulate_tick_usecase import SimulateTickUseCase
from trademax.infrastructure.event_bus import CANDLE_TOPIC, PRICE_SNAPSHOT_TOPIC
from trademax.shared.logging.logger import get_logger

logger = get_logger("market_clock")


class MarketClock:
    """Reloj de mercado cancelable sobre el event loop."""

    def __init__(
        self,
        simulate_tick: SimulateTickUseCase,
        market_state: MarketStateManager,
        publisher: IEventPublisher,
        interval: float = 1.0,
    ) -> None:
        self._simulate_tick = simulate_tick
        self._market_state = market_state
        self._publisher = publisher
        self._interval = interval
        self._task: Optional[asyncio.Task] = None
        self._running = False

        # Estadísticas de monitoreo
        self._ticks = 0
        self._errors = 0
        self._last_tick_time = 0.0

    @property
    def running(self) -> bool:
        return self._running

    # ──────────────────────── Lifecycle ──────────────────────────────────

    async def start(self) -> None:
        """Iniciar el reloj. Idempotente: llamar varias veces es seguro."""
        if self._running:
            logger.warning("MarketClock ya está corriendo, ignorando start()")
            return
        self._running = True
        self._task = asyncio.create_task(self._run(), name="market-clock")
        logger.info("MarketClock iniciado (intervalo=%.2fs)", self._interval)

    async def stop(self) -> None:
        """Shutdown limpio: cancelar el task y esperar a que termine."""
        self._running = False
        if self._task is not None and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
        self._task = None
        logger.info("MarketClock detenido. Ticks ejecutados: %d", self._ticks)

    # ──────────────────────── Loop ──────────────────────────────────────

    async def _run(self) -> None:
        while self._running:
            await asyncio.sleep(self._interval)
            try:
                await self.run_once()
            except Exception as e:
                self._errors += 1
                logger.error("Error en tick de mercado: %s", e, exc_info=True)

    async def run_once(self) -> dict:
        """Un tick completo: commit síncrono y luego publicación."""
        candles = self._simulate_tick.execute()
        self._ticks += 1
        self._last_tick_time = time.time()

        for symbol, candle in candles.items():
            payload = candle.to_dict()
            payload["symbol"] = symbol
            await self._publisher.publish(CANDLE_TOPIC, payload)

        for symbol in candles:
            await self._publisher.publish(
                PRICE_SNAPSHOT_TOPIC, self._market_state.get(symbol).snapshot()
            )
        return candles

    # ──────────────────────── Stats ─────────────────────────────────────

    @property
    def stats(self) -> dict:
        """Estadísticas del reloj para monitoreo."""
        return {
            "running": self._running,
            "interval": self._interval,
            "ticks": self._ticks,
            "errors": self._errors,
            "last_tick_time": self._last_tick_time,
        }
