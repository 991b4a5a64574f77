"""
TradeMax – Domain Service: Candle Aggregator
==============================================
Convierte un stream de precios discretos en un historial acotado de velas
OHLCV: UNA vela completa por tick (sin sub-agregación de ticks finos).

ALGORITMO (append):
  1. open  = close de la vela anterior (o el propio close si no hay historial)
  2. high  = max(open, close) + U₁
     low   = min(open, close) − U₂        U₁, U₂ ~ U[0, wick_factor × volatilidad)
  3. volume ~ randrange(volume_min, volume_max)
  4. Siguiente sequence_id → append con evicción FIFO.

WARM-UP:
  Al registrar un instrumento se siembran `warmup_candles` velas planas
  (open = high = low = close = precio semilla) con volumen nominal, para
  que chart y SMA tengan datos desde el primer frame.

DAY STATS:
  high/low del día sobre los closes y volumen acumulado con incrementos
  aleatorios. Solo se reinician al arrancar el proceso.
"""

from __future__ import annotations

import random

from trademax.domain.entities.candle import Candle
from trademax.domain.entities.candle_history import CandleHistory
from trademax.domain.entities.instrument import DayStats
from trademax.shared.logging.logger import get_logger

logger = get_logger("candle_aggregator")


class CandleAggregator:
    """
    Agregador de velas por tick.

    No mantiene estado propio: opera sobre el CandleHistory y el DayStats
    de cada instrumento, que viven en el MarketStateManager.
    """

    def __init__(
        self,
        rng: random.Random,
        warmup_candles: int = 40,
        warmup_volume: int = 1000,
        wick_factor: float = 0.5,
        volume_min: int = 500,
        volume_max: int = 5500,
        day_volume_increment: int = 500,
        initial_day_volume: int = 1_000_000,
    ) -> None:
        self._rng = rng
        self._warmup_candles = warmup_candles
        self._warmup_volume = warmup_volume
        self._wick_factor = wick_factor
        self._volume_min = volume_min
        self._volume_max = volume_max
        self._day_volume_increment = day_volume_increment
        self._initial_day_volume = initial_day_volume

    # ════════════════════════════════════════════════════════════════
    #  INICIALIZACIÓN
    # ════════════════════════════════════════════════════════════════

    def seed(self, history: CandleHistory, price: float) -> None:
        """Sembrar velas planas de warm-up en un historial vacío."""
        if len(history) > 0:
            return
        for _ in range(self._warmup_candles):
            history.append(
                Candle(
                    sequence_id=history.next_sequence_id,
                    open=price,
                    high=price,
                    low=price,
                    close=price,
                    volume=self._warmup_volume,
                )
            )
        logger.debug(
            "Warm-up sembrado: %d velas planas a %.5f", len(history), price
        )

    def new_day_stats(self, price: float) -> DayStats:
        """Acumulador diario inicial (solo al arrancar la sesión)."""
        return DayStats(
            open=price,
            high=price,
            low=price,
            volume=self._rng.randrange(0, self._initial_day_volume),
        )

    # ════════════════════════════════════════════════════════════════
    #  APPEND
    # ════════════════════════════════════════════════════════════════

    def append(
        self, history: CandleHistory, close: float, volatility: float
    ) -> Candle:
        """Construir la vela del tick y añadirla al historial."""
        last = history.last
        open_ = last.close if last is not None else close

        wick_span = volatility * self._wick_factor
        high = max(open_, close) + self._rng.random() * wick_span
        low = min(open_, close) - self._rng.random() * wick_span
        volume = self._rng.randrange(self._volume_min, self._volume_max)

        candle = Candle(
            sequence_id=history.next_sequence_id,
            open=open_,
            high=high,
            low=low,
            close=close,
            volume=volume,
        )
        history.append(candle)
        return candle

    def update_day_stats(self, day_stats: DayStats, close: float) -> None:
        """Actualizar high/low del día y el volumen acumulado."""
        day_stats.update(
            close, self._rng.randrange(0, self._day_volume_increment)
        )
