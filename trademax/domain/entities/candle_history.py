"""
TradeMax – Domain Entity: Candle History
==========================================
Ventana deslizante acotada de velas de UN instrumento.

PROTECCIÓN DE MEMORIA:
- collections.deque con maxlen → la vela más antigua se descarta (FIFO)
  automáticamente al superar la capacidad. O(1) en append.

ORDEN:
- El orden de inserción es cronológico y significativo.
- sequence_id debe ser estrictamente creciente; un append fuera de orden
  lanza InvalidCandleError y deja el historial intacto.
"""

from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from trademax.domain.entities.candle import Candle
from trademax.domain.exceptions.domain_errors import InvalidCandleError, ValidationError


class CandleHistory:
    """Historial append-only con evicción FIFO."""

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValidationError(
                f"Capacidad de ventana inválida: {capacity}",
                field="capacity",
                value=capacity,
            )
        self._candles: deque[Candle] = deque(maxlen=capacity)
        self._next_sequence_id = 0

    @property
    def capacity(self) -> int:
        return self._candles.maxlen

    @property
    def next_sequence_id(self) -> int:
        """Siguiente id a asignar (no se reutiliza aunque haya evicción)."""
        return self._next_sequence_id

    @property
    def last(self) -> Optional[Candle]:
        return self._candles[-1] if self._candles else None

    def append(self, candle: Candle) -> None:
        """Añadir una vela; descarta la más antigua si se excede la capacidad."""
        if candle.sequence_id < self._next_sequence_id:
            raise InvalidCandleError(
                f"sequence_id {candle.sequence_id} no es creciente "
                f"(esperado ≥ {self._next_sequence_id})",
                sequence_id=candle.sequence_id,
            )
        self._candles.append(candle)
        self._next_sequence_id = candle.sequence_id + 1

    def closes(self) -> list[float]:
        return [c.close for c in self._candles]

    def to_list(self) -> list[Candle]:
        """Copia ordenada (más antigua primero)."""
        return list(self._candles)

    def __len__(self) -> int:
        return len(self._candles)

    def __iter__(self) -> Iterator[Candle]:
        return iter(self._candles)

    def __getitem__(self, index: int) -> Candle:
        return self._candles[index]
