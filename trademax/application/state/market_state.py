"""
TradeMax – Market State Manager
=================================
Estado en memoria por instrumento: precio actual, acumulador diario e
historial acotado de velas.

PROTECCIÓN DE MEMORIA:
- El historial es un CandleHistory (deque con maxlen) → nunca se almacenan
  más de `window_capacity` velas por instrumento.

CONCURRENCIA:
- Todas las operaciones se ejecutan dentro del mismo event loop asyncio.
- Las mutaciones de un tick son síncronas (sin await entre append y
  evicción), así ningún lector observa un estado parcial.

SIN GLOBALES:
- Todo el estado vive en el MarketStateManager que crea el Container y que
  se inyecta en los casos de uso.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from trademax.domain.entities.candle_history import CandleHistory
from trademax.domain.entities.instrument import DayStats, InstrumentInfo
from trademax.domain.exceptions.domain_errors import UnknownInstrumentError
from trademax.shared.logging.logger import get_logger

logger = get_logger("market_state")


@dataclass
class InstrumentState:
    """Estado de mercado para UN instrumento."""

    info: InstrumentInfo
    price: float
    day_stats: DayStats
    history: CandleHistory

    # Contadores de monitoreo
    total_ticks: int = 0

    @property
    def symbol(self) -> str:
        return self.info.symbol

    def snapshot(self) -> dict:
        """Snapshot de precio para consumidores externos (watchlist, cartera)."""
        return {
            "symbol": self.symbol,
            "price": self.price,
            "change_pct": self.day_stats.change_pct(self.price),
            "day_stats": self.day_stats.to_dict(),
            "info": self.info.to_dict(),
            "total_ticks": self.total_ticks,
            "candles_in_buffer": len(self.history),
        }


class MarketStateManager:
    """
    Gestor centralizado del estado de mercado del universo.

    Acceso: market_state.get(symbol) → InstrumentState
    """

    def __init__(self) -> None:
        self._states: Dict[str, InstrumentState] = {}

    def add(self, state: InstrumentState) -> InstrumentState:
        """Registrar un instrumento. Idempotente por símbolo."""
        existing = self._states.get(state.symbol)
        if existing is not None:
            return existing
        self._states[state.symbol] = state
        logger.info(
            "Estado creado para '%s' (precio=%.2f, capacidad=%d velas)",
            state.symbol,
            state.price,
            state.history.capacity,
        )
        return state

    def get(self, symbol: str) -> InstrumentState:
        """Estado de un instrumento; UnknownInstrumentError si no existe."""
        state = self._states.get(symbol)
        if state is None:
            raise UnknownInstrumentError(symbol)
        return state

    def __contains__(self, symbol: str) -> bool:
        return symbol in self._states

    def get_all_symbols(self) -> list[str]:
        """Todos los símbolos registrados, en orden de registro."""
        return list(self._states.keys())

    def states(self) -> list[InstrumentState]:
        return list(self._states.values())

    def snapshot(self) -> dict:
        """Snapshot completo para diagnóstico / API."""
        return {symbol: s.snapshot() for symbol, s in self._states.items()}
