"""
TradeMax – Event Bus (asyncio.Queue fan-out)
==============================================
Bus de eventos interno para desacoplar el productor (MarketClock) de los
consumidores (WebSocketManager, futuros consumidores de snapshots).

Arquitectura:
  ┌──────────┐            ┌───────────┐
  │  Market  │──candle──▸ │ Event Bus │──▸ Consumer 1 (WS broadcast)
  │  Clock   │──snapshot─▸│ (fan-out) │──▸ Consumer N ...
  └──────────┘            └───────────┘

PROTECCIÓN DE MEMORIA:
- Cada consumidor tiene su propia asyncio.Queue con maxsize.
- Si un consumidor es lento y su cola se llena, se descarta el evento MÁS
  ANTIGUO de esa cola (drop-oldest); el productor nunca se bloquea.

THREAD-SAFETY:
- asyncio.Queue es safe dentro del mismo event loop, que es nuestro caso.
"""

from __future__ import annotations

import asyncio
from typing import Any, Dict

from trademax.application.ports.event_publisher import IEventPublisher
from trademax.shared.logging.logger import get_logger

logger = get_logger("event_bus")

CANDLE_TOPIC = "candle"
PRICE_SNAPSHOT_TOPIC = "price_snapshot"


class EventBus(IEventPublisher):
    """Fan-out event bus basado en asyncio.Queue."""

    def __init__(self, max_queue_size: int = 10_000) -> None:
        self._max_queue_size = max_queue_size
        # topic → lista de (queue, nombre_consumidor)
        self._subscribers: Dict[str, list[tuple[asyncio.Queue, str]]] = {}
        self._dropped = 0

    async def subscribe(self, topic: str, consumer_name: str) -> asyncio.Queue:
        """
        Registrar un consumidor en un tópico.
        Retorna la Queue exclusiva de ese consumidor.
        """
        queue: asyncio.Queue = asyncio.Queue(maxsize=self._max_queue_size)
        self._subscribers.setdefault(topic, []).append((queue, consumer_name))
        logger.info(
            "Consumidor '%s' suscrito a tópico '%s' (max_queue=%d)",
            consumer_name,
            topic,
            self._max_queue_size,
        )
        return queue

    async def publish(self, topic: str, data: Any) -> None:
        """
        Publicar un evento a todos los suscriptores de un tópico.
        Política drop-oldest si la cola está llena → el productor NUNCA se bloquea.
        """
        for queue, consumer_name in self._subscribers.get(topic, []):
            if queue.full():
                queue.get_nowait()
                self._dropped += 1
                logger.warning(
                    "Cola llena para '%s' en tópico '%s' – evento antiguo descartado",
                    consumer_name,
                    topic,
                )
            queue.put_nowait(data)

    async def unsubscribe_all(self, topic: str | None = None) -> None:
        """Desuscribir consumidores (cleanup al shutdown)."""
        if topic:
            self._subscribers.pop(topic, None)
            logger.info("Todos los suscriptores del tópico '%s' eliminados", topic)
        else:
            self._subscribers.clear()
            logger.info("Todos los suscriptores eliminados (shutdown)")

    @property
    def subscriber_count(self) -> int:
        return sum(len(subs) for subs in self._subscribers.values())

    @property
    def dropped_count(self) -> int:
        return self._dropped
