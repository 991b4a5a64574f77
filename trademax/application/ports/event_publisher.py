"""
TradeMax – Application Port: Event Publisher
==============================================
Interfaz para publicar eventos hacia consumidores externos.

Los casos de uso publican; la infraestructura decide CÓMO entregar
(EventBus en memoria → WebSocket, etc.).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class IEventPublisher(ABC):
    """Interfaz para publicar eventos del sistema."""

    @abstractmethod
    async def publish(self, topic: str, data: Any) -> None:
        """
        Publica un evento a un tópico.

        Args:
            topic: Nombre del tópico (e.g. "candle", "price_snapshot")
            data: Objeto con to_dict() o dict serializable a JSON
        """
        pass
