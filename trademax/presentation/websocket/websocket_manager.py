"""
TradeMax – WebSocket Manager (broadcast a clientes)
=====================================================
Gestiona conexiones WebSocket de clientes y les envía en tiempo real
las velas nuevas y los snapshots de precio de cada tick de mercado.

ARQUITECTURA:
  EventBus ──(candle)─────────▸ WSManager._broadcast_loop()
  EventBus ──(price_snapshot)─▸ WSManager._broadcast_loop()
       │
       ▼
  [Cliente WS 1, Cliente WS 2, ...]

NO BLOQUEA EL LOOP PRINCIPAL:
- Cada tópico tiene su propio task de broadcast.
- El envío a cada cliente usa asyncio.wait_for con timeout; un cliente
  lento o caído se elimina sin afectar a los demás.
"""

from __future__ import annotations

import asyncio
import json
from typing import Set

from fastapi import WebSocket, WebSocketDisconnect

from trademax.infrastructure.event_bus import (
    CANDLE_TOPIC,
    PRICE_SNAPSHOT_TOPIC,
    EventBus,
)
from trademax.shared.logging.logger import get_logger

logger = get_logger("ws_manager")

SEND_TIMEOUT_SECONDS = 5.0


class WebSocketManager:
    """Gestiona conexiones de clientes y broadcast de datos en tiempo real."""

    def __init__(self, event_bus: EventBus) -> None:
        self._event_bus = event_bus
        self._clients: Set[WebSocket] = set()
        self._broadcast_tasks: list[asyncio.Task] = []

    async def start(self) -> None:
        """Lanzar loops de broadcast para candle y price_snapshot."""
        if self._broadcast_tasks:
            return
        candle_queue = await self._event_bus.subscribe(
            CANDLE_TOPIC, "ws_broadcast_candle"
        )
        snapshot_queue = await self._event_bus.subscribe(
            PRICE_SNAPSHOT_TOPIC, "ws_broadcast_price_snapshot"
        )

        self._broadcast_tasks = [
            asyncio.create_task(
                self._broadcast_loop(candle_queue, "candle"),
                name="ws-broadcast-candle",
            ),
            asyncio.create_task(
                self._broadcast_loop(snapshot_queue, "price_snapshot"),
                name="ws-broadcast-price-snapshot",
            ),
        ]
        logger.info("WebSocketManager iniciado – broadcast loops para candle, price_snapshot")

    async def stop(self) -> None:
        """Cancelar broadcast y cerrar todos los clientes."""
        for task in self._broadcast_tasks:
            task.cancel()
        for task in self._broadcast_tasks:
            try:
                await task
            except asyncio.CancelledError:
                pass
        self._broadcast_tasks = []

        for ws in list(self._clients):
            try:
                await ws.close()
            except (RuntimeError, WebSocketDisconnect) as e:
                logger.debug("Cliente WS ya cerrado: %s", e)
        self._clients.clear()
        logger.info("WebSocketManager detenido")

    async def connect(self, websocket: WebSocket) -> None:
        """Registrar un nuevo cliente WebSocket."""
        await websocket.accept()
        self._clients.add(websocket)
        logger.info("Cliente WS conectado. Total: %d", len(self._clients))

    def disconnect(self, websocket: WebSocket) -> None:
        """Des-registrar un cliente desconectado."""
        self._clients.discard(websocket)
        logger.info("Cliente WS desconectado. Total: %d", len(self._clients))

    async def _broadcast_loop(self, queue: asyncio.Queue, event_type: str) -> None:
        """Consumir eventos de una Queue y enviarlos a todos los clientes."""
        try:
            while True:
                data = await queue.get()
                if not self._clients:
                    continue

                payload = json.dumps({"type": event_type, "data": data})

                disconnected: list[WebSocket] = []
                await asyncio.gather(
                    *(self._safe_send(ws, payload, disconnected) for ws in list(self._clients))
                )
                for ws in disconnected:
                    self._clients.discard(ws)
                if disconnected:
                    logger.info(
                        "%d cliente(s) WS eliminados tras fallo de envío",
                        len(disconnected),
                    )
        except asyncio.CancelledError:
            pass  # Shutdown limpio

    async def _safe_send(
        self, ws: WebSocket, payload: str, disconnected: list[WebSocket]
    ) -> None:
        """
        Enviar payload a un cliente con timeout.
        Si falla se marca como desconectado; no lanza para no romper el gather.
        """
        try:
            await asyncio.wait_for(ws.send_text(payload), timeout=SEND_TIMEOUT_SECONDS)
        except (WebSocketDisconnect, asyncio.TimeoutError, RuntimeError):
            disconnected.append(ws)

    @property
    def client_count(self) -> int:
        return len(self._clients)
