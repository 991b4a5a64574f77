"""Presentation – WebSocket broadcast."""

from trademax.presentation.websocket.websocket_manager import WebSocketManager

__all__ = ["WebSocketManager"]
