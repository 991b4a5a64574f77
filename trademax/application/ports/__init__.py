"""Application ports (interfaces hacia infraestructura)."""
from trademax.application.ports.event_publisher import IEventPublisher

__all__ = ["IEventPublisher"]
