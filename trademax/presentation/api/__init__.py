"""Presentation – API REST."""

from trademax.presentation.api.routes import init_routes, register_exception_handlers, router

__all__ = ["router", "init_routes", "register_exception_handlers"]
