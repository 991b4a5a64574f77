"""
TradeMax – Presentation Layer
===============================
Superficie externa: rutas FastAPI y broadcast WebSocket.
"""
