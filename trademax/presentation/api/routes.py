"""
TradeMax – API Routes (FastAPI)
=================================
Endpoints REST y WebSocket para el frontend.

Endpoints disponibles:
  WS     /ws/market                      → streaming en tiempo real
  GET    /api/health                     → health check
  GET    /api/status                     → estado completo del sistema
  GET    /api/instruments                → snapshot del universo
  GET    /api/candles/{symbol}           → historial acotado de velas
  GET    /api/sma/{symbol}               → puntos SMA (period opcional)
  GET    /api/chart/{symbol}             → geometría + primitivas de render
  GET    /api/chart/{symbol}/hover       → selección bajo el puntero
  GET    /api/subscriptions              → instrumentos en pantalla
  POST   /api/subscriptions              → suscribir (o alternar) un instrumento
  DELETE /api/subscriptions/{symbol}     → desuscribir

ERRORES:
  DomainError            → 400 con {"error", "code", ...}
  UnknownInstrumentError → 404
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, FastAPI, Query, Request, WebSocket, WebSocketDisconnect
from fastapi.responses import JSONResponse

from trademax.domain.exceptions.domain_errors import DomainError, UnknownInstrumentError
from trademax.presentation.api.schemas import (
    CandlesResponse,
    HealthResponse,
    HoverResponse,
    SmaResponse,
    SubscriptionRequest,
    SubscriptionsResponse,
)
from trademax.shared.config.settings import settings
from trademax.shared.logging.logger import get_logger

logger = get_logger("api.routes")

router = APIRouter()

# Referencias a componentes inyectados desde main.py
_ws_manager = None
_market_state = None
_market_clock = None
_chart_usecase = None
_subscriptions = None


def init_routes(
    ws_manager,
    market_state,
    market_clock,
    chart_usecase,
    subscriptions,
) -> None:
    """Inyectar dependencias desde main.py al arrancar."""
    global _ws_manager, _market_state, _market_clock
    global _chart_usecase, _subscriptions
    _ws_manager = ws_manager
    _market_state = market_state
    _market_clock = market_clock
    _chart_usecase = chart_usecase
    _subscriptions = subscriptions


def register_exception_handlers(app: FastAPI) -> None:
    """Traducir DomainError a respuestas JSON."""

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        status_code = 404 if isinstance(exc, UnknownInstrumentError) else 400
        logger.info("%s %s → %d %s", request.method, request.url.path, status_code, exc.code)
        return JSONResponse(status_code=status_code, content=exc.to_dict())


# ─── WebSocket endpoint para streaming a frontend ─────────────────────

@router.websocket("/ws/market")
async def market_stream(websocket: WebSocket) -> None:
    """
    WebSocket endpoint principal.
    El broadcast lo maneja WebSocketManager; este handler solo gestiona
    el ciclo de vida de la conexión.
    """
    if _ws_manager is None:
        await websocket.close(code=1011, reason="Server not ready")
        return

    await _ws_manager.connect(websocket)
    try:
        while True:
            try:
                data = await websocket.receive_text()
                logger.debug("Mensaje de cliente WS: %s", data[:100])
            except WebSocketDisconnect:
                break
    finally:
        _ws_manager.disconnect(websocket)


# ─── REST endpoints de estado ──────────────────────────────────────────

@router.get("/api/health", response_model=HealthResponse)
async def health_check() -> dict:
    """Health check para monitoreo."""
    return {"status": "ok", "service": "trademax"}


@router.get("/api/status")
async def system_status() -> dict:
    """Estado completo del sistema."""
    return {
        "market_state": _market_state.snapshot() if _market_state else {},
        "market_clock": _market_clock.stats if _market_clock else {},
        "ws_clients": _ws_manager.client_count if _ws_manager else 0,
        "subscriptions": _subscriptions.symbols if _subscriptions else [],
    }


@router.get("/api/instruments")
async def get_instruments() -> dict:
    """Precio, variación diaria y datos de referencia de cada instrumento."""
    if _market_state is None:
        return {"error": "Server not ready", "instruments": []}
    return {"instruments": [s.snapshot() for s in _market_state.states()]}


# ─── REST endpoints de chart ───────────────────────────────────────────

@router.get("/api/candles/{symbol}", response_model=CandlesResponse)
async def get_candles(symbol: str) -> dict:
    """Historial acotado de un instrumento, de la más antigua a la más nueva."""
    candles = _chart_usecase.get_history(symbol)
    return {
        "symbol": symbol,
        "count": len(candles),
        "candles": [c.to_dict() for c in candles],
    }


@router.get("/api/sma/{symbol}", response_model=SmaResponse)
async def get_sma(symbol: str, period: Optional[int] = None) -> dict:
    """Media móvil simple sobre el historial actual."""
    if period is None:
        period = _chart_usecase.sma_period
    points = [p._asdict() for p in _chart_usecase.compute_sma(symbol, period)]
    return {
        "symbol": symbol,
        "period": period,
        "count": len(points),
        "points": points,
    }


@router.get("/api/chart/{symbol}")
async def get_chart(
    symbol: str,
    width: float = Query(default=settings.chart_width),
    height: float = Query(default=settings.chart_height),
) -> dict:
    """Frame de render completo para el tamaño de superficie dado."""
    return _chart_usecase.build_frame(symbol, width, height).to_dict()


@router.get("/api/chart/{symbol}/hover", response_model=HoverResponse)
async def get_hover(
    symbol: str,
    x: float,
    width: float = Query(default=settings.chart_width),
    height: float = Query(default=settings.chart_height),
) -> dict:
    """Vela bajo el puntero, o selection=null fuera del área de slots."""
    selection = _chart_usecase.hover(symbol, x, width, height)
    return {
        "symbol": symbol,
        "hit": selection is not None,
        "selection": selection.to_dict() if selection is not None else None,
    }


# ─── REST endpoints de suscripción ─────────────────────────────────────

@router.get("/api/subscriptions", response_model=SubscriptionsResponse)
async def get_subscriptions() -> dict:
    return {"symbols": _subscriptions.symbols}


@router.post("/api/subscriptions", response_model=SubscriptionsResponse)
async def subscribe(body: SubscriptionRequest) -> dict:
    """Suscribir un instrumento, o alternar su estado si toggle=true."""
    if body.toggle:
        symbols = _subscriptions.toggle(body.symbol)
    else:
        symbols = _subscriptions.subscribe(body.symbol)
    return {"symbols": symbols}


@router.delete("/api/subscriptions/{symbol}", response_model=SubscriptionsResponse)
async def unsubscribe(symbol: str) -> dict:
    return {"symbols": _subscriptions.unsubscribe(symbol)}
