"""
TradeMax – Main Application Entry Point
=========================================
Orquesta la simulación de mercado, el motor de chart y el broadcast.

ARQUITECTURA DE ARRANQUE:
  1. Configurar logging
  2. Crear el Container (estado, servicios de dominio, casos de uso)
  3. FastAPI lifespan startup:
     a. Inyectar dependencias en las rutas
     b. Iniciar WebSocketManager (broadcast a clientes)
     c. Iniciar MarketClock (tick periódico)
  4. FastAPI lifespan shutdown:
     a. Detener todo en orden inverso

FLUJO DE DATOS:
  MarketClock → SimulateTickUseCase
       → RandomWalkGenerator → CandleAggregator → CandleHistory
       → EventBus(candle|price_snapshot) → WebSocketManager → Frontend
  HTTP → ChartUseCase → ViewportMapper / IndicatorCalculator / HitTester

  uvicorn trademax.main:app --reload --host 0.0.0.0 --port 8888
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from trademax import __version__
from trademax.container import init_container
from trademax.presentation.api.routes import init_routes, register_exception_handlers, router
from trademax.shared.config.settings import settings
from trademax.shared.logging.logger import get_logger, setup_logging, tick_log_levels

# ─── Logging ────────────────────────────────────────────────────────────
setup_logging(
    "DEBUG" if settings.debug else settings.log_level.upper(),
    tick_log_levels(settings.candle_log_level.upper()),
)
logger = get_logger("main")

# ─── Contenedor de Dependencias ─────────────────────────────────────────
container = init_container(settings)


# ─── FastAPI Lifespan ───────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle de la aplicación."""
    logger.info("=" * 60)
    logger.info("  TradeMax - Market Simulator v%s", __version__)
    logger.info("  Símbolos: %s", ", ".join(settings.symbols))
    logger.info("  Tick: %.2fs  Volatilidad: %.4f", settings.tick_interval_seconds,
                settings.volatility_coefficient)
    logger.info("  Ventana: %d velas por símbolo (warm-up %d)",
                settings.window_capacity, settings.warmup_candles)
    logger.info("  Indicadores: SMA %d", settings.sma_period)
    logger.info("  Seed: %s", settings.random_seed)
    logger.info("=" * 60)

    init_routes(
        container.ws_manager,
        container.market_state,
        container.market_clock,
        container.chart_usecase,
        container.subscriptions,
    )

    await container.ws_manager.start()
    await container.market_clock.start()

    logger.info("✓ Todos los componentes iniciados correctamente")

    yield  # ← La app está corriendo aquí

    # ── SHUTDOWN ──
    logger.info("Iniciando shutdown...")
    await container.market_clock.stop()
    await container.ws_manager.stop()
    await container.event_bus.unsubscribe_all()
    logger.info("✓ Shutdown completo")


# ─── FastAPI App ────────────────────────────────────────────────────────

app = FastAPI(
    title="TradeMax - Market Simulator",
    description="Feed de mercado simulado con agregación OHLCV, SMA y motor de chart",
    version=__version__,
    lifespan=lifespan,
)

# CORS para frontend local
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)
app.include_router(router)
