"""
TradeMax – Settings (Pydantic BaseSettings)
=============================================
Configuración centralizada cargada desde variables de entorno / .env.
Se usa pydantic-settings para validación estricta al arranque.
"""

from __future__ import annotations

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # ─── Universo de instrumentos ───────────────────────────────────────
    symbols: List[str] = Field(
        default=["GOOG", "TSLA", "AMZN", "META", "NVDA", "BTC", "ETH"],
        description="Tickers simulados (universo fijo de la sesión)",
    )

    # ─── Simulación (random walk) ───────────────────────────────────────
    tick_interval_seconds: float = Field(
        default=1.0, gt=0, description="Intervalo del reloj de mercado en segundos"
    )
    volatility_coefficient: float = Field(
        default=0.0015, ge=0, description="Volatilidad como fracción del precio previo"
    )
    min_price: float = Field(
        default=0.01, gt=0, description="Piso de precio estrictamente positivo"
    )
    random_seed: Optional[int] = Field(
        default=None, description="Semilla del RNG (None = entropía del sistema)"
    )

    # ─── Candle Aggregator ──────────────────────────────────────────────
    window_capacity: int = Field(
        default=60, ge=1, description="Máximo de velas en memoria por instrumento"
    )
    warmup_candles: int = Field(
        default=40, ge=0, description="Velas planas sembradas al registrar un instrumento"
    )
    warmup_volume: int = Field(default=1000, ge=0, description="Volumen nominal del warm-up")
    wick_factor: float = Field(
        default=0.5, ge=0, description="Mechas: U[0, wick_factor × volatilidad)"
    )
    volume_min: int = Field(default=500, ge=0, description="Volumen mínimo por vela")
    volume_max: int = Field(default=5500, gt=0, description="Volumen máximo (exclusivo)")
    day_volume_increment: int = Field(
        default=500, gt=0, description="Incremento máximo (exclusivo) del volumen diario"
    )
    initial_day_volume: int = Field(
        default=1_000_000, gt=0, description="Volumen diario inicial máximo (exclusivo)"
    )

    # ─── Indicadores ────────────────────────────────────────────────────
    sma_period: int = Field(default=20, ge=1, description="Período del SMA de overlay")

    # ─── Chart / Viewport ───────────────────────────────────────────────
    chart_width: int = Field(default=600, gt=0)
    chart_height: int = Field(default=280, gt=0)
    padding_top: float = Field(default=20, ge=0)
    padding_bottom: float = Field(default=30, ge=0)
    padding_left: float = Field(default=10, ge=0)
    padding_right: float = Field(default=60, ge=0)
    volume_band_height: float = Field(
        default=50, ge=0, description="Altura fija (px) de la banda de volumen"
    )
    price_margin: float = Field(
        default=0.1, ge=0, description="Margen vertical del dominio como fracción del rango"
    )
    grid_steps: int = Field(default=5, ge=1, description="Divisiones horizontales del grid")

    # ─── Event Bus ──────────────────────────────────────────────────────
    event_bus_max_queue_size: int = Field(
        default=10_000,
        description="Tamaño máximo de cola del Event Bus para contrapresión",
    )

    # ─── Logging ───────────────────────────────────────────────────────
    log_level: str = Field(default="INFO", description="Nivel global de logging")
    candle_log_level: str = Field(
        default="INFO", description="Nivel de los loggers por tick (simulate_tick, candle_aggregator)"
    )

    # ─── Server ─────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8888)
    debug: bool = Field(default=False)

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton global – se importa donde se necesite
settings = Settings()
