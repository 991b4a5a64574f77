"""
TradeMax – Logging configuration
==================================
Handler único a stdout con niveles por módulo.

El flujo por tick (una línea DEBUG por vela e instrumento) vive en
`trademax.simulate_tick` y `trademax.candle_aggregator`, con nivel propio
(Settings.candle_log_level) independiente del nivel global.
"""

from __future__ import annotations

import logging
import sys
from typing import Mapping, Optional, Union

PREFIX = "trademax"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-30s | %(message)s"
DATE_FORMAT = "%H:%M:%S"

# Loggers del camino caliente del tick
TICK_LOGGERS = ("simulate_tick", "candle_aggregator")

# Librerías externas ruidosas
_QUIET_LIBRARIES = ("websockets", "uvicorn.access")

Level = Union[int, str]


def setup_logging(
    level: Level = logging.INFO,
    module_levels: Optional[Mapping[str, Level]] = None,
) -> None:
    """
    Configura el logger raíz del proyecto una sola vez al arranque.

    Args:
        level: Nivel global (int o nombre, ej: "DEBUG")
        module_levels: Nivel por módulo, con nombres sin prefijo
            (ej: {"candle_aggregator": "WARNING"})
    """
    root = logging.getLogger()
    if not any(getattr(h, "_trademax", False) for h in root.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        handler._trademax = True
        root.addHandler(handler)
    root.setLevel(level)

    for name, module_level in (module_levels or {}).items():
        get_logger(name).setLevel(module_level)

    for library in _QUIET_LIBRARIES:
        logging.getLogger(library).setLevel(logging.WARNING)


def tick_log_levels(level: Level) -> dict[str, Level]:
    """Mismo nivel para todos los loggers del camino caliente del tick."""
    return {name: level for name in TICK_LOGGERS}


def get_logger(name: str) -> logging.Logger:
    """Fábrica de loggers con namespace prefijado."""
    return logging.getLogger(f"{PREFIX}.{name}")
