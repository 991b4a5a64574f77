"""
TradeMax – Domain Value Objects: Chart shapes
===============================================
Primitivas dibujables (en píxeles) derivadas de un ViewportGeometry.
Las consume el renderer externo tal cual, sin más cálculo.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CandleShape:
    """Mecha vertical + cuerpo rectangular de una vela."""

    sequence_id: int
    wick_x: float
    wick_top: float        # y del high
    wick_bottom: float     # y del low
    body_x: float
    body_y: float          # y superior del cuerpo
    body_width: float
    body_height: float
    is_up: bool

    def to_dict(self) -> dict:
        return {
            "sequence_id": self.sequence_id,
            "wick": {"x": self.wick_x, "top": self.wick_top, "bottom": self.wick_bottom},
            "body": {
                "x": self.body_x,
                "y": self.body_y,
                "width": self.body_width,
                "height": self.body_height,
            },
            "is_up": self.is_up,
        }


@dataclass(frozen=True, slots=True)
class VolumeBar:
    """Barra de volumen anclada al fondo del área de plot."""

    sequence_id: int
    x: float
    y: float
    width: float
    height: float
    is_up: bool

    def to_dict(self) -> dict:
        return {
            "sequence_id": self.sequence_id,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "is_up": self.is_up,
        }


@dataclass(frozen=True, slots=True)
class GridLine:
    """Línea horizontal del grid con su etiqueta de precio."""

    y: float
    x_start: float
    x_end: float
    price: float

    @property
    def label(self) -> str:
        return f"${self.price:.2f}"

    def to_dict(self) -> dict:
        return {
            "y": self.y,
            "x_start": self.x_start,
            "x_end": self.x_end,
            "price": self.price,
            "label": self.label,
        }
