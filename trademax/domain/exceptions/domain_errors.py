"""
TradeMax – Domain Exceptions
==============================
Excepciones de contrato del dominio.

Los datos de mercado se generan internamente, así que estas excepciones
señalan errores de programación o de entrada externa (HTTP), nunca
anomalías numéricas: esas se resuelven con ramas explícitas.

JERARQUÍA:
    DomainError (base)
    ├── InvalidCandleError
    ├── UnknownInstrumentError
    └── ValidationError
"""

from __future__ import annotations

from typing import Any


class DomainError(Exception):
    """Excepción base para errores de dominio."""

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)

    def to_dict(self) -> dict:
        return {
            "error": self.code,
            "message": self.message,
        }


class InvalidCandleError(DomainError):
    """Vela que viola las invariantes OHLCV o el orden de secuencia."""

    def __init__(self, message: str, sequence_id: int | None = None):
        super().__init__(message, code="INVALID_CANDLE")
        self.sequence_id = sequence_id


class UnknownInstrumentError(DomainError):
    """Símbolo fuera del universo simulado."""

    def __init__(self, symbol: str):
        super().__init__(f"Instrumento desconocido: '{symbol}'", code="UNKNOWN_INSTRUMENT")
        self.symbol = symbol


class ValidationError(DomainError):
    """Error de validación general de parámetros de dominio."""

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field
        self.value = value
