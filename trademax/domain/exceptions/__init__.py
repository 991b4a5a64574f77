"""Domain exceptions."""
from trademax.domain.exceptions.domain_errors import (
    DomainError,
    InvalidCandleError,
    UnknownInstrumentError,
    ValidationError,
)

__all__ = [
    "DomainError",
    "InvalidCandleError",
    "UnknownInstrumentError",
    "ValidationError",
]
