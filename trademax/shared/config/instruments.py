"""
TradeMax – Instrument reference data
=====================================
Datos de referencia inmutables del universo simulado: nombre, sector,
exchange y precio inicial de cada ticker.
"""

from __future__ import annotations

from trademax.domain.entities.instrument import InstrumentInfo

INSTRUMENT_INFO: dict[str, InstrumentInfo] = {
    "GOOG": InstrumentInfo("GOOG", "Alphabet Inc.", "Technology", "NASDAQ"),
    "TSLA": InstrumentInfo("TSLA", "Tesla, Inc.", "Automotive", "NASDAQ"),
    "AMZN": InstrumentInfo("AMZN", "Amazon.com Inc.", "E-commerce", "NASDAQ"),
    "META": InstrumentInfo("META", "Meta Platforms Inc.", "Technology", "NASDAQ"),
    "NVDA": InstrumentInfo("NVDA", "NVIDIA Corporation", "Semiconductors", "NASDAQ"),
    "BTC": InstrumentInfo("BTC", "Bitcoin", "Crypto", "CRYPTO"),
    "ETH": InstrumentInfo("ETH", "Ethereum", "Crypto", "CRYPTO"),
}

INITIAL_PRICES: dict[str, float] = {
    "GOOG": 142.50,
    "TSLA": 245.80,
    "AMZN": 178.30,
    "META": 485.20,
    "NVDA": 875.40,
    "BTC": 64200.00,
    "ETH": 3450.00,
}

__all__ = ["INSTRUMENT_INFO", "INITIAL_PRICES"]
