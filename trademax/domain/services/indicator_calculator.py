"""
TradeMax – Domain Service: Indicator Calculator
=================================================
SMA (Simple Moving Average) de closes para el overlay del chart.

FÓRMULA:
    Para cada índice i en [period, len):
        SMA_i = Σ close[i−period .. i−1] / period

    Ventana semiabierta [i−period, i): el punto i promedia las `period`
    velas ANTERIORES a i.

SIN VENTANAS PARCIALES:
    Si len(history) ≤ period la secuencia es vacía. Nunca se emite un valor
    calculado con menos de `period` datos.

Se recalcula desde cero en cada actualización del historial (a esta
escala no compensa un rolling-sum incremental).
"""

from __future__ import annotations

from typing import Iterator, Sequence

from trademax.domain.entities.candle import Candle
from trademax.domain.exceptions.domain_errors import ValidationError
from trademax.domain.value_objects.viewport import SmaPoint


class IndicatorCalculator:
    """
    Calculadora de indicadores pura (stateless).
    """

    @staticmethod
    def sma(
        candles: Sequence[Candle],
        period: int,
    ) -> Iterator[SmaPoint]:
        """
        Secuencia perezosa de puntos (index, media) sobre los closes.

        Args:
            candles: Historial (más antigua primero)
            period: Tamaño de la ventana, ≥ 1

        Yields:
            SmaPoint para cada índice i ≥ period

        Raises:
            ValidationError: si period < 1
        """
        if period < 1:
            raise ValidationError(
                f"Período SMA inválido: {period}", field="period", value=period
            )
        return IndicatorCalculator._sma_points(
            [c.close for c in candles], period
        )

    @staticmethod
    def _sma_points(closes: list[float], period: int) -> Iterator[SmaPoint]:
        for i in range(period, len(closes)):
            yield SmaPoint(i, sum(closes[i - period:i]) / period)
