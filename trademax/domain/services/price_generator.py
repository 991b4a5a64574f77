"""
TradeMax – Domain Service: Random-Walk Price Generator
========================================================
Genera un nuevo precio por instrumento y por tick.

FÓRMULA:
    v  = p × volatility_coefficient
    δ  ~ U[-v, v]
    p' = max(min_price, p + δ)

La volatilidad escala con el nivel de precio, así los movimientos
porcentuales son aproximadamente estacionarios. El piso estrictamente
positivo mantiene bien definidos los cálculos porcentuales y de escala.
"""

from __future__ import annotations

import random


class RandomWalkGenerator:
    """
    Random walk uniforme con volatilidad proporcional al precio.

    El RNG se inyecta explícitamente (semilla reproducible en tests).
    """

    def __init__(
        self,
        rng: random.Random,
        volatility_coefficient: float = 0.0015,
        min_price: float = 0.01,
    ) -> None:
        self._rng = rng
        self._volatility_coefficient = volatility_coefficient
        self._min_price = min_price

    @property
    def min_price(self) -> float:
        return self._min_price

    def volatility(self, price: float) -> float:
        """Amplitud máxima del paso para un precio dado."""
        return price * self._volatility_coefficient

    def next_price(self, price: float) -> float:
        """Siguiente precio del random walk, con piso en min_price."""
        volatility = self.volatility(price)
        delta = (self._rng.random() - 0.5) * volatility * 2
        return max(self._min_price, price + delta)
