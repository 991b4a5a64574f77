"""
TradeMax – Application Layer
==============================
Casos de uso y estado en memoria de la sesión.

- use_cases/: SimulateTickUseCase (escritura), ChartUseCase (lectura)
- state/: MarketStateManager, SubscriptionRegistry
- ports/: Interfaces hacia infraestructura
- dto/: Data Transfer Objects

REGLA DE DEPENDENCIA:
Puede importar de domain/ y de sus propios ports/.
NO puede importar de infrastructure/ ni de presentation/.
"""
