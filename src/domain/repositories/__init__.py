"""Domain repository interfaces.

All abstractions are defined here with abc.ABC and @abstractmethod.
Concrete implementations live in src/infrastructure/repositories/ and are
wired at the application boundary via dependency injection.
"""

from .stocks import StockRepository

__all__ = ["StockRepository"]
