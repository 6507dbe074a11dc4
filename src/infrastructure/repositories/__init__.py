"""Concrete repository implementations.

Exports the in-memory StockRepository used at the application boundary.
"""

from .memory import InMemoryStockRepository

__all__ = ["InMemoryStockRepository"]
