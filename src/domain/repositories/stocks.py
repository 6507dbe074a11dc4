"""Stock lookup repository interface.

StockRepository is a read-only lookup port and does not follow a CRUD
lifecycle: stocks are built once from loader snapshots and only ever queried
afterwards.  Concrete implementations live in src/infrastructure/repositories/
and are wired at the application boundary.

Unlike a nullable get(), every lookup here raises StockNotFoundError on a
miss so that use cases fail fast instead of carrying a None forward.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models.stock import Stock


class StockRepository(ABC):
    """Resolve symbols and company names to fully-built Stock entities."""

    @abstractmethod
    def get_by_symbol(self, symbol: str) -> Stock:
        """Return the stock with the given ticker (case-insensitive).

        Raises StockNotFoundError if no stock has that symbol.
        """

    @abstractmethod
    def get_by_company(self, company: str) -> Stock:
        """Return the stock of the given company (case-insensitive).

        Raises StockNotFoundError if no stock belongs to that company.
        """

    @abstractmethod
    def list_company_names(self) -> list[str]:
        """Return every known company name in alphabetical order."""
