"""In-memory implementation of StockRepository."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from src.domain.errors import StockNotFoundError
from src.domain.models.stock import Stock, StockSnapshot
from src.domain.repositories.stocks import StockRepository

logger = logging.getLogger(__name__)


def _key(name: str) -> str:
    return name.strip().casefold()


class InMemoryStockRepository(StockRepository):
    """Stocks indexed by symbol and by company name, case-insensitively.

    The index is built completely in __init__ and never changes afterwards,
    so a constructed repository can be shared between threads.
    """

    def __init__(self, stocks: Iterable[Stock]) -> None:
        by_symbol: dict[str, Stock] = {}
        by_company: dict[str, Stock] = {}
        for stock in stocks:
            symbol_key = _key(stock.symbol)
            company_key = _key(stock.company)
            if symbol_key in by_symbol:
                raise ValueError(f"Duplicate stock symbol: {stock.symbol!r}")
            if company_key in by_company:
                raise ValueError(f"Duplicate company name: {stock.company!r}")
            by_symbol[symbol_key] = stock
            by_company[company_key] = stock
        self._by_symbol = by_symbol
        self._by_company = by_company
        logger.debug("Indexed %d stocks", len(by_symbol))

    @classmethod
    def from_snapshots(cls, snapshots: Iterable[StockSnapshot]) -> InMemoryStockRepository:
        """Build every Stock from its loader snapshot, then index them."""
        return cls(Stock.from_snapshot(snapshot) for snapshot in snapshots)

    def __len__(self) -> int:
        return len(self._by_symbol)

    def get_by_symbol(self, symbol: str) -> Stock:
        try:
            return self._by_symbol[_key(symbol)]
        except KeyError:
            logger.warning("Unknown stock symbol requested: %r", symbol)
            raise StockNotFoundError(symbol, kind="symbol") from None

    def get_by_company(self, company: str) -> Stock:
        try:
            return self._by_company[_key(company)]
        except KeyError:
            logger.warning("Unknown company requested: %r", company)
            raise StockNotFoundError(company, kind="company") from None

    def list_company_names(self) -> list[str]:
        return sorted((stock.company for stock in self._by_company.values()), key=str.casefold)
