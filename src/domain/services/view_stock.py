"""View-stock use case.

Projects the trailing window of daily share prices of one stock, oldest first,
for a presenter.  Read-only: no stock or series is modified.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from src.domain.models.use_cases import ViewStockOutput
from src.domain.repositories.stocks import StockRepository

logger = logging.getLogger(__name__)

FIVE_YEARS_IN_DAYS = 5 * 365


class ViewStockPresenter(ABC):
    """Output port receiving the projection built by ViewStockInteractor."""

    @abstractmethod
    def display_stock(self, output: ViewStockOutput) -> None:
        """Render one stock's identity and price window."""


class ViewStockInteractor:
    """Resolve a stock by symbol and hand its recent share prices to a presenter.

    window_days is the number of trailing daily observations to project.  A
    stock whose price history is shorter than the window raises
    OutOfRangeError; the window is never silently shortened.
    """

    def __init__(
        self,
        repository: StockRepository,
        presenter: ViewStockPresenter,
        window_days: int = FIVE_YEARS_IN_DAYS,
    ) -> None:
        if window_days <= 0:
            raise ValueError(f"window_days must be positive, got {window_days}")
        self._repository = repository
        self._presenter = presenter
        self._window_days = window_days

    def execute(self, symbol: str) -> ViewStockOutput:
        """Build the price window for `symbol`, present it, and return it.

        Raises:
            StockNotFoundError: if the symbol is unknown.
            OutOfRangeError: if the price history is shorter than the window.
        """
        stock = self._repository.get_by_symbol(symbol)
        share_prices = tuple(
            stock.share_price_at_offset(self._window_days - i)
            for i in range(self._window_days)
        )
        logger.debug(
            "Projected %d share prices for %s (%s)",
            len(share_prices),
            stock.symbol,
            stock.company,
        )
        output = ViewStockOutput(
            company=stock.company,
            symbol=stock.symbol,
            share_prices=share_prices,
        )
        self._presenter.display_stock(output)
        return output
