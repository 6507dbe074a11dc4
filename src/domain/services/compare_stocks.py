"""Compare-stocks use case.

Compares two companies over an inclusive date range on three figures and
renders a three-line plain-language summary:

  1. earnings per share over [start, end]
  2. growth percentage over [start, end]  (start price as % of end price)
  3. dividends per share on end

Both stocks are resolved before any figure is computed, so an unknown company
fails fast and no partial summary is ever produced.  Errors raised while
computing a figure propagate unchanged; a figure is never replaced by a
default value.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date

from src.domain.models.stock import Stock
from src.domain.models.use_cases import CompareStocksInput
from src.domain.repositories.stocks import StockRepository

logger = logging.getLogger(__name__)

DEFAULT_DATE_FORMAT = "%d/%m/%Y"

_EPS_TEMPLATE = (
    "From {start} to {end}, {first} earned ${first_value:.1f} earnings per share "
    "while {second} earned ${second_value:.1f} earnings per share."
)
_GROWTH_TEMPLATE = (
    "From {start} to {end}, {first} grew {first_value:.1f}% "
    "while {second} grew {second_value:.1f}%."
)
_DIVIDENDS_TEMPLATE = (
    "On {end}, {first} featured {first_value:.1f} dividends per share "
    "while {second} featured {second_value:.1f} per share."
)


class CompareStocksPresenter(ABC):
    """Output port receiving the comparison summary."""

    @abstractmethod
    def display_comparison_summary(self, summary: str) -> None:
        """Render the multi-line comparison text."""


@dataclass(frozen=True)
class _StockFigures:
    """The three compared figures for one stock."""

    eps: float
    growth: float
    dividends: float


class CompareStocksInteractor:
    """Compare two stocks by EPS, growth percentage, and dividends."""

    def __init__(
        self,
        repository: StockRepository,
        presenter: CompareStocksPresenter,
        date_format: str = DEFAULT_DATE_FORMAT,
    ) -> None:
        self._repository = repository
        self._presenter = presenter
        self._date_format = date_format

    def execute(self, request: CompareStocksInput) -> str:
        """Build the comparison summary, present it, and return it.

        Raises:
            StockNotFoundError: if either company is unknown.
            Any error raised by the stocks' metrics (OutOfRangeError,
            NoDataAvailableError, DivisionByZeroError, ...).
        """
        first = self._repository.get_by_company(request.first_company)
        second = self._repository.get_by_company(request.second_company)

        summary = self.summarize(first, second, request.start_date, request.end_date)
        self._presenter.display_comparison_summary(summary)
        return summary

    def list_company_names(self) -> list[str]:
        """Company names available for comparison."""
        return self._repository.list_company_names()

    def summarize(self, first: Stock, second: Stock, start: date, end: date) -> str:
        """Render the three-line summary for two already-resolved stocks."""
        first_figures = self._figures(first, start, end)
        second_figures = self._figures(second, start, end)

        fields = {
            "start": start.strftime(self._date_format),
            "end": end.strftime(self._date_format),
            "first": first.company,
            "second": second.company,
        }
        lines = [
            _EPS_TEMPLATE.format(
                **fields,
                first_value=first_figures.eps,
                second_value=second_figures.eps,
            ),
            _GROWTH_TEMPLATE.format(
                **fields,
                first_value=first_figures.growth,
                second_value=second_figures.growth,
            ),
            _DIVIDENDS_TEMPLATE.format(
                **fields,
                first_value=first_figures.dividends,
                second_value=second_figures.dividends,
            ),
        ]
        return "\n".join(lines)

    @staticmethod
    def _figures(stock: Stock, start: date, end: date) -> _StockFigures:
        figures = _StockFigures(
            eps=stock.earnings_per_share(start, end),
            growth=stock.growth_percentage(start, end),
            dividends=stock.dividends_per_share(end),
        )
        logger.debug(
            "%s %s..%s: eps=%.6g growth=%.6g dividends=%.6g",
            stock.symbol,
            start.isoformat(),
            end.isoformat(),
            figures.eps,
            figures.growth,
            figures.dividends,
        )
        return figures
