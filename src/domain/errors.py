"""Domain error taxonomy.

Every error raised by the analytics core derives from StockAnalyticsError and
from the builtin exception it specialises, so callers may catch either the
domain family or the generic Python category (IndexError, KeyError, ...).

Errors are raised where they are detected and are never swallowed or replaced
by a default value inside the domain layer.
"""

from __future__ import annotations


class StockAnalyticsError(Exception):
    """Root of all analytics-core failures."""


class OutOfRangeError(StockAnalyticsError, IndexError):
    """An offset, interval, or date range resolves outside the covered series."""


class EmptySeriesError(StockAnalyticsError, LookupError):
    """A series holds no observations."""


class NoDataAvailableError(StockAnalyticsError, LookupError):
    """No observation exists on or after the requested date."""


class DivisionByZeroError(StockAnalyticsError, ZeroDivisionError):
    """A derived metric's denominator (a share price) resolved to zero."""


class NonFiniteResultError(StockAnalyticsError, ArithmeticError):
    """A derived metric overflowed to a non-finite float."""


class StockNotFoundError(StockAnalyticsError, KeyError):
    """No stock is registered under the requested symbol or company name."""

    def __init__(self, key: str, kind: str = "symbol") -> None:
        super().__init__(key)
        self.key = key
        self.kind = kind

    def __str__(self) -> str:
        return f"No stock found for {self.kind} {self.key!r}"
