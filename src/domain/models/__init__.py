"""Domain model package.

All domain objects are immutable Pydantic models with no UI or I/O
dependencies.  Import from this package to avoid coupling application code to
individual module paths.
"""

from .enums import MetricKind
from .metrics import Metrics
from .series import MetricSeries
from .stock import Stock, StockSnapshot
from .use_cases import CompareStocksInput, ViewStockOutput

__all__ = [
    # enums
    "MetricKind",
    # series
    "MetricSeries",
    # metrics
    "Metrics",
    # stock
    "Stock",
    "StockSnapshot",
    # use cases
    "CompareStocksInput",
    "ViewStockOutput",
]
