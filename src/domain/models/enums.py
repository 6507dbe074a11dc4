"""Domain enumerations for the stock metrics core.

All string-valued enums use str mixin so they compare equal to plain strings,
which lets them double as DataFrame column labels.
"""

from enum import Enum


class MetricKind(str, Enum):
    """The per-stock metrics a loader supplies, one series each."""

    SHARE_PRICE = "share_price"
    EARNINGS = "earnings"
    VOLUME = "volume"
    DIVIDENDS = "dividends"
