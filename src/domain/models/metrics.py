"""Per-stock metrics and the calculations derived from them.

Metrics composes the share-price, earnings, and volume series of one stock.
Derived values are recomputed on every call; the series are immutable, so
there is nothing to cache or invalidate.

Formulas:
  growth %  = price(start) · 100 / price(end)
              (the start price expressed as a percentage of the end price)
  EPS       = Σ earnings over [start, end] / latest share price
"""

from __future__ import annotations

import math
from datetime import date

from pydantic import BaseModel, ConfigDict, model_validator

from src.domain.errors import DivisionByZeroError, NonFiniteResultError

from .series import MetricSeries

PERCENTAGE = 100.0


def _finite(value: float, label: str) -> float:
    if not math.isfinite(value):
        raise NonFiniteResultError(f"{label} is not finite ({value!r})")
    return value


class Metrics(BaseModel):
    """The metric series of a single stock, on a shared calendar.

    Lengths may differ between series; every lookup is resolved against the
    series it reads from.
    """

    model_config = ConfigDict(frozen=True)

    share_prices: MetricSeries
    earnings: MetricSeries
    volumes: MetricSeries

    @model_validator(mode="after")
    def _series_are_dated(self) -> Metrics:
        self.share_prices.require_dated("share_prices")
        self.earnings.require_dated("earnings")
        self.volumes.require_dated("volumes")
        return self

    def share_price(self, when: date) -> float:
        """Share price on `when`, or on the first later date with data."""
        return self.share_prices.value_at_date(when)

    def volume(self, when: date) -> float:
        """Volume on `when`, or on the first later date with data."""
        return self.volumes.value_at_date(when)

    def growth_percentage(self, start: date, end: date) -> float:
        """Start price as a percentage of end price; both dates inclusive.

        Raises:
            DivisionByZeroError: if the end price is zero.
        """
        start_price = self.share_prices.value_at_date(start)
        end_price = self.share_prices.value_at_date(end)
        if end_price == 0:
            raise DivisionByZeroError(
                f"share price on {end.isoformat()} is zero; growth percentage is undefined"
            )
        return _finite(start_price * PERCENTAGE / end_price, "growth percentage")

    def total_earnings(self, start: date, end: date) -> float:
        """Chronological sum of earnings observed in [start, end]."""
        total = 0.0
        for earning in self.earnings.interval_between_dates(start, end):
            total += earning
        return total

    def earnings_per_share(self, start: date, end: date) -> float:
        """Earnings over [start, end] divided by the latest share price.

        Raises:
            OutOfRangeError: if the range cannot be resolved on the earnings series.
            DivisionByZeroError: if the latest share price is zero.
        """
        total = self.total_earnings(start, end)
        latest_price = self.share_prices.latest()
        if latest_price == 0:
            raise DivisionByZeroError(
                "latest share price is zero; earnings per share is undefined"
            )
        return _finite(total / latest_price, "earnings per share")
