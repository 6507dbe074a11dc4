"""Stock entity and the loader snapshot it is built from.

StockSnapshot is the shape a data loader hands to the core: identity plus the
raw metric series.  Stock.from_snapshot builds the entity once; nothing
mutates it afterwards, so a fully-built Stock can be shared freely.

Dividends are a separate series on Stock, outside Metrics, and come from
their own source.
"""

from __future__ import annotations

from datetime import date

import numpy as np
import pandas as pd
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from .enums import MetricKind
from .metrics import Metrics
from .series import MetricSeries


def _empty_dated_series() -> MetricSeries:
    return MetricSeries(values=(), dates=())


class StockSnapshot(BaseModel):
    """Already-loaded raw data for one stock.

    Every series must be date-addressed and is expected to cover the same
    historical span; lengths may differ.  dividends defaults to an empty
    series, so a dividend lookup on a stock without a dividend feed raises
    NoDataAvailableError rather than reporting zero.
    """

    model_config = ConfigDict(frozen=True)

    company: str = Field(min_length=1)
    symbol: str = Field(min_length=1)
    share_prices: MetricSeries
    earnings: MetricSeries
    volumes: MetricSeries
    dividends: MetricSeries = Field(default_factory=_empty_dated_series)

    @model_validator(mode="after")
    def _series_are_dated(self) -> StockSnapshot:
        for name in ("share_prices", "earnings", "volumes", "dividends"):
            getattr(self, name).require_dated(name)
        return self

    @classmethod
    def from_frame(cls, company: str, symbol: str, frame: pd.DataFrame) -> StockSnapshot:
        """Build a snapshot from a date-indexed DataFrame.

        Columns are the MetricKind values (share_price, earnings, volume and,
        optionally, dividends).  Missing cells are dropped per column, so each
        series keeps only the dates it actually has observations for.

        Raises:
            ValueError: if a required column is missing.
        """
        required = {MetricKind.SHARE_PRICE, MetricKind.EARNINGS, MetricKind.VOLUME}
        missing = {kind.value for kind in required} - set(frame.columns)
        if missing:
            raise ValueError(f"frame is missing metric columns: {sorted(missing)}")

        index = pd.DatetimeIndex(frame.index)
        ordered = frame.set_axis(index).sort_index()

        def column(kind: MetricKind) -> MetricSeries:
            if kind.value not in ordered.columns:
                return _empty_dated_series()
            observed = ordered[kind.value].dropna()
            return MetricSeries(
                dates=tuple(ts.date() for ts in observed.index),
                values=tuple(observed.to_numpy(dtype=np.float64).tolist()),
            )

        return cls(
            company=company,
            symbol=symbol,
            share_prices=column(MetricKind.SHARE_PRICE),
            earnings=column(MetricKind.EARNINGS),
            volumes=column(MetricKind.VOLUME),
            dividends=column(MetricKind.DIVIDENDS),
        )


class Stock(BaseModel):
    """The stock of a single company.

    company is the display name, symbol the ticker.  metrics and dividends are
    owned by this stock alone: the Metrics passed in is copied on construction,
    so two stocks never hold the same Metrics instance.
    """

    model_config = ConfigDict(frozen=True)

    company: str = Field(min_length=1)
    symbol: str = Field(min_length=1)
    metrics: Metrics
    dividends: MetricSeries = Field(default_factory=_empty_dated_series)

    @field_validator("metrics", mode="after")
    @classmethod
    def _own_metrics(cls, value: Metrics) -> Metrics:
        return value.model_copy()

    @field_validator("dividends", mode="after")
    @classmethod
    def _dividends_are_dated(cls, value: MetricSeries) -> MetricSeries:
        return value.require_dated("dividends")

    @classmethod
    def from_snapshot(cls, snapshot: StockSnapshot) -> Stock:
        return cls(
            company=snapshot.company,
            symbol=snapshot.symbol,
            metrics=Metrics(
                share_prices=snapshot.share_prices,
                earnings=snapshot.earnings,
                volumes=snapshot.volumes,
            ),
            dividends=snapshot.dividends,
        )

    def share_price(self, when: date) -> float:
        return self.metrics.share_price(when)

    def share_price_at_offset(self, days: int) -> float:
        """Share price `days` observations before the most recent one."""
        return self.metrics.share_prices.value_at_offset(days)

    def volume(self, when: date) -> float:
        return self.metrics.volume(when)

    def growth_percentage(self, start: date, end: date) -> float:
        return self.metrics.growth_percentage(start, end)

    def earnings_per_share(self, start: date, end: date) -> float:
        return self.metrics.earnings_per_share(start, end)

    def dividends_per_share(self, when: date) -> float:
        """Dividends per share on `when`, forward-snapped like share prices."""
        return self.dividends.value_at_date(when)
