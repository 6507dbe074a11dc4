"""Metric series domain model.

MetricSeries is an ordered, immutable sequence of numeric observations for one
metric of one stock (share price, earnings, volume, dividends), oldest first.

Two accessor strategies share the same underlying tuple:

  Offset addressing: "days before today".  Offset d maps to index size - d,
      so d = 1 is the latest value and d = 0 is one past the end.
  Date addressing: by calendar date with forward-snap.  A date that has no
      observation (weekend, holiday) resolves to the nearest later date that
      does.  Only available when the series carries dates.
"""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, model_validator

from src.domain.errors import EmptySeriesError, NoDataAvailableError, OutOfRangeError


def _as_date(when: date) -> date:
    """Drop the time part of a datetime (or pandas Timestamp)."""
    if isinstance(when, datetime):
        return when.date()
    return when


class MetricSeries(BaseModel):
    """Chronological observations of a single metric.

    values: finite floats, oldest first.  NaN and Infinity are rejected.
    dates:  optional ascending calendar dates, one per value.  Required for
             the date-addressed accessors.
    """

    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    values: tuple[float, ...] = ()
    dates: tuple[date, ...] | None = None

    @model_validator(mode="after")
    def _dates_align_with_values(self) -> MetricSeries:
        if self.dates is None:
            return self
        if len(self.dates) != len(self.values):
            raise ValueError(
                f"dates and values must have the same length, "
                f"got {len(self.dates)} dates and {len(self.values)} values"
            )
        for earlier, later in zip(self.dates, self.dates[1:]):
            if later <= earlier:
                raise ValueError(
                    f"dates must be strictly increasing, got {later} after {earlier}"
                )
        return self

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[date, float]]) -> MetricSeries:
        """Build a dated series from (date, value) pairs in any order.

        Pairs are sorted chronologically; a repeated date raises ValueError
        through the model validator.
        """
        ordered = sorted(pairs, key=lambda pair: pair[0])
        return cls(
            dates=tuple(when for when, _ in ordered),
            values=tuple(value for _, value in ordered),
        )

    def __len__(self) -> int:
        return len(self.values)

    @property
    def is_dated(self) -> bool:
        return self.dates is not None

    # ------------------------------------------------------------------ #
    # Offset addressing                                                    #
    # ------------------------------------------------------------------ #

    def _day_to_index(self, day: int) -> int:
        return len(self.values) - day

    def value_at_offset(self, day: int) -> float:
        """Return the observation `day` days before today (day >= 1).

        Raises:
            OutOfRangeError: if the offset maps outside [0, size).
        """
        index = self._day_to_index(day)
        if index < 0 or index >= len(self.values):
            raise OutOfRangeError(
                f"offset {day} is outside a series of {len(self.values)} values "
                f"(valid offsets are 1..{len(self.values)})"
            )
        return self.values[index]

    def interval_at_offsets(self, start_day: int, end_day: int) -> tuple[float, ...]:
        """Return the values in [start_day, end_day) in offset terms.

        start_day is the older, inclusive bound; end_day the newer, exclusive
        bound, so start_day >= end_day for a non-empty interval.

        Raises:
            OutOfRangeError: if either bound falls outside the series or the
                bounds are inverted.
        """
        start_index = self._day_to_index(start_day)
        end_index = self._day_to_index(end_day)
        if not 0 <= start_index <= end_index <= len(self.values):
            raise OutOfRangeError(
                f"interval [{start_day}, {end_day}) does not map to a valid slice "
                f"of a series of {len(self.values)} values"
            )
        return self.values[start_index:end_index]

    def latest(self) -> float:
        """Return the most recent observation.

        Raises:
            EmptySeriesError: if the series holds no values.
        """
        if not self.values:
            raise EmptySeriesError("series has no observations")
        return self.values[-1]

    # ------------------------------------------------------------------ #
    # Date addressing                                                      #
    # ------------------------------------------------------------------ #

    def require_dated(self, name: str) -> MetricSeries:
        """Return self, or raise ValueError naming `name` if the series has no dates."""
        if self.dates is None:
            raise ValueError(f"{name} must be a date-addressed series")
        return self

    def _require_dates(self) -> tuple[date, ...]:
        if self.dates is None:
            raise ValueError("series is not date-addressed")
        return self.dates

    def _index_at_date(self, when: date) -> int:
        when = _as_date(when)
        dates = self._require_dates()
        index = bisect_left(dates, when)
        if index == len(dates):
            raise NoDataAvailableError(
                f"no observation on or after {when.isoformat()}"
                + (f" (history ends {dates[-1].isoformat()})" if dates else "")
            )
        return index

    def value_at_date(self, when: date) -> float:
        """Return the observation at `when`, snapping forward past missing dates.

        Raises:
            NoDataAvailableError: if no date on or after `when` has data.
        """
        return self.values[self._index_at_date(when)]

    def offset_at_date(self, when: date) -> int:
        """Return the offset of the observation `value_at_date(when)` resolves to."""
        return len(self.values) - self._index_at_date(when)

    def interval_between_dates(self, start: date, end: date) -> tuple[float, ...]:
        """Return the values whose dates fall in [start, end], both inclusive.

        The date bounds are converted to offsets and sliced through
        interval_at_offsets.  A range inside the covered history that holds no
        observation returns an empty tuple.

        Raises:
            OutOfRangeError: if start > end, the series is empty, or the range
                lies wholly before or after the covered history.
        """
        dates = self._require_dates()
        start, end = _as_date(start), _as_date(end)
        if start > end:
            raise OutOfRangeError(
                f"start {start.isoformat()} is after end {end.isoformat()}"
            )
        if not dates or end < dates[0] or start > dates[-1]:
            covered = (
                f"{dates[0].isoformat()}..{dates[-1].isoformat()}" if dates else "nothing"
            )
            raise OutOfRangeError(
                f"range {start.isoformat()}..{end.isoformat()} is outside the "
                f"covered history ({covered})"
            )
        start_day = len(dates) - bisect_left(dates, start)
        end_day = len(dates) - bisect_right(dates, end)
        return self.interval_at_offsets(start_day, end_day)
