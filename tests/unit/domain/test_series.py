"""Tests for src/domain/models/series.py."""

from datetime import date, datetime

import pandas as pd
import pytest
from pydantic import ValidationError

from src.domain.errors import EmptySeriesError, NoDataAvailableError, OutOfRangeError
from src.domain.models.series import MetricSeries


@pytest.fixture
def series() -> MetricSeries:
    """Five observations, oldest first."""
    return MetricSeries(values=[10, 11, 12, 13, 14])


@pytest.fixture
def dated() -> MetricSeries:
    """Observations on 2 Jan, 4 Jan and 5 Jan 2024; nothing on 3 Jan."""
    return MetricSeries(
        dates=[date(2024, 1, 2), date(2024, 1, 4), date(2024, 1, 5)],
        values=[100.0, 104.0, 105.0],
    )


# --- Construction ---

def test_values_are_stored_as_floats(series):
    assert series.values == (10.0, 11.0, 12.0, 13.0, 14.0)
    assert all(isinstance(v, float) for v in series.values)


def test_len_is_number_of_values(series):
    assert len(series) == 5


def test_undated_series_is_not_dated(series):
    assert series.is_dated is False


def test_dated_series_is_dated(dated):
    assert dated.is_dated is True


def test_series_is_frozen(series):
    with pytest.raises(ValidationError):
        series.values = (1.0,)  # type: ignore[misc]


def test_nan_value_raises():
    with pytest.raises(ValidationError):
        MetricSeries(values=[1.0, float("nan")])


def test_infinite_value_raises():
    with pytest.raises(ValidationError):
        MetricSeries(values=[float("inf")])


def test_dates_length_mismatch_raises():
    with pytest.raises(ValidationError, match="same length"):
        MetricSeries(dates=[date(2024, 1, 2)], values=[1.0, 2.0])


def test_dates_out_of_order_raises():
    with pytest.raises(ValidationError, match="strictly increasing"):
        MetricSeries(dates=[date(2024, 1, 3), date(2024, 1, 2)], values=[1.0, 2.0])


def test_duplicate_dates_raise():
    with pytest.raises(ValidationError, match="strictly increasing"):
        MetricSeries(dates=[date(2024, 1, 2), date(2024, 1, 2)], values=[1.0, 2.0])


def test_from_pairs_sorts_chronologically():
    s = MetricSeries.from_pairs(
        [(date(2024, 1, 5), 3.0), (date(2024, 1, 1), 1.0), (date(2024, 1, 3), 2.0)]
    )
    assert s.dates == (date(2024, 1, 1), date(2024, 1, 3), date(2024, 1, 5))
    assert s.values == (1.0, 2.0, 3.0)


def test_from_pairs_duplicate_date_raises():
    with pytest.raises(ValidationError):
        MetricSeries.from_pairs([(date(2024, 1, 1), 1.0), (date(2024, 1, 1), 2.0)])


# --- Offset addressing ---

def test_offset_one_is_latest_value(series):
    assert series.value_at_offset(1) == 14.0


def test_offset_size_is_oldest_value(series):
    assert series.value_at_offset(5) == 10.0


def test_offset_zero_is_out_of_range(series):
    with pytest.raises(OutOfRangeError):
        series.value_at_offset(0)


def test_offset_beyond_history_is_out_of_range(series):
    with pytest.raises(OutOfRangeError):
        series.value_at_offset(6)


def test_negative_offset_is_out_of_range(series):
    with pytest.raises(OutOfRangeError):
        series.value_at_offset(-1)


def test_out_of_range_is_an_index_error(series):
    with pytest.raises(IndexError):
        series.value_at_offset(0)


def test_interval_start_inclusive_end_exclusive(series):
    assert series.interval_at_offsets(5, 2) == (10.0, 11.0, 12.0)


def test_interval_to_offset_zero_includes_latest(series):
    assert series.interval_at_offsets(2, 0) == (13.0, 14.0)


def test_interval_full_history(series):
    assert series.interval_at_offsets(5, 0) == series.values


def test_interval_with_equal_bounds_is_empty(series):
    assert series.interval_at_offsets(3, 3) == ()


def test_interval_with_inverted_bounds_raises(series):
    with pytest.raises(OutOfRangeError):
        series.interval_at_offsets(2, 5)


def test_interval_start_beyond_history_raises(series):
    with pytest.raises(OutOfRangeError):
        series.interval_at_offsets(6, 1)


def test_interval_end_past_today_raises(series):
    with pytest.raises(OutOfRangeError):
        series.interval_at_offsets(1, -1)


def test_interval_length_and_last_element_for_every_valid_pair(series):
    size = len(series)
    for start_day in range(2, size + 1):
        for end_day in range(1, start_day):
            interval = series.interval_at_offsets(start_day, end_day)
            assert len(interval) == start_day - end_day
            assert interval[-1] == series.value_at_offset(end_day + 1)


def test_latest_equals_offset_one(series):
    assert series.latest() == series.value_at_offset(1)


def test_latest_on_single_value_series():
    assert MetricSeries(values=[7.5]).latest() == 7.5


def test_latest_on_empty_series_raises():
    with pytest.raises(EmptySeriesError):
        MetricSeries().latest()


def test_empty_series_error_is_a_lookup_error():
    with pytest.raises(LookupError):
        MetricSeries().latest()


# --- Date addressing ---

def test_value_at_exact_date(dated):
    assert dated.value_at_date(date(2024, 1, 2)) == 100.0
    assert dated.value_at_date(date(2024, 1, 5)) == 105.0


def test_missing_date_snaps_forward(dated):
    assert dated.value_at_date(date(2024, 1, 3)) == 104.0


def test_date_before_history_snaps_to_first_observation(dated):
    assert dated.value_at_date(date(2023, 12, 25)) == 100.0


def test_forward_snap_is_idempotent(dated):
    first = dated.value_at_date(date(2024, 1, 3))
    second = dated.value_at_date(date(2024, 1, 3))
    assert first == second


def test_date_after_history_raises(dated):
    with pytest.raises(NoDataAvailableError, match="2024-01-06"):
        dated.value_at_date(date(2024, 1, 6))


def test_date_lookup_on_empty_dated_series_raises():
    with pytest.raises(NoDataAvailableError):
        MetricSeries(dates=[], values=[]).value_at_date(date(2024, 1, 1))


def test_date_lookup_on_undated_series_raises(series):
    with pytest.raises(ValueError, match="not date-addressed"):
        series.value_at_date(date(2024, 1, 1))


def test_datetime_lookup_uses_its_calendar_date(dated):
    assert dated.value_at_date(datetime(2024, 1, 3, 15, 30)) == 104.0
    assert dated.value_at_date(datetime(2024, 1, 4, 23, 59)) == 104.0


def test_timestamp_lookup_uses_its_calendar_date(dated):
    assert dated.value_at_date(pd.Timestamp("2024-01-03")) == 104.0
    assert dated.offset_at_date(pd.Timestamp("2024-01-05 09:30")) == 1


def test_datetime_after_history_raises(dated):
    with pytest.raises(NoDataAvailableError, match="2024-01-06"):
        dated.value_at_date(datetime(2024, 1, 6))


def test_offset_at_date_resolves_snapped_observation(dated):
    assert dated.offset_at_date(date(2024, 1, 3)) == 2
    assert dated.offset_at_date(date(2024, 1, 5)) == 1


def test_offset_and_date_addressing_agree(dated):
    for day in (2, 3, 4, 5):
        when = date(2024, 1, day)
        assert dated.value_at_offset(dated.offset_at_date(when)) == dated.value_at_date(when)


def test_interval_between_dates_is_inclusive(dated):
    assert dated.interval_between_dates(date(2024, 1, 2), date(2024, 1, 4)) == (100.0, 104.0)


def test_interval_between_dates_snaps_start_forward(dated):
    assert dated.interval_between_dates(date(2024, 1, 3), date(2024, 1, 5)) == (104.0, 105.0)


def test_interval_between_dates_overlapping_start_of_history(dated):
    assert dated.interval_between_dates(date(2023, 12, 1), date(2024, 1, 2)) == (100.0,)


def test_interval_between_dates_covering_everything(dated):
    assert dated.interval_between_dates(date(2023, 1, 1), date(2025, 1, 1)) == dated.values


def test_interval_between_dates_without_observations_is_empty(dated):
    assert dated.interval_between_dates(date(2024, 1, 3), date(2024, 1, 3)) == ()


def test_interval_between_dates_accepts_datetime_and_timestamp(dated):
    result = dated.interval_between_dates(
        datetime(2024, 1, 2, 9, 0), pd.Timestamp("2024-01-04 16:00")
    )
    assert result == (100.0, 104.0)


def test_interval_between_dates_end_time_does_not_exclude_its_day(dated):
    assert dated.interval_between_dates(
        date(2024, 1, 4), datetime(2024, 1, 5, 0, 1)
    ) == (104.0, 105.0)


def test_interval_between_dates_start_after_end_raises(dated):
    with pytest.raises(OutOfRangeError):
        dated.interval_between_dates(date(2024, 1, 5), date(2024, 1, 2))


def test_interval_between_dates_before_history_raises(dated):
    with pytest.raises(OutOfRangeError, match="outside the covered history"):
        dated.interval_between_dates(date(2023, 12, 1), date(2023, 12, 31))


def test_interval_between_dates_after_history_raises(dated):
    with pytest.raises(OutOfRangeError):
        dated.interval_between_dates(date(2024, 2, 1), date(2024, 3, 1))


def test_interval_between_dates_on_empty_series_raises():
    with pytest.raises(OutOfRangeError):
        MetricSeries(dates=[], values=[]).interval_between_dates(
            date(2024, 1, 1), date(2024, 1, 2)
        )
