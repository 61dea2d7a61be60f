"""Unit tests for strict ISO-8601 detection and conversion."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from conditional.primitives.dates import (
    is_iso_date,
    normalize_date,
    parse_iso_date,
    to_epoch_millis,
)

JUNE_11_2018 = 1528675200000


@pytest.mark.parametrize(
    "text",
    [
        "2018-06-11",
        "2018-06",
        "20180611",
        "+002018-06-11",
        "2018-162",
        "2018162",
        "2018-W24",
        "2018-W24-1",
        "2018W241",
        "2018-06-11T10",
        "2018-06-11T10:20",
        "2018-06-11T10:20:30",
        "2018-06-11T10:20:30.123",
        "2018-06-11T10:20:30,123",
        "20180611T102030",
        "20180611T1020",
        "20180611T10Z",
        "2018",
        "201806",
        "2018-06-11T24:00",
        "2018-06-11T10:20:30Z",
        "2018-06-11T10:20:30+02:00",
        "2018-06-11T10:20:30-0230",
        "2018-06-11T10:20:30+02",
        "2018-06-11 10:20",
    ],
)
def test_recognises_iso_8601(text):
    assert is_iso_date(text) is True


@pytest.mark.parametrize(
    "text",
    [
        "",
        "201",
        "hello",
        "2018-6-11",
        "2018-06-1",
        "2018-0611",
        "2018-02-30",
        "2018-13",
        "2018-366",
        "2018-W54",
        "2018-06-11T25:00",
        "2018-06-11T10:61",
        "2018-06-11T10:2030",
        "2018-06-11T1030",
        "20180611T10:30",
        "2018-06T10:00",
        "2018-W24T10",
        "2018W24T10",
        "2018T10",
        "201806T10",
        "2018-06-11T24:30",
        "+002018",
        "2018-06-11T",
        "2018-06-11 ",
        "2018-06-11Z",
        "2018-06-11T10:00+25:00",
        "06/11/2018",
    ],
)
def test_rejects_partial_or_lenient_forms(text):
    assert is_iso_date(text) is False


@pytest.mark.parametrize(
    "value", [20180611, 1528675200000, datetime(2018, 6, 11), date(2018, 6, 11), None]
)
def test_non_strings_are_never_iso_dates(value):
    assert is_iso_date(value) is False


def test_leap_day_ordinal():
    assert parse_iso_date("2016-366") == datetime(2016, 12, 31, tzinfo=timezone.utc)


def test_date_only_is_midnight_utc():
    assert to_epoch_millis("1970-01-01") == 0
    assert to_epoch_millis("2018-06-11") == JUNE_11_2018


def test_equivalent_spellings_share_a_timestamp():
    assert to_epoch_millis("2018-W01-1") == to_epoch_millis("2018-01-01")
    assert to_epoch_millis("2018-032") == to_epoch_millis("2018-02-01")
    assert to_epoch_millis("20180611") == JUNE_11_2018
    assert to_epoch_millis("2018-06") == to_epoch_millis("2018-06-01")


def test_offsets_are_applied():
    assert to_epoch_millis("1970-01-01T01:00:00+01:00") == 0
    assert to_epoch_millis("1970-01-01T00:00:00-00:30") == 30 * 60 * 1000


def test_fractions_truncate_to_milliseconds():
    assert to_epoch_millis("1970-01-01T00:00:01.5Z") == 1500
    assert to_epoch_millis("1970-01-01T00:00:00.0019Z") == 1


def test_native_dates():
    assert to_epoch_millis(datetime(1970, 1, 2)) == 86_400_000
    assert to_epoch_millis(date(1970, 1, 2)) == 86_400_000
    aware = datetime(1970, 1, 1, 1, tzinfo=timezone(timedelta(hours=1)))
    assert to_epoch_millis(aware) == 0


def test_before_epoch_is_negative():
    assert to_epoch_millis("1969-12-31T23:59:59Z") == -1000


def test_to_epoch_millis_rejects_non_dates():
    with pytest.raises(ValueError, match="Not an ISO-8601 date"):
        to_epoch_millis("yesterday")


def test_normalize_date():
    assert normalize_date("2018-06-11") == JUNE_11_2018
    assert normalize_date("john") == "john"
    assert normalize_date(5) == 5
    dt = datetime(2018, 6, 11)
    assert normalize_date(dt) is dt


def test_reduced_precision_dates_start_at_the_period():
    assert to_epoch_millis("2018") == to_epoch_millis("2018-01-01")
    assert to_epoch_millis("201806") == to_epoch_millis("2018-06-01")


def test_midnight_at_end_of_day_rolls_over():
    assert to_epoch_millis("2018-06-10T24:00") == JUNE_11_2018
    assert parse_iso_date("9999-12-31T24:00") is None
