import datetime
import time

import pytest

from cfkit.timeutil import DateTime, is_leap_year, sleep_ms


def test_now_is_marked_utc():
    dt = DateTime.now()
    assert dt.utc is True


def test_now_fields_in_range():
    dt = DateTime.now()
    assert 1 <= dt.month <= 12
    assert 1 <= dt.day <= 31
    assert 0 <= dt.hour <= 23
    assert 0 <= dt.minute <= 59
    assert 0 <= dt.second <= 61
    assert 0 <= dt.millisecond <= 999
    assert 0 <= dt.week_day <= 6


def test_now_timestamp_matches_clock():
    dt = DateTime.now()
    assert abs(dt.timestamp - time.time() * 1000) < 1000
    assert dt.timestamp % 1000 == dt.millisecond


def test_now_week_day_counts_from_sunday():
    dt = DateTime.now()
    assert datetime.date(dt.year, dt.month, dt.day).isoweekday() % 7 == dt.week_day


@pytest.mark.parametrize(
    "year, month, day, expected",
    [
        (2023, 1, 1, 1),
        (2023, 2, 28, 59),
        (2023, 3, 1, 60),
        (2024, 3, 1, 61),
        (2024, 2, 29, 60),
        (2023, 12, 31, 365),
        (2024, 12, 31, 366),
    ],
)
def test_day_of_year(year, month, day, expected):
    assert DateTime(year, month, day).day_of_year() == expected


def test_day_of_year_rejects_bad_month():
    with pytest.raises(ValueError):
        DateTime(2024, 13, 1).day_of_year()


@pytest.mark.parametrize(
    "year, leap",
    [(2000, True), (1900, False), (2024, True), (2023, False), (2100, False)],
)
def test_is_leap_year(year, leap):
    assert is_leap_year(year) is leap


def test_sleep_ms_waits():
    before = DateTime.now().timestamp
    sleep_ms(20)
    after = DateTime.now().timestamp
    assert after - before >= 15


def test_sleep_ms_rejects_negative():
    with pytest.raises(ValueError):
        sleep_ms(-1)