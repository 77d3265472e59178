import re
from datetime import datetime, timedelta, timezone

import pytest

from sid.astro.julian import JULIAN_EPOCH_UNIX, format_julian_date, julian_date


def test_unix_epoch():
    assert julian_date(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 2440587.5


def test_j2000_noon():
    assert julian_date(datetime(2000, 1, 1, 12, tzinfo=timezone.utc)) == 2451545.0


def test_j2000_midnight():
    assert julian_date(datetime(2000, 1, 1, tzinfo=timezone.utc)) == 2451544.5


def test_epoch_constant_is_julian_day_zero():
    assert -JULIAN_EPOCH_UNIX / 86400 == 2440587.5


def test_ignores_fractional_seconds():
    instant = datetime(2000, 1, 1, 12, tzinfo=timezone.utc)
    assert julian_date(instant + timedelta(microseconds=999_999)) == julian_date(instant)


def test_present_day_is_positive():
    assert julian_date(datetime(2026, 10, 17, tzinfo=timezone.utc)) == pytest.approx(
        2461330.5
    )


def test_format_two_decimals():
    assert format_julian_date(2451545.0) == "Julian date: 2451545.00"
    assert format_julian_date(2461330.123456) == "Julian date: 2461330.12"


def test_format_rounds_last_decimal():
    assert format_julian_date(2451544.996) == "Julian date: 2451545.00"


def test_format_pattern():
    line = format_julian_date(julian_date(datetime.now(timezone.utc)))
    assert re.fullmatch(r"Julian date: \d+\.\d{2}", line)
