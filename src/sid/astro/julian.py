from datetime import datetime

from .sidereal import SECONDS_PER_DAY, unix_seconds

# -4713-11-24T12:00:00 UTC, proleptic Gregorian, in Unix seconds
JULIAN_EPOCH_UNIX = -210_866_760_000


def julian_date(instant: datetime) -> float:
    """Julian date of instant, counted in whole UTC seconds."""
    return (unix_seconds(instant) - JULIAN_EPOCH_UNIX) / SECONDS_PER_DAY


def format_julian_date(jd: float) -> str:
    return f"Julian date: {jd:.2f}"
