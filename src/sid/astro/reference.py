"""Cross-check against skyfield's apparent sidereal time.

Only used for verbose diagnostics. The polynomial in ``sidereal`` is a
mean-time formula evaluated on whole UTC seconds, so the two agree to a
few seconds of time, not exactly.
"""

from datetime import datetime, timezone
from functools import lru_cache

from skyfield.api import load


@lru_cache(maxsize=1)
def _timescale():
    # builtin leap second and delta T tables, no download
    return load.timescale()


def _skyfield_time(instant: datetime):
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return _timescale().from_datetime(instant)


def reference_local_sidereal_hours(instant: datetime, west_longitude: float) -> float:
    """Local apparent sidereal time in hours, in [0, 24)."""
    t = _skyfield_time(instant)
    return float((t.gast - west_longitude / 15.0) % 24.0)


def reference_julian_date(instant: datetime) -> float:
    """UT1 Julian date of instant according to skyfield."""
    return float(_skyfield_time(instant).ut1)
