from .sidereal import (
    days_since_j2000,
    decompose_hours,
    local_sidereal_hours,
    local_sidereal_time,
    sidereal_angle,
    sidereal_polynomial,
    unix_seconds,
)
from .julian import format_julian_date, julian_date

__all__ = [
    "days_since_j2000",
    "decompose_hours",
    "local_sidereal_hours",
    "local_sidereal_time",
    "sidereal_angle",
    "sidereal_polynomial",
    "unix_seconds",
    "format_julian_date",
    "julian_date",
]
