"""Local sidereal time from a cubic in days since J2000.

Constants from https://www.aa.quae.nl/en/reken/sterrentijd.html
"""

from datetime import datetime, timedelta, timezone

import numpy as np

from ..models.sidereal import SiderealTime

L0 = 99.967794687
L1 = 360.98564736628603
L2 = 2.907879e-13
L3 = -5.302e-22

SECONDS_PER_DAY = 86400
DEGREES_PER_HOUR = 15.0

UNIX_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
J2000 = datetime(2000, 1, 1, tzinfo=timezone.utc)
J2000_UNIX = 946_684_800


def unix_seconds(instant: datetime) -> int:
    """Whole seconds since the Unix epoch, rounded toward the past.

    Naive datetimes are taken to be UTC.
    """
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return (instant - UNIX_EPOCH) // timedelta(seconds=1)


def days_since_j2000(instant: datetime) -> float:
    """Fractional days (ΔJ) from 2000-01-01T00:00:00 UTC to instant."""
    return (unix_seconds(instant) - J2000_UNIX) / SECONDS_PER_DAY


def sidereal_polynomial(delta_j, west_longitude):
    """Unreduced local sidereal angle in degrees (Horner form)."""
    return L0 + delta_j * (L1 + delta_j * (L2 + L3 * delta_j)) - west_longitude


def sidereal_angle(delta_j, west_longitude):
    """Local sidereal angle in degrees, reduced modulo 360.

    The reduction keeps the sign of the unreduced angle (C fmod), so a
    negative angle stays negative. Works on scalars and numpy arrays.

    Args:
        delta_j: Days since J2000
        west_longitude: Observer longitude in degrees, west positive

    Returns:
        Angle in degrees in the open interval (-360, 360)
    """
    return np.fmod(sidereal_polynomial(delta_j, west_longitude), 360.0)


def local_sidereal_hours(delta_j: float, west_longitude: float) -> float:
    return float(sidereal_angle(delta_j, west_longitude)) / DEGREES_PER_HOUR


def decompose_hours(hours: float) -> SiderealTime:
    """Split decimal hours into truncated hours, minutes and seconds.

    Each step truncates toward zero, so 59.9999 minutes reads as 59.
    """
    whole_hours = int(hours)
    remainder = (hours - whole_hours) * 60
    minutes = int(remainder)
    remainder = (remainder - minutes) * 60
    seconds = int(remainder)
    return SiderealTime(hours=whole_hours, minutes=minutes, seconds=seconds)


def local_sidereal_time(instant: datetime, west_longitude: float) -> SiderealTime:
    """Local sidereal time at instant for an observer at west_longitude degrees."""
    delta_j = days_since_j2000(instant)
    return decompose_hours(local_sidereal_hours(delta_j, west_longitude))
