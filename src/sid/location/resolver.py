import math
import re
from pathlib import Path
from typing import Optional

from sid.models import SidConfig, SkyLocation
from sid.errors import InvalidLongitudeError, SkyFileParseError, SkyFileReadError

SKY_FIELD_COUNT = 3

# decimal float as a C-style %f scan reads it: no underscores, no inf/nan
_FLOAT_TOKEN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _scan_float(token: str, allow_suffix: bool) -> Optional[float]:
    """Numeric value of token, or None if it is not a finite decimal float.

    With allow_suffix, trailing non-numeric characters are ignored
    ("100m" reads as 100.0).
    """
    if allow_suffix:
        match = _FLOAT_TOKEN.match(token)
    else:
        match = _FLOAT_TOKEN.fullmatch(token)
    if match is None:
        return None

    value = float(match.group())
    if not math.isfinite(value):
        return None
    return value


def parse_sky_record(text: str, path: Optional[Path] = None) -> SkyLocation:
    """
    Parse a Plan 9 sky record: latitude, west longitude and elevation.

    Only the first three whitespace-separated fields are read; anything
    after them is ignored, including trailing characters glued to the
    elevation.

    Args:
        text: Contents of the sky file
        path: File the text came from, used in error messages

    Returns:
        SkyLocation with the three parsed fields

    Raises:
        SkyFileParseError: If fewer than three finite numeric fields are present
    """
    fields = text.split()[:SKY_FIELD_COUNT]
    if len(fields) < SKY_FIELD_COUNT:
        raise SkyFileParseError(path, text.strip())

    values = [
        _scan_float(field, allow_suffix=(index == SKY_FIELD_COUNT - 1))
        for index, field in enumerate(fields)
    ]
    if any(value is None for value in values):
        raise SkyFileParseError(path, text.strip())

    latitude, west_longitude, elevation = values
    return SkyLocation(
        latitude=latitude,
        west_longitude=west_longitude,
        elevation=elevation,
    )


def read_sky_file(path: Path | str) -> SkyLocation:
    """
    Read and parse the sky file at path.

    Raises:
        SkyFileReadError: If the file cannot be read
        SkyFileParseError: If its contents are not a sky record
    """
    sky_path = Path(path)
    try:
        text = sky_path.read_text()
    except (OSError, UnicodeDecodeError) as e:
        raise SkyFileReadError(sky_path, reason=str(e)) from e

    return parse_sky_record(text, sky_path)


def resolve_west_longitude(config: SidConfig) -> float:
    """
    Resolve the observer's west longitude in degrees.

    An explicit non-zero longitude wins. Otherwise the sky file named by
    the config is read; a longitude of 0.0 is treated as unset, so it
    always falls through to the file.

    Args:
        config: Run configuration

    Returns:
        West longitude in degrees (west positive)

    Raises:
        InvalidLongitudeError: If the explicit longitude is nan or infinite
        SkyFileReadError: If the sky file is needed but unreadable
        SkyFileParseError: If the sky file is needed but malformed
    """
    if config.has_longitude_override:
        if not math.isfinite(config.west_longitude):
            raise InvalidLongitudeError(config.west_longitude)
        return config.west_longitude

    return read_sky_file(config.sky_path).west_longitude
