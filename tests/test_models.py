import dataclasses
from pathlib import Path

import pytest

from sid.models import DEFAULT_SKY_PATH, SiderealTime, SidConfig, SkyLocation


def test_config_defaults():
    config = SidConfig()
    assert config.west_longitude == 0.0
    assert config.sky_path == DEFAULT_SKY_PATH
    assert config.julian is False
    assert config.verbose is False


def test_default_sky_path_is_plan9_location():
    assert DEFAULT_SKY_PATH == Path("/usr/local/plan9/sky/here")


def test_config_is_frozen():
    config = SidConfig(west_longitude=73.5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.west_longitude = 10.0


def test_zero_longitude_is_not_an_override():
    assert SidConfig(west_longitude=0.0).has_longitude_override is False
    assert SidConfig(west_longitude=-0.0).has_longitude_override is False


def test_nonzero_longitude_is_an_override():
    assert SidConfig(west_longitude=73.5).has_longitude_override is True
    assert SidConfig(west_longitude=-122.4).has_longitude_override is True


def test_sky_location_fields():
    location = SkyLocation(latitude=10.0, west_longitude=73.5, elevation=100.0)
    assert location.latitude == 10.0
    assert location.west_longitude == 73.5
    assert location.elevation == 100.0


def test_sidereal_time_format_zero_padded():
    assert SiderealTime(hours=6, minutes=39, seconds=52).format() == "06h39m52s"
    assert SiderealTime(hours=14, minutes=32, seconds=7).format() == "14h32m07s"
    assert SiderealTime(hours=0, minutes=0, seconds=0).format() == "00h00m00s"


def test_sidereal_time_str_matches_format():
    value = SiderealTime(hours=23, minutes=59, seconds=59)
    assert str(value) == value.format() == "23h59m59s"


def test_sidereal_time_negative_fields_keep_padding():
    """A minus sign precedes the two padded digits, as C's %.2d does."""
    value = SiderealTime(hours=-3, minutes=-20, seconds=-7)
    assert value.format() == "-03h-20m-07s"
