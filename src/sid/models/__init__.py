from .config import SidConfig, DEFAULT_SKY_PATH
from .location import SkyLocation
from .sidereal import SiderealTime

__all__ = [
    "SidConfig",
    "DEFAULT_SKY_PATH",
    "SkyLocation",
    "SiderealTime",
]
