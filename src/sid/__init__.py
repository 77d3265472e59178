"""Report the current local sidereal time."""

__version__ = "0.1.0"
