from dataclasses import dataclass
from pathlib import Path

DEFAULT_SKY_PATH = Path("/usr/local/plan9/sky/here")


@dataclass(frozen=True)
class SidConfig:
    """Settings for a single run, built once from the command line.

    A west longitude of exactly 0.0 means "not supplied": the sky file is
    consulted instead, so the Greenwich meridian itself can only be given
    through the sky file.
    """

    west_longitude: float = 0.0
    sky_path: Path = DEFAULT_SKY_PATH
    julian: bool = False
    verbose: bool = False

    @property
    def has_longitude_override(self) -> bool:
        return self.west_longitude != 0
