from dataclasses import dataclass


@dataclass(frozen=True)
class SkyLocation:
    latitude: float
    west_longitude: float
    elevation: float
