from .resolver import parse_sky_record, read_sky_file, resolve_west_longitude

__all__ = ["parse_sky_record", "read_sky_file", "resolve_west_longitude"]
