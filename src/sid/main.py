import argparse
import math
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from .location.resolver import resolve_west_longitude
from .astro.sidereal import (
    days_since_j2000,
    decompose_hours,
    local_sidereal_time,
    sidereal_angle,
    sidereal_polynomial,
)
from .astro.julian import format_julian_date, julian_date
from .models import DEFAULT_SKY_PATH, SidConfig
from .errors import SidError, handle_error, print_warning


def finite_float(value: str) -> float:
    """argparse type for a float that is neither nan nor infinite."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid float value: {value!r}")
    if not math.isfinite(number):
        raise argparse.ArgumentTypeError(f"longitude must be finite, got {value!r}")
    return number


def parse_args():
    """Parse command-line arguments.

    Every flag also answers to the single-dash spelling of the Plan 9
    tool (-long, -sky, -julian).
    """
    parser = argparse.ArgumentParser(
        prog="sid",
        description="Print the current local sidereal time.",
    )
    parser.add_argument(
        "--long",
        "-long",
        type=finite_float,
        default=0.0,
        help="West longitude in degrees (default: read from the sky file; 0 counts as unset)",
    )
    parser.add_argument(
        "--sky",
        "-sky",
        type=str,
        default=str(DEFAULT_SKY_PATH),
        help="Sky file in Plan 9 format: latitude, west longitude, elevation (default: %(default)s)",
    )
    parser.add_argument(
        "--julian",
        "-julian",
        action="store_true",
        help="Print the Julian date as well",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Print intermediate values and a skyfield cross-check to stderr",
    )
    return parser.parse_args()


def build_config(args: argparse.Namespace) -> SidConfig:
    """Freeze parsed arguments into a SidConfig."""
    return SidConfig(
        west_longitude=args.long,
        sky_path=Path(args.sky),
        julian=args.julian,
        verbose=args.verbose,
    )


def print_verbose_info(config: SidConfig, instant: datetime, west_longitude: float):
    """Print intermediate values and the skyfield cross-check to stderr.

    Args:
        config: Run configuration
        instant: The instant the report was computed for
        west_longitude: Resolved west longitude in degrees
    """
    from .astro.reference import (
        reference_julian_date,
        reference_local_sidereal_hours,
    )

    def emit(line=""):
        print(line, file=sys.stderr)

    delta_j = days_since_j2000(instant)
    theta = sidereal_polynomial(delta_j, west_longitude)
    reduced = float(sidereal_angle(delta_j, west_longitude))

    emit("=== VERBOSE: Internal State ===")
    emit(f"  Instant (UTC): {instant.isoformat(timespec='seconds')}")
    if config.has_longitude_override:
        emit(f"  West longitude: {west_longitude:.6f}° (from --long)")
    else:
        emit(f"  West longitude: {west_longitude:.6f}° (from {config.sky_path})")
    emit(f"  Days since J2000: {delta_j:.6f}")
    emit(f"  Sidereal angle: {theta:.6f}°")
    emit(f"  Reduced angle: {reduced:.6f}°")
    emit(f"  Local sidereal hours: {reduced / 15:.6f}")
    emit()

    reference_hours = reference_local_sidereal_hours(instant, west_longitude)
    emit("skyfield cross-check:")
    emit(f"  Local apparent sidereal time: {decompose_hours(reference_hours)}")
    emit(f"  Julian date (UT1): {reference_julian_date(instant):.6f}")
    emit("=== END VERBOSE ===")


def report_sidereal_time(config: SidConfig, instant: Optional[datetime] = None) -> int:
    """Print local sidereal time, and the Julian date if asked for.

    The longitude is resolved before anything is printed, so a failure
    leaves stdout empty.

    Args:
        config: Run configuration
        instant: Moment to report on (None for now)

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    try:
        west_longitude = resolve_west_longitude(config)
    except SidError as e:
        return handle_error(e)

    if instant is None:
        instant = datetime.now(timezone.utc)

    try:
        print(local_sidereal_time(instant, west_longitude).format())

        if config.julian:
            print(format_julian_date(julian_date(instant)))

    except Exception as e:
        return handle_error(e, "computing sidereal time")

    if config.verbose:
        # stdout is already complete here
        try:
            print_verbose_info(config, instant, west_longitude)
        except Exception as e:
            print_warning(f"verbose cross-check failed: {e}")

    return 0


def main():
    """CLI entry point."""
    args = parse_args()

    exit_code = report_sidereal_time(build_config(args))

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
