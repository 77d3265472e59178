from dataclasses import dataclass


def _two_digits(value: int) -> str:
    # C-style "%.2d": the sign sits outside the zero padding
    sign = "-" if value < 0 else ""
    return f"{sign}{abs(value):02d}"


@dataclass(frozen=True)
class SiderealTime:
    hours: int
    minutes: int
    seconds: int

    def format(self) -> str:
        """Render as HHhMMmSSs, e.g. 14h32m07s."""
        return (
            f"{_two_digits(self.hours)}h"
            f"{_two_digits(self.minutes)}m"
            f"{_two_digits(self.seconds)}s"
        )

    def __str__(self) -> str:
        return self.format()
