"""Error handling utilities for sidereal time reporting."""

import sys
from pathlib import Path
from typing import Optional

PROGRAM_PREFIX = "sid: "


class SidError(Exception):
    """Base exception for sid-specific errors."""

    def __init__(self, message: str, suggestions: Optional[list[str]] = None):
        """Initialize with message and optional suggestions.

        Args:
            message: Error description
            suggestions: Optional list of actionable suggestions
        """
        self.message = message
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with suggestions."""
        formatted = f"{self.message}"
        if self.suggestions:
            formatted += "\n\nSuggestions:"
            for suggestion in self.suggestions:
                formatted += f"\n  - {suggestion}"
        return formatted


class SkyFileReadError(SidError):
    """Raised when the sky file cannot be read."""

    def __init__(self, path: Path | str, reason: Optional[str] = None):
        self.path = Path(path)
        message = "can't read sky file; set --long for longitude"
        suggestions = [f"Sky file: {self.path}"]
        if reason:
            suggestions.append(f"Reason: {reason}")
        suggestions.append("Point --sky at a readable file, or pass --long DEGREES")
        super().__init__(message, suggestions)


class SkyFileParseError(SidError):
    """Raised when the sky file does not hold three numeric fields."""

    def __init__(self, path: Path | str | None, found: str):
        self.path = Path(path) if path is not None else None
        self.found = found
        message = "can't parse sky file; set --long for longitude"
        suggestions = []
        if self.path is not None:
            suggestions.append(f"Sky file: {self.path}")
        suggestions.extend(
            [
                f"Found: {found!r}",
                "Expected one line: <latitude> <west-longitude> <elevation>",
            ]
        )
        super().__init__(message, suggestions)


class InvalidLongitudeError(SidError):
    """Raised when an explicit longitude is nan or infinite."""

    def __init__(self, value: float):
        self.value = value
        message = f"longitude must be a finite number of degrees, got {value}"
        suggestions = ["Pass --long DEGREES with a finite value, west positive"]
        super().__init__(message, suggestions)


def print_error(error: Exception) -> None:
    """Print error to stderr with the program prefix.

    Args:
        error: Exception to print
    """
    print(f"{PROGRAM_PREFIX}{error}", file=sys.stderr)


def print_warning(message: str) -> None:
    """Print a non-fatal problem to stderr; the exit code is unaffected."""
    print(f"{PROGRAM_PREFIX}warning: {message}", file=sys.stderr)


def handle_error(error: Exception, context: Optional[str] = None) -> int:
    """Handle an error with optional context and return exit code.

    Args:
        error: Exception that occurred
        context: Optional description of what was being attempted

    Returns:
        Exit code (1 for error)
    """
    if context:
        print(f"{PROGRAM_PREFIX}error while {context}:", file=sys.stderr)

    print_error(error)

    import traceback

    if not isinstance(error, SidError):
        traceback.print_exc()

    return 1
