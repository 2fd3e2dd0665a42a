"""Error handling utilities for pyfloatview.

The layout pass itself never raises. These exceptions cover the outer
surfaces: persisted settings and command line input.
"""

import math
from pathlib import Path


class PyfloatviewError(Exception):
    """Base exception for pyfloatview errors."""

    pass


class ValidationError(PyfloatviewError):
    """Exception raised when input validation fails."""

    def __init__(self, field: str, value: object, expected: str) -> None:
        """Initialize validation error.

        Args:
            field: Field name that failed validation
            value: Invalid value
            expected: Expected type/description
        """
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(f"Validation failed for '{field}': expected {expected}, got {value!r}")


class SettingsError(PyfloatviewError):
    """Exception raised when settings cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        """Initialize settings error.

        Args:
            path: Settings file path
            reason: Reason for failure
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write settings {path}: {reason}")


def validate_range(value: int | float, min_val: int | float, max_val: int | float, name: str = "value") -> None:
    """Validate that a value is within range.

    Args:
        value: Value to validate
        min_val: Minimum allowed value
        max_val: Maximum allowed value
        name: Name of the value for error messages

    Raises:
        ValidationError: If value is out of range
    """
    if not (min_val <= value <= max_val):
        raise ValidationError(name, value, f"value between {min_val} and {max_val}")


def validate_non_negative(value: int | float, name: str = "value") -> None:
    """Validate that a value is a finite number, zero or positive.

    Raises:
        ValidationError: If value is negative, NaN or infinite
    """
    if not math.isfinite(value) or value < 0:
        raise ValidationError(name, value, "finite non-negative number")
