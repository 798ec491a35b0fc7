# calcsuite/core/errors.py
"""
Typed errors for the calculator engines and the inputs layer.

Exports
-------
- CalculatorError, InvalidHolidayError, UnknownUnitError,
  UnknownTimeZoneError, InputsError

Degenerate numbers (zero principal, zero term, ...) are *not* errors: the
engines answer with zero/empty results instead. These exceptions cover input
that cannot be interpreted at all (bad dates, unknown units, unknown zones).
"""

from __future__ import annotations

# =========================
# Exception types
# =========================


class CalculatorError(ValueError):
    """Base class for calculator input failures."""


class InvalidHolidayError(CalculatorError):
    """A holiday list entry is not an ISO-8601 calendar date."""

    def __init__(self, entry: str) -> None:
        super().__init__(f"invalid holiday date: {entry!r} (expected YYYY-MM-DD)")
        self.entry = entry


class UnknownUnitError(CalculatorError):
    """A duration or conversion unit is not supported."""

    def __init__(self, unit: str, valid: tuple[str, ...] | list[str] = ()) -> None:
        msg = f"unknown unit: {unit!r}"
        if valid:
            msg += f" (expected one of: {', '.join(valid)})"
        super().__init__(msg)
        self.unit = unit


class UnknownTimeZoneError(CalculatorError):
    """A time-zone name is not in the configured zone list."""

    def __init__(self, zone: str) -> None:
        super().__init__(f"unknown time zone: {zone!r}")
        self.zone = zone


class InputsError(CalculatorError):
    """A config/inputs file could not be read or failed validation."""


__all__ = [
    "CalculatorError",
    "InvalidHolidayError",
    "UnknownUnitError",
    "UnknownTimeZoneError",
    "InputsError",
]
