"""Exception hierarchy shared by :mod:`feixing` modules."""

from __future__ import annotations

__all__ = [
    "FeiXingError",
    "InvalidInputError",
    "EphemerisUnavailableError",
    "SolarTermNotFoundError",
]


class FeiXingError(Exception):
    """Base class for errors raised by the library."""


class InvalidInputError(FeiXingError, ValueError):
    """Raised when a caller supplies a malformed direction, sector or chart."""


class EphemerisUnavailableError(FeiXingError, RuntimeError):
    """Raised when the Swiss Ephemeris bindings cannot be imported."""


class SolarTermNotFoundError(FeiXingError, RuntimeError):
    """Raised when a bounded solar-term search exhausts its window."""
