"""Angle utilities for solar longitude and compass bearings."""

from __future__ import annotations

import math

__all__ = ["norm360", "delta_angle"]


def norm360(x: float) -> float:
    """Normalize angle to [0, 360)."""

    y = math.fmod(x, 360.0)
    return y + 360.0 if y < 0 else y


def delta_angle(a: float, b: float) -> float:
    """Smallest signed delta from ``a``→``b`` in degrees in (-180, 180].

    The solar-term search relies on this to step across the 0° (Chun-Fen)
    boundary without special casing the wrap.
    """

    raw = b - a
    delta = (raw + 180.0) % 360.0 - 180.0
    if delta == -180.0:
        tie = math.nextafter(180.0, 0.0)
        return tie if raw >= 0.0 else -tie
    return delta
