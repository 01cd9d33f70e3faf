"""Ephemeris access for :mod:`feixing`."""

from __future__ import annotations

from .sun import init_ephe, longitude_of_sun, longitude_of_sun_jd
from .swe import reset_swe, swe

__all__ = [
    "init_ephe",
    "longitude_of_sun",
    "longitude_of_sun_jd",
    "reset_swe",
    "swe",
]
