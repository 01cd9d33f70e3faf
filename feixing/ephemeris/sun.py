"""Solar ecliptic longitude backed by Swiss Ephemeris."""

from __future__ import annotations

import datetime as _dt
import logging
from functools import lru_cache
from pathlib import Path

from ..time import julian_day
from ..utils.angles import norm360
from .swe import swe

LOG = logging.getLogger(__name__)

__all__ = ["init_ephe", "longitude_of_sun", "longitude_of_sun_jd"]


@lru_cache(maxsize=1)
def init_ephe() -> int:
    """Configure the ephemeris path from settings and return the flags to use."""

    from ..config import get_settings

    cfg = get_settings().ephemeris
    swe_module = swe()
    path = Path(cfg.path).expanduser() if cfg.path else None
    if not cfg.moshier and path is not None and path.is_dir():
        swe_module.set_ephe_path(str(path))
        LOG.info("Ephemeris runtime mode: swiss (path=%s)", path)
        return int(swe_module.FLG_SWIEPH)
    if not cfg.moshier:
        LOG.info("Ephemeris runtime mode: moshier (path=%s - Swiss data missing)", path)
    return int(swe_module.FLG_MOSEPH)


def longitude_of_sun_jd(jd_ut: float) -> float:
    """Return the apparent ecliptic longitude of the sun at Julian day ``jd_ut``."""

    values, _ = swe().calc_ut(jd_ut, swe.SUN, init_ephe())
    return norm360(float(values[0]))


def longitude_of_sun(moment: _dt.datetime) -> float:
    """Return the sun's ecliptic longitude in [0, 360) for ``moment``."""

    return longitude_of_sun_jd(julian_day(moment))
