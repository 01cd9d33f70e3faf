"""The twenty-four solar terms (二十四節氣) and the Li-Chun (立春) finder.

A solar term begins when the sun's ecliptic longitude reaches a multiple of
15 degrees. Crossing moments are UTC; term dates are calendar days in the
configured almanac zone (China Standard Time by default).
"""

from __future__ import annotations

import datetime as _dt
import logging
import math
from dataclasses import dataclass
from typing import Final, Mapping

from .data import load_table
from .ephemeris import longitude_of_sun_jd
from .exceptions import InvalidInputError, SolarTermNotFoundError
from .language import Language, NamedRecord
from .time import ensure_utc, julian_day
from .utils.angles import delta_angle

LOG = logging.getLogger(__name__)

__all__ = [
    "SolarTerm",
    "SolarTermHit",
    "SOLAR_TERMS",
    "LICHUN_ANGLE",
    "solar_term_for_angle",
    "find_solar_term_before",
    "lichun",
    "lichun_moment",
]

LICHUN_ANGLE: Final[int] = 315

_BISECT_ITERATIONS: Final[int] = 20
_ONE_DAY: Final[_dt.timedelta] = _dt.timedelta(days=1)


@dataclass(frozen=True)
class SolarTerm(NamedRecord):
    """A solar term; ``id`` runs from 1 (立春) to 24 (大寒)."""

    id: int
    name: Language
    angle: int


@dataclass(frozen=True)
class SolarTermHit:
    """The most recent solar term at or before some moment."""

    term: SolarTerm
    date: _dt.date
    moment: _dt.datetime

    @property
    def longitude(self) -> float:
        return float(self.term.angle)


SOLAR_TERMS: Final[tuple[SolarTerm, ...]] = tuple(
    SolarTerm(
        id=int(row["id"]),
        name=Language.from_data(row["name"]),
        angle=int(row["angle"]),
    )
    for row in load_table("solar_terms")
)

_BY_ANGLE: Final[Mapping[int, SolarTerm]] = {term.angle: term for term in SOLAR_TERMS}


def solar_term_for_angle(angle: float) -> SolarTerm:
    """Return the solar term that begins at ``angle`` degrees."""

    key = int(round(angle)) % 360
    try:
        return _BY_ANGLE[key]
    except KeyError:
        raise InvalidInputError(f"No solar term begins at {angle} degrees") from None


def _from_jd(jd: float) -> _dt.datetime:
    return _dt.datetime(2000, 1, 1, 12, tzinfo=_dt.UTC) + _dt.timedelta(
        days=jd - 2_451_545.0
    )


def _crossing(target: float, lo: float, hi: float) -> float:
    """Bisect for the Julian day in ``[lo, hi]`` where the sun reaches ``target``."""

    for _ in range(_BISECT_ITERATIONS):
        mid = (lo + hi) / 2.0
        if delta_angle(target, longitude_of_sun_jd(mid)) <= 0.0:
            lo = mid
        else:
            hi = mid
    return hi


def find_solar_term_before(
    moment: _dt.date,
    *,
    search_limit_days: int | None = None,
    timezone: _dt.tzinfo | None = None,
) -> SolarTermHit:
    """Return the latest solar term that began at or before ``moment``.

    The search steps back one day at a time from 00:00 UT of ``moment``'s
    date until the sun sits at or behind the term's longitude, then narrows
    the crossing down within that day.

    ``moment`` on the hit is the UTC crossing; ``date`` is the calendar day of
    that crossing in ``timezone`` (the configured ``solar_terms.timezone``
    when omitted).
    """

    if search_limit_days is None or timezone is None:
        from .config import get_settings

        cfg = get_settings().solar_terms
        if search_limit_days is None:
            search_limit_days = cfg.search_limit_days
        if timezone is None:
            timezone = cfg.zone()

    if isinstance(moment, _dt.datetime):
        start = ensure_utc(moment)
    else:
        start = _dt.datetime(moment.year, moment.month, moment.day, tzinfo=_dt.UTC)
    start_jd = julian_day(start)
    target = math.floor(longitude_of_sun_jd(start_jd) / 15.0) * 15.0
    term = solar_term_for_angle(target)

    day = start.replace(hour=0, minute=0, second=0, microsecond=0)
    for _ in range(search_limit_days):
        day_jd = julian_day(day)
        if delta_angle(target, longitude_of_sun_jd(day_jd)) <= 0.0:
            upper = min(day_jd + 1.0, start_jd)
            crossing = _from_jd(_crossing(target, day_jd, upper))
            LOG.debug("Solar term %s (%d deg) began %s", term.name.en, term.angle, crossing)
            return SolarTermHit(
                term=term, date=crossing.astimezone(timezone).date(), moment=crossing
            )
        day -= _ONE_DAY

    raise SolarTermNotFoundError(
        f"No solar term found within {search_limit_days} days before {start.isoformat()}"
    )


def lichun_moment(year: int) -> _dt.datetime:
    """Return the UTC moment Li-Chun (立春) begins in ``year``."""

    return _lichun_hit(year).moment


def _lichun_hit(year: int) -> SolarTermHit:
    from .config import get_settings

    probe_day = get_settings().solar_terms.lichun_probe_day
    hit = find_solar_term_before(_dt.datetime(year, 2, probe_day, tzinfo=_dt.UTC))
    if hit.term.angle != LICHUN_ANGLE:
        raise SolarTermNotFoundError(
            f"Expected Li-Chun before February {probe_day}, {year}; found {hit.term.name.en}"
        )
    return hit


def lichun(year: int) -> _dt.date:
    """Return the calendar date of Li-Chun (立春) in ``year``.

    The date is counted in the configured ``solar_terms.timezone``.

    >>> lichun(2022)
    datetime.date(2022, 2, 4)
    """

    return _lichun_hit(year).date
