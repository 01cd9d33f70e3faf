"""Four Pillars (八字, Bazi) computation.

Year and month pillars follow the solar calendar: the year turns at Li-Chun
(立春) and each month spans two solar terms. The day pillar counts the
sexagenary cycle from the Modified Julian Day, and the hour pillar uses the
local clock hour.
"""

from __future__ import annotations

import datetime as _dt
import logging
import math
from dataclasses import dataclass

from .constants import (
    BRANCHES,
    GANZHI_SEXAGESIMAL,
    HOUR_STEM_TABLE,
    STEMS,
    Branch,
    Stem,
)
from .ephemeris import longitude_of_sun
from .solar_terms import lichun_moment
from .time import ensure_utc, modified_julian_day

LOG = logging.getLogger(__name__)

__all__ = ["GanZhi", "Bazi", "compute_bazi"]


@dataclass(frozen=True)
class GanZhi:
    """A Stem and Branch pair (干支)."""

    stem: Stem
    branch: Branch

    def alphabet(self, lang: str | None = None) -> str:
        return f"{self.stem.alphabet(lang)}{self.branch.alphabet(lang)}"

    def phonetic(self, lang: str | None = None) -> str:
        return f"{self.stem.phonetic(lang)} {self.branch.phonetic(lang)}"

    def alphabet_ja(self) -> str:
        return f"{self.stem.alphabet_ja()}・{self.branch.alphabet_ja()}"

    def label(self) -> str:
        return f"{self.stem.name.en.capitalize()}-{self.branch.name.en.capitalize()}"


@dataclass(frozen=True)
class Bazi:
    """Year, month, day and hour pillars."""

    year: GanZhi
    month: GanZhi
    day: GanZhi
    hour: GanZhi

    def ordered_pillars(self) -> tuple[GanZhi, GanZhi, GanZhi, GanZhi]:
        return (self.year, self.month, self.day, self.hour)

    def as_dict(self, lang: str | None = None) -> dict[str, str]:
        return {
            "year": self.year.alphabet(lang),
            "month": self.month.alphabet(lang),
            "day": self.day.alphabet(lang),
            "hour": self.hour.alphabet(lang),
        }


def _stem_group(stem_no: int) -> int:
    """Pair stems five apart (甲己, 乙庚, 丙辛, 丁壬, 戊癸) into groups 0..4."""

    return (stem_no - 1) % 5


def _year_ganzhi(ut: _dt.datetime) -> GanZhi:
    year = ut.year
    if ut < lichun_moment(year):
        year -= 1
    # Last digit 0 is 庚, 4 is 甲; (year + 8) % 12 puts 子 on years like 2020.
    return GanZhi(stem=STEMS[(year % 10 + 6) % 10], branch=BRANCHES[(year + 8) % 12])


def _month_ganzhi(ut: _dt.datetime, year_stem_no: int) -> GanZhi:
    lng = longitude_of_sun(ut)
    # Months start at 立春 (315 deg) with 寅, one branch per 30 degrees.
    branch_index = int(math.floor(((lng - 315.0) % 360.0) / 30.0)) % 12
    # First month stem: 甲己 -> 丙, 乙庚 -> 戊, 丙辛 -> 庚, 丁壬 -> 壬, 戊癸 -> 甲.
    first_stem = (2 + 2 * _stem_group(year_stem_no)) % 10
    return GanZhi(
        stem=STEMS[(first_stem + branch_index) % 10],
        branch=BRANCHES[(branch_index + 2) % 12],
    )


def _day_ganzhi(ut: _dt.datetime) -> GanZhi:
    index = int(math.floor((modified_julian_day(ut) - 10.0) % 60.0))
    stem_index, branch_index = GANZHI_SEXAGESIMAL[index]
    return GanZhi(stem=STEMS[stem_index], branch=BRANCHES[branch_index])


def _hour_branch_index(hour: int) -> int:
    # 子 spans 23:00-00:59, then each branch covers two hours.
    return ((hour + 1) // 2) % 12


def _hour_ganzhi(local: _dt.datetime, day_stem_no: int) -> GanZhi:
    branch_index = _hour_branch_index(local.hour)
    stem_index = HOUR_STEM_TABLE[branch_index][_stem_group(day_stem_no)]
    return GanZhi(stem=STEMS[stem_index], branch=BRANCHES[branch_index])


def compute_bazi(
    moment: _dt.datetime, *, timezone: _dt.tzinfo | None = None
) -> Bazi:
    """Compute the Four Pillars for ``moment``.

    Parameters
    ----------
    moment:
        Datetime of the event. Aware values carry their own zone.
    timezone:
        Zone for naive ``moment`` values (or an override for aware ones).
        Naive datetimes without an override are taken as UTC.

    The hour pillar is read from the local clock; the remaining pillars are
    derived from the UT instant.
    """

    if timezone is not None:
        local = (
            moment.replace(tzinfo=timezone)
            if moment.tzinfo is None
            else moment.astimezone(timezone)
        )
    else:
        local = moment if moment.tzinfo is not None else moment.replace(tzinfo=_dt.UTC)
    ut = ensure_utc(local)

    year = _year_ganzhi(ut)
    month = _month_ganzhi(ut, year.stem.no)
    day = _day_ganzhi(ut)
    hour = _hour_ganzhi(local, day.stem.no)
    LOG.debug(
        "Bazi for %s: %s %s %s %s",
        local.isoformat(),
        year.label(),
        month.label(),
        day.label(),
        hour.label(),
    )
    return Bazi(year=year, month=month, day=day, hour=hour)
