"""Time conversion helpers.

Julian days here are UT based. Solar-term boundaries only need day-level
accuracy, so no TT correction is applied.
"""

from __future__ import annotations

import datetime as _dt
import re
from typing import Final
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .exceptions import InvalidInputError

__all__ = [
    "MJD_OFFSET",
    "ensure_utc",
    "julian_day",
    "modified_julian_day",
    "parse_timezone",
]

MJD_OFFSET: Final[float] = 2_400_000.5


def ensure_utc(moment: _dt.datetime) -> _dt.datetime:
    """Return ``moment`` converted to UTC; naive values are taken as UTC."""

    tzinfo = moment.tzinfo
    if tzinfo is None:
        return moment.replace(tzinfo=_dt.UTC)
    return moment.astimezone(_dt.UTC)


def julian_day(moment: _dt.datetime) -> float:
    """Return the Julian day for ``moment``."""

    moment = ensure_utc(moment)
    year = moment.year
    month = moment.month
    day = moment.day
    frac = (
        moment.hour + moment.minute / 60.0 + (moment.second + moment.microsecond / 1e6) / 3600.0
    ) / 24.0

    if month <= 2:
        year -= 1
        month += 12

    a = year // 100
    b = 2 - a + (a // 4)
    jd = int(365.25 * (year + 4716)) + int(30.6001 * (month + 1)) + day + b - 1524.5
    return jd + frac


def modified_julian_day(moment: _dt.datetime) -> float:
    """Return the Modified Julian Day (JD - 2400000.5) for ``moment``."""

    return julian_day(moment) - MJD_OFFSET


_OFFSET_RE: Final = re.compile(r"^(?:UTC)?([+-])(\d{1,2}):?(\d{2})?$")


def parse_timezone(label: str) -> _dt.tzinfo:
    """Return the zone named by ``label``.

    Accepts ``"UTC"``, fixed offsets such as ``"+08:00"`` or ``"UTC-0530"``,
    and IANA names such as ``"Asia/Taipei"``.
    """

    text = str(label).strip()
    if not text:
        raise InvalidInputError("Time zone label is empty")
    if text.upper() in {"UTC", "Z"}:
        return _dt.UTC
    match = _OFFSET_RE.match(text.upper())
    if match is not None:
        sign, hours, minutes = match.groups()
        offset = _dt.timedelta(hours=int(hours), minutes=int(minutes or 0))
        if offset > _dt.timedelta(hours=14):
            raise InvalidInputError(f"UTC offset out of range: {label!r}")
        return _dt.timezone(-offset if sign == "-" else offset)
    try:
        return ZoneInfo(text)
    except (ZoneInfoNotFoundError, ValueError):
        raise InvalidInputError(f"Unknown time zone: {label!r}") from None
