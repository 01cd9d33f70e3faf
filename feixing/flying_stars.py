"""Flying-star (玄空飛星, Xuan-Kong Fei-Xing) chart engine.

A reading overlays three charts on the nine cells of a base chart:

* the Un-Pan (運盤) chart, flown from the period star of the construction year;
* the Shan-Xing (山星, mountain) chart, centered on the Un-Pan star found in
  the cell of the sitting direction;
* the Xiang-Xing (向星, facing) chart, centered on the Un-Pan star found in
  the cell of the facing direction.

Mountain and facing charts fly forward or backward depending on the parity of
their center star and the sector of the facing direction.
"""

from __future__ import annotations

import datetime as _dt
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from .compass import (
    CompassDirection,
    opposite_of,
    parse_direction,
    parse_sector,
    relative_position_map,
)
from .exceptions import InvalidInputError
from .jiuxing import (
    StarIndex,
    direction_from_dipan_order,
    normalize_jiuxing,
    validate_chart,
)
from .time import julian_day

LOG = logging.getLogger(__name__)

__all__ = [
    "ChartKind",
    "XiaGuaTu",
    "Reading",
    "SAN_YUAN_JIU_YUN_START_YEAR",
    "fly",
    "is_flying_normal",
    "build_reading",
    "unpan_xing_index",
    "unpan_xing_index_for",
]

# First year of the 180-year San-Yuan Jiu-Yun (三元九運) cycle.
SAN_YUAN_JIU_YUN_START_YEAR: Final[int] = 1864

_CENTER_STAR: Final[int] = 4


class ChartKind(StrEnum):
    """The three overlays of a reading."""

    UN_PAN = "unpan_xing"
    SHAN = "shan_xing"
    XIANG = "xiang_xing"


@dataclass(frozen=True)
class XiaGuaTu:
    """One overlay (下卦図) of a reading.

    ``direction`` and ``sector`` are only set for the mountain and facing
    charts; ``flying_normal`` records which way those charts were flown.
    """

    kind: ChartKind
    center: StarIndex
    chart: tuple[StarIndex, ...]
    direction: CompassDirection | None = None
    sector: int | None = None
    flying_normal: bool | None = None

    def as_dict(self) -> dict[str, object]:
        return {
            "kind": str(self.kind),
            "center": self.center,
            "direction": str(self.direction) if self.direction is not None else None,
            "sector": self.sector,
            "chart": list(self.chart),
            "flying_normal": self.flying_normal,
        }


@dataclass(frozen=True)
class Reading:
    """Un-Pan, mountain and facing charts for one orientation."""

    unpan_xing: XiaGuaTu
    shan_xing: XiaGuaTu
    xiang_xing: XiaGuaTu
    resolved_direction: CompassDirection

    def charts(self) -> tuple[XiaGuaTu, XiaGuaTu, XiaGuaTu]:
        return (self.unpan_xing, self.shan_xing, self.xiang_xing)

    def as_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            chart.kind.value: chart.as_dict() for chart in self.charts()
        }
        payload["resolved_direction"] = str(self.resolved_direction)
        return payload


def _validate_star(value: int, *, label: str) -> StarIndex:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < 9:
        raise InvalidInputError(f"{label} must be a star index within 0..8, got {value!r}")
    return StarIndex(value)


def fly(center: int, order: Sequence[int], reverse: bool = False) -> tuple[StarIndex, ...]:
    """Fly the stars of ``order`` so that ``center`` lands in the middle cell.

    With ``reverse`` the stars travel the Lo-Shu path backwards (逆飛).

    >>> fly(5, (5, 0, 7, 6, 4, 2, 1, 8, 3))
    (6, 1, 8, 7, 5, 3, 2, 0, 4)
    """

    center = _validate_star(center, label="center")
    cells = validate_chart(order, label="order")
    diff = center - _CENTER_STAR
    return tuple(
        normalize_jiuxing(((8 - cell) if reverse else cell) + diff) for cell in cells
    )


def is_flying_normal(index: int, sector: int) -> bool:
    """Return ``True`` when a chart centered on star ``index`` flies forward.

    Odd stars fly forward in the first sector, even stars in the second and
    third. The rule does not apply to 五黄 (index 4); callers substitute the
    Un-Pan center for it first.
    """

    num = _validate_star(index, label="index") + 1
    sector = parse_sector(sector)
    return (num % 2 == 1 and sector == 1) or (num % 2 == 0 and sector > 1)


def build_reading(
    unpan_center: int,
    order: Sequence[int],
    facing_direction: str | CompassDirection,
    facing_sector: int,
) -> Reading:
    """Compute the Un-Pan, mountain and facing charts for one orientation.

    Parameters
    ----------
    unpan_center:
        Star index (0..8) of the construction period, see
        :func:`unpan_xing_index`.
    order:
        Base chart the device currently points at, normally one of
        :data:`feixing.jiuxing.DI_PAN_POSITIONS`.
    facing_direction, facing_sector:
        Where the building faces. The mountain sits opposite in the same
        sector.

    An ``order`` that matches no base chart resolves to
    :attr:`CompassDirection.UNKNOWN`, which cannot be laid out on the nine
    cells and therefore raises :class:`InvalidInputError`.
    """

    unpan_center = _validate_star(unpan_center, label="unpan_center")
    base = validate_chart(order, label="order")
    xiang_direction = parse_direction(facing_direction)
    sector = parse_sector(facing_sector)
    shan_direction = opposite_of(xiang_direction)

    unpan_chart = fly(unpan_center, base, False)

    current = direction_from_dipan_order(base)
    if current is CompassDirection.UNKNOWN:
        raise InvalidInputError(
            f"Ordering {list(base)} matches no base chart; cell positions are undefined"
        )
    positions = relative_position_map(current)

    overlays: dict[ChartKind, XiaGuaTu] = {}
    for kind, direction in (
        (ChartKind.SHAN, shan_direction),
        (ChartKind.XIANG, xiang_direction),
    ):
        center = unpan_chart[positions.index(direction)]
        # 五黄 has no parity of its own.
        parity_star = unpan_center if center == _CENTER_STAR else center
        normal = is_flying_normal(parity_star, sector)
        overlays[kind] = XiaGuaTu(
            kind=kind,
            center=center,
            chart=fly(center, base, reverse=not normal),
            direction=direction,
            sector=sector,
            flying_normal=normal,
        )
        LOG.debug(
            "%s: direction=%s center=%d normal=%s", kind, direction, center, normal
        )

    return Reading(
        unpan_xing=XiaGuaTu(
            kind=ChartKind.UN_PAN, center=unpan_center, chart=unpan_chart
        ),
        shan_xing=overlays[ChartKind.SHAN],
        xiang_xing=overlays[ChartKind.XIANG],
        resolved_direction=current,
    )


def _as_datetime(value: _dt.date) -> _dt.datetime:
    if isinstance(value, _dt.datetime):
        return value
    return _dt.datetime(value.year, value.month, value.day, tzinfo=_dt.UTC)


def unpan_xing_index(
    current: _dt.date, lichun: _dt.date, *, start_year: int | None = None
) -> StarIndex:
    """Return the Un-Pan star for a building completed on ``current``.

    ``lichun`` is the Li-Chun (立春) of ``current``'s calendar year; dates
    before it belong to the previous solar year. Each of the nine periods of
    the 180-year cycle lasts 20 years.
    """

    if start_year is None:
        from .config import get_settings

        start_year = get_settings().flying_stars.san_yuan_start_year
    year = current.year
    if julian_day(_as_datetime(current)) < julian_day(_as_datetime(lichun)):
        year -= 1
    return StarIndex(((year - start_year) % 180) // 20)


def unpan_xing_index_for(moment: _dt.date) -> StarIndex:
    """Return the Un-Pan star for ``moment``, locating Li-Chun astronomically."""

    from .solar_terms import lichun_moment

    return unpan_xing_index(_as_datetime(moment), lichun_moment(moment.year))
