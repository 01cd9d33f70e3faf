"""Direction algebra for the eight-direction compass and its 24 mountains.

Each of the eight compass directions spans 45 degrees and is split into three
15 degree sectors, giving the 24 mountains (二十四山) of a Luo-Pan. The ring is
indexed from the middle sector of the north, so index ``0`` is ``(n, 2)`` and
index ``23`` is ``(n, 1)``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import StrEnum
from typing import Final, Mapping, Union

from .bagua import BAGUA, Bagua
from .constants import BRANCHES, STEMS, Branch, Stem
from .exceptions import InvalidInputError

__all__ = [
    "CompassDirection",
    "TwentyFourDirection",
    "TwentyFourKind",
    "DIRECTIONS",
    "OPPOSITE_DIRECTION",
    "DIRECTION_POSITIONS_IN_CHART",
    "TWENTYFOUR_SECTORS",
    "TWENTYFOUR_INDEX_TO_DIRECTIONS",
    "TWENTYFOUR_ORDER_START_NORTH",
    "parse_direction",
    "parse_sector",
    "opposite_of",
    "relative_position_map",
    "sector_from_degrees",
    "index_from_direction_sector",
    "direction_sector_from_index",
    "twentyfour_data_from_index",
    "twentyfour_data_from_direction",
]


class CompassDirection(StrEnum):
    """Compass labels used throughout the charts."""

    N = "n"
    NE = "ne"
    E = "e"
    SE = "se"
    S = "s"
    SW = "sw"
    W = "w"
    NW = "nw"
    CENTER = ""
    UNKNOWN = "unknown"


class TwentyFourKind(StrEnum):
    """What occupies a mountain of the 24-mountain ring."""

    BAGUA = "bagua"
    STEM = "stem"
    BRANCH = "branch"


@dataclass(frozen=True)
class TwentyFourDirection:
    """A compass direction paired with one of its three sectors."""

    direction: CompassDirection
    sector: int

    def as_dict(self) -> dict[str, object]:
        return {"direction": str(self.direction), "sector": self.sector}


TwentyFourData = Union[Bagua, Stem, Branch]

_D = CompassDirection

DIRECTIONS: Final[tuple[CompassDirection, ...]] = (
    _D.N,
    _D.NE,
    _D.E,
    _D.SE,
    _D.S,
    _D.SW,
    _D.W,
    _D.NW,
)

OPPOSITE_DIRECTION: Final[Mapping[CompassDirection, CompassDirection]] = {
    _D.N: _D.S,
    _D.NE: _D.SW,
    _D.E: _D.W,
    _D.SE: _D.NW,
    _D.S: _D.N,
    _D.SW: _D.NE,
    _D.W: _D.E,
    _D.NW: _D.SE,
}

# Nine chart cells, top-left to bottom-right, as seen when the chart is
# rotated so the keyed direction sits at the top-middle cell.
DIRECTION_POSITIONS_IN_CHART: Final[
    Mapping[CompassDirection, tuple[CompassDirection, ...]]
] = {
    _D.N: (_D.NW, _D.N, _D.NE, _D.W, _D.CENTER, _D.E, _D.SW, _D.S, _D.SE),
    _D.NE: (_D.N, _D.NE, _D.E, _D.NW, _D.CENTER, _D.SE, _D.W, _D.SW, _D.S),
    _D.E: (_D.NE, _D.E, _D.SE, _D.N, _D.CENTER, _D.S, _D.NW, _D.W, _D.SW),
    _D.SE: (_D.E, _D.SE, _D.S, _D.NE, _D.CENTER, _D.SW, _D.N, _D.NW, _D.W),
    _D.S: (_D.SE, _D.S, _D.SW, _D.E, _D.CENTER, _D.W, _D.NE, _D.N, _D.NW),
    _D.SW: (_D.S, _D.SW, _D.W, _D.SE, _D.CENTER, _D.NW, _D.E, _D.NE, _D.N),
    _D.W: (_D.SW, _D.W, _D.NW, _D.S, _D.CENTER, _D.N, _D.SE, _D.E, _D.NE),
    _D.NW: (_D.W, _D.NW, _D.N, _D.SW, _D.CENTER, _D.NE, _D.S, _D.SE, _D.E),
}

_RING: Final[tuple[TwentyFourDirection, ...]] = tuple(
    TwentyFourDirection(direction, sector)
    for direction in DIRECTIONS
    for sector in (1, 2, 3)
)

# Rotated left by one so the ring starts at the middle of the north.
TWENTYFOUR_INDEX_TO_DIRECTIONS: Final[tuple[TwentyFourDirection, ...]] = (
    _RING[1:] + _RING[:1]
)

TWENTYFOUR_SECTORS: Final[tuple[int, ...]] = tuple(
    entry.sector for entry in TWENTYFOUR_INDEX_TO_DIRECTIONS
)

_TWENTYFOUR_DIRECTIONS_TO_INDEX: Final[Mapping[TwentyFourDirection, int]] = {
    entry: index for index, entry in enumerate(TWENTYFOUR_INDEX_TO_DIRECTIONS)
}

# (kind, index) per mountain: kind 0 indexes BAGUA, 1 STEMS, 2 BRANCHES.
TWENTYFOUR_ORDER_START_NORTH: Final[tuple[tuple[int, int], ...]] = (
    (2, 0),  # 子
    (1, 9),  # 癸
    (2, 1),  # 丑
    (0, 7),  # 艮
    (2, 2),  # 寅
    (1, 0),  # 甲
    (2, 3),  # 卯
    (1, 1),  # 乙
    (2, 4),  # 辰
    (0, 3),  # 巽
    (2, 5),  # 巳
    (1, 2),  # 丙
    (2, 6),  # 午
    (1, 3),  # 丁
    (2, 7),  # 未
    (0, 1),  # 坤
    (2, 8),  # 申
    (1, 6),  # 庚
    (2, 9),  # 酉
    (1, 7),  # 辛
    (2, 10),  # 戌
    (0, 5),  # 乾
    (2, 11),  # 亥
    (1, 8),  # 壬
)

_KINDS: Final[tuple[TwentyFourKind, ...]] = (
    TwentyFourKind.BAGUA,
    TwentyFourKind.STEM,
    TwentyFourKind.BRANCH,
)


def parse_direction(value: str | CompassDirection) -> CompassDirection:
    """Return the compass direction named by ``value``.

    Only the eight compass labels are accepted; the center label and the
    ``unknown`` marker are rejected.
    """

    label = str(value).strip().lower() if value is not None else ""
    try:
        direction = CompassDirection(label)
    except ValueError:
        raise InvalidInputError(f"Invalid direction: {value!r}") from None
    if direction not in OPPOSITE_DIRECTION:
        raise InvalidInputError(f"Invalid direction: {value!r}")
    return direction


def parse_sector(sector: int) -> int:
    """Validate a sector number (1, 2 or 3)."""

    if isinstance(sector, bool) or not isinstance(sector, int) or sector not in (1, 2, 3):
        raise InvalidInputError(f"Sector must be 1, 2 or 3, got {sector!r}")
    return sector


def opposite_of(direction: str | CompassDirection) -> CompassDirection:
    """Return the direction 180 degrees from ``direction``."""

    return OPPOSITE_DIRECTION[parse_direction(direction)]


def relative_position_map(
    direction: str | CompassDirection,
) -> tuple[CompassDirection, ...]:
    """Return the nine cell labels of a chart viewed from ``direction``."""

    return DIRECTION_POSITIONS_IN_CHART[parse_direction(direction)]


def sector_from_degrees(degrees: float) -> TwentyFourDirection:
    """Map a compass bearing in [0, 360) to its mountain.

    Bearings in [352.5, 360) and [0, 7.5) fall into ``(n, 2)``; every
    subsequent 15 degree slot advances one step around the ring.
    """

    try:
        value = float(degrees)
    except (TypeError, ValueError):
        raise InvalidInputError(f"Degrees must be numeric, got {degrees!r}") from None
    if not math.isfinite(value) or not 0.0 <= value < 360.0:
        raise InvalidInputError(f"Degrees must be within [0, 360), got {degrees!r}")
    index = int(math.floor((value + 7.5) / 15.0)) % 24
    return TWENTYFOUR_INDEX_TO_DIRECTIONS[index]


def index_from_direction_sector(direction: str | CompassDirection, sector: int) -> int:
    """Return the ring index (0..23) of ``(direction, sector)``."""

    key = TwentyFourDirection(parse_direction(direction), parse_sector(sector))
    return _TWENTYFOUR_DIRECTIONS_TO_INDEX[key]


def direction_sector_from_index(index: int) -> TwentyFourDirection:
    """Return the ``(direction, sector)`` pair at ring ``index`` (0..23)."""

    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < 24:
        raise InvalidInputError(f"Mountain index must be within 0..23, got {index!r}")
    return TWENTYFOUR_INDEX_TO_DIRECTIONS[index]


def twentyfour_data_from_index(index: int) -> tuple[TwentyFourKind, TwentyFourData]:
    """Return the trigram, stem or branch that names mountain ``index``."""

    direction_sector_from_index(index)
    kind, position = TWENTYFOUR_ORDER_START_NORTH[index]
    if kind == 0:
        return _KINDS[kind], BAGUA[position]
    if kind == 1:
        return _KINDS[kind], STEMS[position]
    return _KINDS[kind], BRANCHES[position]


def twentyfour_data_from_direction(
    direction: str | CompassDirection, sector: int
) -> tuple[TwentyFourKind, TwentyFourData]:
    """Return the trigram, stem or branch that names ``(direction, sector)``."""

    return twentyfour_data_from_index(index_from_direction_sector(direction, sector))
