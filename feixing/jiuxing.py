"""Nine Stars (九星) and the base chart (地盤, Di-Pan).

Stars are referred to by index ``0..8`` rather than by their Lo-Shu number,
so 一白水星 is ``0`` and 五黄土星 (always the center of a base chart) is ``4``.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final, Mapping, NewType

from .compass import (
    DIRECTIONS,
    CompassDirection,
    parse_direction,
    relative_position_map,
)
from .constants import PLANETS, WU_XING, Planet, WuXing
from .data import load_table
from .exceptions import InvalidInputError
from .language import Language, NamedRecord

LOG = logging.getLogger(__name__)

__all__ = [
    "StarIndex",
    "JiuXing",
    "JIU_XING",
    "DIRECTION_TO_JIU_XING",
    "DI_PAN_POSITIONS",
    "jiuxing_from_index",
    "normalize_jiuxing",
    "dipan_positions",
    "direction_from_dipan_order",
    "validate_chart",
]

StarIndex = NewType("StarIndex", int)


@dataclass(frozen=True)
class JiuXing(NamedRecord):
    """A star of the Nine Stars with its Lo-Shu home and correspondences.

    ``element`` indexes :data:`feixing.constants.WU_XING` and ``planet``
    indexes :data:`feixing.constants.PLANETS`.
    """

    num: int
    name: Language
    direction: CompassDirection
    color: str
    element: int
    planet: int

    @property
    def index(self) -> StarIndex:
        return StarIndex(self.num - 1)

    @property
    def wuxing(self) -> WuXing:
        return WU_XING[self.element]

    @property
    def planet_record(self) -> Planet:
        return PLANETS[self.planet]

    def as_dict(self) -> dict[str, object]:
        return {
            "num": self.num,
            "name": self.name.en,
            "direction": str(self.direction),
            "color": self.color,
            "element": self.wuxing.name.en,
            "planet": self.planet_record.name.en,
        }


JIU_XING: Final[tuple[JiuXing, ...]] = tuple(
    JiuXing(
        num=int(row["num"]),
        name=Language.from_data(row["name"]),
        direction=CompassDirection(row["direction"]),
        color=str(row["color"]),
        element=int(row["element"]),
        planet=int(row["planet"]),
    )
    for row in load_table("jiuxing")
)

# Lo-Shu home direction to star index; the center cell holds star 4.
DIRECTION_TO_JIU_XING: Final[Mapping[CompassDirection, StarIndex]] = {
    star.direction: star.index for star in JIU_XING
}


def _build_di_pan() -> dict[CompassDirection, tuple[StarIndex, ...]]:
    return {
        direction: tuple(
            DIRECTION_TO_JIU_XING[label] for label in relative_position_map(direction)
        )
        for direction in DIRECTIONS
    }


# Base chart for each facing direction, e.g. ``n`` -> (5, 0, 7, 6, 4, 2, 1, 8, 3).
DI_PAN_POSITIONS: Final[Mapping[CompassDirection, tuple[StarIndex, ...]]] = (
    _build_di_pan()
)

_DI_PAN_TO_DIRECTION: Final[Mapping[tuple[int, ...], CompassDirection]] = {
    order: direction for direction, order in DI_PAN_POSITIONS.items()
}


def jiuxing_from_index(index: int) -> JiuXing:
    """Return the star record for ``index`` (0..8)."""

    if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < 9:
        raise InvalidInputError(f"Star index must be within 0..8, got {index!r}")
    return JIU_XING[index]


def normalize_jiuxing(raw: int) -> StarIndex:
    """Fold an arbitrary integer onto the star indices 0..8.

    ``9`` folds to ``0``, ``10`` to ``1`` and ``-1`` to ``8``.
    """

    value = int(raw)
    while value < 0:
        value += 9
    t = (value + 1) % 9
    return StarIndex(8 if t == 0 else t - 1)


def validate_chart(chart: Sequence[int], *, label: str = "chart") -> tuple[StarIndex, ...]:
    """Return ``chart`` as a tuple after checking it holds nine star indices."""

    values = tuple(chart)
    if len(values) != 9:
        raise InvalidInputError(f"{label} must hold 9 cells, got {len(values)}")
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < 9:
            raise InvalidInputError(f"{label} cells must be within 0..8, got {value!r}")
    return tuple(StarIndex(value) for value in values)


def dipan_positions(direction: str | CompassDirection) -> tuple[StarIndex, ...]:
    """Return the base chart for ``direction``."""

    return DI_PAN_POSITIONS[parse_direction(direction)]


def direction_from_dipan_order(order: Sequence[int]) -> CompassDirection:
    """Return the direction whose base chart equals ``order``.

    Orderings that match no base chart resolve to
    :attr:`CompassDirection.UNKNOWN`.
    """

    direction = _DI_PAN_TO_DIRECTION.get(tuple(order))
    if direction is None:
        LOG.warning("Ordering %s matches no base chart", list(order))
        return CompassDirection.UNKNOWN
    return direction
