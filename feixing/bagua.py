"""The eight trigrams (八卦) as they are laid out on the Lo-Shu square."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .constants import WU_XING, WuXing
from .data import load_table
from .language import Language, NamedRecord

__all__ = [
    "Bagua",
    "BAGUA",
    "BAGUA_START_NORTH_INDEXES",
    "BAGUA_START_NORTH",
    "bagua_start_north",
]


@dataclass(frozen=True)
class Bagua(NamedRecord):
    """A trigram with its Lo-Shu number and home direction.

    ``element`` indexes :data:`feixing.constants.WU_XING`. The center cell
    (中, number 5) has an empty direction.
    """

    num: int
    name: Language
    direction: str
    element: int

    @property
    def wuxing(self) -> WuXing:
        return WU_XING[self.element]


# Indexed by Lo-Shu number minus one: 坎 坤 震 巽 中 乾 兌 艮 離.
BAGUA: Final[tuple[Bagua, ...]] = tuple(
    Bagua(
        num=int(row["num"]),
        name=Language.from_data(row["name"]),
        direction=str(row["direction"]),
        element=int(row["element"]),
    )
    for row in load_table("bagua")
)

# Compass order starting from the north, center omitted:
# 坎 艮 震 巽 離 坤 兌 乾.
BAGUA_START_NORTH_INDEXES: Final[tuple[int, ...]] = (0, 7, 2, 3, 8, 1, 6, 5)

BAGUA_START_NORTH: Final[tuple[Bagua, ...]] = tuple(
    BAGUA[index] for index in BAGUA_START_NORTH_INDEXES
)


def bagua_start_north(index: int) -> Bagua | None:
    """Return the trigram at ``index`` in north-first compass order, if any."""

    if 0 <= index < len(BAGUA_START_NORTH):
        return BAGUA_START_NORTH[index]
    return None
