"""Seasonal strength (生死衰旺, Sheng-Si Shuai-Wang) of the Nine Stars.

For a given Un-Pan star the stars of a chart are growing (生), prosperous
(旺), perishing (衰) or dying (死); stars outside every group stay
unclassified.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Final, Mapping

from .exceptions import InvalidInputError
from .jiuxing import StarIndex, normalize_jiuxing, validate_chart

__all__ = [
    "ShengSiKey",
    "ShengSi",
    "ShengSiYearlyAlloc",
    "SHENG_SI",
    "SHENG_SI_ALLOC",
    "classify",
]


class ShengSiKey(StrEnum):
    SHENG = "sheng"
    SI = "si"
    SHUAI = "shuai"
    WANG = "wang"


@dataclass(frozen=True)
class ShengSi:
    """Display data for one seasonal state."""

    key: ShengSiKey
    kanji: str
    meaning: str

    def as_dict(self) -> dict[str, str]:
        return {"key": str(self.key), "kanji": self.kanji, "meaning": self.meaning}


@dataclass(frozen=True)
class ShengSiYearlyAlloc:
    """Star indices assigned to each state for one Un-Pan star."""

    wang: tuple[StarIndex, ...]
    sheng: tuple[StarIndex, ...]
    shuai: tuple[StarIndex, ...]
    si: tuple[StarIndex, ...]

    def accessor(self, key: ShengSiKey | str) -> tuple[StarIndex, ...]:
        return getattr(self, ShengSiKey(key).value)


SHENG_SI: Final[Mapping[ShengSiKey, ShengSi]] = {
    ShengSiKey.SHENG: ShengSi(ShengSiKey.SHENG, "生", "growth"),
    ShengSiKey.SI: ShengSi(ShengSiKey.SI, "死", "death"),
    ShengSiKey.SHUAI: ShengSi(ShengSiKey.SHUAI, "衰", "perishing"),
    ShengSiKey.WANG: ShengSi(ShengSiKey.WANG, "旺", "prosperous"),
}


def _allocate(phase: int) -> ShengSiYearlyAlloc:
    sheng = tuple(normalize_jiuxing(phase + step) for step in (1, 2))
    shuai = tuple(normalize_jiuxing(phase - step) for step in (1, 2))
    # Dying stars count back from the second perishing star, before the
    # 一白 override below is applied.
    si = tuple(normalize_jiuxing(shuai[1] - step) for step in (1, 2, 3, 4))
    if phase < 7:
        si = tuple(index for index in si if index not in (0, 7))
    return ShengSiYearlyAlloc(
        wang=(StarIndex(phase),),
        sheng=sheng,
        # With 一白 as the Un-Pan star only 九紫 is perishing.
        shuai=(StarIndex(8),) if phase == 0 else shuai,
        si=si,
    )


SHENG_SI_ALLOC: Final[tuple[ShengSiYearlyAlloc, ...]] = tuple(
    _allocate(phase) for phase in range(9)
)

# Later keys override earlier ones when a star sits in two groups.
_ASSIGNMENT_ORDER: Final[tuple[ShengSiKey, ...]] = (
    ShengSiKey.SHENG,
    ShengSiKey.SI,
    ShengSiKey.SHUAI,
    ShengSiKey.WANG,
)


def classify(phase: int, chart: Sequence[int]) -> tuple[ShengSi | None, ...]:
    """Return the seasonal state of every cell in ``chart``.

    ``phase`` is the Un-Pan star index (0..8) and ``chart`` a nine-cell chart
    of star indices, usually the Un-Pan chart of a reading.
    """

    if isinstance(phase, bool) or not isinstance(phase, int) or not 0 <= phase < 9:
        raise InvalidInputError(f"Phase must be within 0..8, got {phase!r}")
    cells = validate_chart(chart)

    alloc = SHENG_SI_ALLOC[phase]
    lookup: dict[int, ShengSi | None] = {index: None for index in range(9)}
    for key in _ASSIGNMENT_ORDER:
        for index in alloc.accessor(key):
            lookup[index] = SHENG_SI[key]
    return tuple(lookup[cell] for cell in cells)
