"""Lookup tables for stems, branches, the five phases and the planets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from .data import load_table
from .exceptions import InvalidInputError
from .language import Language, NamedRecord

__all__ = [
    "Stem",
    "Branch",
    "WuXing",
    "Planet",
    "STEMS",
    "BRANCHES",
    "WU_XING",
    "PLANETS",
    "GANZHI_SEXAGESIMAL",
    "HOUR_STEM_TABLE",
    "stem_for_index",
    "branch_for_index",
]


@dataclass(frozen=True)
class Stem(NamedRecord):
    """One of the ten Heavenly Stems (天干); ``no`` runs 1..10."""

    no: int
    name: Language


@dataclass(frozen=True)
class Branch(NamedRecord):
    """One of the twelve Earthly Branches (地支); ``no`` runs 1..12."""

    no: int
    name: Language


@dataclass(frozen=True)
class WuXing(NamedRecord):
    """One of the five phases (五行)."""

    name: Language


@dataclass(frozen=True)
class Planet(NamedRecord):
    """A planet, listed in Ptolemaic order."""

    name: Language


STEMS: Final[tuple[Stem, ...]] = tuple(
    Stem(no=int(row["no"]), name=Language.from_data(row["name"]))
    for row in load_table("stems")
)
BRANCHES: Final[tuple[Branch, ...]] = tuple(
    Branch(no=int(row["no"]), name=Language.from_data(row["name"]))
    for row in load_table("branches")
)
WU_XING: Final[tuple[WuXing, ...]] = tuple(
    WuXing(name=Language.from_data(row["name"])) for row in load_table("wuxing")
)
PLANETS: Final[tuple[Planet, ...]] = tuple(
    Planet(name=Language.from_data(row["name"])) for row in load_table("planets")
)

# (stem index, branch index) for each of the sixty Jia-Zi combinations.
GANZHI_SEXAGESIMAL: Final[tuple[tuple[int, int], ...]] = tuple(
    (i % 10, i % 12) for i in range(60)
)

# Hour stem index by hour branch (rows) and day stem group (columns).
#       甲乙丙丁戊
#       己庚辛壬癸
# 子:   甲丙戊庚壬
# 丑:   乙丁己辛癸
# ...
# 戌 and 亥 repeat 子 and 丑.
HOUR_STEM_TABLE: Final[tuple[tuple[int, ...], ...]] = tuple(
    tuple((row + 2 * group) % 10 for group in range(5)) for row in range(12)
)


def stem_for_index(index: int) -> Stem:
    """Return the Heavenly Stem for ``index`` (0-9)."""

    if not 0 <= index < len(STEMS):
        raise InvalidInputError(f"Stem index must be within 0..9, got {index}")
    return STEMS[index]


def branch_for_index(index: int) -> Branch:
    """Return the Earthly Branch for ``index`` (0-11)."""

    if not 0 <= index < len(BRANCHES):
        raise InvalidInputError(f"Branch index must be within 0..11, got {index}")
    return BRANCHES[index]
