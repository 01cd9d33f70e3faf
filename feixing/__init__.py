"""feixing package bootstrap and curated public API surface."""

from __future__ import annotations

import logging
from importlib import import_module
from importlib.metadata import PackageNotFoundError, version as _get_version
from typing import Any

from .compass import (
    DIRECTIONS,
    CompassDirection,
    TwentyFourDirection,
    direction_sector_from_index,
    index_from_direction_sector,
    opposite_of,
    relative_position_map,
    sector_from_degrees,
)
from .exceptions import (
    EphemerisUnavailableError,
    FeiXingError,
    InvalidInputError,
    SolarTermNotFoundError,
)
from .flying_stars import (
    ChartKind,
    Reading,
    XiaGuaTu,
    build_reading,
    fly,
    is_flying_normal,
    unpan_xing_index,
)
from .jiuxing import DI_PAN_POSITIONS, JIU_XING, StarIndex, normalize_jiuxing
from .shengsi import SHENG_SI, SHENG_SI_ALLOC, ShengSi, classify

LOG = logging.getLogger(__name__)

try:
    __version__ = _get_version("feixing")
except PackageNotFoundError:  # pragma: no cover - metadata may be unavailable in source checkouts
    __version__ = "0.0.0"


def get_version() -> str:
    """Return the resolved feixing package version."""

    return __version__


# Modules that need the ephemeris are imported on first access.
_PUBLIC_MODULES: dict[str, str] = {
    "bazi": "bazi",
    "solar_terms": "solar_terms",
}

__all__ = [
    "__version__",
    "get_version",
    "bazi",
    "solar_terms",
    "DIRECTIONS",
    "CompassDirection",
    "TwentyFourDirection",
    "direction_sector_from_index",
    "index_from_direction_sector",
    "opposite_of",
    "relative_position_map",
    "sector_from_degrees",
    "EphemerisUnavailableError",
    "FeiXingError",
    "InvalidInputError",
    "SolarTermNotFoundError",
    "ChartKind",
    "Reading",
    "XiaGuaTu",
    "build_reading",
    "fly",
    "is_flying_normal",
    "unpan_xing_index",
    "DI_PAN_POSITIONS",
    "JIU_XING",
    "StarIndex",
    "normalize_jiuxing",
    "SHENG_SI",
    "SHENG_SI_ALLOC",
    "ShengSi",
    "classify",
]


def __getattr__(name: str) -> Any:
    module_name = _PUBLIC_MODULES.get(name)
    if module_name is not None:
        module = import_module(f".{module_name}", __name__)
        globals()[name] = module
        return module
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
