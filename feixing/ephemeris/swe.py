"""Deferred import of the Swiss Ephemeris bindings (``pyswisseph``).

Pure chart code never touches the ephemeris, so ``swisseph`` is only
imported the first time a solar longitude is requested.
"""

from __future__ import annotations

import importlib
from typing import Any

from ..exceptions import EphemerisUnavailableError

__all__ = ["swe", "reset_swe"]

_module: Any | None = None


class _Swisseph:
    """Calling the object returns the module; attributes are forwarded to it."""

    def __call__(self) -> Any:
        global _module
        if _module is None:
            try:
                _module = importlib.import_module("swisseph")
            except ImportError as exc:
                raise EphemerisUnavailableError(
                    "Solar longitudes need pyswisseph; install the 'pyswisseph' package."
                ) from exc
        return _module

    def __getattr__(self, name: str) -> Any:
        return getattr(self(), name)


swe = _Swisseph()


def reset_swe() -> None:
    """Drop the cached module so the next access imports it again."""

    global _module
    _module = None
