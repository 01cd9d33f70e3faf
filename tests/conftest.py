from __future__ import annotations

import importlib.util
import warnings
from collections.abc import Iterator
from pathlib import Path

import pytest

from feixing.config import reset_settings_cache
from feixing.ephemeris import init_ephe

if importlib.util.find_spec("swisseph") is None:
    warnings.warn(
        "pyswisseph not installed; ephemeris-backed tests will be skipped.",
        RuntimeWarning,
        stacklevel=1,
    )


@pytest.fixture(autouse=True)
def _isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point settings at an empty per-test home so user config never leaks in."""

    home = tmp_path / "feixing-home"
    monkeypatch.setenv("FEIXING_HOME", str(home))
    reset_settings_cache()
    init_ephe.cache_clear()
    yield home
    reset_settings_cache()
    init_ephe.cache_clear()
