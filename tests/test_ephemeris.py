from __future__ import annotations

import sys

import pytest

from feixing.ephemeris import init_ephe, longitude_of_sun_jd, reset_swe, swe
from feixing.exceptions import EphemerisUnavailableError


def test_missing_bindings_raise_package_error(monkeypatch: pytest.MonkeyPatch) -> None:
    reset_swe()
    monkeypatch.setitem(sys.modules, "swisseph", None)
    try:
        with pytest.raises(EphemerisUnavailableError):
            swe()
        with pytest.raises(EphemerisUnavailableError):
            longitude_of_sun_jd(2_451_545.0)
    finally:
        reset_swe()


def test_sun_longitude_at_j2000() -> None:
    pytest.importorskip("swisseph")
    init_ephe.cache_clear()
    # Apparent longitude of the sun at 2000-01-01 12:00 UT.
    assert longitude_of_sun_jd(2_451_545.0) == pytest.approx(280.37, abs=0.05)
