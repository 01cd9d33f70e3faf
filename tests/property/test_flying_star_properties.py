from __future__ import annotations

import pytest

from feixing.compass import (
    DIRECTIONS,
    direction_sector_from_index,
    index_from_direction_sector,
    opposite_of,
    sector_from_degrees,
)
from feixing.flying_stars import build_reading, fly
from feixing.jiuxing import DI_PAN_POSITIONS, normalize_jiuxing
from feixing.shengsi import classify
from feixing.utils.angles import delta_angle, norm360

hypothesis = pytest.importorskip("hypothesis")
given = hypothesis.given
st = hypothesis.strategies
settings = hypothesis.settings

STARS = st.integers(min_value=0, max_value=8)
SECTORS = st.integers(min_value=1, max_value=3)
COMPASS = st.sampled_from(DIRECTIONS)
PERMUTATIONS = st.permutations(list(range(9)))
BEARINGS = st.floats(
    min_value=0.0,
    max_value=360.0,
    exclude_max=True,
    allow_nan=False,
    allow_infinity=False,
)


@given(value=st.integers(min_value=-1000, max_value=1000))
def test_normalize_matches_modulo_nine(value: int) -> None:
    assert normalize_jiuxing(value) == value % 9


@given(center=STARS, order=PERMUTATIONS, reverse=st.booleans())
def test_fly_permutes_a_permutation(center: int, order: list[int], reverse: bool) -> None:
    result = fly(center, order, reverse)
    assert sorted(result) == list(range(9))


@given(center=STARS, direction=COMPASS, reverse=st.booleans())
def test_fly_places_center_in_middle_cell(center: int, direction, reverse: bool) -> None:
    assert fly(center, DI_PAN_POSITIONS[direction], reverse)[4] == center


@given(direction=COMPASS)
def test_opposite_involution(direction) -> None:
    assert opposite_of(opposite_of(direction)) is direction


@given(degrees=BEARINGS)
def test_sector_from_degrees_is_total(degrees: float) -> None:
    entry = sector_from_degrees(degrees)
    index = index_from_direction_sector(entry.direction, entry.sector)
    assert direction_sector_from_index(index) == entry
    # The slot's center bearing lies within 7.5 degrees of the input.
    assert abs(delta_angle(norm360(index * 15.0), degrees)) <= 7.5


@settings(deadline=None)
@given(center=STARS, base=COMPASS, facing=COMPASS, sector=SECTORS)
def test_build_reading_is_pure(center: int, base, facing, sector: int) -> None:
    order = DI_PAN_POSITIONS[base]
    first = build_reading(center, order, facing, sector)
    second = build_reading(center, order, facing, sector)
    assert first == second
    assert first.resolved_direction is base
    for overlay in first.charts():
        assert sorted(overlay.chart) == list(range(9))
        assert overlay.chart[4] == overlay.center


@given(phase=STARS, order=PERMUTATIONS)
def test_classify_assigns_every_prosperous_cell(phase: int, order: list[int]) -> None:
    result = classify(phase, order)
    assert len(result) == 9
    wang_cells = [cell for cell, state in zip(order, result) if state and state.key == "wang"]
    assert wang_cells == [phase]
