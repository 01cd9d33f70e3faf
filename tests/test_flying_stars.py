from __future__ import annotations

import datetime as dt

import pytest

from feixing.compass import CompassDirection
from feixing.exceptions import InvalidInputError
from feixing.flying_stars import (
    ChartKind,
    build_reading,
    fly,
    is_flying_normal,
    unpan_xing_index,
)
from feixing.jiuxing import DI_PAN_POSITIONS, dipan_positions

NORTH = dipan_positions("n")


@pytest.mark.parametrize(
    ("center", "expected"),
    [
        (4, (5, 0, 7, 6, 4, 2, 1, 8, 3)),
        (5, (6, 1, 8, 7, 5, 3, 2, 0, 4)),
        (6, (7, 2, 0, 8, 6, 4, 3, 1, 5)),
        (7, (8, 3, 1, 0, 7, 5, 4, 2, 6)),
        (8, (0, 4, 2, 1, 8, 6, 5, 3, 7)),
    ],
)
def test_fly_forward_from_north(center: int, expected: tuple[int, ...]) -> None:
    assert fly(center, NORTH, False) == expected


def test_fly_reverse() -> None:
    assert fly(4, NORTH, True) == (3, 8, 1, 2, 4, 6, 7, 0, 5)
    assert fly(4, dipan_positions("ne"), True) == (8, 1, 6, 3, 4, 5, 2, 7, 0)


def test_fly_centers_the_requested_star() -> None:
    for center in range(9):
        for reverse in (False, True):
            assert fly(center, NORTH, reverse)[4] == center


def test_fly_below_center_star() -> None:
    # A negative rotation offset wraps around instead of underflowing.
    assert fly(0, NORTH) == (1, 5, 3, 2, 0, 7, 6, 4, 8)


@pytest.mark.parametrize(
    "order",
    [
        [5, 0, 7, 6, 4, 2, 1, 8],
        [5, 0, 7, 6, 4, 2, 1, 8, 3, 0],
        [5, 0, 7, 6, 4, 2, 1, 8, 9],
        [5, 0, 7, 6, 4, 2, 1, 8, -1],
    ],
)
def test_fly_rejects_malformed_order(order: list[int]) -> None:
    with pytest.raises(InvalidInputError):
        fly(4, order)


@pytest.mark.parametrize("center", [-1, 9])
def test_fly_rejects_bad_center(center: int) -> None:
    with pytest.raises(InvalidInputError):
        fly(center, NORTH)


@pytest.mark.parametrize(
    ("index", "sector", "expected"),
    [
        (0, 1, True),  # 一 odd, first sector
        (0, 2, False),
        (1, 1, False),  # 二 even, first sector
        (1, 2, True),
        (1, 3, True),
        (8, 1, True),
        (8, 3, False),
    ],
)
def test_is_flying_normal(index: int, sector: int, expected: bool) -> None:
    assert is_flying_normal(index, sector) is expected


def test_is_flying_normal_rejects_bad_sector() -> None:
    with pytest.raises(InvalidInputError):
        is_flying_normal(0, 4)


def test_build_reading_period_eight_facing_south() -> None:
    reading = build_reading(7, NORTH, "s", 2)

    assert reading.resolved_direction is CompassDirection.N
    assert reading.unpan_xing.kind is ChartKind.UN_PAN
    assert reading.unpan_xing.chart == (8, 3, 1, 0, 7, 5, 4, 2, 6)
    assert reading.unpan_xing.direction is None

    # Mountain sits north (cell 1 holds 四緑), facing south (cell 7 holds 三碧).
    shan = reading.shan_xing
    assert shan.direction is CompassDirection.N
    assert shan.sector == 2
    assert shan.center == 3
    assert shan.flying_normal is True
    assert shan.chart == fly(3, NORTH, False)

    xiang = reading.xiang_xing
    assert xiang.direction is CompassDirection.S
    assert xiang.center == 2
    assert xiang.flying_normal is False
    assert xiang.chart == fly(2, NORTH, True)


def test_build_reading_substitutes_unpan_center_for_five_yellow() -> None:
    # Period 3 (三碧) facing east: the mountain cell (w) holds 五黄.
    reading = build_reading(2, NORTH, "e", 1)
    assert reading.shan_xing.center == 4
    # Parity is taken from the Un-Pan star 三 (odd), which flies forward in sector 1.
    assert reading.shan_xing.flying_normal is True
    assert reading.shan_xing.chart == fly(4, NORTH, False)


def test_build_reading_uses_rotated_layout() -> None:
    east = DI_PAN_POSITIONS[CompassDirection.E]
    reading = build_reading(7, east, "s", 2)
    assert reading.resolved_direction is CompassDirection.E
    unpan = reading.unpan_xing.chart
    # In the east layout north is cell 3 and south is cell 5.
    assert reading.shan_xing.center == unpan[3]
    assert reading.xiang_xing.center == unpan[5]


def test_build_reading_is_deterministic() -> None:
    first = build_reading(7, NORTH, "se", 3)
    second = build_reading(7, NORTH, "se", 3)
    assert first == second
    assert first.as_dict() == second.as_dict()
    assert set(first.as_dict()) == {
        "unpan_xing",
        "shan_xing",
        "xiang_xing",
        "resolved_direction",
    }


def test_build_reading_rejects_bad_inputs() -> None:
    with pytest.raises(InvalidInputError):
        build_reading(7, NORTH, "north", 2)
    with pytest.raises(InvalidInputError):
        build_reading(7, NORTH, "s", 0)
    with pytest.raises(InvalidInputError):
        build_reading(7, NORTH[:8], "s", 2)


def test_build_reading_unknown_layout_raises_on_lookup() -> None:
    with pytest.raises(InvalidInputError, match="matches no base chart"):
        build_reading(7, [0, 1, 2, 3, 4, 5, 6, 7, 8], "s", 2)


@pytest.mark.parametrize(
    ("current", "expected"),
    [
        (dt.date(2022, 3, 1), 7),  # period 8 (2004-2023)
        (dt.date(2024, 2, 1), 7),  # before Li-Chun still counts as 2023
        (dt.date(2024, 2, 10), 8),  # period 9
        (dt.date(1864, 6, 1), 0),
        (dt.date(1863, 6, 1), 8),  # wraps to the previous cycle
    ],
)
def test_unpan_xing_index(current: dt.date, expected: int) -> None:
    lichun = dt.date(current.year, 2, 4)
    assert unpan_xing_index(current, lichun) == expected


def test_unpan_xing_index_honours_start_year() -> None:
    assert unpan_xing_index(dt.date(2022, 3, 1), dt.date(2022, 2, 4), start_year=1844) == 8
