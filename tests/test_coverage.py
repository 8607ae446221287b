"""Tests for per-variant coverage generation."""

import math
import random

import pytest

from safepath.config import Config
from safepath.environment import (
    COVERAGE_GENERATORS,
    Direction,
    ObstacleVariant,
    camera_coverage,
    fence_coverage,
    generate_coverage,
    guard_coverage,
    nanobot_coverage,
    sensor_coverage,
)
from safepath.errors import (
    InvalidCount,
    InvalidDirection,
    InvalidFenceGeometry,
    InvalidRange,
    InvalidRectangle,
)


def test_guard_covers_single_cell():
    assert guard_coverage((5, -3)) == {(5, -3)}


@pytest.mark.parametrize(
    "start,end",
    [
        ((0, 0), (0, 3)),
        ((0, 3), (0, 0)),
        ((-4, 2), (3, 2)),
        ((7, -1), (7, -9)),
    ],
)
def test_fence_covers_inclusive_segment(start, end):
    cells = fence_coverage(start, end)
    delta = abs(end[0] - start[0]) + abs(end[1] - start[1])
    assert len(cells) == delta + 1
    assert start in cells and end in cells
    xs = sorted((start[0], end[0]))
    ys = sorted((start[1], end[1]))
    for x, y in cells:
        assert xs[0] <= x <= xs[1]
        assert ys[0] <= y <= ys[1]


def test_fence_rejects_diagonal_and_identical_endpoints():
    with pytest.raises(InvalidFenceGeometry):
        fence_coverage((0, 0), (2, 3))
    with pytest.raises(InvalidFenceGeometry):
        fence_coverage((4, 4), (4, 4))
    # Placement errors are also ValueErrors for callers that re-prompt
    with pytest.raises(ValueError):
        fence_coverage((1, 1), (2, 2))


def test_sensor_unit_range_is_a_plus_shape():
    assert sensor_coverage((0, 0), 1) == {(0, 0), (1, 0), (-1, 0), (0, 1), (0, -1)}


def test_sensor_range_matches_distance_test():
    center = (3, -2)
    radius = 2.7
    cells = sensor_coverage(center, radius)
    for x in range(center[0] - 5, center[0] + 6):
        for y in range(center[1] - 5, center[1] + 6):
            inside = math.hypot(x - center[0], y - center[1]) <= radius
            assert ((x, y) in cells) == inside


def test_sensor_coverage_is_symmetric_about_center():
    center = (10, 10)
    cells = sensor_coverage(center, 3.5)
    for x, y in cells:
        assert (2 * center[0] - x, 2 * center[1] - y) in cells
        assert (2 * center[0] - x, y) in cells
        assert (x, 2 * center[1] - y) in cells


def test_sensor_counts():
    assert len(sensor_coverage((0, 0), 1.5)) == 9
    assert len(sensor_coverage((0, 0), 2)) == 13


@pytest.mark.parametrize("bad", [0, -1.5, float("nan"), float("inf"), "far"])
def test_sensor_rejects_out_of_domain_range(bad):
    with pytest.raises(InvalidRange):
        sensor_coverage((0, 0), bad)


def test_camera_south_cone_width_grows_with_depth():
    cells = camera_coverage((0, 0), Direction.SOUTH, horizon=4)
    assert (-2, 2) in cells
    assert (2, 2) in cells
    assert (3, 2) not in cells
    assert (0, -1) not in cells
    # depth d contributes 2d + 1 cells
    assert len(cells) == sum(2 * d + 1 for d in range(5))


@pytest.mark.parametrize(
    "direction,inside,outside",
    [
        ("n", [(0, 0), (0, -3), (-3, -3), (3, -3)], [(0, 1), (4, -3)]),
        ("e", [(3, 0), (3, -3), (3, 3)], [(-1, 0), (2, 3)]),
        ("s", [(0, 3), (-3, 3), (3, 3)], [(0, -1), (-3, 2)]),
        ("W", [(-3, 0), (-3, 3), (-3, -3)], [(1, 0), (-1, 2)]),
    ],
)
def test_camera_faces_each_direction(direction, inside, outside):
    cells = camera_coverage((0, 0), direction, horizon=3)
    assert len(cells) == 16
    for cell in inside:
        assert cell in cells
    for cell in outside:
        assert cell not in cells


def test_camera_horizon_defaults_to_config(monkeypatch):
    monkeypatch.setattr(Config, "CAMERA_HORIZON", 2)
    cells = camera_coverage((1, 1), "east")
    assert len(cells) == 9
    assert (3, 3) in cells
    assert (4, 1) not in cells


def test_camera_rejects_unknown_direction_and_negative_horizon():
    with pytest.raises(InvalidDirection):
        camera_coverage((0, 0), "up", horizon=2)
    with pytest.raises(InvalidRange):
        camera_coverage((0, 0), "n", horizon=-1)


@pytest.mark.parametrize("word", ["sideways", "eat", "nope", "", "ns"])
def test_camera_rejects_words_that_only_start_like_a_direction(word):
    with pytest.raises(InvalidDirection):
        camera_coverage((0, 0), word, horizon=2)


@pytest.mark.parametrize("horizon", ["far", "3", 2.5, True])
def test_camera_rejects_non_integer_horizon(horizon):
    with pytest.raises(InvalidRange, match="whole number"):
        camera_coverage((0, 0), "s", horizon=horizon)


def test_nanobots_are_distinct_cells_inside_rectangle():
    cells = nanobot_coverage((2, 3), (5, 6), 7, rng=random.Random(11))
    assert len(cells) == 7
    for x, y in cells:
        assert 2 <= x <= 5
        assert 3 <= y <= 6


def test_nanobots_are_reproducible_with_seeded_source():
    first = nanobot_coverage((0, 0), (9, 9), 12, rng=random.Random(1234))
    second = nanobot_coverage((0, 0), (9, 9), 12, rng=random.Random(1234))
    assert first == second


def test_nanobots_can_fill_rectangle_exactly():
    cells = nanobot_coverage((-1, -1), (1, 0), 6, rng=random.Random(0))
    assert cells == {(x, y) for x in (-1, 0, 1) for y in (-1, 0)}


def test_nanobot_parameter_errors():
    with pytest.raises(InvalidCount):
        nanobot_coverage((0, 0), (1, 1), 5)
    with pytest.raises(InvalidCount):
        nanobot_coverage((0, 0), (1, 1), 0)
    with pytest.raises(InvalidRectangle):
        nanobot_coverage((3, 0), (1, 1), 1)
    with pytest.raises(InvalidRectangle):
        nanobot_coverage((0, 3), (1, 1), 1)


def test_dispatch_table_covers_every_variant():
    assert set(COVERAGE_GENERATORS) == set(ObstacleVariant)
    assert generate_coverage("fence", start=(0, 0), end=(2, 0)) == {(0, 0), (1, 0), (2, 0)}
    assert generate_coverage(ObstacleVariant.GUARD, point=(1, 1)) == {(1, 1)}
