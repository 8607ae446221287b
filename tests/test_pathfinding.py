"""Tests for neighbor expansion, path search and safe-direction reports."""

import pytest

from safepath.environment import (
    Direction,
    ObstacleRegistry,
    ObstacleVariant,
    fence_coverage,
    find_path,
    neighbors,
    safe_directions,
    step,
)
from safepath.errors import InvalidDirection, SearchLimitExceeded, StartCompromised, UnreachableGoal


class SpyRegistry(ObstacleRegistry):
    """Registry that records every blocking query."""

    def __init__(self):
        super().__init__()
        self.queries = []

    def is_blocked(self, point):
        self.queries.append(point)
        return super().is_blocked(point)


def walk(registry, start, moves):
    """Apply moves from start, asserting every visited cell is unblocked."""
    position = start
    for move in moves:
        position = step(position, move)
        assert not registry.is_blocked(position)
    return position


def boxed(registry, center):
    """Surround center with four fences so its only open cell is itself."""
    x, y = center
    registry.place(ObstacleVariant.FENCE, fence_coverage((x - 1, y - 1), (x + 1, y - 1)))
    registry.place(ObstacleVariant.FENCE, fence_coverage((x - 1, y + 1), (x + 1, y + 1)))
    registry.place(ObstacleVariant.FENCE, fence_coverage((x - 1, y - 1), (x - 1, y + 1)))
    registry.place(ObstacleVariant.FENCE, fence_coverage((x + 1, y - 1), (x + 1, y + 1)))


def test_direction_offsets_and_parsing():
    assert Direction.NORTH.offset == (0, -1)
    assert Direction.EAST.offset == (1, 0)
    assert Direction.SOUTH.offset == (0, 1)
    assert Direction.WEST.offset == (-1, 0)
    assert Direction.parse("s") is Direction.SOUTH
    assert Direction.parse(" West ") is Direction.WEST
    assert Direction.from_offset(1, 0) is Direction.EAST
    with pytest.raises(ValueError):
        Direction.from_offset(1, 1)


@pytest.mark.parametrize(
    "token, expected",
    [("North", Direction.NORTH), ("E", Direction.EAST), ("south", Direction.SOUTH), ("w", Direction.WEST)],
)
def test_direction_parse_accepts_letters_and_words(token, expected):
    assert Direction.parse(token) is expected


@pytest.mark.parametrize("token", ["sideways", "eat", "Nowhere", "", 3])
def test_direction_parse_is_strict(token):
    with pytest.raises(InvalidDirection):
        Direction.parse(token)


def test_neighbors_in_canonical_order_and_filtered():
    registry = ObstacleRegistry()
    assert neighbors(registry, (0, 0)) == [(0, -1), (1, 0), (0, 1), (-1, 0)]
    registry.place(ObstacleVariant.GUARD, {(1, 0)})
    assert neighbors(registry, (0, 0)) == [(0, -1), (0, 1), (-1, 0)]


def test_empty_grid_path_is_deterministic():
    registry = ObstacleRegistry()
    path = find_path(registry, (0, 0), (2, 3))
    assert path == [Direction.EAST, Direction.EAST, Direction.SOUTH, Direction.SOUTH, Direction.SOUTH]


def test_empty_grid_path_toward_north_west():
    registry = ObstacleRegistry()
    path = find_path(registry, (0, 0), (-2, -1))
    assert len(path) == 3
    assert sorted(path) == sorted([Direction.WEST, Direction.WEST, Direction.NORTH])
    assert walk(registry, (0, 0), path) == (-2, -1)


def test_start_equal_goal_returns_empty_moves():
    assert find_path(ObstacleRegistry(), (4, 4), (4, 4)) == []


def test_path_detours_around_fence():
    registry = ObstacleRegistry()
    registry.place(ObstacleVariant.FENCE, fence_coverage((1, -5), (1, 5)))
    path = find_path(registry, (0, 0), (2, 0))
    # Up to y=-6 (or down to y=6), across two, back six
    assert len(path) == 14
    assert walk(registry, (0, 0), path) == (2, 0)


def test_blocked_start_is_compromised():
    registry = ObstacleRegistry()
    registry.place(ObstacleVariant.GUARD, {(5, 5)})
    with pytest.raises(StartCompromised):
        find_path(registry, (5, 5), (0, 0))
    with pytest.raises(StartCompromised):
        find_path(registry, (5, 5), (5, 5))


def test_blocked_goal_fails_without_searching():
    registry = SpyRegistry()
    registry.place(ObstacleVariant.GUARD, {(3, 3)})
    with pytest.raises(UnreachableGoal) as excinfo:
        find_path(registry, (0, 0), (3, 3))
    assert excinfo.value.goal == (3, 3)
    # Only the start and goal were inspected; no neighbor was ever expanded
    assert registry.queries == [(0, 0), (3, 3)]


def test_enclosed_start_has_no_path():
    registry = ObstacleRegistry()
    boxed(registry, (0, 0))
    assert find_path(registry, (0, 0), (5, 5)) is None


def test_enclosed_goal_hits_search_cap():
    registry = ObstacleRegistry()
    boxed(registry, (10, 10))
    with pytest.raises(SearchLimitExceeded) as excinfo:
        find_path(registry, (0, 0), (10, 10), max_visited=200)
    assert excinfo.value.limit == 200


def test_safe_directions_beside_fence():
    registry = ObstacleRegistry()
    registry.place(ObstacleVariant.FENCE, fence_coverage((0, 0), (0, 3)))
    report = safe_directions(registry, (1, 1))
    assert report.outcome == "safe"
    assert report.is_safe
    assert report.directions == ["N", "E", "S"]


def test_safe_directions_compromised_and_boxed_in():
    registry = ObstacleRegistry()
    boxed(registry, (0, 0))
    assert safe_directions(registry, (0, 0)).outcome == "no_safe_direction"
    assert safe_directions(registry, (0, 0)).directions == []
    assert safe_directions(registry, (1, 0)).outcome == "compromised"


def test_safe_directions_open_grid_lists_all_in_order():
    report = safe_directions(ObstacleRegistry(), (7, -7))
    assert report.directions == ["N", "E", "S", "W"]
