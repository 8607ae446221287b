"""Grid coordinates and the four compass directions.

The plane uses screen orientation: x grows to the east, y grows to the south,
so North is a step of ``(0, -1)``.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from ..errors import InvalidDirection

Coordinate = Tuple[int, int]


class Direction(str, Enum):
    """Unit step on the grid. Declaration order (N, E, S, W) is the canonical order."""

    NORTH = "N"
    EAST = "E"
    SOUTH = "S"
    WEST = "W"

    @property
    def offset(self) -> Coordinate:
        return _OFFSETS[self]

    @classmethod
    def parse(cls, token: "str | Direction") -> "Direction":
        """Normalise ``n``/``North``/``S`` style tokens into a Direction.

        Accepts the single letters n, e, s, w or the full compass words, in
        any case. Raises InvalidDirection for anything else.
        """
        if isinstance(token, Direction):
            return token
        if not isinstance(token, str):
            raise InvalidDirection(f"Invalid direction: {token!r}")
        direction = _NAMES.get(token.strip().lower())
        if direction is None:
            raise InvalidDirection(f"Invalid direction: {token!r}")
        return direction

    @classmethod
    def from_offset(cls, dx: int, dy: int) -> "Direction":
        """Return the direction whose unit offset is ``(dx, dy)``."""
        for direction, offset in _OFFSETS.items():
            if offset == (dx, dy):
                return direction
        raise ValueError(f"({dx}, {dy}) is not a unit step")


_OFFSETS = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}

_NAMES = {
    "n": Direction.NORTH,
    "north": Direction.NORTH,
    "e": Direction.EAST,
    "east": Direction.EAST,
    "s": Direction.SOUTH,
    "south": Direction.SOUTH,
    "w": Direction.WEST,
    "west": Direction.WEST,
}

# Canonical neighbor/report order.
DIRECTIONS: Tuple[Direction, ...] = tuple(Direction)


def step(point: Coordinate, direction: Direction) -> Coordinate:
    """Return the cell one unit away from ``point`` in ``direction``."""
    dx, dy = direction.offset
    return point[0] + dx, point[1] + dy
