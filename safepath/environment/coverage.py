"""Coverage generation for each obstacle variant.

Every generator is a pure function from placement parameters to the set of
cells the obstacle occupies. ``COVERAGE_GENERATORS`` maps each
``ObstacleVariant`` to its generator so callers can dispatch on the tag instead
of subclassing.
"""

from __future__ import annotations

import math
import random
from typing import Callable, Dict, Optional, Set

from ..config import Config
from ..errors import InvalidCount, InvalidFenceGeometry, InvalidRange, InvalidRectangle
from .coordinates import Coordinate, Direction
from .registry import ObstacleVariant


def guard_coverage(point: Coordinate) -> Set[Coordinate]:
    """A guard occupies exactly its own cell."""
    return {point}


def fence_coverage(start: Coordinate, end: Coordinate) -> Set[Coordinate]:
    """Return every cell on the axis-aligned segment from ``start`` to ``end``.

    Raises:
        InvalidFenceGeometry: If the endpoints coincide or share neither axis.
    """
    same_x = start[0] == end[0]
    same_y = start[1] == end[1]
    # Exactly one shared axis: identical endpoints share both, diagonals share none
    if same_x == same_y:
        raise InvalidFenceGeometry(
            f"Fences must be horizontal or vertical (got {start} -> {end})"
        )

    if same_x:
        low, high = sorted((start[1], end[1]))
        return {(start[0], y) for y in range(low, high + 1)}
    low, high = sorted((start[0], end[0]))
    return {(x, start[1]) for x in range(low, high + 1)}


def sensor_coverage(center: Coordinate, sensor_range: float) -> Set[Coordinate]:
    """Return every cell within Euclidean distance ``sensor_range`` of ``center``.

    Only the bounding box ``floor(c - r) .. ceil(c + r)`` on each axis is
    searched; nothing outside it can pass the distance test.

    Raises:
        InvalidRange: If the range is not a positive finite number.
    """
    try:
        radius = float(sensor_range)
    except (TypeError, ValueError):
        raise InvalidRange(f"Sensor range must be a number (got {sensor_range!r})") from None
    if not math.isfinite(radius) or radius <= 0:
        raise InvalidRange(f"Sensor range must be positive (got {sensor_range!r})")

    cx, cy = center
    min_x, max_x = math.floor(cx - radius), math.ceil(cx + radius)
    min_y, max_y = math.floor(cy - radius), math.ceil(cy + radius)

    covered: Set[Coordinate] = set()
    for x in range(min_x, max_x + 1):
        for y in range(min_y, max_y + 1):
            if math.hypot(x - cx, y - cy) <= radius:
                covered.add((x, y))
    return covered


def camera_coverage(
    point: Coordinate,
    direction: "Direction | str",
    horizon: Optional[int] = None,
) -> Set[Coordinate]:
    """Return the filled 90° cone a camera sees out to ``horizon`` cells.

    At depth ``d`` along the facing axis the cone spans ``d`` cells either
    side of that axis, so facing South from ``(x0, y0)`` covers every
    ``(x, y0 + d)`` with ``x0 - d <= x <= x0 + d`` for ``0 <= d <= horizon``.
    ``horizon`` defaults to ``Config.CAMERA_HORIZON``.

    Raises:
        InvalidDirection: If ``direction`` is not a compass direction.
        InvalidRange: If ``horizon`` is not a non-negative whole number.
    """
    facing = Direction.parse(direction)
    depth_limit = Config.CAMERA_HORIZON if horizon is None else horizon
    if isinstance(depth_limit, bool) or not isinstance(depth_limit, int):
        raise InvalidRange(f"Camera horizon must be a whole number (got {horizon!r})")
    if depth_limit < 0:
        raise InvalidRange(f"Camera horizon must not be negative (got {horizon!r})")

    x0, y0 = point
    fx, fy = facing.offset
    # Unit vector across the facing axis
    px, py = abs(fy), abs(fx)

    covered: Set[Coordinate] = set()
    for depth in range(depth_limit + 1):
        ax, ay = x0 + fx * depth, y0 + fy * depth
        for side in range(-depth, depth + 1):
            covered.add((ax + px * side, ay + py * side))
    return covered


def nanobot_coverage(
    top_left: Coordinate,
    bottom_right: Coordinate,
    count: int,
    rng: Optional[random.Random] = None,
) -> Set[Coordinate]:
    """Scatter ``count`` nanobots over distinct cells of an inclusive rectangle.

    Cells are drawn uniformly without replacement from ``rng`` (a fresh
    ``random.Random`` when omitted), so a seeded source reproduces a field.

    Raises:
        InvalidRectangle: If ``bottom_right`` precedes ``top_left`` on either axis.
        InvalidCount: If ``count`` is not positive or exceeds the rectangle's area.
    """
    left, top = top_left
    right, bottom = bottom_right
    if right < left or bottom < top:
        raise InvalidRectangle(
            f"Bottom-right {bottom_right} precedes top-left {top_left}"
        )

    width = right - left + 1
    area = width * (bottom - top + 1)
    if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
        raise InvalidCount(f"Nanobot count must be a positive integer (got {count!r})")
    if count > area:
        raise InvalidCount(f"Cannot place {count} nanobots in {area} cells")

    source = rng if rng is not None else random.Random()
    return {
        (left + index % width, top + index // width)
        for index in source.sample(range(area), count)
    }


CoverageGenerator = Callable[..., Set[Coordinate]]

COVERAGE_GENERATORS: Dict[ObstacleVariant, CoverageGenerator] = {
    ObstacleVariant.GUARD: guard_coverage,
    ObstacleVariant.FENCE: fence_coverage,
    ObstacleVariant.SENSOR: sensor_coverage,
    ObstacleVariant.CAMERA: camera_coverage,
    ObstacleVariant.NANOBOT: nanobot_coverage,
}


def generate_coverage(variant: "ObstacleVariant | str", **params) -> Set[Coordinate]:
    """Dispatch to the generator registered for ``variant``."""
    generator = COVERAGE_GENERATORS[ObstacleVariant(variant)]
    return generator(**params)
