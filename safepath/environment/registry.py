"""Obstacle registry.

The registry is the single source of truth for which cells are occupied. It
keeps every placement in insertion order and a cumulative point index so that
blocking queries stay O(1) regardless of how many obstacles have been placed.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from .coordinates import Coordinate
from .schemas import PlacedObstacleState, RegistryState


class ObstacleVariant(str, Enum):
    """Closed set of obstacle kinds. Values double as JSON ``type`` tags."""

    GUARD = "guard"
    FENCE = "fence"
    SENSOR = "sensor"
    CAMERA = "camera"
    NANOBOT = "nanobot"

    @property
    def symbol(self) -> str:
        """Single-character map symbol."""
        return _SYMBOLS[self]


_SYMBOLS: Dict[ObstacleVariant, str] = {
    ObstacleVariant.GUARD: "g",
    ObstacleVariant.FENCE: "f",
    ObstacleVariant.SENSOR: "s",
    ObstacleVariant.CAMERA: "c",
    ObstacleVariant.NANOBOT: "n",
}

EMPTY_SYMBOL = "."


@dataclass(frozen=True)
class PlacedObstacle:
    """One placement: its variant and the deduplicated cells it covers."""

    variant: ObstacleVariant
    coverage: frozenset

    def __contains__(self, point: Coordinate) -> bool:
        return point in self.coverage


class ObstacleRegistry:
    """Ordered, grow-only collection of placed obstacles.

    Insertion order only matters for ``symbol_at`` (the first-registered
    obstacle wins when coverages overlap); blocking queries ignore it.
    """

    def __init__(self, obstacles: Optional[Iterable[PlacedObstacle]] = None):
        self._obstacles: List[PlacedObstacle] = []
        # point -> variant of the first obstacle that covered it
        self._index: Dict[Coordinate, ObstacleVariant] = {}
        for obstacle in obstacles or ():
            self._append(obstacle)

    def place(self, variant: ObstacleVariant, coverage: Iterable[Coordinate]) -> PlacedObstacle:
        """Record a new obstacle and merge its coverage into the index."""
        obstacle = PlacedObstacle(variant=ObstacleVariant(variant), coverage=frozenset(coverage))
        self._append(obstacle)
        return obstacle

    def _append(self, obstacle: PlacedObstacle) -> None:
        self._obstacles.append(obstacle)
        index = self._index
        for point in obstacle.coverage:
            # setdefault keeps the earlier variant for overlapping cells
            index.setdefault(point, obstacle.variant)

    def is_blocked(self, point: Coordinate) -> bool:
        """True iff some placed obstacle covers ``point``."""
        return point in self._index

    def symbol_at(self, point: Coordinate) -> Optional[ObstacleVariant]:
        """Variant of the first-registered obstacle covering ``point``, if any."""
        return self._index.get(point)

    @property
    def obstacles(self) -> Tuple[PlacedObstacle, ...]:
        return tuple(self._obstacles)

    @property
    def blocked_count(self) -> int:
        """Number of distinct blocked cells across all obstacles."""
        return len(self._index)

    def __len__(self) -> int:
        return len(self._obstacles)

    def __iter__(self) -> Iterator[PlacedObstacle]:
        return iter(self._obstacles)

    def snapshot(self) -> RegistryState:
        """Serializable view of the registry (coverage sorted for stable output)."""
        return RegistryState(
            obstacles=[
                PlacedObstacleState(
                    variant=obstacle.variant.value,
                    coverage=sorted(obstacle.coverage),
                )
                for obstacle in self._obstacles
            ]
        )
