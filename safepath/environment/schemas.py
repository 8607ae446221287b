"""Pydantic schemas for registry snapshots and query reports.

These models mirror the lightweight dataclasses in ``registry.py`` and the
results of ``helpers.py`` but ensure outputs remain serializable for callers
that want to hand them to another process or print them as JSON.
"""

from __future__ import annotations

from typing import List, Literal, Optional, Tuple

from pydantic import BaseModel, Field


class PlacedObstacleState(BaseModel):
    """Serializable view of one placed obstacle."""

    variant: str = Field(..., description="Obstacle kind (guard, fence, ...)")
    coverage: List[Tuple[int, int]] = Field(
        default_factory=list,
        description="Covered cells as (x, y), sorted",
    )


class RegistryState(BaseModel):
    """Ordered list of placements, first-registered first."""

    obstacles: List[PlacedObstacleState] = Field(default_factory=list)


SafeDirectionOutcome = Literal["safe", "compromised", "no_safe_direction"]


class SafeDirectionReport(BaseModel):
    """Which unit moves from ``location`` land on an unblocked cell."""

    location: Tuple[int, int]
    outcome: SafeDirectionOutcome
    directions: List[str] = Field(
        default_factory=list,
        description="Safe direction tokens in N, E, S, W order",
    )

    @property
    def is_safe(self) -> bool:
        return self.outcome == "safe"


PathOutcome = Literal[
    "found",
    "already_at_objective",
    "no_path",
    "goal_blocked",
    "start_compromised",
    "search_limit",
]


class PathReport(BaseModel):
    """Result of a route request between two cells."""

    start: Tuple[int, int]
    goal: Tuple[int, int]
    outcome: PathOutcome
    moves: List[str] = Field(
        default_factory=list,
        description="Direction tokens from start to goal",
    )
    detail: Optional[str] = Field(None, description="Human-readable failure reason")

    @property
    def route(self) -> str:
        """Moves joined into a single string, e.g. ``EESSS``."""
        return "".join(self.moves)
