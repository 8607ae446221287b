"""Typed failures raised by the SafePath core.

Placement errors also derive from ``ValueError`` so callers that only care about
"bad input" can catch that and re-prompt. Nothing here is retried internally.
"""


class SafePathError(Exception):
    """Base class for every error the core raises."""


# ============================================================================
# Placement errors (bad parameters)
# ============================================================================


class InvalidFenceGeometry(SafePathError, ValueError):
    """Fence endpoints are identical or not axis-aligned."""


class InvalidRange(SafePathError, ValueError):
    """Sensor range (or camera horizon) is outside its domain."""


class InvalidCount(SafePathError, ValueError):
    """Nanobot count is non-positive or larger than the rectangle."""


class InvalidDirection(SafePathError, ValueError):
    """Direction token is not one of N, E, S, W."""


class InvalidRectangle(SafePathError, ValueError):
    """Bottom-right corner precedes top-left on at least one axis."""


# ============================================================================
# Search errors
# ============================================================================


class UnreachableGoal(SafePathError):
    """Goal cell is covered by an obstacle and can never be entered."""

    def __init__(self, goal):
        self.goal = goal
        super().__init__(f"Goal {goal} is blocked by an obstacle")


class StartCompromised(SafePathError):
    """Start cell is itself covered by an obstacle."""

    def __init__(self, start):
        self.start = start
        super().__init__(f"Start {start} is covered by an obstacle")


class SearchLimitExceeded(SafePathError):
    """Breadth-first search discovered more cells than the configured cap."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Path search exceeded {limit} visited cells")
