"""Queries over an obstacle registry: neighbors, path search, reports, rendering."""

from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional

from ..config import Config
from ..errors import (
    InvalidRectangle,
    SearchLimitExceeded,
    StartCompromised,
    UnreachableGoal,
)
from .coordinates import DIRECTIONS, Coordinate, Direction, step
from .registry import EMPTY_SYMBOL, ObstacleRegistry, ObstacleVariant
from .schemas import SafeDirectionReport


def neighbors(registry: ObstacleRegistry, point: Coordinate) -> List[Coordinate]:
    """Return the unblocked 4-neighbors of ``point`` in N, E, S, W order."""
    return [
        cell
        for cell in (step(point, direction) for direction in DIRECTIONS)
        if not registry.is_blocked(cell)
    ]


def find_path(
    registry: ObstacleRegistry,
    start: Coordinate,
    goal: Coordinate,
    *,
    max_visited: Optional[int] = None,
) -> Optional[List[Direction]]:
    """Return the shortest list of moves from ``start`` to ``goal``.

    Uses breadth-first search over the implicit 4-neighbor grid; every edge
    costs one step so the first time the goal is dequeued its path is
    shortest. Neighbors are expanded in N, E, S, W order, which fixes the
    tie-break between equal-length routes: on an empty grid the route from
    ``(0, 0)`` to ``(2, 3)`` is ``E E S S S``.

    Returns an empty list when ``start == goal`` and None when the frontier
    empties without reaching the goal.

    Raises:
        StartCompromised: If ``start`` is blocked (checked before anything else).
        UnreachableGoal: If ``goal`` is blocked. No cell is enqueued in that case.
        SearchLimitExceeded: If more than ``max_visited`` cells are discovered
            (defaults to ``Config.MAX_VISITED_CELLS``).
    """
    # A blocked start is reported even when start == goal; the agent is already spotted.
    if registry.is_blocked(start):
        raise StartCompromised(start)
    # Trivial case: already at goal
    if start == goal:
        return []
    # Blocked goal can never be entered - refuse before searching
    if registry.is_blocked(goal):
        raise UnreachableGoal(goal)

    limit = Config.MAX_VISITED_CELLS if max_visited is None else max_visited

    # Parent pointers double as the visited set. Start has no parent.
    came_from: Dict[Coordinate, Optional[Coordinate]] = {start: None}
    frontier: deque[Coordinate] = deque([start])

    while frontier:
        # FIFO order gives breadth-first expansion
        current = frontier.popleft()
        if current == goal:
            return _reconstruct(came_from, goal)
        for cell in neighbors(registry, current):
            # Skip cells already discovered to avoid cycles
            if cell in came_from:
                continue
            came_from[cell] = current
            # Open plane around an enclosed goal would otherwise expand forever
            if len(came_from) > limit:
                raise SearchLimitExceeded(limit)
            frontier.append(cell)
    # Frontier exhausted without reaching the goal - start is enclosed
    return None


def _reconstruct(
    came_from: Dict[Coordinate, Optional[Coordinate]],
    goal: Coordinate,
) -> List[Direction]:
    """Walk parent pointers from goal back to start and emit moves in travel order."""
    moves: List[Direction] = []
    current = goal
    previous = came_from[current]
    while previous is not None:
        moves.append(Direction.from_offset(current[0] - previous[0], current[1] - previous[1]))
        current = previous
        previous = came_from[current]
    moves.reverse()
    return moves


def safe_directions(registry: ObstacleRegistry, point: Coordinate) -> SafeDirectionReport:
    """Report which single moves from ``point`` land on an unblocked cell.

    Outcomes:
    - ``compromised`` when ``point`` itself is covered by an obstacle
    - ``no_safe_direction`` when all four neighbors are blocked
    - ``safe`` otherwise, with the free directions in N, E, S, W order
    """
    if registry.is_blocked(point):
        return SafeDirectionReport(location=point, outcome="compromised")

    free = [
        direction.value
        for direction in DIRECTIONS
        if not registry.is_blocked(step(point, direction))
    ]
    if not free:
        return SafeDirectionReport(location=point, outcome="no_safe_direction")
    return SafeDirectionReport(location=point, outcome="safe", directions=free)


def obstacle_map_rows(
    registry: ObstacleRegistry,
    top_left: Coordinate,
    bottom_right: Coordinate,
    *,
    symbols: Optional[Dict[ObstacleVariant, str]] = None,
    empty: str = EMPTY_SYMBOL,
) -> List[str]:
    """Return one string per row of the inclusive window, top row first.

    Each cell shows the symbol of the first-registered obstacle covering it
    or ``empty``. ``symbols`` overrides individual variant symbols.

    Raises:
        InvalidRectangle: If ``bottom_right`` precedes ``top_left`` on either axis.
    """
    left, top = top_left
    right, bottom = bottom_right
    if right < left or bottom < top:
        raise InvalidRectangle(f"Bottom-right {bottom_right} precedes top-left {top_left}")

    mapping = {variant: variant.symbol for variant in ObstacleVariant}
    if symbols:
        mapping.update(symbols)

    rows: List[str] = []
    for y in range(top, bottom + 1):
        row_chars: List[str] = []
        for x in range(left, right + 1):
            variant = registry.symbol_at((x, y))
            row_chars.append(mapping[variant] if variant is not None else empty)
        rows.append("".join(row_chars))
    return rows


def render_obstacle_map(
    registry: ObstacleRegistry,
    top_left: Coordinate,
    bottom_right: Coordinate,
    *,
    symbols: Optional[Dict[ObstacleVariant, str]] = None,
    empty: str = EMPTY_SYMBOL,
) -> str:
    """Render the inclusive window as newline-separated rows of symbols."""
    return "\n".join(
        obstacle_map_rows(registry, top_left, bottom_right, symbols=symbols, empty=empty)
    )
