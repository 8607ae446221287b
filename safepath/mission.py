"""
Mission session: one obstacle registry plus the random source used to fill it.

A Mission is the object callers hold for the lifetime of a session. It owns
the registry explicitly (no module-level state), turns placement parameters
into coverage through the variant dispatch table, and answers the two
questions the console asks: which directions are safe, and how to reach the
objective.

Design notes:
- Placement failures propagate as typed ``ValueError`` subclasses from
  ``safepath.errors``; the caller decides whether to re-prompt.
- ``plan_route`` folds search failures into a ``PathReport`` outcome so the
  console can print a message without a try/except per case. ``find_path``
  exposes the raw, raising behaviour.
- Nanobot sampling draws from ``self.rng``; pass ``seed`` (or set
  ``SAFEPATH_SEED``) to reproduce a session.

Usage:
    mission = Mission(seed=7)
    mission.place_fence((0, 0), (0, 3))
    mission.safe_directions((1, 1)).directions   # ['N', 'E', 'S']
    mission.plan_route((1, 1), (4, 4)).route     # 'EEESSS'
"""

from __future__ import annotations

import os
import random
from typing import Dict, List, Optional

from .config import Config
from .environment import (
    Coordinate,
    Direction,
    ObstacleRegistry,
    ObstacleVariant,
    PathReport,
    PlacedObstacle,
    SafeDirectionReport,
    generate_coverage,
    render_obstacle_map,
)
from .environment import find_path as _find_path
from .environment import safe_directions as _safe_directions
from .errors import SearchLimitExceeded, StartCompromised, UnreachableGoal
from .logging_utils import log_deterministic, log_error, log_info, log_success


class Mission:
    """Session facade over an ObstacleRegistry."""

    def __init__(
        self,
        registry: Optional[ObstacleRegistry] = None,
        *,
        name: Optional[str] = None,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
        camera_horizon: Optional[int] = None,
        max_visited: Optional[int] = None,
        verbose: bool = False,
    ):
        """Initialize a mission.

        Args:
            registry: Existing registry to extend; a new empty one by default.
            name: Optional label used in log lines.
            rng: Random source for nanobot placement. Takes precedence over seed.
            seed: Seed for a new random source (falls back to Config.SEED).
            camera_horizon: Cone depth for cameras (falls back to Config.CAMERA_HORIZON).
            max_visited: Search cap (falls back to Config.MAX_VISITED_CELLS).
            verbose: Print a tagged line per placement/query. Also enabled by
                SAFEPATH_VERBOSE.
        """
        self.registry = registry if registry is not None else ObstacleRegistry()
        self.name = name
        if rng is None:
            rng = random.Random(seed if seed is not None else Config.SEED)
        self.rng = rng
        self.camera_horizon = camera_horizon
        self.max_visited = max_visited
        self.verbose = verbose or bool(os.getenv("SAFEPATH_VERBOSE"))

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------

    def place(self, variant: "ObstacleVariant | str", **params) -> PlacedObstacle:
        """Generate coverage for ``variant`` from ``params`` and register it.

        Session defaults are filled in for parameters the caller omits:
        the camera horizon and the nanobot random source.
        """
        kind = ObstacleVariant(variant)
        if kind is ObstacleVariant.CAMERA:
            params.setdefault("horizon", self.camera_horizon)
        elif kind is ObstacleVariant.NANOBOT:
            params.setdefault("rng", self.rng)

        try:
            coverage = generate_coverage(kind, **params)
        except ValueError as exc:
            self._log(log_error, f"Rejected {kind.value}: {exc}")
            raise

        obstacle = self.registry.place(kind, coverage)
        self._log(
            log_deterministic,
            f"Placed {kind.value} covering {len(obstacle.coverage)} cell(s) "
            f"({self.registry.blocked_count} blocked in total)",
        )
        return obstacle

    def place_guard(self, point: Coordinate) -> PlacedObstacle:
        return self.place(ObstacleVariant.GUARD, point=point)

    def place_fence(self, start: Coordinate, end: Coordinate) -> PlacedObstacle:
        return self.place(ObstacleVariant.FENCE, start=start, end=end)

    def place_sensor(self, center: Coordinate, sensor_range: float) -> PlacedObstacle:
        return self.place(ObstacleVariant.SENSOR, center=center, sensor_range=sensor_range)

    def place_camera(self, point: Coordinate, direction: "Direction | str") -> PlacedObstacle:
        return self.place(ObstacleVariant.CAMERA, point=point, direction=direction)

    def place_nanobots(
        self,
        top_left: Coordinate,
        bottom_right: Coordinate,
        count: int,
    ) -> PlacedObstacle:
        return self.place(
            ObstacleVariant.NANOBOT,
            top_left=top_left,
            bottom_right=bottom_right,
            count=count,
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_blocked(self, point: Coordinate) -> bool:
        return self.registry.is_blocked(point)

    def safe_directions(self, point: Coordinate) -> SafeDirectionReport:
        report = _safe_directions(self.registry, point)
        self._log(log_info, f"Safe directions from {point}: {report.outcome} {''.join(report.directions)}")
        return report

    def find_path(self, start: Coordinate, goal: Coordinate) -> Optional[List[Direction]]:
        """Raw path search; raises the typed search errors."""
        return _find_path(self.registry, start, goal, max_visited=self.max_visited)

    def plan_route(self, start: Coordinate, goal: Coordinate) -> PathReport:
        """Search for a route and describe the result as a PathReport."""
        try:
            moves = self.find_path(start, goal)
        except StartCompromised as exc:
            report = PathReport(start=start, goal=goal, outcome="start_compromised", detail=str(exc))
        except UnreachableGoal as exc:
            report = PathReport(start=start, goal=goal, outcome="goal_blocked", detail=str(exc))
        except SearchLimitExceeded as exc:
            report = PathReport(start=start, goal=goal, outcome="search_limit", detail=str(exc))
        else:
            if moves is None:
                report = PathReport(start=start, goal=goal, outcome="no_path")
            elif not moves:
                report = PathReport(start=start, goal=goal, outcome="already_at_objective")
            else:
                report = PathReport(
                    start=start,
                    goal=goal,
                    outcome="found",
                    moves=[move.value for move in moves],
                )

        if report.outcome == "found":
            self._log(log_success, f"Route {start} -> {goal}: {report.route}")
        else:
            self._log(log_info, f"Route {start} -> {goal}: {report.outcome}")
        return report

    def render_map(
        self,
        top_left: Coordinate,
        bottom_right: Coordinate,
        *,
        symbols: Optional[Dict[ObstacleVariant, str]] = None,
    ) -> str:
        return render_obstacle_map(self.registry, top_left, bottom_right, symbols=symbols)

    def _log(self, logger, message: str) -> None:
        if not self.verbose:
            return
        logger(message, label=self.name or None)
