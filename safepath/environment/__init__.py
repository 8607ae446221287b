"""Grid, obstacle coverage and path search for SafePath."""

from .coordinates import Coordinate, Direction, DIRECTIONS, step
from .registry import ObstacleRegistry, ObstacleVariant, PlacedObstacle, EMPTY_SYMBOL
from .schemas import (
    PathReport,
    PlacedObstacleState,
    RegistryState,
    SafeDirectionReport,
)
from .coverage import (
    COVERAGE_GENERATORS,
    camera_coverage,
    fence_coverage,
    generate_coverage,
    guard_coverage,
    nanobot_coverage,
    sensor_coverage,
)
from .helpers import (
    find_path,
    neighbors,
    obstacle_map_rows,
    render_obstacle_map,
    safe_directions,
)

__all__ = [
    "Coordinate",
    "Direction",
    "DIRECTIONS",
    "step",
    "ObstacleRegistry",
    "ObstacleVariant",
    "PlacedObstacle",
    "EMPTY_SYMBOL",
    "PathReport",
    "PlacedObstacleState",
    "RegistryState",
    "SafeDirectionReport",
    "COVERAGE_GENERATORS",
    "camera_coverage",
    "fence_coverage",
    "generate_coverage",
    "guard_coverage",
    "nanobot_coverage",
    "sensor_coverage",
    "find_path",
    "neighbors",
    "obstacle_map_rows",
    "render_obstacle_map",
    "safe_directions",
]
