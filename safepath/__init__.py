"""
SafePath - obstacle coverage and safe-route planning on an integer grid.

Place guards, fences, sensors, cameras and nanobot fields, then ask which
directions are safe to move or which sequence of unit moves reaches a target.

No global state: every session owns its registry through a Mission.
"""

__version__ = "0.1.0"

from .mission import Mission
from .briefing import Briefing, ObstaclePlacement, build_mission, load_briefing
from .config import Config
from .environment import (
    Coordinate,
    Direction,
    ObstacleRegistry,
    ObstacleVariant,
    PlacedObstacle,
    PathReport,
    SafeDirectionReport,
    RegistryState,
    camera_coverage,
    fence_coverage,
    guard_coverage,
    nanobot_coverage,
    sensor_coverage,
    generate_coverage,
    find_path,
    safe_directions,
    render_obstacle_map,
)
from .errors import (
    SafePathError,
    InvalidFenceGeometry,
    InvalidRange,
    InvalidCount,
    InvalidDirection,
    InvalidRectangle,
    UnreachableGoal,
    StartCompromised,
    SearchLimitExceeded,
)

__all__ = [
    # Session
    "Mission",
    "Config",
    # Briefings
    "Briefing",
    "ObstaclePlacement",
    "build_mission",
    "load_briefing",
    # Grid model
    "Coordinate",
    "Direction",
    "ObstacleRegistry",
    "ObstacleVariant",
    "PlacedObstacle",
    "PathReport",
    "SafeDirectionReport",
    "RegistryState",
    # Coverage
    "camera_coverage",
    "fence_coverage",
    "guard_coverage",
    "nanobot_coverage",
    "sensor_coverage",
    "generate_coverage",
    # Queries
    "find_path",
    "safe_directions",
    "render_obstacle_map",
    # Errors
    "SafePathError",
    "InvalidFenceGeometry",
    "InvalidRange",
    "InvalidCount",
    "InvalidDirection",
    "InvalidRectangle",
    "UnreachableGoal",
    "StartCompromised",
    "SearchLimitExceeded",
]
