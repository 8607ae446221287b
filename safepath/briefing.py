"""
Mission briefings: JSON files that seed a Mission with obstacles.

A briefing is data, not code. It lists placements in the order they should be
registered (which is also map-rendering precedence) plus optional session
settings.

Briefing file structure:
```json
{
  "name": "Embassy perimeter",
  "seed": 42,
  "camera_horizon": 20,
  "obstacles": [
    {"type": "guard", "point": [5, 5]},
    {"type": "fence", "start": [0, 0], "end": [0, 3]},
    {"type": "sensor", "center": [10, 10], "range": 2.5},
    {"type": "camera", "point": [3, 8], "direction": "s"},
    {"type": "nanobot", "top_left": [12, 0], "bottom_right": [15, 3], "count": 4}
  ]
}
```

Usage:
    mission = load_briefing(Path("examples/briefings/embassy.json"))
    print(mission.render_map((0, 0), (15, 12)))
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field

from .environment import ObstacleVariant
from .mission import Mission


class ObstaclePlacement(BaseModel):
    """One entry of a briefing's ``obstacles`` list.

    Only the fields relevant to ``type`` are read; coverage generation
    enforces the per-variant rules.
    """

    type: ObstacleVariant
    point: Optional[Tuple[int, int]] = None
    start: Optional[Tuple[int, int]] = None
    end: Optional[Tuple[int, int]] = None
    center: Optional[Tuple[int, int]] = None
    range: Optional[float] = None
    direction: Optional[str] = None
    top_left: Optional[Tuple[int, int]] = None
    bottom_right: Optional[Tuple[int, int]] = None
    count: Optional[int] = None

    def coverage_params(self) -> Dict[str, Any]:
        """Return keyword arguments for the variant's coverage generator.

        Raises:
            ValueError: If a field the variant needs is missing.
        """
        required = _REQUIRED_FIELDS[self.type]
        missing = [name for name in required if getattr(self, name) is None]
        if missing:
            raise ValueError(
                f"{self.type.value} placement missing field(s): {', '.join(missing)}"
            )
        params = {name: getattr(self, name) for name in required}
        if "range" in params:
            params["sensor_range"] = params.pop("range")
        return params


_REQUIRED_FIELDS: Dict[ObstacleVariant, Tuple[str, ...]] = {
    ObstacleVariant.GUARD: ("point",),
    ObstacleVariant.FENCE: ("start", "end"),
    ObstacleVariant.SENSOR: ("center", "range"),
    ObstacleVariant.CAMERA: ("point", "direction"),
    ObstacleVariant.NANOBOT: ("top_left", "bottom_right", "count"),
}


class Briefing(BaseModel):
    """Top-level briefing document."""

    name: str = Field("Unnamed mission", description="Label shown in logs")
    seed: Optional[int] = Field(None, description="Seed for nanobot placement")
    camera_horizon: Optional[int] = Field(None, description="Cone depth override")
    obstacles: List[ObstaclePlacement] = Field(default_factory=list)


def build_mission(
    briefing: Briefing,
    *,
    seed: Optional[int] = None,
    verbose: bool = False,
) -> Mission:
    """Create a Mission and register every placement in briefing order.

    ``seed`` overrides the briefing's own seed so nanobot fields can be
    reproduced from the command line.
    """
    mission = Mission(
        name=briefing.name,
        seed=seed if seed is not None else briefing.seed,
        camera_horizon=briefing.camera_horizon,
        verbose=verbose,
    )
    for placement in briefing.obstacles:
        mission.place(placement.type, **placement.coverage_params())
    return mission


def load_briefing(
    path: Path | str,
    *,
    seed: Optional[int] = None,
    verbose: bool = False,
) -> Mission:
    """Read a briefing JSON file and return the seeded Mission.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the document is malformed (pydantic ``ValidationError``
            and the placement errors from ``safepath.errors`` both subclass it).
        json.JSONDecodeError: If the file is not valid JSON.
    """
    briefing_path = Path(path)
    if not briefing_path.exists():
        raise FileNotFoundError(f"Briefing not found at {briefing_path}")

    data = json.loads(briefing_path.read_text())
    briefing = Briefing.model_validate(data)
    return build_mission(briefing, seed=seed, verbose=verbose)
