"""
SafePath Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return None
    return int(raw)


class Config:
    """Application configuration loaded from environment variables."""

    # Coverage generation
    # Camera cones are otherwise unbounded; this caps their depth in cells.
    CAMERA_HORIZON: int = int(os.getenv("SAFEPATH_CAMERA_HORIZON", "1000"))

    # Path search safety net (open plane with an enclosed goal never drains the frontier)
    MAX_VISITED_CELLS: int = int(os.getenv("SAFEPATH_MAX_VISITED_CELLS", "1000000"))

    # Seed for nanobot placement; unset means a fresh random source per mission
    SEED: int | None = _optional_int("SAFEPATH_SEED")

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are out of range."""
        if cls.CAMERA_HORIZON < 0:
            raise ValueError(
                "SAFEPATH_CAMERA_HORIZON must be zero or positive "
                f"(got {cls.CAMERA_HORIZON})"
            )

        if cls.MAX_VISITED_CELLS <= 0:
            raise ValueError(
                "SAFEPATH_MAX_VISITED_CELLS must be positive "
                f"(got {cls.MAX_VISITED_CELLS})"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "SafePath Configuration:",
            f"  Camera Horizon: {cls.CAMERA_HORIZON} cells",
            f"  Max Visited Cells: {cls.MAX_VISITED_CELLS}",
            f"  Seed: {cls.SEED if cls.SEED is not None else 'random'}",
        ]
        return "\n".join(lines)
