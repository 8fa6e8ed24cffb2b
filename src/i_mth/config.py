"""
Configuration module for the i-mth demo command line.

Loads configuration from a config.yaml file with Pydantic validation.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from .constants import EARTH_MASS, EARTH_RADIUS, MOON_MASS, MOON_RADIUS


class BodyConfig(BaseModel):
    name: str
    mass: float  # kg
    radius: float  # m


def _default_bodies() -> list[BodyConfig]:
    return [
        BodyConfig(name="Earth", mass=EARTH_MASS, radius=EARTH_RADIUS),
        BodyConfig(name="Moon", mass=MOON_MASS, radius=MOON_RADIUS),
    ]


class MthConfig(BaseModel):
    debug: bool = False
    precision: int = 4
    bodies: list[BodyConfig] = Field(default_factory=_default_bodies)

    @classmethod
    def from_yaml(cls, path: Path | str | None = None) -> "MthConfig":
        """Load configuration from a YAML file."""
        if path is None:
            return cls()

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, encoding="utf-8") as f:
            data: dict[str, Any] = yaml.safe_load(f) or {}

        return cls(**data)
