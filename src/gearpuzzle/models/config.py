"""Engine tolerance configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Union

import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from .dimensions import BASE_ROTATION_SPEED, MESH_TOLERANCE, SNAP_TOLERANCE


class EngineTolerances(BaseModel):
    """Tolerances and defaults used by a puzzle session."""

    mesh_tolerance: float = Field(
        default=MESH_TOLERANCE, gt=0, description="Mesh detection band around the ideal distance in px"
    )
    snap_tolerance: float = Field(
        default=SNAP_TOLERANCE, gt=0, description="Drag assistance band around the ideal distance in px"
    )
    base_rotation_speed: float = Field(
        default=BASE_ROTATION_SPEED, description="Speed given to start gears configured at 0"
    )

    @field_validator("base_rotation_speed")
    @classmethod
    def validate_speed_nonzero(cls, value: float) -> float:
        if value == 0:
            raise ValueError("base_rotation_speed must be non-zero")
        return value

    @model_validator(mode="after")
    def validate_snap_looser_than_mesh(self) -> "EngineTolerances":
        if self.snap_tolerance < self.mesh_tolerance:
            raise ValueError(
                f"snap_tolerance ({self.snap_tolerance}) must be >= "
                f"mesh_tolerance ({self.mesh_tolerance})"
            )
        return self


def load_tolerances(path: Union[str, Path]) -> EngineTolerances:
    """Load tolerances from a YAML file. An empty file gives the defaults."""
    with open(path) as f:
        data = yaml.safe_load(f)
    return EngineTolerances.model_validate(data or {})
