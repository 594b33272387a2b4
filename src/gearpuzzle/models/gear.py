"""Board gear model used by the simulation engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class GearSize(str, Enum):
    """Available gear sizes."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    EXTRA_LARGE = "extraLarge"


class GearRole(str, Enum):
    """What a gear does on the board."""

    START = "start"  # Motion source
    POSITIONAL = "positional"  # Passive relay placed by the player
    GOAL = "goal"  # Win target


class RotationDirection(str, Enum):
    """Spin direction required by a goal gear."""

    CW = "cw"
    CCW = "ccw"
    ANY = "any"


@dataclass(frozen=True)
class Position:
    """A point on the board in pixels."""

    x: float
    y: float


@dataclass
class GearInstance:
    """A gear placed on the board.

    ``position`` is the top-left corner of the gear's bounding box; the
    engine works on centers (see ``gearpuzzle.engine.geometry.gear_center``).
    ``rotation_speed`` is in degrees per tick, positive = clockwise.
    ``meshed_with`` and ``locked`` are rebuilt on every propagation pass.
    """

    id: str
    role: GearRole
    size: GearSize
    position: Position
    angle: float = 0.0
    rotation_speed: float = 0.0
    meshed_with: list[str] = field(default_factory=list)
    required_direction: Optional[RotationDirection] = None
    locked: bool = False

    @property
    def is_start(self) -> bool:
        return self.role is GearRole.START

    @property
    def is_goal(self) -> bool:
        return self.role is GearRole.GOAL
