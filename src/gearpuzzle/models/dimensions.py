"""Static gear dimension table and engine constants."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from .gear import GearSize


@dataclass(frozen=True)
class GearDimension:
    """Dimensions of one gear size, in board pixels.

    outer_radius = base_radius + tooth_depth. Two gears mesh when their
    centers sit outer_radius_a + outer_radius_b apart.
    """

    outer_radius: float
    base_radius: float
    teeth: int
    tooth_depth: float
    tooth_width: float  # Width of each tooth at the tip


GEAR_DIMENSIONS: Mapping[GearSize, GearDimension] = MappingProxyType({
    GearSize.SMALL: GearDimension(
        outer_radius=45, base_radius=35, teeth=8, tooth_depth=10, tooth_width=14,
    ),
    GearSize.MEDIUM: GearDimension(
        outer_radius=70, base_radius=55, teeth=12, tooth_depth=15, tooth_width=16,
    ),
    GearSize.LARGE: GearDimension(
        outer_radius=95, base_radius=75, teeth=16, tooth_depth=20, tooth_width=18,
    ),
    GearSize.EXTRA_LARGE: GearDimension(
        outer_radius=125, base_radius=100, teeth=22, tooth_depth=25, tooth_width=20,
    ),
})

# Rotation speed in degrees per animation tick given to start gears created at 0
BASE_ROTATION_SPEED = 0.8

# How close (px) a dragged gear must be to a mesh point to snap
SNAP_TOLERANCE = 40.0

# How close (px) two gears must be to their ideal mesh distance to engage
MESH_TOLERANCE = 8.0

BOARD_WIDTH = 1200
BOARD_HEIGHT = 800

MAX_START_GEARS = 5
MAX_GOAL_GEARS = 2
