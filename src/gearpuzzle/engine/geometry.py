"""Geometry helpers for gear placement and meshing.

Gear positions are stored as the top-left corner of the gear's bounding box.
All meshing math operates on centers.
"""

from __future__ import annotations

import math

from ..models.dimensions import GEAR_DIMENSIONS, MESH_TOLERANCE, GearDimension
from ..models.gear import GearInstance, GearSize, Position


def distance(a: Position, b: Position) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def angle_between(origin: Position, target: Position) -> float:
    """Angle in radians of the vector from ``origin`` to ``target``."""
    return math.atan2(target.y - origin.y, target.x - origin.x)


def dimensions_of(size: GearSize) -> GearDimension:
    return GEAR_DIMENSIONS[size]


def center_from_top_left(position: Position, size: GearSize) -> Position:
    r = GEAR_DIMENSIONS[size].outer_radius
    return Position(position.x + r, position.y + r)


def top_left_from_center(center: Position, size: GearSize) -> Position:
    r = GEAR_DIMENSIONS[size].outer_radius
    return Position(center.x - r, center.y - r)


def gear_center(gear: GearInstance) -> Position:
    return center_from_top_left(gear.position, gear.size)


def ideal_mesh_distance(size_a: GearSize, size_b: GearSize) -> float:
    """Center-to-center distance at which two gears' tooth tips touch."""
    return GEAR_DIMENSIONS[size_a].outer_radius + GEAR_DIMENSIONS[size_b].outer_radius


def can_mesh(gear_a: GearInstance, gear_b: GearInstance, tolerance: float = MESH_TOLERANCE) -> bool:
    """Check whether two gears sit at their ideal mesh distance within tolerance."""
    actual = distance(gear_center(gear_a), gear_center(gear_b))
    ideal = ideal_mesh_distance(gear_a.size, gear_b.size)
    return abs(actual - ideal) <= tolerance


def overlaps(
    center_a: Position,
    size_a: GearSize,
    center_b: Position,
    size_b: GearSize,
    tolerance: float = MESH_TOLERANCE,
) -> bool:
    """Check whether two gears would sit closer than a mesh allows."""
    # strict '<' -> a gear at the edge of the mesh band is not overlapping
    min_distance = ideal_mesh_distance(size_a, size_b) - tolerance
    return distance(center_a, center_b) < min_distance
