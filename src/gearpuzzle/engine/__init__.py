"""Gear simulation engine: meshing, propagation, snapping and win checks."""

from .geometry import (
    angle_between,
    can_mesh,
    center_from_top_left,
    dimensions_of,
    distance,
    gear_center,
    ideal_mesh_distance,
    overlaps,
    top_left_from_center,
)
from .mesh import build_adjacency, detect_meshes
from .propagation import initialize_start_defaults, mesh_propagate
from .snap import SnapTarget, find_snap_target, snap_position
from .win import check_win, goal_satisfied, spin_of

__all__ = [
    "angle_between",
    "can_mesh",
    "center_from_top_left",
    "dimensions_of",
    "distance",
    "gear_center",
    "ideal_mesh_distance",
    "overlaps",
    "top_left_from_center",
    "build_adjacency",
    "detect_meshes",
    "initialize_start_defaults",
    "mesh_propagate",
    "SnapTarget",
    "find_snap_target",
    "snap_position",
    "check_win",
    "goal_satisfied",
    "spin_of",
]
