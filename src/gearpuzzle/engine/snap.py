"""Snap placement for gears being dragged across the board."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Optional, Sequence

from ..models.dimensions import MESH_TOLERANCE, SNAP_TOLERANCE
from ..models.gear import GearInstance, GearSize, Position
from .geometry import angle_between, distance, gear_center, ideal_mesh_distance, overlaps

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SnapTarget:
    """Center a dragged gear should take to mesh exactly with ``anchor_id``."""

    position: Position
    anchor_id: str


def snap_position(anchor: GearInstance, candidate_center: Position, candidate_size: GearSize) -> Position:
    """Project the candidate onto the anchor's mesh circle, keeping its bearing."""
    anchor_center = gear_center(anchor)
    angle = angle_between(anchor_center, candidate_center)
    reach = ideal_mesh_distance(anchor.size, candidate_size)
    return Position(
        anchor_center.x + math.cos(angle) * reach,
        anchor_center.y + math.sin(angle) * reach,
    )


def find_snap_target(
    candidate_center: Position,
    candidate_size: GearSize,
    candidate_id: str,
    gears: Sequence[GearInstance],
    snap_tolerance: float = SNAP_TOLERANCE,
    mesh_tolerance: float = MESH_TOLERANCE,
) -> Optional[SnapTarget]:
    """Find the best anchor for a dragged gear.

    Args:
        candidate_center: Current center of the dragged gear
        candidate_size: Size of the dragged gear
        candidate_id: Id of the dragged gear, excluded from the search
        gears: Gears on the board
        snap_tolerance: Max distance from the ideal mesh distance to snap
        mesh_tolerance: Overlap slack allowed against third gears

    Returns:
        The snap target whose anchor is closest to a perfect mesh and whose
        snap point overlaps no other gear, or None. Ties keep the first
        anchor in board order.
    """
    best: Optional[SnapTarget] = None
    best_diff = math.inf

    for anchor in gears:
        if anchor.id == candidate_id:
            continue

        ideal = ideal_mesh_distance(anchor.size, candidate_size)
        diff = abs(distance(gear_center(anchor), candidate_center) - ideal)
        if diff >= snap_tolerance or diff >= best_diff:
            continue

        snapped = snap_position(anchor, candidate_center, candidate_size)
        blocked = any(
            overlaps(snapped, candidate_size, gear_center(other), other.size, mesh_tolerance)
            for other in gears
            if other.id not in (anchor.id, candidate_id)
        )
        if blocked:
            continue

        best = SnapTarget(position=snapped, anchor_id=anchor.id)
        best_diff = diff

    if best is not None:
        log.debug(f"Snap {candidate_id} to {best.anchor_id} at ({best.position.x:.1f}, {best.position.y:.1f})")
    return best
