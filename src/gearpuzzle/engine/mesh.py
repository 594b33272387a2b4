"""Mesh detection between placed gears."""

from __future__ import annotations

import logging
from typing import Sequence

from ..models.dimensions import MESH_TOLERANCE
from ..models.gear import GearInstance
from .geometry import can_mesh

log = logging.getLogger(__name__)


def detect_meshes(
    gears: Sequence[GearInstance], tolerance: float = MESH_TOLERANCE
) -> list[tuple[str, str]]:
    """Find every engaged pair of gears.

    Pairs are returned in board order: ``(gears[i].id, gears[j].id)`` with
    ``i < j``, walking ``i`` then ``j`` ascending.
    """
    pairs: list[tuple[str, str]] = []
    for i, gear_a in enumerate(gears):
        for gear_b in gears[i + 1:]:
            if can_mesh(gear_a, gear_b, tolerance):
                pairs.append((gear_a.id, gear_b.id))

    log.debug(f"Detected {len(pairs)} meshed pairs among {len(gears)} gears")
    return pairs


def build_adjacency(
    gears: Sequence[GearInstance], tolerance: float = MESH_TOLERANCE
) -> dict[str, list[str]]:
    """Symmetric adjacency lists keyed by gear id, every gear present."""
    adjacency: dict[str, list[str]] = {g.id: [] for g in gears}
    for a, b in detect_meshes(gears, tolerance):
        adjacency[a].append(b)
        adjacency[b].append(a)
    return adjacency
