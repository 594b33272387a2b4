"""Rotation propagation through meshed gears."""

from __future__ import annotations

import logging
import math
from collections import deque
from dataclasses import replace
from typing import Sequence

from ..models.dimensions import BASE_ROTATION_SPEED, GEAR_DIMENSIONS, MESH_TOLERANCE
from ..models.gear import GearInstance, GearRole
from .mesh import build_adjacency

log = logging.getLogger(__name__)


def mesh_propagate(
    gears: Sequence[GearInstance], mesh_tolerance: float = MESH_TOLERANCE
) -> list[GearInstance]:
    """Recompute mesh connections, rotation speeds and lock state.

    Returns a new snapshot; the input gears are not modified. Start gears
    keep their configured speed and act as breadth-first seeds in board
    order. Each meshed neighbor turns the opposite way, scaled by the
    tooth ratio. A non-start gear reached again with the opposite sign is
    locked at speed 0 and stops propagating.

    Raises:
        ValueError: If two gears share an id.
    """
    updated = [
        replace(
            g,
            meshed_with=[],
            rotation_speed=g.rotation_speed if g.is_start else 0.0,
            locked=False,
        )
        for g in gears
    ]
    by_id = {g.id: g for g in updated}
    if len(by_id) != len(updated):
        raise ValueError("Gear ids must be unique within a board")

    for gear_id, neighbors in build_adjacency(updated, mesh_tolerance).items():
        by_id[gear_id].meshed_with = neighbors

    assigned: dict[str, float] = {}
    queue: deque[str] = deque()
    for gear in updated:
        if gear.is_start and gear.rotation_speed != 0:
            assigned[gear.id] = gear.rotation_speed
            queue.append(gear.id)

    while queue:
        current = by_id[queue.popleft()]
        if current.locked:
            continue

        current_teeth = GEAR_DIMENSIONS[current.size].teeth
        for neighbor_id in current.meshed_with:
            neighbor = by_id[neighbor_id]
            # Start gears are motion sources, never driven
            if neighbor.role is GearRole.START:
                continue

            ratio = current_teeth / GEAR_DIMENSIONS[neighbor.size].teeth
            expected = -current.rotation_speed * ratio

            if neighbor_id in assigned:
                existing = assigned[neighbor_id]
                if existing != 0 and math.copysign(1, existing) != math.copysign(1, expected):
                    if not neighbor.locked:
                        log.debug(
                            f"Gear {neighbor_id} locked: {current.id} drives {expected:+.3f}, "
                            f"already turning {existing:+.3f}"
                        )
                    neighbor.locked = True
                    neighbor.rotation_speed = 0.0
                continue

            assigned[neighbor_id] = expected
            neighbor.rotation_speed = expected
            queue.append(neighbor_id)

    return updated


def initialize_start_defaults(
    gears: Sequence[GearInstance], default_speed: float = BASE_ROTATION_SPEED
) -> list[GearInstance]:
    """Give every start gear configured at speed 0 the default speed."""
    return [
        replace(g, rotation_speed=default_speed) if g.is_start and g.rotation_speed == 0 else g
        for g in gears
    ]
