"""Puzzle session - applies player moves to a board and keeps it propagated."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..engine import (
    SnapTarget,
    check_win,
    find_snap_target,
    initialize_start_defaults,
    mesh_propagate,
    top_left_from_center,
)
from ..models.config import EngineTolerances
from ..models.gear import GearInstance, GearRole, GearSize, Position
from ..models.level import InventoryItemDef, LevelDefinition
from .animation import advance_angles

log = logging.getLogger(__name__)


class BoardError(ValueError):
    """Raised when a move is not allowed on the current board."""


class PuzzleSession:
    """Holds the authoritative board snapshot for one play-through of a level.

    Every structural change (place, move, remove) replaces the snapshot with
    a fresh propagation result. Only positional gears can be moved or removed.
    """

    def __init__(self, level: LevelDefinition, tolerances: Optional[EngineTolerances] = None):
        self.level = level
        self.tolerances = tolerances or EngineTolerances()
        self._inventory: list[InventoryItemDef] = list(level.inventory)
        self._gears: list[GearInstance] = []
        self._won = False
        self._ticks = 0

        start = initialize_start_defaults(level.to_gears(), self.tolerances.base_rotation_speed)
        self._recompute(start)
        log.info(f"Started level {level.id} ({level.name}) with {len(self._inventory)} inventory gears")

    @property
    def gears(self) -> list[GearInstance]:
        return list(self._gears)

    @property
    def inventory(self) -> list[InventoryItemDef]:
        return list(self._inventory)

    @property
    def won(self) -> bool:
        return self._won

    @property
    def ticks(self) -> int:
        return self._ticks

    def get_gear(self, gear_id: str) -> GearInstance:
        for gear in self._gears:
            if gear.id == gear_id:
                return gear
        raise BoardError(f"No gear '{gear_id}' on the board")

    def preview_snap(
        self, size: GearSize, center: Position, exclude_id: str = ""
    ) -> Optional[SnapTarget]:
        """Snap target for a gear being dragged, without changing the board."""
        return find_snap_target(
            center,
            size,
            exclude_id,
            self._gears,
            self.tolerances.snap_tolerance,
            self.tolerances.mesh_tolerance,
        )

    def place_from_inventory(self, item_id: str, center: Position, snap: bool = True) -> GearInstance:
        """Drop an inventory gear with its center at ``center``.

        Returns:
            The placed gear as it sits in the new snapshot
        """
        item = next((i for i in self._inventory if i.id == item_id), None)
        if item is None:
            raise BoardError(f"No inventory item '{item_id}'")

        gear = self._drop(item.id, item.size, center, snap, self._gears)
        self._inventory.remove(item)
        return gear

    def move_gear(self, gear_id: str, center: Position, snap: bool = True) -> GearInstance:
        """Pick up a positional gear and drop it at ``center``, keeping its id."""
        gear = self._positional(gear_id)
        remaining = [g for g in self._gears if g.id != gear_id]
        return self._drop(gear.id, gear.size, center, snap, remaining)

    def remove_gear(self, gear_id: str) -> InventoryItemDef:
        """Take a positional gear off the board and return it to the inventory."""
        gear = self._positional(gear_id)
        self._recompute([g for g in self._gears if g.id != gear_id])
        item = InventoryItemDef(id=gear.id, size=gear.size)
        self._inventory.append(item)
        log.debug(f"Removed {gear_id} back to inventory")
        return item

    def tick(self, now_ms: float) -> bool:
        """Advance the animation by one tick and check the win condition."""
        self._gears = advance_angles(self._gears, now_ms)
        self._ticks += 1
        if not self._won and check_win(self._gears):
            self._won = True
            log.info(f"Level {self.level.id} solved after {self._ticks} ticks")
        return self._won

    def _positional(self, gear_id: str) -> GearInstance:
        gear = self.get_gear(gear_id)
        if gear.role is not GearRole.POSITIONAL:
            raise BoardError(f"Gear '{gear_id}' is a {gear.role.value} gear and cannot be moved")
        return gear

    def _drop(
        self,
        gear_id: str,
        size: GearSize,
        center: Position,
        snap: bool,
        board: Sequence[GearInstance],
    ) -> GearInstance:
        if snap:
            target = find_snap_target(
                center,
                size,
                gear_id,
                board,
                self.tolerances.snap_tolerance,
                self.tolerances.mesh_tolerance,
            )
            if target is not None:
                center = target.position

        gear = GearInstance(
            id=gear_id,
            role=GearRole.POSITIONAL,
            size=size,
            position=top_left_from_center(center, size),
        )
        self._recompute([*board, gear])
        placed = self.get_gear(gear_id)
        log.debug(f"Placed {gear_id} meshed with {placed.meshed_with or 'nothing'}")
        return placed

    def _recompute(self, gears: Sequence[GearInstance]) -> None:
        self._gears = mesh_propagate(gears, self.tolerances.mesh_tolerance)
