"""Data models for the gear puzzle engine."""

from .gear import GearInstance, GearRole, GearSize, Position, RotationDirection
from .dimensions import GEAR_DIMENSIONS, GearDimension
from .level import FixedGearDef, InventoryItemDef, LevelDefinition, PositionSpec
from .config import EngineTolerances, load_tolerances

__all__ = [
    "GearInstance",
    "GearRole",
    "GearSize",
    "Position",
    "RotationDirection",
    "GEAR_DIMENSIONS",
    "GearDimension",
    "FixedGearDef",
    "InventoryItemDef",
    "LevelDefinition",
    "PositionSpec",
    "EngineTolerances",
    "load_tolerances",
]
