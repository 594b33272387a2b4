"""Pydantic models for level definition parsing and validation."""

from __future__ import annotations

from collections import Counter
from datetime import datetime, timezone
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from .dimensions import MAX_GOAL_GEARS, MAX_START_GEARS
from .gear import GearInstance, GearRole, GearSize, Position, RotationDirection


class _LevelModel(BaseModel):
    """Level files use camelCase keys; snake_case is accepted on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PositionSpec(_LevelModel):
    """Top-left corner of a gear on the board."""

    x: float
    y: float


class FixedGearDef(_LevelModel):
    """A start or goal gear fixed on the board by the level author."""

    id: str = Field(min_length=1, description="Gear identifier, unique within the level")
    role: GearRole
    size: GearSize
    position: PositionSpec
    rotation_speed: float = Field(default=0.0, description="Signed speed for start gears (deg/tick)")
    required_direction: Optional[RotationDirection] = Field(
        default=None, description="Spin a goal gear needs to be satisfied"
    )

    @model_validator(mode="after")
    def validate_role(self) -> "FixedGearDef":
        if self.role is GearRole.POSITIONAL:
            raise ValueError(f"Fixed gear '{self.id}' must be a start or goal gear")
        if self.required_direction is not None and self.role is not GearRole.GOAL:
            raise ValueError(f"requiredDirection is only allowed on goal gears (gear '{self.id}')")
        return self

    def to_gear(self) -> GearInstance:
        """Create the board gear for this definition."""
        return GearInstance(
            id=self.id,
            role=self.role,
            size=self.size,
            position=Position(self.position.x, self.position.y),
            rotation_speed=self.rotation_speed if self.role is GearRole.START else 0.0,
            required_direction=self.required_direction,
        )


class InventoryItemDef(_LevelModel):
    """A gear handed to the player to place."""

    id: str = Field(min_length=1)
    size: GearSize


class LevelDefinition(_LevelModel):
    """Top-level level definition."""

    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    description: Optional[str] = None
    created_at: str = Field(description="ISO date the level was created")
    fixed_gears: list[FixedGearDef]
    inventory: list[InventoryItemDef] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "LevelDefinition":
        ids = [g.id for g in self.fixed_gears] + [item.id for item in self.inventory]
        duplicates = sorted(i for i, n in Counter(ids).items() if n > 1)
        if duplicates:
            raise ValueError(f"Duplicate gear ids: {', '.join(duplicates)}")
        return self

    @model_validator(mode="after")
    def validate_gear_counts(self) -> "LevelDefinition":
        starts = len(self.start_gears)
        goals = len(self.goal_gears)
        if starts == 0:
            raise ValueError("Level requires at least one start gear")
        if goals == 0:
            raise ValueError("Level requires at least one goal gear")
        if starts > MAX_START_GEARS:
            raise ValueError(f"Level has {starts} start gears, maximum is {MAX_START_GEARS}")
        if goals > MAX_GOAL_GEARS:
            raise ValueError(f"Level has {goals} goal gears, maximum is {MAX_GOAL_GEARS}")
        return self

    @property
    def start_gears(self) -> list[FixedGearDef]:
        return [g for g in self.fixed_gears if g.role is GearRole.START]

    @property
    def goal_gears(self) -> list[FixedGearDef]:
        return [g for g in self.fixed_gears if g.role is GearRole.GOAL]

    def to_gears(self) -> list[GearInstance]:
        """Build the initial board gears (fixed gears only, not yet propagated)."""
        return [g.to_gear() for g in self.fixed_gears]

    def to_data(self) -> dict:
        """Serialize to the camelCase level format."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def from_board(
        cls,
        level_id: str,
        name: str,
        gears: Iterable[GearInstance],
        inventory: Iterable[InventoryItemDef],
        description: Optional[str] = None,
        created_at: Optional[str] = None,
    ) -> "LevelDefinition":
        """Build a level from an editor board. Positional gears are not saved."""
        fixed = [
            FixedGearDef(
                id=g.id,
                role=g.role,
                size=g.size,
                position=PositionSpec(x=g.position.x, y=g.position.y),
                rotation_speed=g.rotation_speed if g.is_start else 0.0,
                required_direction=g.required_direction if g.is_goal else None,
            )
            for g in gears
            if g.role is not GearRole.POSITIONAL
        ]
        return cls(
            id=level_id,
            name=name,
            description=description,
            created_at=created_at or datetime.now(timezone.utc).isoformat(),
            fixed_gears=fixed,
            inventory=list(inventory),
        )
