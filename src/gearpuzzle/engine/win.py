"""Win condition evaluation."""

from __future__ import annotations

from typing import Optional, Sequence

from ..models.gear import GearInstance, RotationDirection


def spin_of(speed: float) -> Optional[RotationDirection]:
    """Direction a signed speed turns, or None when stopped."""
    if speed > 0:
        return RotationDirection.CW
    if speed < 0:
        return RotationDirection.CCW
    return None


def goal_satisfied(gear: GearInstance) -> bool:
    """Check a single goal gear against its required direction."""
    if gear.rotation_speed == 0:
        return False

    required = gear.required_direction
    if required is None or required is RotationDirection.ANY:
        return True
    return spin_of(gear.rotation_speed) is required


def check_win(gears: Sequence[GearInstance]) -> bool:
    """True when at least one goal gear exists and every goal is satisfied."""
    goals = [g for g in gears if g.is_goal]
    if not goals:
        return False
    return all(goal_satisfied(g) for g in goals)
