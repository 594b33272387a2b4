"""Cosmetic angle animation, kept apart from the simulation engine."""

from __future__ import annotations

import math
from dataclasses import replace
from typing import Sequence

from ..models.gear import GearInstance

# Locked gears shake back and forth instead of turning
JITTER_FREQUENCY = 0.02
JITTER_AMPLITUDE = 3.0
JITTER_DAMPING = 0.1


def locked_jitter(now_ms: float) -> float:
    """Angle offset (degrees) applied to locked gears at time ``now_ms``."""
    return math.sin(now_ms * JITTER_FREQUENCY) * JITTER_AMPLITUDE * JITTER_DAMPING


def advance_angles(gears: Sequence[GearInstance], now_ms: float) -> list[GearInstance]:
    """Advance every gear's angle by one tick."""
    jitter = locked_jitter(now_ms)
    return [
        replace(g, angle=math.fmod(g.angle + (jitter if g.locked else g.rotation_speed), 360.0))
        for g in gears
    ]
