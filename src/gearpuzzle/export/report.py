"""Board report export to JSON."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Sequence, Union

from ..engine import check_win, gear_center, goal_satisfied, spin_of
from ..models.gear import GearInstance, GearRole


def gear_entry(gear: GearInstance) -> dict[str, Any]:
    """Report entry for one gear."""
    center = gear_center(gear)
    spin = spin_of(gear.rotation_speed)
    entry: dict[str, Any] = {
        "id": gear.id,
        "role": gear.role.value,
        "size": gear.size.value,
        "center": {"x": round(center.x, 3), "y": round(center.y, 3)},
        "rotation_speed": round(gear.rotation_speed, 6),
        "spin": spin.value if spin else "stopped",
        "locked": gear.locked,
        "meshed_with": list(gear.meshed_with),
    }
    if gear.is_goal:
        direction = gear.required_direction
        entry["required_direction"] = direction.value if direction else "any"
        entry["satisfied"] = goal_satisfied(gear)
    return entry


def build_report(gears: Sequence[GearInstance]) -> dict[str, Any]:
    """Summarize a propagated board."""
    return {
        "gears": [gear_entry(g) for g in gears],
        "summary": {
            "total": len(gears),
            "start": sum(1 for g in gears if g.role is GearRole.START),
            "goal": sum(1 for g in gears if g.role is GearRole.GOAL),
            "positional": sum(1 for g in gears if g.role is GearRole.POSITIONAL),
            "turning": sum(1 for g in gears if g.rotation_speed != 0),
            "locked": sum(1 for g in gears if g.locked),
            "meshes": sum(len(g.meshed_with) for g in gears) // 2,
        },
        "won": check_win(gears),
    }


def write_report(gears: Sequence[GearInstance], path: Union[str, Path]) -> Path:
    """Write the board report as JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(build_report(gears), f, indent=2)
    return path
