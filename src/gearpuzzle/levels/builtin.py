"""Built-in level pool and daily level selection."""

from __future__ import annotations

from datetime import date
from functools import lru_cache
from importlib import resources
from typing import Iterable, Optional

import yaml

from ..models.level import LevelDefinition


@lru_cache(maxsize=1)
def _load_builtin() -> tuple[LevelDefinition, ...]:
    text = resources.files("gearpuzzle.levels").joinpath("builtin_levels.yaml").read_text()
    return tuple(LevelDefinition.model_validate(entry) for entry in yaml.safe_load(text))


def builtin_levels() -> list[LevelDefinition]:
    """All built-in levels, in pool order."""
    return list(_load_builtin())


def get_daily_level(day: Optional[date] = None) -> LevelDefinition:
    """Level of the day: the pool is cycled by day of year (1 = January 1st)."""
    day = day or date.today()
    levels = _load_builtin()
    return levels[day.timetuple().tm_yday % len(levels)]


def get_level_by_id(
    level_id: str, custom_levels: Iterable[LevelDefinition] = ()
) -> Optional[LevelDefinition]:
    """Find a level by id, built-in levels first."""
    for level in (*_load_builtin(), *custom_levels):
        if level.id == level_id:
            return level
    return None
