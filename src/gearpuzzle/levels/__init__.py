"""Level loading and the built-in level pool."""

from .builtin import builtin_levels, get_daily_level, get_level_by_id
from .loader import dump_level, load_level

__all__ = [
    "builtin_levels",
    "get_daily_level",
    "get_level_by_id",
    "dump_level",
    "load_level",
]
