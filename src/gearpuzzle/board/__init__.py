"""Board state management for gear puzzles."""

from .animation import advance_angles, locked_jitter
from .session import BoardError, PuzzleSession

__all__ = ["advance_angles", "locked_jitter", "BoardError", "PuzzleSession"]
