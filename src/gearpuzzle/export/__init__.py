"""Export of board state."""

from .report import build_report, gear_entry, write_report

__all__ = ["build_report", "gear_entry", "write_report"]
