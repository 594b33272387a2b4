"""Gear puzzle engine - connect start gears to goal gears."""

__version__ = "0.1.0"
