"""Logging helpers for triewalk."""

from .levels import WALK_LEVEL_NUMBER, install_walk_level

__all__ = ["install_walk_level", "WALK_LEVEL_NUMBER"]
