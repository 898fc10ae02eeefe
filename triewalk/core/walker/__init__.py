"""Traversal engine: stack, trail, transitions and the auto-running walker."""

from .engine import TrieWalker
from .stack import WalkerStack
from .trail_tracker import TrailTracker
from .transition import COMPLETED_DECISION, advance, initialize, passes_prefilter

__all__ = [
    "TrieWalker",
    "WalkerStack",
    "TrailTracker",
    "advance",
    "initialize",
    "passes_prefilter",
    "COMPLETED_DECISION",
]
