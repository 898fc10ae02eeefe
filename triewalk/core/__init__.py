"""Core package for triewalk.

Provides the immutable trie model, the walk state models and the walker
that traverses the trie.
"""

from .state import (
    READY_DECISION,
    DbOperation,
    DbWrite,
    TrailAction,
    TrailEntry,
    WalkerState,
    WalkStats,
    WalkStatus,
)
from .trie import NodeKind, TrieModel, TrieNode, find_node, sample_trie
from .view import NodeStatus, annotate, node_status
from .walker import (
    COMPLETED_DECISION,
    TrailTracker,
    TrieWalker,
    WalkerStack,
    advance,
    initialize,
    passes_prefilter,
)

__all__ = [
    # Trie model
    "NodeKind",
    "TrieNode",
    "TrieModel",
    "find_node",
    "sample_trie",
    # Walk state
    "WalkerState",
    "WalkStats",
    "WalkStatus",
    "TrailAction",
    "TrailEntry",
    "DbOperation",
    "DbWrite",
    "READY_DECISION",
    "COMPLETED_DECISION",
    # Walker
    "TrieWalker",
    "WalkerStack",
    "TrailTracker",
    "advance",
    "initialize",
    "passes_prefilter",
    # Rendering
    "NodeStatus",
    "annotate",
    "node_status",
]
