"""
triewalk - Trie walker simulation engine.

triewalk simulates how an Ethereum execution client walks a Merkle Patricia
Trie: a stack-based depth-first traversal that skips pre-hashed subtrees the
current lookup cannot reach. It computes no hashes and stores nothing; it
exists to demonstrate traversal decisions step by step.

Main Exports:
    Trie model:
        - TrieNode: Immutable branch / extension / leaf / hash node
        - TrieModel: Read-only tree with lookup by id
        - sample_trie: Demonstration tree

    Walker:
        - TrieWalker: Step-wise and auto-running walker
        - WalkerState: Snapshot of a walk
        - advance: Pure single-step transition

    Configuration:
        - WalkerConfig: Step interval and target path

Example:
    >>> from triewalk import TrieWalker, sample_trie
    >>>
    >>> walker = TrieWalker(sample_trie(), target_path="a7f3")
    >>> walker.step()  # seeds the root
    >>> walker.step()  # expands the root branch
"""

__version__ = "0.1.0"

from . import exceptions
from .config import WalkerConfig
from .core import (
    COMPLETED_DECISION,
    READY_DECISION,
    DbOperation,
    DbWrite,
    NodeKind,
    NodeStatus,
    TrailAction,
    TrailEntry,
    TrailTracker,
    TrieModel,
    TrieNode,
    TrieWalker,
    WalkerStack,
    WalkerState,
    WalkStats,
    WalkStatus,
    advance,
    annotate,
    find_node,
    initialize,
    node_status,
    passes_prefilter,
    sample_trie,
)
from .exceptions import (
    InvalidTrieError,
    NodeNotFoundError,
    TrieWalkerError,
    WalkerConfigError,
)

__all__ = [
    "__version__",
    "exceptions",
    "WalkerConfig",
    "NodeKind",
    "TrieNode",
    "TrieModel",
    "find_node",
    "sample_trie",
    "WalkerState",
    "WalkStats",
    "WalkStatus",
    "TrailAction",
    "TrailEntry",
    "DbOperation",
    "DbWrite",
    "READY_DECISION",
    "COMPLETED_DECISION",
    "TrieWalker",
    "WalkerStack",
    "TrailTracker",
    "advance",
    "initialize",
    "passes_prefilter",
    "NodeStatus",
    "annotate",
    "node_status",
    "TrieWalkerError",
    "InvalidTrieError",
    "NodeNotFoundError",
    "WalkerConfigError",
]
