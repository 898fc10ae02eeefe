"""Traversal state models for the trie walker."""

from enum import Enum
from typing import List, Optional, Set

from pydantic import BaseModel, Field

from .trie import NodeKind

READY_DECISION = "Ready to start trie traversal"


class WalkStatus(str, Enum):
    """Lifecycle of a walk session."""

    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    COMPLETED = "completed"


class TrailAction(str, Enum):
    """What the walker did with a popped node."""

    SKIP = "skip"
    READ = "read"
    WRITE = "write"
    EXPAND = "expand"
    STALE = "stale"


class TrailEntry(BaseModel):
    """One popped node in the order it was processed."""

    step: int
    node_id: str
    kind: Optional[NodeKind] = None
    action: TrailAction
    stack_depth: int = 0


class DbOperation(str, Enum):
    """Storage operations recorded for nodes that are not stored yet."""

    INSERT = "INSERT"
    UPDATE = "UPDATE"


class DbWrite(BaseModel):
    """One simulated storage write."""

    node_id: str
    operation: DbOperation
    data: str


class WalkStats(BaseModel):
    """Counters accumulated over a walk."""

    nodes_visited: int = 0
    nodes_skipped: int = 0
    db_reads: int = 0
    db_writes: int = 0
    cache_hits: int = 0

    @property
    def efficiency(self) -> int:
        """Percentage of visited nodes that were skipped."""
        if self.nodes_visited == 0:
            return 0
        return round(self.nodes_skipped * 100 / self.nodes_visited)


class WalkerState(BaseModel):
    """Mutable traversal state of a single walk.

    Attributes:
        stack: Node ids awaiting visitation, top of stack last
        visited: Ids of every popped node
        skipped: Ids of popped nodes classified as skip / cache hit
        current: Id of the last popped node, None before start and after completion
        decision: Explanation of the most recent transition
        stats: Walk counters
        trail: Popped nodes in processing order
        writes: Storage writes in the order they were made
        completed: Whether a step has reported completion
    """

    stack: List[str] = Field(default_factory=list)
    visited: Set[str] = Field(default_factory=set)
    skipped: Set[str] = Field(default_factory=set)
    current: Optional[str] = None
    decision: str = READY_DECISION
    stats: WalkStats = Field(default_factory=WalkStats)
    trail: List[TrailEntry] = Field(default_factory=list)
    writes: List[DbWrite] = Field(default_factory=list)
    completed: bool = False

    @property
    def started(self) -> bool:
        """Whether the walk has been initialized."""
        return bool(self.stack) or self.current is not None or self.completed

    def snapshot(self) -> "WalkerState":
        """Return a deep copy detached from this state."""
        return self.model_copy(deep=True)
