"""Trail tracking for trie walker traversals.

Records every popped node together with what the walker decided to do
with it, in processing order.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from triewalk.core.state import TrailAction, TrailEntry
from triewalk.core.trie import NodeKind


class TrailTracker:
    """Tracks popped nodes and the action taken for each."""

    def __init__(self, backing: Optional[List[TrailEntry]] = None) -> None:
        """Initialize the trail tracker.

        Args:
            backing: Optional list of entries to append to in place
        """
        self._trail: List[TrailEntry] = backing if backing is not None else []

    def record_step(
        self,
        node_id: str,
        action: TrailAction,
        kind: Optional[NodeKind] = None,
        stack_depth: int = 0,
    ) -> TrailEntry:
        """Record a popped node.

        Args:
            node_id: ID of the popped node
            action: What the walker did with it
            kind: Node kind, None when the id did not resolve
            stack_depth: Stack length after the node was processed

        Returns:
            The recorded entry
        """
        entry = TrailEntry(
            step=len(self._trail) + 1,
            node_id=node_id,
            kind=kind,
            action=action,
            stack_depth=stack_depth,
        )
        self._trail.append(entry)
        return entry

    def get_trail(self) -> List[TrailEntry]:
        """Get a copy of the complete trail."""
        return list(self._trail)

    def get_recent(self, count: int = 5) -> List[str]:
        """Get the most recently popped node ids."""
        if count <= 0:
            return []
        return [entry.node_id for entry in self._trail[-count:]]

    def get_length(self) -> int:
        """Get trail length."""
        return len(self._trail)

    def summary(self) -> Dict[str, int]:
        """Count trail entries per action."""
        counts = {action.value: 0 for action in TrailAction}
        for entry in self._trail:
            counts[entry.action.value] += 1
        return counts
