"""Stack management for trie walker traversals.

The stack operates directly on the ``WalkerState.stack`` list it wraps so
that the state model never diverges from the helper's view of it. The top
of the stack is the last element.
"""

from __future__ import annotations

from typing import Iterable, List, Optional


class WalkerStack:
    """LIFO view over a walker state's pending node ids."""

    def __init__(self, backing: Optional[List[str]] = None) -> None:
        """Initialize the walker stack.

        Args:
            backing: Optional list to operate on in place
        """
        self._backing: List[str] = backing if backing is not None else []

    def push(self, node_ids: Iterable[str]) -> None:
        """Push ids in the given order; the last id ends up on top."""
        self._backing.extend(node_ids)

    def push_reversed(self, node_ids: Iterable[str]) -> None:
        """Push ids so that they pop in the given order.

        Args:
            node_ids: Ids in the order they should later be visited
        """
        self._backing.extend(reversed(list(node_ids)))

    def pop(self) -> Optional[str]:
        """Pop the top id, or return None when the stack is empty."""
        if not self._backing:
            return None
        return self._backing.pop()

    def __len__(self) -> int:
        return len(self._backing)
