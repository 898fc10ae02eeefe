"""Exception hierarchy for triewalk.

All library errors derive from :class:`TrieWalkerError`. These are raised
while building trees or loading configuration; a running walk absorbs its
anomalies into the decision narrative instead of raising.
"""

from typing import Any, Dict, Optional


class TrieWalkerError(Exception):
    """Base exception for all triewalk errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize the error.

        Args:
            message: Human-readable error message
            details: Additional context about the error
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (details: {self.details})"
        return self.message


class InvalidTrieError(TrieWalkerError):
    """Raised when a trie cannot be constructed from the given nodes."""

    pass


class NodeNotFoundError(TrieWalkerError):
    """Raised by strict lookups when a node id is not part of the trie."""

    def __init__(self, node_id: str):
        self.node_id = node_id
        super().__init__(f"Node '{node_id}' not found in trie", {"node_id": node_id})


class WalkerConfigError(TrieWalkerError):
    """Raised when walker configuration cannot be loaded."""

    pass


__all__ = [
    "TrieWalkerError",
    "InvalidTrieError",
    "NodeNotFoundError",
    "WalkerConfigError",
]
