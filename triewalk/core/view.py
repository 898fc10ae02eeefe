"""Per-node status mapping consumed by renderers."""

from enum import Enum
from typing import Dict

from .state import WalkerState
from .trie import TrieModel


class NodeStatus(str, Enum):
    """How a renderer should present a node."""

    CURRENT = "current"
    SKIPPED = "skipped"
    VISITED = "visited"
    QUEUED = "queued"
    PENDING = "pending"


def node_status(node_id: str, state: WalkerState) -> NodeStatus:
    """Classify one node against the walk state.

    Precedence: current, skipped, visited, queued, pending.
    """
    if node_id == state.current:
        return NodeStatus.CURRENT
    if node_id in state.skipped:
        return NodeStatus.SKIPPED
    if node_id in state.visited:
        return NodeStatus.VISITED
    if node_id in state.stack:
        return NodeStatus.QUEUED
    return NodeStatus.PENDING


def annotate(model: TrieModel, state: WalkerState) -> Dict[str, NodeStatus]:
    """Map every node id of ``model`` to its status in ``state``."""
    return {node.id: node_status(node.id, state) for node in model.iter_nodes()}
