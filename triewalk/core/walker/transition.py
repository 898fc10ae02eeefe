"""Single-step transitions of the trie walker.

``advance`` is the whole traversal algorithm: it takes a state, the trie and
the current target path and returns the next state without touching its
inputs. Nodes are popped from an explicit stack and dispatched on their kind:

* hash nodes are never expanded and count as skipped cache hits
* leaf nodes count as a storage read
* extension nodes push their children as given
* branch nodes count as a storage read and push their children reversed,
  so they pop left to right, leaving out hash children that the target
  path cannot lead into

Nodes that storage does not hold yet (``in_database=False``) are written
instead of read: leaves and extensions as an insert, branches as an update.
"""

import logging
from typing import Callable, Dict, List

import triewalk.logging  # noqa: F401  adds Logger.walk

from ..state import DbOperation, DbWrite, TrailAction, WalkerState
from ..trie import NodeKind, TrieModel, TrieNode
from .stack import WalkerStack
from .trail_tracker import TrailTracker

logger = logging.getLogger(__name__)

COMPLETED_DECISION = "Traversal complete: all nodes processed"


def passes_prefilter(child: TrieNode, target_path: str) -> bool:
    """Check whether a branch child should be queued at all.

    Only hash children are filtered: they are queued when the target path
    starts with their path prefix.
    """
    if child.kind is not NodeKind.HASH:
        return True
    return target_path.startswith(child.path)


def initialize(state: WalkerState, model: TrieModel) -> WalkerState:
    """Seed a fresh walk with the root node.

    A state that has already started is returned unchanged.
    """
    new_state = state.snapshot()
    if new_state.started:
        logger.debug("Walk already initialized; ignoring initialize()")
        return new_state

    root_id = model.root.id
    new_state.stack.append(root_id)
    new_state.current = root_id
    new_state.decision = f"Starting from root node {root_id}"
    logger.walk(new_state.decision)
    return new_state


def advance(state: WalkerState, model: TrieModel, target_path: str) -> WalkerState:
    """Compute the state after one walker step.

    Args:
        state: State before the step (left untouched)
        model: Trie being walked
        target_path: Nibble path used by the hash pre-filter

    Returns:
        The state after the step
    """
    if not state.started:
        return initialize(state, model)

    new_state = state.snapshot()
    if new_state.completed:
        return new_state

    stack = WalkerStack(new_state.stack)
    node_id = stack.pop()
    if node_id is None:
        new_state.completed = True
        new_state.current = None
        new_state.decision = COMPLETED_DECISION
        logger.info(
            f"Walk completed: {new_state.stats.nodes_visited} visited, "
            f"{new_state.stats.nodes_skipped} skipped"
        )
        return new_state

    new_state.current = node_id
    new_state.visited.add(node_id)
    new_state.stats.nodes_visited += 1
    trail = TrailTracker(new_state.trail)

    node = model.lookup(node_id)
    if node is None:
        new_state.decision = (
            f"Node {node_id} no longer resolves in the trie; nothing to expand"
        )
        logger.warning(f"Stale node reference '{node_id}' popped from walker stack")
        trail.record_step(node_id, TrailAction.STALE, stack_depth=len(stack))
        return new_state

    action = _HANDLERS[node.kind](new_state, stack, node, target_path)
    trail.record_step(node_id, action, kind=node.kind, stack_depth=len(stack))
    logger.walk(new_state.decision)
    return new_state


def _record_write(
    state: WalkerState, node: TrieNode, operation: DbOperation, data: str
) -> None:
    state.writes.append(DbWrite(node_id=node.id, operation=operation, data=data))
    state.stats.db_writes += 1


def _visit_hash(
    state: WalkerState, stack: WalkerStack, node: TrieNode, target_path: str
) -> TrailAction:
    state.skipped.add(node.id)
    state.stats.nodes_skipped += 1
    state.stats.cache_hits += 1
    state.decision = f"Skipping hash node {node.path}: subtree already processed"
    return TrailAction.SKIP


def _visit_leaf(
    state: WalkerState, stack: WalkerStack, node: TrieNode, target_path: str
) -> TrailAction:
    state.decision = f"Processing leaf {node.path} with value {node.value}"
    if node.in_database:
        state.stats.db_reads += 1
        return TrailAction.READ

    _record_write(
        state, node, DbOperation.INSERT, f"Leaf({node.path}) -> {node.value}"
    )
    state.decision += ", inserted into storage"
    return TrailAction.WRITE


def _visit_extension(
    state: WalkerState, stack: WalkerStack, node: TrieNode, target_path: str
) -> TrailAction:
    stack.push(child.id for child in node.children or ())
    state.decision = f"Following extension path {node.path}"
    if not node.in_database:
        _record_write(state, node, DbOperation.INSERT, f"Extension({node.path})")
        state.decision += ", inserted into storage"
    return TrailAction.EXPAND


def _visit_branch(
    state: WalkerState, stack: WalkerStack, node: TrieNode, target_path: str
) -> TrailAction:
    children = node.children or ()
    if node.in_database:
        state.stats.db_reads += 1
    else:
        _record_write(
            state,
            node,
            DbOperation.UPDATE,
            f"Branch({node.path}) with {len(children)} children",
        )

    queued: List[str] = [
        child.id for child in children if passes_prefilter(child, target_path)
    ]
    stack.push_reversed(queued)

    pruned = len(children) - len(queued)
    decision = f"Exploring branch {node.path or 'root'}: queued {len(queued)} children"
    if pruned:
        decision += f", pruned {pruned} hash subtree(s) outside target {target_path!r}"
    if not node.in_database:
        decision += ", storage updated"
    state.decision = decision
    return TrailAction.EXPAND


_HANDLERS: Dict[
    NodeKind, Callable[[WalkerState, WalkerStack, TrieNode, str], TrailAction]
] = {
    NodeKind.HASH: _visit_hash,
    NodeKind.LEAF: _visit_leaf,
    NodeKind.EXTENSION: _visit_extension,
    NodeKind.BRANCH: _visit_branch,
}
