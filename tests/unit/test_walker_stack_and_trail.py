"""Unit tests for the walker stack and trail helpers."""

from triewalk.core.state import TrailAction, WalkerState, WalkStats
from triewalk.core.trie import NodeKind
from triewalk.core.walker.stack import WalkerStack
from triewalk.core.walker.trail_tracker import TrailTracker


class TestWalkerStack:
    """Test LIFO operations on a backing list."""

    def test_operates_on_backing_list(self) -> None:
        """Test that the stack mutates the list it wraps."""
        state = WalkerState()
        stack = WalkerStack(state.stack)

        stack.push(["a", "b"])

        assert state.stack == ["a", "b"]
        assert stack.pop() == "b"
        assert state.stack == ["a"]

    def test_push_reversed_pops_in_given_order(self) -> None:
        """Test that reversed pushes restore ascending visitation order."""
        stack = WalkerStack()
        stack.push_reversed(["c0", "c1", "c2"])

        assert [stack.pop(), stack.pop(), stack.pop()] == ["c0", "c1", "c2"]

    def test_pop_empty(self) -> None:
        """Test that popping an empty stack returns None."""
        stack = WalkerStack()

        assert stack.pop() is None
        assert len(stack) == 0


class TestTrailTracker:
    """Test trail recording."""

    def test_record_numbers_steps(self) -> None:
        """Test that entries are numbered in recording order."""
        tracker = TrailTracker()
        tracker.record_step("root", TrailAction.EXPAND, kind=NodeKind.BRANCH, stack_depth=2)
        entry = tracker.record_step("n1", TrailAction.EXPAND, kind=NodeKind.EXTENSION)

        assert entry.step == 2
        assert tracker.get_length() == 2
        assert tracker.get_trail()[0].stack_depth == 2

    def test_get_recent(self) -> None:
        """Test retrieval of the latest node ids."""
        tracker = TrailTracker()
        for node_id in ["a", "b", "c", "d"]:
            tracker.record_step(node_id, TrailAction.READ)

        assert tracker.get_recent(2) == ["c", "d"]
        assert tracker.get_recent(0) == []
        assert tracker.get_recent(10) == ["a", "b", "c", "d"]

    def test_summary_counts_actions(self) -> None:
        """Test the per-action summary."""
        tracker = TrailTracker()
        tracker.record_step("h", TrailAction.SKIP, kind=NodeKind.HASH)
        tracker.record_step("l", TrailAction.READ, kind=NodeKind.LEAF)
        tracker.record_step("x", TrailAction.STALE)

        assert tracker.summary() == {"skip": 1, "read": 1, "write": 0, "expand": 0, "stale": 1}

    def test_get_trail_returns_copy(self) -> None:
        """Test that callers cannot mutate the tracked trail."""
        tracker = TrailTracker()
        tracker.record_step("a", TrailAction.READ)

        tracker.get_trail().clear()

        assert tracker.get_length() == 1


class TestWalkStats:
    """Test derived statistics."""

    def test_efficiency(self) -> None:
        """Test the skipped-to-visited percentage."""
        assert WalkStats().efficiency == 0
        assert WalkStats(nodes_visited=9, nodes_skipped=1).efficiency == 11
        assert WalkStats(nodes_visited=4, nodes_skipped=2).efficiency == 50
