"""Unit tests for the WALK log level."""

import logging

import pytest

from triewalk.core.state import WalkerState
from triewalk.core.trie import sample_trie
from triewalk.core.walker.transition import advance
from triewalk.logging import WALK_LEVEL_NUMBER, install_walk_level


class TestWalkLevel:
    """Test registration of the WALK level."""

    def test_walk_level_registered(self) -> None:
        """Test that importing triewalk registers WALK."""
        assert logging.getLevelName("WALK") == WALK_LEVEL_NUMBER
        assert logging.getLevelName(WALK_LEVEL_NUMBER) == "WALK"
        assert callable(getattr(logging.getLogger("triewalk.tests"), "walk"))

    def test_install_is_idempotent(self) -> None:
        """Test installing the level twice."""
        assert install_walk_level() == WALK_LEVEL_NUMBER
        assert install_walk_level() == WALK_LEVEL_NUMBER

    def test_logger_walk_respects_level(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that Logger.walk only emits when WALK is enabled."""
        logger = logging.getLogger("triewalk.tests.walk")

        caplog.set_level(logging.INFO, logger="triewalk.tests.walk")
        logger.walk("hidden %s", "step")
        caplog.set_level(WALK_LEVEL_NUMBER, logger="triewalk.tests.walk")
        logger.walk("shown %s", "step")

        assert [(r.levelname, r.getMessage()) for r in caplog.records] == [
            ("WALK", "shown step")
        ]


class TestTransitionLogging:
    """Test what transitions log."""

    def test_transitions_log_at_walk_level(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that every decision is logged at WALK level."""
        caplog.set_level(WALK_LEVEL_NUMBER, logger="triewalk")
        model = sample_trie()
        state = WalkerState()
        state = advance(state, model, "a7f3")
        state = advance(state, model, "a7f3")

        walk_messages = [r.getMessage() for r in caplog.records if r.levelname == "WALK"]
        assert walk_messages == [
            "Starting from root node root",
            state.decision,
        ]

    def test_walk_level_hidden_at_info(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that decisions stay quiet when only INFO is enabled."""
        caplog.set_level(logging.INFO, logger="triewalk")

        advance(WalkerState(), sample_trie(), "a7f3")

        assert not [r for r in caplog.records if r.levelno == WALK_LEVEL_NUMBER]

    def test_stale_reference_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that stale references are logged as warnings."""
        caplog.set_level(logging.WARNING, logger="triewalk")

        advance(WalkerState(stack=["ghost"], current="root"), sample_trie(), "")

        assert any(
            r.levelno == logging.WARNING and "ghost" in r.getMessage()
            for r in caplog.records
        )
