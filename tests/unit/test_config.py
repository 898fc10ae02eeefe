"""Unit tests for walker configuration."""

import os
from unittest.mock import patch

import pytest

from triewalk.config import WalkerConfig
from triewalk.core.trie import sample_trie
from triewalk.core.walker.engine import TrieWalker
from triewalk.exceptions import WalkerConfigError


class TestWalkerConfig:
    """Test WalkerConfig defaults and environment loading."""

    def test_defaults(self) -> None:
        """Test default values without environment overrides."""
        with patch.dict(os.environ, {}, clear=True):
            config = WalkerConfig.from_env()

        assert config.step_interval_ms == 1000
        assert config.target_path == "a7f3"

    def test_environment_values(self) -> None:
        """Test reading TRIEWALK_* variables."""
        env = {"TRIEWALK_STEP_INTERVAL_MS": "250", "TRIEWALK_TARGET_PATH": " b5 "}
        with patch.dict(os.environ, env, clear=True):
            config = WalkerConfig.from_env()

        assert config.step_interval_ms == 250
        assert config.target_path == "b5"

    def test_overrides_take_precedence(self) -> None:
        """Test that explicit overrides win over the environment."""
        with patch.dict(os.environ, {"TRIEWALK_TARGET_PATH": "b5"}, clear=True):
            config = WalkerConfig.from_env(target_path="c")

        assert config.target_path == "c"

    @pytest.mark.parametrize("interval", ["fast", "-5"])
    def test_invalid_interval(self, interval: str) -> None:
        """Test that unparsable intervals raise WalkerConfigError."""
        with patch.dict(os.environ, {"TRIEWALK_STEP_INTERVAL_MS": interval}, clear=True):
            with pytest.raises(WalkerConfigError) as exc_info:
                WalkerConfig.from_env()

        assert exc_info.value.details["errors"]

    def test_walker_reads_environment(self) -> None:
        """Test that a walker without explicit config uses the environment."""
        env = {"TRIEWALK_STEP_INTERVAL_MS": "40", "TRIEWALK_TARGET_PATH": "c"}
        with patch.dict(os.environ, env, clear=True):
            walker = TrieWalker(sample_trie())

        assert walker.step_interval_ms == 40
        assert walker.target_path == "c"

    def test_walker_applies_overrides_to_config(self) -> None:
        """Test keyword overrides on top of an explicit config."""
        config = WalkerConfig(step_interval_ms=500, target_path="b5")
        walker = TrieWalker(sample_trie(), config=config, target_path="a7")

        assert walker.step_interval_ms == 500
        assert walker.target_path == "a7"
        assert config.target_path == "b5"

    def test_walker_rejects_invalid_override(self) -> None:
        """Test that keyword overrides on an explicit config are validated."""
        with pytest.raises(WalkerConfigError) as exc_info:
            TrieWalker(sample_trie(), config=WalkerConfig(), step_interval_ms=-5)

        assert exc_info.value.details["errors"]

    def test_walker_coerces_override(self) -> None:
        """Test that overrides are coerced like any other config value."""
        walker = TrieWalker(sample_trie(), config=WalkerConfig(), step_interval_ms="0")

        assert walker.step_interval_ms == 0
        assert isinstance(walker.step_interval_ms, int)

    def test_merged_leaves_original_untouched(self) -> None:
        """Test that merged() returns a validated copy."""
        config = WalkerConfig(step_interval_ms=500)
        merged = config.merged(step_interval_ms="25")

        assert merged.step_interval_ms == 25
        assert config.step_interval_ms == 500
        with pytest.raises(WalkerConfigError):
            config.merged(step_interval_ms="soon")
