"""Configuration model for the trie walker.

Defaults can be overridden through environment variables:

    TRIEWALK_STEP_INTERVAL_MS: Auto-run cadence in milliseconds (default: 1000)
    TRIEWALK_TARGET_PATH: Initial nibble path sought by the walk (default: "a7f3")
"""

import os
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from triewalk.exceptions import WalkerConfigError

DEFAULT_STEP_INTERVAL_MS = 1000
DEFAULT_TARGET_PATH = "a7f3"


class WalkerConfig(BaseModel):
    """Configuration model for :class:`triewalk.TrieWalker`.

    Attributes:
        step_interval_ms: Delay between two auto-run steps
        target_path: Nibble path used by the hash pre-filter
    """

    step_interval_ms: int = Field(default=DEFAULT_STEP_INTERVAL_MS, ge=0)
    target_path: str = DEFAULT_TARGET_PATH

    @classmethod
    def from_env(cls, **overrides: Any) -> "WalkerConfig":
        """Build a config from ``TRIEWALK_*`` environment variables.

        Args:
            **overrides: Values that take precedence over the environment

        Raises:
            WalkerConfigError: If an environment value cannot be parsed
        """
        values: dict = {}
        interval = os.getenv("TRIEWALK_STEP_INTERVAL_MS")
        if interval is not None:
            values["step_interval_ms"] = interval
        target = os.getenv("TRIEWALK_TARGET_PATH")
        if target is not None:
            values["target_path"] = target.strip()
        values.update(overrides)
        return cls._validated(values)

    def merged(self, **overrides: Any) -> "WalkerConfig":
        """Return a validated copy with ``overrides`` applied.

        Raises:
            WalkerConfigError: If an override is invalid
        """
        return self._validated({**self.model_dump(), **overrides})

    @classmethod
    def _validated(cls, values: dict) -> "WalkerConfig":
        try:
            return cls.model_validate(values)
        except ValidationError as e:
            raise WalkerConfigError(
                "Invalid walker configuration", {"errors": e.errors()}
            ) from e
