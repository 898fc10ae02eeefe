"""The WALK log level used to narrate walker transitions.

WALK sits between DEBUG (10) and INFO (20) so that a host can follow a
traversal step by step without enabling full debug output. Importing this
module registers the level name and adds ``Logger.walk``.
"""

import logging
from typing import Any

WALK_LEVEL_NUMBER = 15


def _walk(self: logging.Logger, message: str, *args: Any, **kwargs: Any) -> None:
    """Log a message at WALK level."""
    if self.isEnabledFor(WALK_LEVEL_NUMBER):
        self._log(WALK_LEVEL_NUMBER, message, args, **kwargs)


def install_walk_level() -> int:
    """Register the WALK level and the ``Logger.walk`` method.

    Safe to call more than once.

    Returns:
        The WALK level number

    Raises:
        ValueError: If "WALK" is already registered with another number
    """
    existing_level = logging.getLevelName("WALK")
    if isinstance(existing_level, int) and existing_level != WALK_LEVEL_NUMBER:
        raise ValueError(f"Log level 'WALK' already exists with number {existing_level}")

    logging.addLevelName(WALK_LEVEL_NUMBER, "WALK")
    setattr(logging.Logger, "walk", _walk)
    return WALK_LEVEL_NUMBER


install_walk_level()


__all__ = ["install_walk_level", "WALK_LEVEL_NUMBER"]
