"""Timer-driven trie walker.

``TrieWalker`` owns the live state of one walk session and drives
:func:`advance` either one step at a time or from an asyncio task that
sleeps for the configured interval before every step.

Every auto-run task is bound to a generation number. ``pause()`` and
``reset()`` bump the generation and cancel the task, and a task only applies
a step while its generation is still current, so a stopped walker never
takes a stray step.
"""

import asyncio
import logging
from typing import Any, Optional

from triewalk.config import WalkerConfig

from ..state import WalkerState, WalkStatus
from ..trie import TrieModel
from .trail_tracker import TrailTracker
from .transition import advance

logger = logging.getLogger(__name__)


class TrieWalker:
    """Step-wise and auto-running walker over a :class:`TrieModel`.

    Attributes:
        model: Trie being walked (read-only)
        state: Snapshot of the current walk state
        status: Lifecycle status of the walk

    Example:
        >>> walker = TrieWalker(sample_trie(), target_path="a7f3", step_interval_ms=0)
        >>> await walker.walk()
        >>> walker.state.stats.nodes_visited
        8
    """

    def __init__(
        self,
        model: TrieModel,
        config: Optional[WalkerConfig] = None,
        **overrides: Any,
    ) -> None:
        """Initialize a walker.

        Args:
            model: Trie to walk
            config: Walker configuration; read from the environment when omitted
            **overrides: ``step_interval_ms`` / ``target_path`` overrides
        """
        if config is None:
            config = WalkerConfig.from_env(**overrides)
        elif overrides:
            config = config.merged(**overrides)

        self._model = model
        self._step_interval_ms = config.step_interval_ms
        self._target_path = config.target_path
        self._state = WalkerState()
        self._generation = 0
        self._task: Optional[asyncio.Task] = None

    @property
    def model(self) -> TrieModel:
        """Get the trie being walked."""
        return self._model

    @property
    def state(self) -> WalkerState:
        """Get a snapshot of the current walk state."""
        return self._state.snapshot()

    @property
    def target_path(self) -> str:
        """Get the nibble path used by the hash pre-filter."""
        return self._target_path

    @target_path.setter
    def target_path(self, value: str) -> None:
        """Set the target path; applies from the next branch expansion."""
        self._target_path = value

    @property
    def step_interval_ms(self) -> int:
        """Get the auto-run interval in milliseconds."""
        return self._step_interval_ms

    @step_interval_ms.setter
    def step_interval_ms(self, value: int) -> None:
        """Set the auto-run interval; applies from the next scheduled step."""
        self._step_interval_ms = max(0, int(value))

    @property
    def is_running(self) -> bool:
        """Whether an auto-run task is scheduled."""
        return self._task is not None and not self._task.done()

    @property
    def status(self) -> WalkStatus:
        """Get the lifecycle status of the walk."""
        if self._state.completed:
            return WalkStatus.COMPLETED
        if self.is_running:
            return WalkStatus.RUNNING
        if self._state.started:
            return WalkStatus.PAUSED
        return WalkStatus.NOT_STARTED

    @property
    def trail(self) -> TrailTracker:
        """Get a trail tracker over a snapshot of the walk trail."""
        return TrailTracker(self.state.trail)

    def step(self) -> WalkerState:
        """Advance the walk by one step.

        Returns:
            Snapshot of the state after the step
        """
        self._state = advance(self._state, self._model, self._target_path)
        return self.state

    def start(self) -> asyncio.Task:
        """Start auto-running on the current event loop.

        Calling ``start()`` while already running returns the existing task.

        Returns:
            The auto-run task

        Raises:
            RuntimeError: If no event loop is running
        """
        if self.is_running:
            return self._task  # type: ignore[return-value]

        loop = asyncio.get_running_loop()
        self._generation += 1
        self._task = loop.create_task(self._run(self._generation))
        logger.info(
            f"Walker auto-run started (interval={self._step_interval_ms}ms, "
            f"target={self._target_path!r})"
        )
        return self._task

    def pause(self) -> None:
        """Stop auto-running, keeping the walk state for a later resume."""
        if self._cancel_pending():
            logger.info("Walker auto-run paused")

    def reset(self) -> None:
        """Cancel any pending step and discard the walk state."""
        self._cancel_pending()
        self._state = WalkerState()
        logger.info("Walker reset")

    async def wait(self) -> None:
        """Wait for the current auto-run task to finish, if any."""
        task = self._task
        if task is None:
            return
        try:
            await task
        except asyncio.CancelledError:
            if not task.cancelled():
                raise

    async def walk(self) -> WalkerState:
        """Auto-run until the walk completes or is paused.

        Returns:
            Snapshot of the final state
        """
        self.start()
        await self.wait()
        return self.state

    def _cancel_pending(self) -> bool:
        self._generation += 1
        task, self._task = self._task, None
        if task is None or task.done():
            return False
        task.cancel()
        return True

    async def _run(self, generation: int) -> None:
        while generation == self._generation and not self._state.completed:
            await asyncio.sleep(self._step_interval_ms / 1000.0)
            if generation != self._generation:
                return
            self.step()
