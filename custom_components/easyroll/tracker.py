"""Position tracking for Easyroll blinds.

The blind only reports where it is, never where it is heading, and it cannot
push updates. After every command the tracker polls the blind until it stops,
publishing each step so the position moves gradually instead of jumping.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Coroutine
import contextlib
import logging
from typing import Any

from .api import EasyrollApiClient, EasyrollError
from .models import (
    ConvergencePolicy,
    EasyrollState,
    PositionState,
    TrackerSettings,
    is_valid_position,
    to_device,
    to_exposed,
)

_LOGGER = logging.getLogger(__name__)

type StateListener = Callable[[EasyrollState], None]


class PositionTracker:
    """Reconcile the requested target of a blind with its reported position."""

    def __init__(
        self,
        api: EasyrollApiClient,
        settings: TrackerSettings | None = None,
        listener: StateListener | None = None,
    ) -> None:
        """Initialize the tracker.

        Args:
            api: client used to talk to the blind
            settings: polling and scale tunables
            listener: called with the state whenever it is published

        """
        self.api = api
        self.settings = settings or TrackerSettings()
        self.state = EasyrollState()
        self._listener = listener
        self._watch_task: asyncio.Task[None] | None = None
        self._background_tasks: set[asyncio.Task[Any]] = set()
        self._read_seq = 0

    @property
    def is_watching(self) -> bool:
        """Return True while the convergence loop is running."""
        return self._watch_task is not None and not self._watch_task.done()

    @property
    def position_state(self) -> PositionState:
        """Return the movement direction; the blind never reports one."""
        return PositionState.STOPPED

    @property
    def powered(self) -> bool:
        """Return the power flag."""
        return self.state.powered

    def set_power(self, powered: bool) -> None:
        """Store the power flag."""
        _LOGGER.debug("Set power %s", powered)
        self.state.powered = powered
        self._notify()

    def get_current_position(self) -> int:
        """Return the cached position and refresh it in the background."""
        if not self.is_watching:
            self.schedule_refresh()
        return self.state.current_position

    def get_target_position(self) -> int:
        """Return the target, resolving it from the blind if still unknown."""
        if self.state.target_position is None:
            _LOGGER.debug("Target position requested before first read")
            self.schedule_refresh()
            return self.state.current_position
        return self.state.target_position

    def request_target(self, target: int) -> None:
        """Move the blind to an exposed position and watch it get there.

        Raises:
            ValueError: If the target is outside 0-100

        """
        if not is_valid_position(target):
            raise ValueError(f"Target position {target!r} is outside 0-100")

        _LOGGER.debug("Set target position %s", target)
        self.state.target_position = target
        # Reads already in flight describe the blind before this request
        self._read_seq += 1
        self._notify()

        level = to_device(target, self.settings.position_scale)
        self._spawn(
            self._async_fire(self.api.async_set_level(level), f"level {level}")
        )
        self.restart_watch(target)

    def send_auxiliary_command(self, command: str) -> None:
        """Send a named command and watch the blind until it stops."""
        _LOGGER.debug("Send command %s", command)
        self._spawn(self._async_fire(self.api.async_send_command(command), command))
        self.restart_watch()

    def restart_watch(self, target: int | None = None) -> None:
        """Cancel any running convergence loop and start a new one."""
        if self._watch_task is not None:
            self._watch_task.cancel()
            self._watch_task = None
        self._watch_task = asyncio.create_task(self._async_watch(target))

    def schedule_refresh(self) -> None:
        """Read the status in the background and publish it."""
        self._spawn(self._async_refresh())

    async def async_read_status(self) -> int:
        """Read the position from the blind and store it.

        Raises:
            EasyrollError: If the blind cannot be read

        """
        position, _ = await self._async_read()
        return position

    async def async_shutdown(self) -> None:
        """Stop the convergence loop and any background work."""
        tasks = list(self._background_tasks)
        if self._watch_task is not None:
            tasks.append(self._watch_task)
            self._watch_task = None
        for task in tasks:
            task.cancel()
        for task in tasks:
            with contextlib.suppress(asyncio.CancelledError):
                await task

    async def _async_read(self) -> tuple[int, bool]:
        """Read the blind, returning the position and whether it was stored.

        Only the most recently started read may store its result.
        """
        self._read_seq += 1
        seq = self._read_seq
        raw = await self.api.async_get_position()
        position = to_exposed(raw, self.settings.position_scale)
        if seq != self._read_seq:
            _LOGGER.debug("Discarding outdated position %s", position)
            return position, False

        self.state.current_position = position
        if self.state.target_position is None:
            self.state.target_position = position
        return position, True

    async def _async_refresh(self) -> None:
        try:
            position, stored = await self._async_read()
        except EasyrollError as err:
            _LOGGER.warning("Failed to refresh Easyroll position: %s", err)
            return
        if stored:
            _LOGGER.debug("Update position %s", position)
            self._notify()

    async def _async_watch(self, target: int | None) -> None:
        """Poll the blind until it converges."""
        previous = self.state.current_position
        while True:
            await asyncio.sleep(self.settings.poll_interval)
            try:
                position, stored = await self._async_read()
            except EasyrollError as err:
                _LOGGER.warning("Failed to poll Easyroll position: %s", err)
                continue
            if not stored:
                continue

            _LOGGER.debug("Moving %s => %s => %s", previous, position, target)
            if self._converged(previous, position, target):
                self._publish(position, position)
                _LOGGER.debug("Converged at %s", position)
                break
            self._publish(previous, position)
            previous = position

        if self._watch_task is asyncio.current_task():
            self._watch_task = None

    def _converged(self, previous: int, position: int, target: int | None) -> bool:
        if (
            self.settings.convergence_policy is ConvergencePolicy.TOLERANCE_BAND
            and target is not None
        ):
            return abs(position - target) < self.settings.convergence_tolerance
        return position == previous

    def _publish(self, current: int, target: int) -> None:
        self.state.current_position = current
        self.state.target_position = target
        self._notify()

    def _notify(self) -> None:
        if self._listener is not None:
            self._listener(self.state)

    def _spawn(self, coro: Coroutine[Any, Any, Any]) -> None:
        task = asyncio.create_task(coro)
        self._background_tasks.add(task)
        task.add_done_callback(self._background_tasks.discard)

    async def _async_fire(self, call: Coroutine[Any, Any, Any], what: str) -> None:
        try:
            await call
        except EasyrollError as err:
            _LOGGER.warning("Failed to send %s to Easyroll: %s", what, err)
