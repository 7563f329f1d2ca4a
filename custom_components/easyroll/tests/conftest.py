"""Global fixtures for Easyroll integration."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncGenerator, Callable
from typing import Any

import pytest

from custom_components.easyroll.api import EasyrollConnectionError
from custom_components.easyroll.models import EasyrollState, TrackerSettings
from custom_components.easyroll.tracker import PositionTracker

pytest_plugins = "pytest_homeassistant_custom_component"

# Device levels the memory buttons move to
PRESETS = {"M1": 60, "M2": 30, "M3": 90}


@pytest.fixture(autouse=True)
def auto_enable_custom_integrations(enable_custom_integrations: Any) -> None:  # noqa: D103
    return


class FakeBlind:
    """Simulated blind that moves a fixed step towards its level on every read.

    Positions are on the device scale, so 0 here is exposed as 100.
    """

    def __init__(self, raw: float = 0, step: float = 10, offset: float = 0) -> None:
        self.raw = raw
        self.level = raw
        self.step = step
        self.offset = offset
        self.reads = 0
        self.levels: list[int] = []
        self.commands: list[str] = []
        self.failures = 0
        self.command_error: Exception | None = None
        self.gate: asyncio.Event | None = None

    async def async_get_position(self) -> float:
        self.reads += 1
        if self.gate is not None:
            await self.gate.wait()
        if self.failures:
            self.failures -= 1
            raise EasyrollConnectionError("Blind unreachable")
        delta = self.level - self.raw
        self.raw += max(-self.step, min(self.step, delta))
        return self.raw

    async def async_set_level(self, level: int) -> None:
        if self.command_error is not None:
            raise self.command_error
        self.levels.append(level)
        self.level = level + self.offset

    async def async_send_command(self, command: str) -> None:
        if self.command_error is not None:
            raise self.command_error
        self.commands.append(command)
        self.level = PRESETS.get(command, self.level)


class Recorder:
    """Listener collecting (current, target) pairs as they are published."""

    def __init__(self) -> None:
        self.published: list[tuple[int, int | None]] = []

    def __call__(self, state: EasyrollState) -> None:
        self.published.append((state.current_position, state.target_position))


@pytest.fixture
def blind() -> FakeBlind:
    """Return a blind sitting fully open on the exposed scale."""
    return FakeBlind()


@pytest.fixture
def recorder() -> Recorder:
    """Return a state listener."""
    return Recorder()


@pytest.fixture
async def make_tracker(
    blind: FakeBlind, recorder: Recorder
) -> AsyncGenerator[Callable[..., PositionTracker], None]:
    """Return a factory for trackers bound to the fake blind."""
    trackers: list[PositionTracker] = []

    def _make(**settings: Any) -> PositionTracker:
        settings.setdefault("poll_interval", 0.01)
        tracker = PositionTracker(blind, TrackerSettings(**settings), recorder)  # type: ignore[arg-type]
        trackers.append(tracker)
        return tracker

    yield _make

    for tracker in trackers:
        await tracker.async_shutdown()


async def wait_idle(tracker: PositionTracker, timeout: float = 5) -> None:
    """Wait until the tracker has no loop or background work left."""
    async with asyncio.timeout(timeout):
        while tracker.is_watching or tracker._background_tasks:  # noqa: SLF001
            await asyncio.sleep(0.005)
