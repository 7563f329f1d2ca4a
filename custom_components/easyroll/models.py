"""Data models for Easyroll integration."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
import math
from typing import Any

from .const import (
    CONF_CONVERGENCE_POLICY,
    CONF_CONVERGENCE_TOLERANCE,
    CONF_POLL_INTERVAL,
    CONF_POSITION_SCALE,
    DEFAULT_CONVERGENCE_TOLERANCE,
    DEFAULT_POLL_INTERVAL,
)

POSITION_MIN = 0
POSITION_MAX = 100


class PositionScale(StrEnum):
    """How the device's native position maps onto the exposed position."""

    INVERTED = "inverted"
    DIRECT = "direct"


class ConvergencePolicy(StrEnum):
    """When the convergence loop considers the blind arrived."""

    EXACT_MATCH = "exact_match"
    TOLERANCE_BAND = "tolerance_band"


class PositionState(StrEnum):
    """Movement direction reported for the blind."""

    DECREASING = "decreasing"
    INCREASING = "increasing"
    STOPPED = "stopped"


@dataclass
class EasyrollState:
    """Local model for the accessory state of one blind.

    A target position of None means it has not been resolved from the device yet.
    """

    powered: bool = True
    current_position: int = POSITION_MAX
    target_position: int | None = None


@dataclass(frozen=True)
class TrackerSettings:
    """Tunables for the position tracker."""

    position_scale: PositionScale = PositionScale.INVERTED
    convergence_policy: ConvergencePolicy = ConvergencePolicy.EXACT_MATCH
    convergence_tolerance: int = DEFAULT_CONVERGENCE_TOLERANCE
    poll_interval: float = DEFAULT_POLL_INTERVAL

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> TrackerSettings:
        """Build settings from config entry options, falling back to defaults."""
        return cls(
            position_scale=PositionScale(
                options.get(CONF_POSITION_SCALE, PositionScale.INVERTED)
            ),
            convergence_policy=ConvergencePolicy(
                options.get(CONF_CONVERGENCE_POLICY, ConvergencePolicy.EXACT_MATCH)
            ),
            convergence_tolerance=int(
                options.get(CONF_CONVERGENCE_TOLERANCE, DEFAULT_CONVERGENCE_TOLERANCE)
            ),
            poll_interval=float(options.get(CONF_POLL_INTERVAL, DEFAULT_POLL_INTERVAL)),
        )


@dataclass
class DeviceAddress:
    """Hosts of a single logical blind; the first one answers status reads."""

    hosts: list[str] = field(default_factory=list)

    @property
    def primary(self) -> str:
        """Return the host queried for status."""
        return self.hosts[0]

    @property
    def serial(self) -> str:
        """Return the serial number shown for the blind."""
        return "+".join(self.hosts)


def pos_flip(position: int) -> int:
    """Mirror a position on the 0-100 scale."""
    return POSITION_MAX - position


def to_exposed(raw: float, scale: PositionScale) -> int:
    """Convert a device reading to an exposed position.

    The reading is floored before it is inverted, so 37.8 becomes 63.
    """
    position = min(POSITION_MAX, max(POSITION_MIN, math.floor(raw)))
    if scale is PositionScale.INVERTED:
        return pos_flip(position)
    return position


def to_device(position: int, scale: PositionScale) -> int:
    """Convert an exposed position to a device level command."""
    if scale is PositionScale.INVERTED:
        return pos_flip(position)
    return position


def is_valid_position(position: Any) -> bool:
    """Return True for an integer position within 0-100."""
    return (
        isinstance(position, int)
        and not isinstance(position, bool)
        and POSITION_MIN <= position <= POSITION_MAX
    )
