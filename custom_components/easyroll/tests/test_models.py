"""Test the Easyroll models."""

import pytest

from custom_components.easyroll.const import (
    CONF_CONVERGENCE_POLICY,
    CONF_CONVERGENCE_TOLERANCE,
    CONF_POLL_INTERVAL,
    CONF_POSITION_SCALE,
)
from custom_components.easyroll.models import (
    ConvergencePolicy,
    EasyrollState,
    PositionScale,
    TrackerSettings,
    is_valid_position,
    pos_flip,
    to_device,
    to_exposed,
)


@pytest.mark.parametrize(
    ("raw", "exposed"),
    [
        (0, 100),
        (100, 0),
        (50.9, 49),
        (37.8, 63),
        (99.99, 1),
        (0.4, 100),
    ],
)
def test_to_exposed_inverted(raw: float, exposed: int) -> None:
    """Test device readings are floored before they are inverted."""
    assert to_exposed(raw, PositionScale.INVERTED) == exposed


@pytest.mark.parametrize(
    ("raw", "exposed"),
    [(0, 0), (100, 100), (50.9, 50), (37.8, 37)],
)
def test_to_exposed_direct(raw: float, exposed: int) -> None:
    """Test the direct scale only floors."""
    assert to_exposed(raw, PositionScale.DIRECT) == exposed


def test_to_exposed_clamps_out_of_range_readings() -> None:
    """Test readings outside 0-100 stay on the scale."""
    assert to_exposed(-3, PositionScale.INVERTED) == 100
    assert to_exposed(104.2, PositionScale.INVERTED) == 0


def test_pos_flip_round_trip() -> None:
    """Test flipping twice gives the position back."""
    for position in range(101):
        assert pos_flip(pos_flip(position)) == position
        assert to_device(position, PositionScale.INVERTED) == 100 - position
        assert to_device(position, PositionScale.DIRECT) == position


@pytest.mark.parametrize(
    ("value", "valid"),
    [(0, True), (100, True), (55, True), (-1, False), (101, False), (3.0, False), (False, False), (None, False)],
)
def test_is_valid_position(value: object, valid: bool) -> None:
    """Test position validation."""
    assert is_valid_position(value) is valid


def test_initial_state() -> None:
    """Test a fresh state is powered, open and has no target."""
    state = EasyrollState()
    assert state.powered
    assert state.current_position == 100
    assert state.target_position is None


def test_settings_from_options() -> None:
    """Test options override the defaults."""
    assert TrackerSettings.from_options({}) == TrackerSettings()

    settings = TrackerSettings.from_options(
        {
            CONF_CONVERGENCE_POLICY: "tolerance_band",
            CONF_CONVERGENCE_TOLERANCE: 6,
            CONF_POLL_INTERVAL: 0.5,
            CONF_POSITION_SCALE: "direct",
        }
    )
    assert settings.convergence_policy is ConvergencePolicy.TOLERANCE_BAND
    assert settings.convergence_tolerance == 6
    assert settings.poll_interval == 0.5
    assert settings.position_scale is PositionScale.DIRECT
