"""Support for Easyroll blinds."""

from __future__ import annotations

import logging
from typing import Any

from homeassistant.components.cover import (
    ATTR_POSITION,
    CoverDeviceClass,
    CoverEntity,
    CoverEntityFeature,
)
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import HomeAssistantError
from homeassistant.helpers.entity_platform import AddConfigEntryEntitiesCallback

from .const import ATTR_TARGET_POSITION, DOMAIN
from .coordinator import EasyrollCoordinator
from .entity import EasyrollEntity
from .models import PositionState

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddConfigEntryEntitiesCallback,
) -> None:
    """Set up the Easyroll cover."""
    coordinator: EasyrollCoordinator = hass.data[DOMAIN][entry.entry_id]
    async_add_entities([EasyrollCover(coordinator, entry)])


class EasyrollCover(EasyrollEntity, CoverEntity):
    """Representation of an Easyroll blind."""

    _attr_name = None
    _attr_device_class = CoverDeviceClass.BLIND
    _attr_supported_features = (
        CoverEntityFeature.OPEN
        | CoverEntityFeature.CLOSE
        | CoverEntityFeature.SET_POSITION
    )

    def __init__(self, coordinator: EasyrollCoordinator, entry: ConfigEntry) -> None:
        """Initialize the cover."""
        super().__init__(coordinator, entry, "cover")

    @property
    def current_cover_position(self) -> int | None:  # type: ignore[override]
        """Return the last known position, 0 closed and 100 open."""
        return self.tracker.state.current_position

    @property
    def is_closed(self) -> bool | None:  # type: ignore[override]
        """Return if the cover is closed."""
        return self.current_cover_position == 0

    @property
    def is_opening(self) -> bool | None:  # type: ignore[override]
        """Return if the cover is opening."""
        return self.tracker.position_state is PositionState.INCREASING

    @property
    def is_closing(self) -> bool | None:  # type: ignore[override]
        """Return if the cover is closing."""
        return self.tracker.position_state is PositionState.DECREASING

    @property
    def extra_state_attributes(self) -> dict[str, Any]:  # type: ignore[override]
        """Return extra state attributes."""
        return {ATTR_TARGET_POSITION: self.tracker.get_target_position()}

    async def async_open_cover(self, **kwargs: Any) -> None:
        """Open the cover."""
        self._request_target(100, "open cover")

    async def async_close_cover(self, **kwargs: Any) -> None:
        """Close the cover."""
        self._request_target(0, "close cover")

    async def async_set_cover_position(self, **kwargs: Any) -> None:
        """Move the cover to a specific position."""
        self._request_target(kwargs[ATTR_POSITION], "set position")

    async def async_update(self) -> None:
        """Refresh in the background; the cached state answers right away."""
        self.tracker.get_current_position()

    def _request_target(self, position: int, action: str) -> None:
        try:
            self.tracker.request_target(position)
        except ValueError as err:
            raise HomeAssistantError(
                f"Failed to {action} (value: {position}) for {self.entity_id}: {err}"
            ) from err
