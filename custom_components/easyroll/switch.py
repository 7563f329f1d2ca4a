"""Power switch for Easyroll blinds."""

from __future__ import annotations

from typing import Any

from homeassistant.components.switch import SwitchEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddConfigEntryEntitiesCallback

from .const import DOMAIN
from .coordinator import EasyrollCoordinator
from .entity import EasyrollEntity


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddConfigEntryEntitiesCallback,
) -> None:
    """Set up the Easyroll power switch."""
    coordinator: EasyrollCoordinator = hass.data[DOMAIN][entry.entry_id]
    async_add_entities([EasyrollPowerSwitch(coordinator, entry)])


class EasyrollPowerSwitch(EasyrollEntity, SwitchEntity):
    """Power flag of the blind. It is kept locally, the blind never sees it."""

    _attr_name = "Power"

    def __init__(self, coordinator: EasyrollCoordinator, entry: ConfigEntry) -> None:
        """Initialize the switch."""
        super().__init__(coordinator, entry, "power")

    @property
    def is_on(self) -> bool:  # type: ignore[override]
        """Return the power flag."""
        return self.tracker.powered

    async def async_turn_on(self, **kwargs: Any) -> None:
        """Turn the power flag on."""
        self.tracker.set_power(True)

    async def async_turn_off(self, **kwargs: Any) -> None:
        """Turn the power flag off."""
        self.tracker.set_power(False)
