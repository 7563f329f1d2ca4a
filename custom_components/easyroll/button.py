"""Memory buttons for Easyroll blinds."""

from __future__ import annotations

from homeassistant.components.button import ButtonEntity
from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.helpers.entity_platform import AddConfigEntryEntitiesCallback

from .const import AUXILIARY_COMMANDS, DOMAIN
from .coordinator import EasyrollCoordinator
from .entity import EasyrollEntity


async def async_setup_entry(
    hass: HomeAssistant,
    entry: ConfigEntry,
    async_add_entities: AddConfigEntryEntitiesCallback,
) -> None:
    """Set up the Easyroll memory buttons."""
    coordinator: EasyrollCoordinator = hass.data[DOMAIN][entry.entry_id]
    async_add_entities(
        EasyrollCommandButton(coordinator, entry, command)
        for command in AUXILIARY_COMMANDS
    )


class EasyrollCommandButton(EasyrollEntity, ButtonEntity):
    """Button emulating one of the physical memory buttons."""

    def __init__(
        self, coordinator: EasyrollCoordinator, entry: ConfigEntry, command: str
    ) -> None:
        """Initialize the button."""
        super().__init__(coordinator, entry, command.lower())
        self._command = command
        self._attr_name = command

    async def async_press(self) -> None:
        """Send the command; the tracker follows the resulting movement."""
        self.tracker.send_auxiliary_command(self._command)
