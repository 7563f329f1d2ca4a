"""Base entity for Easyroll blinds."""

from __future__ import annotations

from homeassistant.config_entries import ConfigEntry
from homeassistant.helpers.entity import DeviceInfo
from homeassistant.helpers.update_coordinator import CoordinatorEntity

from .const import CONF_NAME, DEFAULT_NAME, DOMAIN, MANUFACTURER, MODEL
from .coordinator import EasyrollCoordinator


class EasyrollEntity(CoordinatorEntity[EasyrollCoordinator]):
    """Entity attached to the Easyroll blind device."""

    _attr_has_entity_name = True

    def __init__(
        self, coordinator: EasyrollCoordinator, entry: ConfigEntry, key: str
    ) -> None:
        """Initialize the entity."""
        super().__init__(coordinator)
        self.tracker = coordinator.tracker
        serial = f"{MANUFACTURER}-{coordinator.api.address.serial}"

        self._attr_unique_id = f"{serial}_{key}"
        self._attr_device_info = DeviceInfo(
            identifiers={(DOMAIN, serial)},
            name=entry.data.get(CONF_NAME) or DEFAULT_NAME,
            manufacturer=MANUFACTURER,
            model=MODEL,
            serial_number=serial,
        )
