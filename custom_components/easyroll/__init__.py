"""Integration for Easyroll smart blinds."""

from __future__ import annotations

import logging

from homeassistant.config_entries import ConfigEntry
from homeassistant.core import HomeAssistant
from homeassistant.exceptions import ConfigEntryNotReady
from homeassistant.helpers.aiohttp_client import async_get_clientsession

from .api import EasyrollApiClient, EasyrollError
from .const import CONF_HOSTS, DOMAIN, PLATFORMS
from .coordinator import EasyrollCoordinator
from .models import TrackerSettings

_LOGGER = logging.getLogger(__name__)


async def async_setup_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Set up Easyroll from a config entry."""
    _LOGGER.debug("Setting up Easyroll at %s", entry.data[CONF_HOSTS])

    api = EasyrollApiClient(async_get_clientsession(hass), entry.data[CONF_HOSTS])

    # Validate the API connection
    try:
        await api.async_validate_connection()
    except EasyrollError as err:
        raise ConfigEntryNotReady(f"Failed to connect to Easyroll: {err}") from err

    # The first refresh also resolves the unknown target position
    coordinator = EasyrollCoordinator(
        hass, api, TrackerSettings.from_options(entry.options)
    )
    await coordinator.async_config_entry_first_refresh()

    hass.data.setdefault(DOMAIN, {})[entry.entry_id] = coordinator

    await hass.config_entries.async_forward_entry_setups(entry, PLATFORMS)

    # Reload when the options change
    entry.async_on_unload(entry.add_update_listener(update_listener))

    return True


async def async_unload_entry(hass: HomeAssistant, entry: ConfigEntry) -> bool:
    """Unload a config entry."""
    unload_ok = await hass.config_entries.async_unload_platforms(entry, PLATFORMS)

    if unload_ok:
        coordinator: EasyrollCoordinator = hass.data[DOMAIN].pop(entry.entry_id)
        await coordinator.async_shutdown()

        if not hass.data[DOMAIN]:
            hass.data.pop(DOMAIN)

    return unload_ok


async def update_listener(hass: HomeAssistant, entry: ConfigEntry) -> None:
    """Handle options update."""
    await hass.config_entries.async_reload(entry.entry_id)
