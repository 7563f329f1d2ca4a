"""Data update coordinator for Easyroll blinds."""

from __future__ import annotations

import logging

from homeassistant.core import HomeAssistant
from homeassistant.helpers.update_coordinator import DataUpdateCoordinator, UpdateFailed

from .api import EasyrollApiClient, EasyrollApiError, EasyrollConnectionError
from .const import DOMAIN
from .models import EasyrollState, TrackerSettings
from .tracker import PositionTracker

_LOGGER = logging.getLogger(__name__)


class EasyrollCoordinator(DataUpdateCoordinator[EasyrollState]):
    """Easyroll data update coordinator.

    There is no polling interval: the tracker polls while the blind moves and
    publishes through the coordinator.
    """

    def __init__(
        self,
        hass: HomeAssistant,
        api: EasyrollApiClient,
        settings: TrackerSettings | None = None,
    ) -> None:
        """Initialize the coordinator."""
        super().__init__(
            hass,
            _LOGGER,
            name=DOMAIN,
            update_interval=None,
        )
        self.api = api
        self.tracker = PositionTracker(api, settings, self.async_set_updated_data)

    async def _async_update_data(self) -> EasyrollState:
        """Fetch the blind position.

        Raises:
            UpdateFailed: If the blind cannot be read

        """
        try:
            await self.tracker.async_read_status()
        except EasyrollConnectionError as err:
            raise UpdateFailed(f"Error communicating with Easyroll: {err}") from err
        except EasyrollApiError as err:
            raise UpdateFailed(f"Invalid response from Easyroll: {err}") from err
        return self.tracker.state

    async def async_shutdown(self) -> None:
        """Stop tracking and shut down the coordinator."""
        await self.tracker.async_shutdown()
        await super().async_shutdown()
