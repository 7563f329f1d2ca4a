"""API client for Easyroll smart blinds."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
import logging
import math
from typing import Any

import aiohttp
from aiohttp import ClientTimeout
from aiohttp.client_exceptions import ClientError

from homeassistant.exceptions import HomeAssistantError

from .const import DEVICE_PORT, REQUEST_TIMEOUT
from .models import DeviceAddress

_LOGGER = logging.getLogger(__name__)

# API endpoints
ENDPOINT_INFO = "/lstinfo"
ENDPOINT_ACTION = "/action"

MODE_LEVEL = "level"
MODE_GENERAL = "general"


class EasyrollError(HomeAssistantError):
    """Base exception for Easyroll API failures."""


class EasyrollApiError(EasyrollError):
    """Exception to indicate the blind sent an unusable response."""


class EasyrollConnectionError(EasyrollError):
    """Exception to indicate a connection error occurred."""


class EasyrollApiClient:
    """API client for one Easyroll blind reachable at one or more hosts."""

    def __init__(self, session: aiohttp.ClientSession, hosts: Sequence[str]) -> None:
        """Initialize the API client.

        Args:
            session: aiohttp session shared with Home Assistant
            hosts: IP addresses or hostnames; the first one answers status reads

        """
        if not hosts:
            raise ValueError("At least one host is required")
        self._session = session
        self.address = DeviceAddress(list(hosts))
        self._timeout = ClientTimeout(total=REQUEST_TIMEOUT)

    @property
    def hosts(self) -> list[str]:
        """Return the configured hosts."""
        return self.address.hosts

    @staticmethod
    def _url(host: str, endpoint: str) -> str:
        return f"http://{host}:{DEVICE_PORT}{endpoint}"

    async def async_validate_connection(self) -> bool:
        """Test if we can read the blind status.

        Raises:
            EasyrollConnectionError: If the blind cannot be reached
            EasyrollApiError: If the blind answers with garbage

        """
        try:
            await self.async_get_position()
        except EasyrollConnectionError:
            _LOGGER.error("Failed to connect to Easyroll at %s", self.address.primary)
            raise
        return True

    async def async_get_info(self) -> dict[str, Any]:
        """Get the status document from the primary host.

        Raises:
            EasyrollApiError: If the response is not a JSON object
            EasyrollConnectionError: If connection fails

        """
        try:
            response = await self._session.get(
                self._url(self.address.primary, ENDPOINT_INFO),
                timeout=self._timeout,
            )
            response.raise_for_status()
            # The blind does not always label its JSON as such
            data = await response.json(content_type=None)
        except (ClientError, TimeoutError) as err:
            raise EasyrollConnectionError(
                f"Failed to connect to Easyroll at {self.address.primary}: {err}"
            ) from err
        except ValueError as err:
            raise EasyrollApiError(f"Invalid response from Easyroll: {err}") from err

        if not isinstance(data, dict):
            raise EasyrollApiError(f"Unexpected status document: {data!r}")
        return data

    async def async_get_position(self) -> float:
        """Return the raw position reported by the blind, on the device scale."""
        data = await self.async_get_info()
        position = data.get("position")
        if (
            isinstance(position, bool)
            or not isinstance(position, (int, float))
            or (isinstance(position, float) and not math.isfinite(position))
        ):
            raise EasyrollApiError(f"Missing or invalid position: {position!r}")
        return position

    async def async_set_level(self, level: int) -> Any:
        """Move the blind to an absolute level on the device scale."""
        return await self._async_action({"mode": MODE_LEVEL, "command": level})

    async def async_send_command(self, command: str) -> Any:
        """Send a named command such as a memory button press."""
        return await self._async_action({"mode": MODE_GENERAL, "command": command})

    async def _async_action(self, payload: dict[str, Any]) -> Any:
        """Post the same action to every host and return the first answer.

        Every post runs to completion before the first failure is raised.
        """
        results = await asyncio.gather(
            *(self._async_post_action(host, payload) for host in self.hosts),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result
        return results[0]

    async def _async_post_action(self, host: str, payload: dict[str, Any]) -> Any:
        try:
            response = await self._session.post(
                self._url(host, ENDPOINT_ACTION),
                json=payload,
                timeout=self._timeout,
            )
            response.raise_for_status()
            return await response.text()
        except (ClientError, TimeoutError) as err:
            raise EasyrollConnectionError(
                f"Failed to send {payload} to Easyroll at {host}: {err}"
            ) from err
