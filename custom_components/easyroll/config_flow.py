"""Config flow for Easyroll integration."""

from __future__ import annotations

import logging
from typing import Any

import voluptuous as vol

from homeassistant.config_entries import (
    ConfigEntry,
    ConfigFlow,
    ConfigFlowResult,
    OptionsFlow,
)
from homeassistant.core import callback
from homeassistant.helpers.aiohttp_client import async_get_clientsession

from .api import EasyrollApiClient, EasyrollApiError, EasyrollConnectionError
from .const import (
    CONF_CONVERGENCE_POLICY,
    CONF_CONVERGENCE_TOLERANCE,
    CONF_HOSTS,
    CONF_NAME,
    CONF_POLL_INTERVAL,
    CONF_POSITION_SCALE,
    DEFAULT_CONVERGENCE_TOLERANCE,
    DEFAULT_NAME,
    DEFAULT_POLL_INTERVAL,
    DOMAIN,
)
from .models import ConvergencePolicy, PositionScale

_LOGGER = logging.getLogger(__name__)

STEP_USER_DATA_SCHEMA = vol.Schema(
    {
        vol.Required(CONF_HOSTS): str,
        vol.Optional(CONF_NAME, default=DEFAULT_NAME): str,
    }
)


def parse_hosts(value: str) -> list[str]:
    """Split a comma separated host list, dropping blanks and duplicates."""
    hosts: list[str] = []
    for host in value.split(","):
        host = host.strip()
        if host and host not in hosts:
            hosts.append(host)
    return hosts


class EasyrollConfigFlow(ConfigFlow, domain=DOMAIN):
    """Handle a config flow for Easyroll."""

    VERSION = 1

    @staticmethod
    @callback
    def async_get_options_flow(config_entry: ConfigEntry) -> OptionsFlow:
        """Create the options flow."""
        return EasyrollOptionsFlow()

    async def async_step_user(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """Handle the initial step."""
        errors: dict[str, str] = {}

        if user_input is not None:
            hosts = parse_hosts(user_input[CONF_HOSTS])
            name = user_input.get(CONF_NAME) or DEFAULT_NAME

            if not hosts:
                errors["base"] = "no_hosts"
            else:
                # Check if already configured
                await self.async_set_unique_id("+".join(hosts))
                self._abort_if_unique_id_configured()

                api = EasyrollApiClient(async_get_clientsession(self.hass), hosts)
                try:
                    await api.async_validate_connection()
                except EasyrollConnectionError:
                    errors["base"] = "cannot_connect"
                except EasyrollApiError:
                    errors["base"] = "invalid_response"
                except Exception:  # pylint: disable=broad-except
                    _LOGGER.exception("Unexpected exception")
                    errors["base"] = "unknown"
                else:
                    return self.async_create_entry(
                        title=name,
                        data={CONF_HOSTS: hosts, CONF_NAME: name},
                    )

        return self.async_show_form(
            step_id="user",
            data_schema=STEP_USER_DATA_SCHEMA,
            errors=errors,
        )


class EasyrollOptionsFlow(OptionsFlow):
    """Handle tracker options for Easyroll."""

    async def async_step_init(
        self, user_input: dict[str, Any] | None = None
    ) -> ConfigFlowResult:
        """Manage the options."""
        if user_input is not None:
            return self.async_create_entry(data=user_input)

        options = self.config_entry.options
        schema = vol.Schema(
            {
                vol.Required(
                    CONF_CONVERGENCE_POLICY,
                    default=options.get(
                        CONF_CONVERGENCE_POLICY, ConvergencePolicy.EXACT_MATCH.value
                    ),
                ): vol.In([policy.value for policy in ConvergencePolicy]),
                vol.Required(
                    CONF_CONVERGENCE_TOLERANCE,
                    default=options.get(
                        CONF_CONVERGENCE_TOLERANCE, DEFAULT_CONVERGENCE_TOLERANCE
                    ),
                ): vol.All(vol.Coerce(int), vol.Range(min=1, max=50)),
                vol.Required(
                    CONF_POLL_INTERVAL,
                    default=options.get(CONF_POLL_INTERVAL, DEFAULT_POLL_INTERVAL),
                ): vol.All(vol.Coerce(float), vol.Range(min=0.2, max=10)),
                vol.Required(
                    CONF_POSITION_SCALE,
                    default=options.get(
                        CONF_POSITION_SCALE, PositionScale.INVERTED.value
                    ),
                ): vol.In([scale.value for scale in PositionScale]),
            }
        )
        return self.async_show_form(step_id="init", data_schema=schema)
