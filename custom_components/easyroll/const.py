"""Constants for the Easyroll integration."""

from homeassistant.const import Platform

DOMAIN = "easyroll"

# Platforms
PLATFORMS = [Platform.COVER, Platform.SWITCH, Platform.BUTTON]

# Config entry keys
CONF_HOSTS = "hosts"
CONF_NAME = "name"

# Options keys
CONF_POSITION_SCALE = "position_scale"
CONF_CONVERGENCE_POLICY = "convergence_policy"
CONF_CONVERGENCE_TOLERANCE = "convergence_tolerance"
CONF_POLL_INTERVAL = "poll_interval"

DEFAULT_NAME = "Easyroll"
DEVICE_PORT = 20318
REQUEST_TIMEOUT = 10  # seconds

DEFAULT_CONVERGENCE_TOLERANCE = 4
DEFAULT_POLL_INTERVAL = 1.0  # seconds

MANUFACTURER = "INOSHADE"
MODEL = "Smart Blind"

# Physical memory buttons on the blind
AUXILIARY_COMMANDS = ["M1", "M2", "M3"]

ATTR_TARGET_POSITION = "target_position"
