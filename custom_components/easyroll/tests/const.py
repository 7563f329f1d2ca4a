"""Constants for Easyroll tests."""

from custom_components.easyroll.const import CONF_HOSTS, CONF_NAME, CONF_POLL_INTERVAL

HOST = "192.168.0.10"
SECOND_HOST = "192.168.0.11"

INFO_URL = f"http://{HOST}:20318/lstinfo"
ACTION_URL = f"http://{HOST}:20318/action"
SECOND_ACTION_URL = f"http://{SECOND_HOST}:20318/action"

MOCK_USER_INPUT: dict[str, str] = {CONF_HOSTS: HOST, CONF_NAME: "Living room"}
MOCK_CONFIG: dict[str, object] = {CONF_HOSTS: [HOST], CONF_NAME: "Living room"}
MOCK_OPTIONS: dict[str, object] = {CONF_POLL_INTERVAL: 0.01}
