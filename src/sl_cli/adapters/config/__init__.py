"""Configuration adapters."""

from sl_cli.adapters.config.app_settings import AppSettings
from sl_cli.adapters.config.json_user_config_store import JsonUserConfigStore

__all__ = ["AppSettings", "JsonUserConfigStore"]
