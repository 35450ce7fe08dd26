"""12-factor settings adapter using SLCLI_* environment variables."""

import os
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sl_cli.adapters.journey_planner_api.constants import JOURNEY_PLANNER_BASE_URL
from sl_cli.adapters.transport_api.constants import TRANSPORT_BASE_URL

CONFIG_DIR_NAME = "sl-cli"
CONFIG_FILE_NAME = "config.json"
DEFAULT_TIMEZONE = "Europe/Stockholm"


class AppSettings(BaseSettings):
    """Runtime settings following 12-factor principles."""

    model_config = SettingsConfigDict(
        env_prefix="SLCLI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API configuration
    journey_planner_base_url: str = Field(
        default=JOURNEY_PLANNER_BASE_URL, description="Base URL of the SL Journey Planner v2 API"
    )
    transport_base_url: str = Field(
        default=TRANSPORT_BASE_URL, description="Base URL of the SL Transport v1 API"
    )
    http_timeout_seconds: float = Field(
        default=30.0, description="Total timeout for a single HTTP request in seconds"
    )

    # User defaults
    origin: str | None = Field(
        default=None, description="Default trip origin, overrides the config file value"
    )
    timezone: str = Field(
        default=DEFAULT_TIMEZONE,
        description="Timezone for displayed times and naive --depart/--arrive values (IANA name)",
    )
    config_home: str | None = Field(
        default=None,
        description="Directory holding the sl-cli config folder (defaults to $XDG_CONFIG_HOME or ~/.config)",
    )

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate timezone is a known IANA name."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"timezone must be a valid IANA timezone name, got '{v}'") from e
        return v

    @field_validator("http_timeout_seconds")
    @classmethod
    def validate_http_timeout(cls, v: float) -> float:
        """Validate the timeout is positive."""
        if v <= 0:
            raise ValueError("http_timeout_seconds must be positive")
        return v

    def config_path(self) -> Path:
        """Path of the user preferences file."""
        base = self.config_home or os.environ.get("XDG_CONFIG_HOME")
        base_dir = Path(base) if base else Path.home() / ".config"
        return base_dir / CONFIG_DIR_NAME / CONFIG_FILE_NAME
