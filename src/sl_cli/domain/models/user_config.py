"""User preferences domain model."""

from typing import Literal, get_args

from pydantic import BaseModel, ConfigDict

ConfigKey = Literal["origin", "home", "work", "timezone"]
CONFIG_KEYS: tuple[str, ...] = get_args(ConfigKey)


class UserConfig(BaseModel):
    """Preferences persisted between invocations.

    Every value is an optional string; keys outside CONFIG_KEYS are dropped
    when loading.
    """

    model_config = ConfigDict(extra="ignore")

    origin: str | None = None
    home: str | None = None
    work: str | None = None
    timezone: str | None = None

    def get(self, key: str) -> str | None:
        """Return the value stored under a config key."""
        return getattr(self, key) if key in CONFIG_KEYS else None

    def with_value(self, key: str, value: str) -> "UserConfig":
        """Return a copy with one key replaced."""
        return self.model_copy(update={key: value})
