"""User config store port."""

from typing import Protocol

from sl_cli.domain.models.user_config import UserConfig


class UserConfigStore(Protocol):
    """Port for reading and writing persisted user preferences."""

    def load(self) -> UserConfig:
        """Load preferences; a missing store yields an empty config."""
        ...

    def save(self, config: UserConfig) -> None:
        """Replace the stored preferences."""
        ...
