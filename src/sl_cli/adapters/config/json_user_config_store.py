"""JSON file store for user preferences."""

import json
import logging
import os
import tempfile
from pathlib import Path

from sl_cli.domain.models.user_config import UserConfig
from sl_cli.domain.ports.user_config_store import UserConfigStore

logger = logging.getLogger(__name__)


class JsonUserConfigStore(UserConfigStore):
    """Persists UserConfig as a JSON object in a single file."""

    def __init__(self, path: Path) -> None:
        """Initialize with the path of the config file."""
        self.path = path

    def load(self) -> UserConfig:
        """Load preferences from disk.

        Returns:
            The stored config, or an empty config when the file does not exist.

        Raises:
            ValueError: If the file is not a JSON object.
        """
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug(f"No config file at {self.path}, using empty config")
            return UserConfig()

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ValueError(f"Config file {self.path} is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"Config file {self.path} must contain a JSON object")
        return UserConfig.model_validate(data)

    def save(self, config: UserConfig) -> None:
        """Replace the config file with the given preferences."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        content = json.dumps(config.model_dump(exclude_none=True), indent=2, ensure_ascii=False)

        # Write next to the target so os.replace stays on one filesystem
        fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=".config-", suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug(f"Wrote config file {self.path}")
