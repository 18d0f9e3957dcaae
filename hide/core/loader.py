# hide/core/loader.py

"""Loader and saver for the persisted set of sensitive keys."""

import yaml
import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from hide.core.domain import KeysConfig
from hide.core.exceptions import ConfigLoadFailed, ConfigStoreFailed

logger = logging.getLogger(__name__)


class KeysConfigLoader:
    """Reads and writes the YAML record listing the keys to redact.

    The file looks like::

        sensitive_keys:
        - password
        - token

    A missing file is not an error: it reads as an empty configuration and
    is created on the first save.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def load(self) -> KeysConfig:
        """Loads the key configuration from disk.

        Returns:
            Parsed configuration, empty if the file does not exist yet

        Raises:
            ConfigLoadFailed: If the file is unreadable, not valid YAML, or
                does not describe a set of keys.
        """
        if not self.path.exists():
            logger.debug(
                "Configuration file not found, starting with no keys",
                extra={"config_path": str(self.path)},
            )
            return KeysConfig()

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"YAML parsing error: {e}", exc_info=True)
            raise ConfigLoadFailed(self.path, f"invalid YAML: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Configuration loading failed: {e}", exc_info=True)
            raise ConfigLoadFailed(self.path, str(e)) from e

        # An empty file is a valid, empty configuration
        if raw is None:
            raw = {}

        if not isinstance(raw, dict):
            raise ConfigLoadFailed(self.path, "expected a mapping at top level")

        try:
            config = KeysConfig.model_validate(raw)
        except ValidationError as e:
            raise ConfigLoadFailed(self.path, f"invalid configuration: {e}") from e

        logger.info(
            "Configuration loaded successfully",
            extra={
                "config_path": str(self.path),
                "key_count": len(config.sensitive_keys),
            },
        )
        return config

    def save(self, config: KeysConfig) -> None:
        """Writes the full key set, replacing any previous content.

        Raises:
            ConfigStoreFailed: If the file or its directory cannot be written.
        """
        data = {"sensitive_keys": sorted(config.sensitive_keys)}

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                yaml.safe_dump(data, f, allow_unicode=True, default_flow_style=False)
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Configuration storing failed: {e}", exc_info=True)
            raise ConfigStoreFailed(self.path, str(e)) from e

        logger.info(
            "Configuration stored",
            extra={"config_path": str(self.path), "key_count": len(data["sensitive_keys"])},
        )
