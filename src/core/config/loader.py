"""YAML configuration file loader."""

from pathlib import Path
from typing import Any

import yaml

from src.core.exceptions.errors import ConfigurationError


class ConfigLoader:
    """Load a YAML configuration file and hand out its sections."""

    def __init__(self, config_path: Path | str | None = None) -> None:
        """Initialize the config loader.

        Args:
            config_path: Path to configuration file.
        """
        self.config_path = Path(config_path) if config_path else None
        self._config: dict[str, Any] = {}

    def load(self, path: Path | str | None = None) -> dict[str, Any]:
        """Load configuration from a YAML file.

        Args:
            path: Path to YAML file. Uses config_path if not provided.

        Returns:
            Loaded configuration dictionary. An empty file yields {}.

        Raises:
            ConfigurationError: If the file is missing, unparsable, or its
                top level is not a mapping.
        """
        load_path = Path(path) if path else self.config_path
        if not load_path:
            return {}

        try:
            with open(load_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(
                f"Configuration file not found: {load_path}",
                config_key=str(load_path),
                details={"path": str(load_path)},
            ) from e
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Invalid YAML in configuration file: {load_path}",
                config_key=str(load_path),
                details={"error": str(e)},
            ) from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration root must be a mapping: {load_path}",
                config_key=str(load_path),
                details={"type": type(data).__name__},
            )

        self._config = data
        return self._config

    def get_section(self, section: str) -> dict[str, Any]:
        """Get an entire configuration section.

        Sections that are absent, empty or not mappings come back as {}.
        """
        result = self._config.get(section)
        return result if isinstance(result, dict) else {}
