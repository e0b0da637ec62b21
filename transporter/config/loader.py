"""Configuration loader for Transporter.

This module loads the YAML configuration file and provides a singleton
config object for easy access throughout the package.
"""

import os
from pathlib import Path
from typing import Any, cast

import yaml

from ..logging_config import get_module_logger

logger = get_module_logger("config")

CONFIG_FILE_ENV = "TRANSPORTER_CONFIG"
BASE_URI_ENV = "TRANSPORTER_BASE_URI"
DEFAULT_CONFIG_FILE = Path("config") / "transporter.yaml"


class Config:
    """Configuration manager that loads and provides access to the config file."""

    def __init__(
        self, config_dict: dict[str, Any] | None = None, config_file: Path | None = None
    ):
        """
        Initialize the configuration manager.

        Args:
            config_dict: Optional dictionary of config values for testing.
                        If provided, nothing is loaded from disk or the environment.
            config_file: Optional path of the YAML file to load. Defaults to
                        $TRANSPORTER_CONFIG, then config/transporter.yaml.
        """
        self._configs: dict[str, Any]
        self._config_file: Path | None

        if config_dict is not None:
            # Testing mode: use provided config
            self._configs = dict(config_dict)
            self._config_file = None
        else:
            self._configs = {}
            self._config_file = config_file or self._find_config_file()
            self._load_config()

    def _find_config_file(self) -> Path:
        """Find the config file from the environment or the working directory."""
        env_path = os.environ.get(CONFIG_FILE_ENV)
        if env_path:
            return Path(env_path)

        return Path.cwd() / DEFAULT_CONFIG_FILE

    def _load_config(self):
        """Load the YAML configuration file and apply environment overrides."""
        if self._config_file is None:
            return

        if self._config_file.exists():
            with open(self._config_file, encoding="utf-8") as f:
                loaded_config = yaml.safe_load(f)

            if isinstance(loaded_config, dict):
                self._configs.update(loaded_config)
            elif loaded_config is not None:
                logger.warning(
                    f"Config file {self._config_file} must contain a dictionary, "
                    f"got {type(loaded_config).__name__}. Using empty config."
                )
        else:
            logger.debug(f"Config file not found at {self._config_file}")

        base_uri = os.environ.get(BASE_URI_ENV)
        if base_uri:
            section = self._configs.get("transporter")
            if not isinstance(section, dict):
                section = {}
                self._configs["transporter"] = section
            section["base_uri"] = base_uri

    def get(self, path: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation.

        Args:
            path: Dot-separated path to the config value (e.g., "transporter.base_uri")
            default: Default value to return if path is not found

        Returns:
            The configuration value or default if not found

        Example:
            >>> config.get("transporter.base_uri")
            "https://api.example.com"
        """
        parts = path.split(".")
        value = self._configs

        for part in parts:
            if isinstance(value, dict) and part in value:
                value = value[part]
            else:
                return default

        return value

    @property
    def transporter(self) -> dict[str, Any]:
        """Get the transporter section."""
        section = self._configs.get("transporter", {})
        return cast(dict[str, Any], section) if isinstance(section, dict) else {}

    def reload(self):
        """Reload the configuration file. Dict-backed configs keep their values."""
        if self._config_file is None:
            return

        self._configs.clear()
        self._load_config()


# Create a singleton instance
config = Config()
