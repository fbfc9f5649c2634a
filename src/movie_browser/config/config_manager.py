"""Configuration management."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import ValidationError

from ..utils.exceptions import ConfigurationError
from .models import Config

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages application configuration loading and validation."""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize config manager.

        Args:
            config_path: Path to configuration file. If None, searches standard locations.
        """
        self._config_path = config_path
        self._config: Optional[Config] = None

    def load_config(self) -> Config:
        """Load and validate configuration.

        Returns:
            Validated configuration object. Built-in defaults are used when no
            configuration file exists in the standard locations.

        Raises:
            FileNotFoundError: If an explicit configuration file is not found.
            ConfigurationError: If configuration is invalid.
            yaml.YAMLError: If YAML parsing fails.
        """
        if self._config is not None:
            return self._config

        config_path = self._find_config_file()
        if config_path is None:
            logger.debug("No configuration file found, using defaults")
            self._config = Config()
            return self._config

        raw_config = self._load_yaml_file(config_path)

        try:
            self._config = Config(**raw_config)
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed: {e}")

        return self._config

    def reload_config(self) -> Config:
        """Reload configuration from file.

        Returns:
            Newly loaded configuration object.
        """
        self._config = None
        return self.load_config()

    def get_config(self) -> Config:
        """Get current configuration, loading if necessary.

        Returns:
            Current configuration object.
        """
        if self._config is None:
            return self.load_config()
        return self._config

    @staticmethod
    def search_paths() -> List[Path]:
        """Standard configuration locations, in lookup order."""
        paths = [
            Path.cwd() / "config" / "config.yaml",
            Path.cwd() / "config.yaml",
            Path.home() / ".config" / "movie_browser" / "config.yaml",
        ]

        env_config = os.getenv("MOVIE_BROWSER_CONFIG")
        if env_config:
            paths.insert(0, Path(env_config))

        return paths

    def _find_config_file(self) -> Optional[Path]:
        """Find configuration file in standard locations.

        Returns:
            Path to configuration file, or None if none of the standard locations exist.

        Raises:
            FileNotFoundError: If the explicit configuration path does not exist.
        """
        if self._config_path is not None:
            if self._config_path.exists():
                return self._config_path
            raise FileNotFoundError(f"Configuration file not found: {self._config_path}")

        for path in self.search_paths():
            if path.exists():
                return path

        return None

    def _load_yaml_file(self, path: Path) -> Dict[str, Any]:
        """Load YAML file with environment variable expansion.

        Variables from a ``.env`` file in the working directory are loaded first.

        Args:
            path: Path to YAML file.

        Returns:
            Parsed YAML data with environment variables expanded.

        Raises:
            yaml.YAMLError: If YAML parsing fails.
        """
        load_dotenv()

        with open(path, "r", encoding="utf-8") as f:
            content = f.read()

        content = os.path.expandvars(content)

        try:
            result = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise yaml.YAMLError(f"Failed to parse YAML file {path}: {e}")

        if result is None:
            return {}
        if not isinstance(result, dict):
            raise yaml.YAMLError(f"YAML file {path} must contain a dictionary at root level")
        return result

    @classmethod
    def create_default_config(cls, output_path: Path) -> None:
        """Create a default configuration file.

        Args:
            output_path: Path where to create the configuration file.
        """
        default_config = Config().model_dump(mode="json")

        with open(output_path, "w", encoding="utf-8") as f:
            yaml.dump(
                default_config,
                f,
                default_flow_style=False,
                indent=2,
                allow_unicode=True,
                sort_keys=False,
            )

    def validate_config_file(self, config_path: Path) -> bool:
        """Validate a configuration file without loading it as current config.

        Args:
            config_path: Path to configuration file to validate.

        Returns:
            True if configuration is valid, False otherwise.
        """
        try:
            raw_config = self._load_yaml_file(config_path)
            Config(**raw_config)
            return True
        except (ValidationError, yaml.YAMLError, FileNotFoundError):
            return False
