"""Configuration persistence manager."""

import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any

from .config import LookupConfig
from .defaults import create_default_config

logger = logging.getLogger(__name__)


class ConfigManager:
    """Save and load the user configuration as JSON.

    Path values are stored as strings. A missing or unreadable file falls
    back to the default configuration.
    """

    CONFIG_FILE = Path.home() / ".lexilookup" / "config.json"

    PATH_KEYS = {"grammalecte_dir", "checker_script", "state_file"}

    @classmethod
    def save_config(cls, config: LookupConfig) -> None:
        """Save configuration to JSON file.

        Args:
            config: Configuration to save

        Raises:
            OSError: If unable to create directory or write file
        """
        cls.CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)

        config_dict = cls._paths_to_strings(asdict(config))

        with cls.CONFIG_FILE.open("w", encoding="utf-8") as f:
            json.dump(config_dict, f, indent=2, ensure_ascii=False)

    @classmethod
    def load_config(cls, **overrides) -> LookupConfig:
        """Load configuration from JSON file.

        Args:
            **overrides: Values taking precedence over the stored ones

        Returns:
            Loaded configuration, or the default one if the file doesn't exist
            or is invalid
        """
        if not cls.CONFIG_FILE.exists():
            return create_default_config(**overrides)

        try:
            with cls.CONFIG_FILE.open("r", encoding="utf-8") as f:
                config_dict = json.load(f)

            config_dict = cls._strings_to_paths(config_dict)
            config_dict.update(overrides)
            return LookupConfig(**config_dict)

        except (json.JSONDecodeError, TypeError, ValueError) as e:
            logger.warning(f"Invalid config file, using defaults: {e}")
            return create_default_config(**overrides)

    @classmethod
    def config_exists(cls) -> bool:
        """Check if configuration file exists."""
        return cls.CONFIG_FILE.exists()

    @classmethod
    def delete_config(cls) -> None:
        """Delete the configuration file."""
        if cls.CONFIG_FILE.exists():
            cls.CONFIG_FILE.unlink()

    @staticmethod
    def _paths_to_strings(data: dict[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, value in data.items():
            if isinstance(value, Path):
                result[key] = str(value)
            elif isinstance(value, list):
                result[key] = [str(item) if isinstance(item, Path) else item for item in value]
            else:
                result[key] = value
        return result

    @classmethod
    def _strings_to_paths(cls, data: dict[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for key, value in data.items():
            if key in cls.PATH_KEYS and isinstance(value, str):
                result[key] = Path(value)
            else:
                result[key] = value
        return result
