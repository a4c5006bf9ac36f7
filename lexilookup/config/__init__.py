"""Configuration management for lexilookup."""

from .config import LookupConfig
from .config_manager import ConfigManager
from .defaults import create_default_config

__all__ = ["LookupConfig", "ConfigManager", "create_default_config"]
