"""CLI subcommands."""

from lexilookup.config import ConfigManager, LookupConfig


def load_config(args, **overrides) -> LookupConfig:
    """Load the stored configuration, applying command-line overrides."""
    timeout = getattr(args, "timeout", None)
    if timeout is not None:
        overrides["request_timeout"] = timeout
    return ConfigManager.load_config(**overrides)
