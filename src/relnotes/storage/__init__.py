"""Persistence of the relnotes configuration document."""

from relnotes.storage.config_store import DEFAULT_CONFIG_FILE, ConfigStore

__all__ = [
    "ConfigStore",
    "DEFAULT_CONFIG_FILE",
]
