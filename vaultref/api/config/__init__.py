"""Configuration models for vaultref."""

from .GuardConfig import GuardConfig
from .LogConfig import LogConfig
from .VaultConfig import VaultConfig
from .VaultrefConfig import VaultrefConfig
from .WatchConfig import WatchConfig

__all__ = [
    "GuardConfig",
    "LogConfig",
    "VaultConfig",
    "VaultrefConfig",
    "WatchConfig",
]
