"""Top-level vaultref configuration."""

import json
import os
from contextlib import suppress
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .GuardConfig import GuardConfig
from .LogConfig import LogConfig
from .VaultConfig import VaultConfig
from .WatchConfig import WatchConfig


class VaultrefConfig(BaseModel):
    """Top-level configuration for the reference tracker."""

    model_config = ConfigDict(extra="forbid")

    vault: VaultConfig
    log: LogConfig = Field(default_factory=LogConfig)
    guard: GuardConfig = Field(default_factory=GuardConfig)
    watch: WatchConfig = Field(default_factory=WatchConfig)
    hints: Literal["markdown", "none"] = "markdown"

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get vaultref home directory based on VAULTREF_HOME or default to ~/.vaultref."""
        home_env = os.environ.get("VAULTREF_HOME")
        if home_env:
            return Path(home_env).expanduser().resolve()
        return Path.home() / ".vaultref"

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to the config file inside the home directory."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def get_logfile_path(cls) -> Path:
        """Get path to the unified logfile inside the home directory."""
        return cls.get_home_dir() / "logfile"

    @classmethod
    def load(cls) -> "VaultrefConfig":
        """Load and validate config from file.

        Raises:
            ValueError: If config file not found, invalid JSON, or validation error
        """
        path = cls.get_config_path()

        if not path.exists():
            raise ValueError(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": (), "type": "value_error", "input": None}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert the configuration to a JSON-serialisable dictionary."""
        return {
            "vault": self.vault.model_dump(),
            "log": self.log.model_dump(),
            "guard": self.guard.model_dump(),
            "watch": self.watch.model_dump(),
            "hints": self.hints,
        }

    def save(self) -> None:
        """Save the current configuration to a JSON file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except Exception as e:
            with suppress(Exception):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
