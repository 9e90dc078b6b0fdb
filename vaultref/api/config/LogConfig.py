"""Log configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LOG_LEVELS = ("DEBUG", "INFO", "WARN", "ERROR")


class LogConfig(BaseModel):
    """Unified logfile configuration."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = Field("INFO", description="Lowest level written to the logfile")

    def enabled(self, level: str) -> bool:
        """Return True if entries at ``level`` should be written."""
        level = level.upper()
        if level not in LOG_LEVELS:
            return True
        return LOG_LEVELS.index(level) >= LOG_LEVELS.index(self.level)
