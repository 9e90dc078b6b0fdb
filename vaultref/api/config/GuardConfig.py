"""Rename guard configuration."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class GuardConfig(BaseModel):
    """Time windows used to suppress duplicate rename notifications."""

    model_config = ConfigDict(extra="forbid")

    window_seconds: float = Field(2.0, gt=0, description="Reject a repeated transition admitted this recently")
    retention_seconds: float = Field(5.0, gt=0, description="Forget admitted transitions older than this")

    @model_validator(mode="after")
    def _retention_covers_window(self) -> "GuardConfig":
        if self.retention_seconds < self.window_seconds:
            raise ValueError("retention_seconds must be >= window_seconds")
        return self
