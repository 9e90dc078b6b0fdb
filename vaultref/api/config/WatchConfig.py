"""Rename watcher configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_IMAGE_EXTENSIONS = ["png", "jpg", "jpeg", "gif", "bmp", "webp", "svg"]


class WatchConfig(BaseModel):
    """Settings for the filesystem rename watcher."""

    model_config = ConfigDict(extra="forbid")

    poll_interval: float = Field(0.5, gt=0, description="Seconds between event queue drains")
    image_extensions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_IMAGE_EXTENSIONS),
        description="File extensions treated as image assets",
    )

    @field_validator("image_extensions")
    @classmethod
    def _normalize_extensions(cls, v: list[str]) -> list[str]:
        return [ext.lower().lstrip(".") for ext in v if ext.strip()]

    def is_image(self, path: str) -> bool:
        """Return True if ``path`` has one of the configured image extensions."""
        name = path.rsplit("/", 1)[-1]
        if "." not in name:
            return False
        return name.rsplit(".", 1)[-1].lower() in self.image_extensions
