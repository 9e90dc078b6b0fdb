"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command."""

    config_path: str = Field(..., description="Path to the configuration file")
    content: dict[str, Any] = Field(..., description="Loaded configuration, empty dict if loading failed")
