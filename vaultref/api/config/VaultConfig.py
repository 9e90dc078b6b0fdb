"""Vault configuration management."""

from __future__ import annotations

__all__ = ["VaultConfig"]

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class VaultConfig(BaseModel):
    """Vault configuration model."""

    model_config = ConfigDict(extra="forbid")

    type: str = Field(..., description="Corpus backend type")
    base_dir: str = Field(..., description="Path to vault root directory")

    @field_validator("base_dir")
    @classmethod
    def _normalize_base_dir(cls, v: str) -> str:
        from .normalize_path import normalize_path

        return str(normalize_path(v))

    @classmethod
    def from_config_dict(cls, config: dict[str, Any]) -> VaultConfig:
        """Load vault config from config dict."""
        vault_config = config.get("vault")
        if not vault_config:
            raise ValueError("vault section is required in config")
        return cls(**vault_config)


_BACKEND_REGISTRY = {
    "filesystem": "vaultref.api.corpus._filesystem",
    "memory": "vaultref.api.corpus._memory",
}
