"""Shared pytest configuration and fixtures for all tests."""

import asyncio
import json
from pathlib import Path

import pytest

from vaultref.api.config.VaultrefConfig import VaultrefConfig


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without external services")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict(base_dir: str = "~/_vault") -> dict:
    """Minimal valid vaultref configuration dict for testing."""
    return {
        "vault": {
            "type": "filesystem",
            "base_dir": base_dir,
        },
        "log": {"level": "DEBUG"},
    }


def minimal_vaultref_config(base_dir: str = "~/_vault") -> VaultrefConfig:
    """Build a VaultrefConfig from the minimal config dict."""
    return VaultrefConfig(**minimal_config_dict(base_dir))


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    """Pytest fixture returning a copy of the minimal config dict."""
    return minimal_config_dict()


@pytest.fixture
def vault_dir(tmp_path: Path) -> Path:
    """An empty vault directory."""
    path = tmp_path / "vault"
    path.mkdir()
    return path


@pytest.fixture
def vaultref_home(tmp_path: Path, monkeypatch, vault_dir: Path) -> Path:
    """Set up VAULTREF_HOME with a config pointing at ``vault_dir``.

    Returns:
        Path to the vaultref home directory
    """
    home = tmp_path / ".vaultref"
    home.mkdir()
    monkeypatch.setenv("VAULTREF_HOME", str(home))
    (home / "config.json").write_text(json.dumps(minimal_config_dict(str(vault_dir))))
    return home


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def run(coro):
    """Drive a coroutine to completion."""
    return asyncio.run(coro)


def write_vault(root: Path, files: dict[str, str | bytes]) -> None:
    """Create ``files`` (vault-relative path -> content) under ``root``."""
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content, encoding="utf-8")
