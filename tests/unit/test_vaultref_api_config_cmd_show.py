"""Unit tests for vaultref.api.config.cmd_show."""

from tests.unit.conftest import run_cmd
from vaultref.api.config.cmd_show import cmd_show


def test_show_all(vaultref_home, vault_dir):
    result = run_cmd(cmd_show)
    assert result.success is True
    assert result.output["config_path"] == str(vaultref_home.resolve() / "config.json")
    content = result.output["content"]
    assert set(content) == {"vault", "log", "guard", "watch", "hints"}
    assert content["vault"]["base_dir"] == str(vault_dir)


def test_show_section(vaultref_home):  # noqa: ARG001
    result = run_cmd(cmd_show, "guard")
    assert result.success is True
    assert result.output["content"] == {"guard": {"window_seconds": 2.0, "retention_seconds": 5.0}}


def test_unknown_section(vaultref_home):  # noqa: ARG001
    result = run_cmd(cmd_show, "nope")
    assert result.success is False
    assert result.output["errors"] == ["Unknown section: nope"]


def test_missing_config(tmp_path, monkeypatch):
    monkeypatch.setenv("VAULTREF_HOME", str(tmp_path / "empty"))
    result = run_cmd(cmd_show)
    assert result.success is False
    assert "not found" in result.output["errors"][0]
