"""Unit tests for the vaultref CLI entry point."""

import json

import pytest

from tests.conftest import write_vault
from vaultref import __version__
from vaultref.cli import main


@pytest.fixture
def vault(vaultref_home, vault_dir):  # noqa: ARG001
    write_vault(vault_dir, {"note.md": "![[photo.png]]\n", "photo.png": b"\x89PNG"})
    return vault_dir


def test_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == f"vaultref {__version__}"


def test_refs_find_yaml(vault, capsys):  # noqa: ARG001
    assert main(["refs", "find", "photo.png"]) == 0
    out = capsys.readouterr().out
    assert "count: 1" in out
    assert "success: true" in out


def test_refs_find_json(vault, capsys):  # noqa: ARG001
    assert main(["--display", "json", "refs", "find", "photo.png"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["count"] == 1
    assert data["occurrences"][0]["file"] == "note.md"


def test_refs_rewrite(vault, capsys):
    assert main(["-d", "json", "refs", "rewrite", "photo.png", "pics/photo.png"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["updated_file_count"] == 1
    assert (vault / "note.md").read_text() == "![[pics/photo.png]]\n"


def test_invalid_display(capsys):
    assert main(["--display", "xml", "refs", "find", "photo.png"]) == 1
    assert "--display must be" in capsys.readouterr().err


def test_failed_command_exits_nonzero(vaultref_home, capsys):  # noqa: ARG001
    assert main(["config", "show", "nope"]) == 1
    assert "Unknown section" in capsys.readouterr().out


def test_no_command_shows_help(capsys):
    assert main([]) == 0
    assert "refs" in capsys.readouterr().out
