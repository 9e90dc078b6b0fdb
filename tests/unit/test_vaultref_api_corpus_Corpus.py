"""Unit tests for vaultref.api.corpus.Corpus and its backends."""

import pytest

from tests.conftest import run, write_vault
from vaultref.api.config.VaultConfig import VaultConfig
from vaultref.api.corpus import Corpus
from vaultref.api.corpus._memory._Backend import _Backend as MemoryBackend


@pytest.fixture
def vault(tmp_path):
    root = tmp_path / "vault"
    write_vault(
        root,
        {
            "a.md": "![[img/p.png]]\n",
            "sub/b.md": "text\n",
            ".obsidian/workspace.md": "hidden\n",
            "img/p.png": b"\x89PNG",
        },
    )
    return root


def test_filesystem_enumeration(vault):
    with Corpus(VaultConfig(type="filesystem", base_dir=str(vault))) as corpus:
        assert list(corpus.iter_documents()) == ["a.md", "sub/b.md"]
        assert set(corpus.iter_files()) == {"a.md", "sub/b.md", "img/p.png"}


def test_filesystem_read_write(vault):
    with Corpus(VaultConfig(type="filesystem", base_dir=str(vault))) as corpus:
        assert run(corpus.read("a.md")) == "![[img/p.png]]\n"
        run(corpus.write("sub/b.md", "changed\n"))
    assert (vault / "sub" / "b.md").read_text(encoding="utf-8") == "changed\n"


def test_filesystem_keeps_crlf(vault):
    (vault / "crlf.md").write_bytes(b"one\r\n![[p.png]]\r\n")
    with Corpus(VaultConfig(type="filesystem", base_dir=str(vault))) as corpus:
        text = run(corpus.read("crlf.md"))
        assert text == "one\r\n![[p.png]]\r\n"
        run(corpus.write("crlf.md", text))
    assert (vault / "crlf.md").read_bytes() == b"one\r\n![[p.png]]\r\n"


def test_filesystem_to_identity(vault, tmp_path):
    with Corpus(VaultConfig(type="filesystem", base_dir=str(vault))) as corpus:
        assert corpus.to_identity(vault / "img" / "p.png") == "img/p.png"
        assert corpus.to_identity(str(tmp_path / "elsewhere.png")) is None
        assert corpus.vault_path == vault


def test_memory_backend_from_registry():
    with Corpus(VaultConfig(type="memory", base_dir="/v")) as corpus:
        assert isinstance(corpus.backend, MemoryBackend)
        run(corpus.write("n.md", "x"))
        assert list(corpus.iter_documents()) == ["n.md"]
        assert corpus.to_identity("/v/img/a.png") == "img/a.png"
        assert corpus.to_identity("/other/a.png") is None


def test_memory_read_missing():
    backend = MemoryBackend()
    with pytest.raises(FileNotFoundError):
        run(backend.read("nope.md"))


def test_unsupported_backend(tmp_path):
    with pytest.raises(ValueError, match="Unsupported backend type"):
        with Corpus(VaultConfig(type="dropbox", base_dir=str(tmp_path))):
            pass


def test_backend_requires_context(tmp_path):
    corpus = Corpus(VaultConfig(type="filesystem", base_dir=str(tmp_path)))
    with pytest.raises(RuntimeError, match="not initialized"):
        list(corpus.iter_documents())
