"""Filesystem corpus backend: a directory of markdown notes and assets."""

from __future__ import annotations

import asyncio
from collections.abc import Iterator
from pathlib import Path

from .._AbstractBackend import _AbstractBackend


def _read_text(path: Path) -> str:
    # newline="" keeps CRLF files byte-identical on write back
    with path.open(encoding="utf-8", newline="") as fh:
        return fh.read()


def _write_text(path: Path, text: str) -> None:
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(text)


class _Backend(_AbstractBackend):
    """Corpus rooted at a vault directory."""

    def __init__(self, vault_path: Path):
        self._vault_path = Path(vault_path)

    @property
    def vault_path(self) -> Path:
        return self._vault_path

    def _iter_paths(self) -> Iterator[Path]:
        for path in sorted(self._vault_path.rglob("*")):
            try:
                rel = path.relative_to(self._vault_path)
            except ValueError:
                continue
            # Skip .obsidian/, .trash/ and other hidden trees
            if any(part.startswith(".") for part in rel.parts):
                continue
            try:
                if not path.is_file():
                    continue
            except (OSError, PermissionError):
                continue
            yield path

    def iter_documents(self) -> Iterator[str]:
        for path in self._iter_paths():
            if path.suffix.lower() == ".md":
                yield path.relative_to(self._vault_path).as_posix()

    def iter_files(self) -> Iterator[str]:
        for path in self._iter_paths():
            yield path.relative_to(self._vault_path).as_posix()

    def _path(self, doc_id: str) -> Path:
        return self._vault_path / doc_id

    async def read(self, doc_id: str) -> str:
        return await asyncio.to_thread(_read_text, self._path(doc_id))

    async def write(self, doc_id: str, text: str) -> None:
        await asyncio.to_thread(_write_text, self._path(doc_id), text)

    def to_identity(self, path: Path | str) -> str | None:
        candidate = Path(path)
        if not candidate.is_absolute():
            candidate = self._vault_path / candidate
        try:
            return candidate.relative_to(self._vault_path).as_posix()
        except ValueError:
            # Vault reached through a symlink: compare resolved forms
            try:
                return candidate.resolve().relative_to(self._vault_path.resolve()).as_posix()
            except (ValueError, OSError):
                return None
