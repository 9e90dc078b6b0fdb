"""In-memory corpus backend for embedding and tests."""

from __future__ import annotations

import posixpath
from collections.abc import Iterator
from pathlib import Path

from .._AbstractBackend import _AbstractBackend


class _Backend(_AbstractBackend):
    """Corpus held in dictionaries; documents are files ending in ``.md``."""

    def __init__(self, vault_path: Path | None = None, *, documents: dict[str, str] | None = None, files=()):
        self._vault_path = Path(vault_path) if vault_path is not None else Path("/")
        self.documents: dict[str, str] = dict(documents or {})
        self.files: set[str] = set(files)
        self.writes: list[str] = []

    def iter_documents(self) -> Iterator[str]:
        yield from sorted(self.documents)

    def iter_files(self) -> Iterator[str]:
        yield from sorted(self.files | set(self.documents))

    async def read(self, doc_id: str) -> str:
        try:
            return self.documents[doc_id]
        except KeyError:
            raise FileNotFoundError(doc_id) from None

    async def write(self, doc_id: str, text: str) -> None:
        self.documents[doc_id] = text
        self.writes.append(doc_id)

    def move(self, old: str, new: str) -> None:
        """Rename an asset, as the host would before notifying us."""
        self.files.discard(old)
        self.files.add(new)

    def to_identity(self, path: Path | str) -> str | None:
        text = Path(path).as_posix()
        root = self._vault_path.as_posix().rstrip("/")
        if root and text.startswith(root + "/"):
            text = text[len(root) + 1 :]
        elif root and text.startswith("/"):
            return None
        text = posixpath.normpath(text)
        if text.startswith("../") or text == "..":
            return None
        return text.lstrip("/")
