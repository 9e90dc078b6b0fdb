"""Abstract base class for corpus backends."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path


class _AbstractBackend(ABC):
    """Document store the reference components read from and write to.

    Documents and assets are named by their vault-relative POSIX path,
    which doubles as their identity.
    """

    @abstractmethod
    def iter_documents(self) -> Iterator[str]:
        """Iterate over all markdown documents."""
        pass

    @abstractmethod
    def iter_files(self) -> Iterator[str]:
        """Iterate over every file link targets can resolve to."""
        pass

    @abstractmethod
    async def read(self, doc_id: str) -> str:
        """Return the full text of a document."""
        pass

    @abstractmethod
    async def write(self, doc_id: str, text: str) -> None:
        """Replace the full text of a document."""
        pass

    @abstractmethod
    def to_identity(self, path: Path | str) -> str | None:
        """Map a filesystem path to an identity, or None if it is outside the vault."""
        pass
