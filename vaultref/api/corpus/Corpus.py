"""Corpus public API."""

from collections.abc import Iterator
from importlib import import_module
from pathlib import Path
from typing import Any

from ..config.VaultConfig import VaultConfig
from ._AbstractBackend import _AbstractBackend


class Corpus(_AbstractBackend):
    """Facade for document access.

    Delegates to a concrete backend based on configuration.
    Acts as a Context Manager to ensure proper resource handling.
    """

    def __init__(self, vault_config: VaultConfig):
        self.vault_config = vault_config
        self.type = vault_config.type
        self._backend: _AbstractBackend | None = None

    def __enter__(self) -> "Corpus":
        from ..config.VaultConfig import _BACKEND_REGISTRY

        backend_type = self.vault_config.type
        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")

        # Pattern: vaultref.api.corpus._filesystem._Backend
        module = import_module(f"{_BACKEND_REGISTRY[backend_type]}._Backend")
        self._backend = module._Backend(Path(self.vault_config.base_dir))
        if hasattr(self._backend, "__enter__"):
            self._backend.__enter__()  # type: ignore
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        if self._backend and hasattr(self._backend, "__exit__"):
            self._backend.__exit__(exc_type, exc_val, exc_tb)  # type: ignore
        self._backend = None

    @property
    def backend(self) -> _AbstractBackend:
        if self._backend is None:
            raise RuntimeError("Corpus not initialized (use 'with Corpus(...)')")
        return self._backend

    @property
    def vault_path(self) -> Path:
        """Root directory of the vault."""
        return Path(self.vault_config.base_dir)

    def iter_documents(self) -> Iterator[str]:
        return self.backend.iter_documents()

    def iter_files(self) -> Iterator[str]:
        return self.backend.iter_files()

    async def read(self, doc_id: str) -> str:
        return await self.backend.read(doc_id)

    async def write(self, doc_id: str, text: str) -> None:
        await self.backend.write(doc_id, text)

    def to_identity(self, path: Path | str) -> str | None:
        return self.backend.to_identity(path)
