"""Reference components wired from configuration (private)."""

from __future__ import annotations

import posixpath
from dataclasses import dataclass
from pathlib import Path

from ..code import make_hint_provider
from ..config.VaultrefConfig import VaultrefConfig
from ..corpus._AbstractBackend import _AbstractBackend
from ..log.make_log_sink import make_log_sink
from .ReferenceEditor import ReferenceEditor
from .ReferenceFinder import ReferenceFinder
from .RenameGuard import RenameGuard
from .RenameService import RenameService
from .RewriteEngine import RewriteEngine


@dataclass
class _Components:
    """Finder, engine, editor and rename service sharing one corpus."""

    corpus: _AbstractBackend
    finder: ReferenceFinder
    engine: RewriteEngine
    editor: ReferenceEditor
    service: RenameService

    @classmethod
    def from_config(cls, config: VaultrefConfig, corpus: _AbstractBackend) -> _Components:
        log = make_log_sink(config, "refs")
        hints = make_hint_provider(config.hints)
        finder = ReferenceFinder(corpus, hints, log=log, watch_config=config.watch)
        engine = RewriteEngine(corpus, hints, log=log)
        service = RenameService(engine, RenameGuard(config.guard), finder=finder, log=log)
        return cls(corpus=corpus, finder=finder, engine=engine, editor=ReferenceEditor(corpus, log=log), service=service)

    def identity(self, path: str) -> str:
        """Turn a CLI path (absolute or vault-relative) into an identity.

        Raises:
            ValueError: If an absolute path lies outside the vault
        """
        if Path(path).is_absolute():
            identity = self.corpus.to_identity(path)
            if identity is None:
                raise ValueError(f"Path is outside the vault: {path}")
            return identity
        return posixpath.normpath(path.replace("\\", "/")).lstrip("/")
