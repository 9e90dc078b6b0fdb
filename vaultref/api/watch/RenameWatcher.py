"""Watchdog-driven source of rename notifications (UNO: single class)."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from pathlib import Path
from typing import Any

from watchdog.observers import Observer

from ..config.WatchConfig import WatchConfig
from ..corpus._AbstractBackend import _AbstractBackend
from ..log.make_log_sink import LogSink, null_sink
from ..refs.RenameService import RenameService
from ._EventHandler import _EventHandler


class RenameWatcher:
    """Feeds image moves seen on disk to a ``RenameService``.

    watchdog delivers events on its own thread; they are queued in the
    handler and drained from the event loop every ``poll_interval``.
    Duplicate notifications are left to the service's guard.
    """

    def __init__(
        self,
        vault_path: Path,
        corpus: _AbstractBackend,
        service: RenameService,
        watch_config: WatchConfig | None = None,
        log: LogSink = null_sink,
        observer_factory: Callable[[], Any] = Observer,
    ):
        self.vault_path = Path(vault_path)
        self.corpus = corpus
        self.service = service
        self.watch_config = watch_config or WatchConfig()
        self.log = log
        self.handler = _EventHandler()
        self._observer_factory = observer_factory
        self.renames_seen = 0
        self.renames_processed = 0

    async def process_pending(self) -> int:
        """Hand every queued image move to the service.

        Returns:
            Number of moves that led to an admitted rewrite
        """
        events = self.handler.get_and_clear_events()
        processed = 0
        for src, dest in events.moved:
            if not self.watch_config.is_image(Path(src).name):
                continue
            old = self.corpus.to_identity(src)
            new = self.corpus.to_identity(dest)
            if old is None or new is None:
                self.log("WARN", f"Ignoring move outside the vault: {src} -> {dest}")
                continue
            self.renames_seen += 1
            result = await self.service.handle_rename(old, new)
            if result is not None:
                processed += 1
        self.renames_processed += processed
        return processed

    async def run(self, stop: asyncio.Event | None = None) -> None:
        """Watch the vault until ``stop`` is set (or forever)."""
        stop = stop or asyncio.Event()
        observer = self._observer_factory()
        observer.schedule(self.handler, str(self.vault_path), recursive=True)
        observer.start()
        self.log("INFO", f"Watching {self.vault_path}")
        try:
            while not stop.is_set():
                await self.process_pending()
                try:
                    await asyncio.wait_for(stop.wait(), timeout=self.watch_config.poll_interval)
                except asyncio.TimeoutError:
                    pass
            await self.process_pending()
        finally:
            observer.stop()
            observer.join()
            self.log("INFO", f"Stopped watching {self.vault_path}")
