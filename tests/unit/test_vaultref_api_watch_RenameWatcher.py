"""Unit tests for vaultref.api.watch.RenameWatcher."""

import asyncio
from pathlib import Path

from watchdog.events import DirMovedEvent, FileMovedEvent

from tests.unit.conftest import run
from vaultref.api.corpus._memory._Backend import _Backend as MemoryBackend
from vaultref.api.refs import RenameService, RewriteEngine
from vaultref.api.watch import RenameWatcher


class FakeObserver:
    def __init__(self) -> None:
        self.calls: list[str] = []
        self.scheduled = None

    def schedule(self, handler, path, recursive=False):
        self.scheduled = (handler, path, recursive)
        self.calls.append("schedule")

    def start(self):
        self.calls.append("start")

    def stop(self):
        self.calls.append("stop")

    def join(self):
        self.calls.append("join")


def _watcher(documents, files=(), log=None):
    corpus = MemoryBackend(Path("/v"), documents=documents, files=files)
    service = RenameService(RewriteEngine(corpus))
    observer = FakeObserver()
    watcher = RenameWatcher(
        Path("/v"),
        corpus,
        service,
        log=log or (lambda level, msg: None),
        observer_factory=lambda: observer,
    )
    return watcher, corpus, observer


def test_image_move_rewrites_references():
    watcher, corpus, _ = _watcher({"n.md": "![[img/a.png]]"}, files=["img/b.png"])
    watcher.handler.on_moved(FileMovedEvent("/v/img/a.png", "/v/img/b.png"))

    assert run(watcher.process_pending()) == 1
    assert corpus.documents["n.md"] == "![[img/b.png]]"
    assert watcher.renames_seen == 1
    assert watcher.renames_processed == 1


def test_non_image_moves_ignored():
    watcher, corpus, _ = _watcher({"n.md": "[[old.md]]"}, files=["new.md"])
    watcher.handler.on_moved(FileMovedEvent("/v/old.md", "/v/new.md"))
    watcher.handler.on_moved(DirMovedEvent("/v/img", "/v/pics"))

    assert run(watcher.process_pending()) == 0
    assert watcher.renames_seen == 0
    assert corpus.writes == []


def test_moves_outside_vault_logged():
    logged = []
    watcher, _, _ = _watcher({}, log=lambda level, msg: logged.append(level))
    watcher.handler.on_moved(FileMovedEvent("/other/a.png", "/v/a.png"))

    assert run(watcher.process_pending()) == 0
    assert logged == ["WARN"]


def test_events_drained_once():
    watcher, _, _ = _watcher({"n.md": "![[a.png]]"}, files=["b.png"])
    watcher.handler.on_moved(FileMovedEvent("/v/a.png", "/v/b.png"))
    assert watcher.handler.get_and_clear_events().moved == [("/v/a.png", "/v/b.png")]
    assert watcher.handler.get_and_clear_events().is_empty()


def test_run_drains_queue_and_stops_observer():
    watcher, corpus, observer = _watcher({"n.md": "![[a.png]]"}, files=["b.png"])
    watcher.handler.on_moved(FileMovedEvent("/v/a.png", "/v/b.png"))

    async def _run():
        stop = asyncio.Event()
        stop.set()
        await watcher.run(stop)

    run(_run())

    assert observer.calls == ["schedule", "start", "stop", "join"]
    assert observer.scheduled == (watcher.handler, "/v", True)
    assert corpus.documents["n.md"] == "![[b.png]]"
