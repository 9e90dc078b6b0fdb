"""Filesystem event handler for the rename watcher."""

import threading

from watchdog.events import FileSystemEvent, FileSystemEventHandler

from .FilesystemEvents import FilesystemEvents


class _EventHandler(FileSystemEventHandler):
    """Accumulates file moves until the watcher drains them."""

    def __init__(self) -> None:
        super().__init__()
        self._moved: dict[str, str] = {}
        self._lock = threading.Lock()

    def on_moved(self, event: FileSystemEvent) -> None:
        if not event.is_directory:
            with self._lock:
                # A later move of the same source replaces the earlier one
                self._moved[str(event.src_path)] = str(event.dest_path)

    def get_and_clear_events(self) -> FilesystemEvents:
        with self._lock:
            moved = list(self._moved.items())
            self._moved.clear()
        return FilesystemEvents(moved=moved)
