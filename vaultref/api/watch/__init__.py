"""Rename watcher: filesystem moves become rename notifications."""

from .FilesystemEvents import FilesystemEvents
from .RenameWatcher import RenameWatcher

__all__ = ["FilesystemEvents", "RenameWatcher"]
