"""Filesystem events dataclass for the rename watcher."""

from dataclasses import dataclass, field


@dataclass
class FilesystemEvents:
    """File moves accumulated between two polls.

    All paths are absolute paths as strings, in the order observed.
    """

    moved: list[tuple[str, str]] = field(default_factory=list)

    def is_empty(self) -> bool:
        """Check if there are any events."""
        return not self.moved
