"""Normalize a user supplied path.

Expands the user home directory (~) and returns an absolute path
WITHOUT resolving symlinks, so a vault reached through a symlink keeps
the path the user configured.
"""

from pathlib import Path


def normalize_path(path: str | Path) -> Path:
    expanded = Path(path).expanduser()
    if not expanded.is_absolute():
        expanded = Path.cwd() / expanded
    return expanded
