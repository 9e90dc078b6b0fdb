"""Duplicate-rename guard (UNO: single class)."""

import time
from collections.abc import Callable

from ..config.GuardConfig import GuardConfig


class RenameGuard:
    """Admits each (old, new) rename at most once per window.

    Hosts often deliver the same rename more than once in quick
    succession. Entries are pruned lazily on every check once they are
    older than the retention period.
    """

    def __init__(self, config: GuardConfig | None = None, clock: Callable[[], float] = time.monotonic):
        self.config = config or GuardConfig()
        self._clock = clock
        self._entries: dict[tuple[str, str], float] = {}

    def admit(self, old: str, new: str) -> bool:
        """Return True if this rename should be processed now."""
        now = self._clock()
        self._prune(now)
        key = (old, new)
        last = self._entries.get(key)
        if last is not None and now - last < self.config.window_seconds:
            return False
        self._entries[key] = now
        return True

    def _prune(self, now: float) -> None:
        retention = self.config.retention_seconds
        for key in [k for k, ts in self._entries.items() if now - ts > retention]:
            del self._entries[key]

    def __len__(self) -> int:
        return len(self._entries)
