"""Rename notification handler (UNO: single class)."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from ..log.make_log_sink import LogSink, null_sink
from .ReferenceFinder import ReferenceFinder
from .RenameGuard import RenameGuard
from .RenameTransition import RenameTransition
from .RewriteEngine import RewriteEngine
from .RewriteResult import RewriteResult

RenameListener = Callable[[RenameTransition, RewriteResult], Awaitable[None]]


class RenameService:
    """Turns rename notifications into guarded rewrite passes.

    The service owns the guard, so repeated notifications for the same
    move are only processed once per window. Listeners (history
    recorders and the like) are awaited after each admitted rewrite.
    """

    def __init__(
        self,
        engine: RewriteEngine,
        guard: RenameGuard | None = None,
        finder: ReferenceFinder | None = None,
        log: LogSink = null_sink,
    ):
        self.engine = engine
        self.guard = guard or RenameGuard()
        self.finder = finder
        self.log = log
        self._listeners: list[RenameListener] = []

    def add_listener(self, listener: RenameListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_listener(self, listener: RenameListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    async def handle_rename(self, old_path: str, new_path: str) -> RewriteResult | None:
        """Process one rename notification.

        Returns:
            The rewrite result, or None when the guard rejected the notification
        """
        transition = RenameTransition.from_paths(old_path, new_path)
        if not self.guard.admit(transition.old_identity, transition.new_identity):
            self.log("DEBUG", f"Ignoring duplicate rename {transition.old_identity} -> {transition.new_identity}")
            return None

        try:
            result = await self.engine.rewrite(
                transition.old_identity,
                transition.new_identity,
                transition.old_display_name,
                transition.new_display_name,
            )
        except Exception as e:
            self.log("ERROR", f"Rewrite failed for {transition.old_identity} -> {transition.new_identity}: {e}")
            result = RewriteResult(errors=[str(e)])
        finally:
            if self.finder is not None:
                self.finder.invalidate()

        if result.updated_file_count:
            self.log(
                "INFO",
                f"Renamed {transition.old_identity} -> {transition.new_identity}: "
                f"updated {result.updated_file_count} document(s)",
            )
        for error in result.errors:
            self.log("WARN", error)

        for listener in list(self._listeners):
            try:
                await listener(transition, result)
            except Exception as e:
                self.log("ERROR", f"Rename listener failed: {e}")

        return result
