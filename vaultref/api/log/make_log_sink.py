"""Build the ``(level, message)`` sink handed to the reference components."""

from collections.abc import Callable
from typing import TYPE_CHECKING

from .append_log import append_log

if TYPE_CHECKING:
    from ..config.VaultrefConfig import VaultrefConfig

LogSink = Callable[[str, str], None]


def make_log_sink(config: "VaultrefConfig", domain: str) -> LogSink:
    """Return a sink that writes entries at or above ``config.log.level``."""
    log_path = config.get_logfile_path()

    def sink(level: str, message: str) -> None:
        if config.log.enabled(level):
            append_log(log_path, domain, level.upper(), message)

    return sink


def null_sink(level: str, message: str) -> None:  # noqa: ARG001
    """Discard log entries."""
