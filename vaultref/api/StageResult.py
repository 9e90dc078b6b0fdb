"""StageResult dataclass for 4-stage command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """Result from a command function following the 4-stage pattern.

    ``announce`` is shown before any work starts, ``progress_callback`` is a
    generator that does the work and yields ``(fraction, message)`` pairs, and
    it must leave ``result``, ``output`` and ``success`` filled in.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False
