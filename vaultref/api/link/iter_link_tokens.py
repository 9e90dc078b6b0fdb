"""Link token scanner (UNO: single function)."""

from collections.abc import Iterable, Iterator

from ._constants import ALL_FORMATS, FORMAT_PATTERNS
from .LinkToken import LinkToken


def iter_link_tokens(line: str, formats: Iterable[str] = ALL_FORMATS, start: int = 0) -> Iterator[LinkToken]:
    """Yield link tokens of ``formats`` found in ``line``.

    Tokens are yielded format by format in the order given, each format in
    column order.

    Args:
        line: A single line of markdown (no newline handling is done)
        formats: Formats to scan for
        start: Column to begin scanning at
    """
    for fmt in formats:
        pattern = FORMAT_PATTERNS[fmt]
        for match in pattern.finditer(line, start):
            yield LinkToken(format=fmt, start=match.start(), end=match.end(), text=match.group(0))
