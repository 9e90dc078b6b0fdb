"""Inline code span detection (private)."""

import re

_BACKTICK_RUN = re.compile(r"`+")

# Link syntax wrapped in backticks somewhere on the line
_WRAPPED_LINK_PATTERNS = (
    re.compile(r"`[^`]*!?\[\[[^\]]*\]\][^`]*`"),
    re.compile(r"`[^`]*!\[[^\]]*\]\([^)]*\)[^`]*`"),
    re.compile(r"`[^`]*<img[^>]*>[^`]*`", re.IGNORECASE),
)


def _inline_code_spans(line: str) -> list[tuple[int, int]]:
    """Return ``(start, end)`` column spans of inline code, backticks included.

    An opening run of N backticks is closed by the next run of exactly N
    backticks; a run with no partner is literal text.
    """
    runs = [(m.start(), m.end()) for m in _BACKTICK_RUN.finditer(line)]
    spans: list[tuple[int, int]] = []
    i = 0
    while i < len(runs):
        open_start, open_end = runs[i]
        width = open_end - open_start
        for j in range(i + 1, len(runs)):
            close_start, close_end = runs[j]
            if close_end - close_start == width:
                spans.append((open_start, close_end))
                i = j + 1
                break
        else:
            i += 1
    return spans


def _is_inline_code(line: str, span: tuple[int, int] | None = None) -> bool:
    """Return True if ``span`` (or, without a span, any link) sits in inline code."""
    stripped = line.strip()
    if stripped.startswith("`") and stripped.endswith("`"):
        spans = _inline_code_spans(stripped)
        if len(spans) == 1 and spans[0] == (0, len(stripped)):
            return True

    if span is not None:
        start, end = span
        return any(s <= start and end <= e for s, e in _inline_code_spans(line))

    return any(pattern.search(line) for pattern in _WRAPPED_LINK_PATTERNS)
