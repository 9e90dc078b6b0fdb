"""Wiki link parser (UNO: single function)."""

from ._constants import SIZE_PATTERN, WIKI_LINK_PATTERN
from .LinkParts import LinkParts


def split_segments(inner: str) -> tuple[list[str], bool]:
    """Split the inside of ``[[...]]`` on pipes.

    Handles both regular pipes (|) and escaped pipes (\\|) used in tables.

    Returns:
        The segments and whether the escaped pipe form was used.
    """
    if "\\|" in inner:
        return inner.split("\\|"), True
    return inner.split("|"), False


def parse_wiki_link(token: str) -> LinkParts:
    """Parse ``![[path|text|size]]`` or ``[[path|text|size]]``.

    The first segment is the path. Each remaining segment is a size if it
    looks like ``100`` or ``100x200`` and no size was seen yet; otherwise
    the first such segment becomes the display text. Later segments are
    dropped once both are known. An all-numeric caption ("2024") is read
    as a width.

    Args:
        token: Text containing a wiki link

    Returns:
        LinkParts; empty when ``token`` holds no wiki link
    """
    match = WIKI_LINK_PATTERN.search(token)
    if not match:
        return LinkParts()

    segments, _ = split_segments(match.group(2))
    path = segments[0].strip()
    display_text = ""
    width: int | None = None
    height: int | None = None

    for segment in segments[1:]:
        part = segment.strip()
        size = SIZE_PATTERN.match(part)
        if size and width is None:
            width = int(size.group(1))
            if size.group(2):
                height = int(size.group(2))
        elif not display_text:
            display_text = part

    return LinkParts(path=path, display_text=display_text, width=width, height=height)
