"""Wiki link builder (UNO: single function)."""

from .LinkParts import LinkParts


def build_wiki_link(parts: LinkParts, embed: bool = True, escaped_pipe: bool = False) -> str:
    """Build a wiki link in canonical form: path, display text, size.

    Args:
        parts: Fields to emit
        embed: Prefix with ``!`` (image embed)
        escaped_pipe: Separate segments with ``\\|`` (links inside tables)

    Returns:
        The link token, e.g. ``![[image.png|Title|100x200]]``
    """
    sep = "\\|" if escaped_pipe else "|"
    content = parts.path
    if parts.display_text:
        content += f"{sep}{parts.display_text}"
    if parts.width is not None:
        if parts.height is not None:
            content += f"{sep}{parts.width}x{parts.height}"
        else:
            content += f"{sep}{parts.width}"
    prefix = "!" if embed else ""
    return f"{prefix}[[{content}]]"
