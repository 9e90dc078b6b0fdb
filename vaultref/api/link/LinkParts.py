"""Link parts model."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LinkParts:
    """Fields carried by a link token: target path, display text and size."""

    path: str = ""
    display_text: str = ""
    width: int | None = None
    height: int | None = None
