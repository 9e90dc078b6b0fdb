"""Markdown image model (UNO: single model)."""

from __future__ import annotations

import re
from dataclasses import dataclass, replace

from ._constants import MARKDOWN_IMAGE_PATTERN

_TARGET_PATTERN = re.compile(r"(\s*)(\S+)(.*)$", re.DOTALL)


@dataclass(frozen=True)
class MarkdownImage:
    """A parsed ``![alt](target "title")`` token.

    ``rest`` keeps whatever followed the target inside the parentheses
    (typically an optional title) verbatim. The format carries no size.
    """

    alt: str
    target: str
    rest: str = ""
    angle: bool = False
    lead: str = ""

    @classmethod
    def parse(cls, token: str) -> MarkdownImage | None:
        """Parse the first markdown image in ``token``; None if there is none."""
        match = MARKDOWN_IMAGE_PATTERN.search(token)
        if not match:
            return None
        alt = match.group(1)
        inner = match.group(2)

        stripped = inner.lstrip()
        lead = inner[: len(inner) - len(stripped)]
        if stripped.startswith("<") and ">" in stripped:
            close = stripped.index(">")
            return cls(alt=alt, target=stripped[1:close], rest=stripped[close + 1 :], angle=True, lead=lead)

        parts = _TARGET_PATTERN.match(inner)
        if not parts:
            return None
        return cls(alt=alt, target=parts.group(2), rest=parts.group(3), lead=parts.group(1))

    def build(self) -> str:
        target = f"<{self.target}>" if self.angle else self.target
        return f"![{self.alt}]({self.lead}{target}{self.rest})"

    def with_target(self, target: str) -> MarkdownImage:
        return replace(self, target=target)

    def with_alt(self, alt: str) -> MarkdownImage:
        return replace(self, alt=alt)
