"""HTML image tag model (UNO: single model)."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from ._constants import HTML_IMG_PATTERN

_OPEN_PATTERN = re.compile(r"^<img\b", re.IGNORECASE)
_CLOSE_PATTERN = re.compile(r"\s*/?>$")
_ATTR_PATTERN = re.compile(r"""([^\s"'<>/=]+)(?:\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s"'=<>`]+)))?""")
_LEADING_INT = re.compile(r"\s*(\d+)")

_KNOWN = ("src", "alt", "width", "height")


@dataclass(frozen=True)
class HtmlAttribute:
    """One attribute of a tag. ``value`` is None for bare boolean attributes."""

    name: str
    value: str | None
    quote: str = '"'
    value_start: int = -1
    value_end: int = -1

    def render(self) -> str:
        if self.value is None:
            return self.name
        quote = self.quote
        if not quote and (not self.value or re.search(r"[\s\"'=<>`]", self.value)):
            quote = '"'
        return f"{self.name}={quote}{self.value}{quote}"


def _to_int(value: str | None) -> int | None:
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


@dataclass(frozen=True)
class HtmlImageTag:
    """A parsed ``<img ...>`` tag.

    Attribute names are matched case-insensitively. Values may be double
    quoted, single quoted or unquoted. ``closing`` keeps the original
    ending (``>``, ``/>`` or `` />``) verbatim.
    """

    raw: str
    attributes: tuple[HtmlAttribute, ...] = field(default_factory=tuple)
    closing: str = ">"

    @classmethod
    def parse(cls, token: str) -> HtmlImageTag | None:
        """Parse the first ``<img>`` tag in ``token``; None if there is none."""
        match = HTML_IMG_PATTERN.search(token)
        if not match:
            return None
        raw = match.group(0)
        opening = _OPEN_PATTERN.match(raw)
        closing = _CLOSE_PATTERN.search(raw)
        if not opening or not closing:
            return None

        body_start = opening.end()
        body = raw[body_start : closing.start()]
        attributes: list[HtmlAttribute] = []
        for attr in _ATTR_PATTERN.finditer(body):
            name = attr.group(1)
            if attr.group(2) is not None:
                value, quote, group = attr.group(2), '"', 2
            elif attr.group(3) is not None:
                value, quote, group = attr.group(3), "'", 3
            elif attr.group(4) is not None:
                value, quote, group = attr.group(4), "", 4
            else:
                attributes.append(HtmlAttribute(name=name, value=None, quote=""))
                continue
            attributes.append(
                HtmlAttribute(
                    name=name,
                    value=value,
                    quote=quote,
                    value_start=body_start + attr.start(group),
                    value_end=body_start + attr.end(group),
                )
            )
        return cls(raw=raw, attributes=tuple(attributes), closing=closing.group(0))

    def get(self, name: str) -> HtmlAttribute | None:
        """Return the first attribute called ``name`` (case-insensitive)."""
        lowered = name.lower()
        for attr in self.attributes:
            if attr.name.lower() == lowered:
                return attr
        return None

    @property
    def src(self) -> str:
        attr = self.get("src")
        return (attr.value or "") if attr else ""

    @property
    def alt(self) -> str | None:
        attr = self.get("alt")
        return attr.value if attr else None

    @property
    def width(self) -> int | None:
        attr = self.get("width")
        return _to_int(attr.value) if attr else None

    @property
    def height(self) -> int | None:
        attr = self.get("height")
        return _to_int(attr.value) if attr else None

    @property
    def self_closing(self) -> bool:
        return self.closing.strip() == "/>"

    def with_src(self, src: str) -> str:
        """Return the raw tag with only the ``src`` value replaced."""
        attr = self.get("src")
        if attr is None or attr.value_start < 0:
            return self.raw
        value = src
        if not attr.quote and re.search(r"[\s\"'=<>`]", src):
            value = f'"{src}"'
        return self.raw[: attr.value_start] + value + self.raw[attr.value_end :]

    def build(
        self,
        *,
        src: str | None = None,
        alt: str | None = None,
        width: int | None = None,
        height: int | None = None,
    ) -> str:
        """Rebuild the tag in canonical order: src, alt, width, height, then the rest.

        Arguments left as None keep the current value. Attributes outside the
        four known ones keep their original order and quoting.
        """
        src_attr = self.get("src")
        default_quote = src_attr.quote if src_attr and src_attr.quote else '"'

        def known(name: str, value: str | None) -> HtmlAttribute | None:
            current = self.get(name)
            if value is None:
                if current is None or current.value is None:
                    return None
                value = current.value
            quote = current.quote if current is not None and current.quote else default_quote
            return HtmlAttribute(name=name, value=value, quote=quote)

        parts: list[HtmlAttribute] = []
        for name, value in (
            ("src", src if src is not None else self.src),
            ("alt", alt),
            ("width", str(width) if width is not None else None),
            ("height", str(height) if height is not None else None),
        ):
            attr = known(name, value)
            if attr is not None:
                parts.append(attr)
        parts.extend(a for a in self.attributes if a.name.lower() not in _KNOWN)

        rendered = " ".join(a.render() for a in parts)
        return f"<img {rendered}{self.closing}"


def parse_html_image_size(tag: str) -> tuple[int | None, int | None]:
    """Read ``width``/``height`` from an ``<img>`` tag as decimal integers.

    Accepts quoted or unquoted values and any attribute name case.
    """
    width = re.search(r"\bwidth\s*=\s*[\"']?(\d+)[\"']?", tag, re.IGNORECASE)
    height = re.search(r"\bheight\s*=\s*[\"']?(\d+)[\"']?", tag, re.IGNORECASE)
    return (
        int(width.group(1)) if width else None,
        int(height.group(1)) if height else None,
    )
