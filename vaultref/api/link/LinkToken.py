"""Link token model (UNO: single model)."""

from dataclasses import dataclass
from urllib.parse import unquote

from ._constants import FORMAT_HTML, FORMAT_MARKDOWN, FORMAT_WIKI, FORMAT_WIKI_BARE
from .HtmlImageTag import HtmlImageTag
from .LinkParts import LinkParts
from .MarkdownImage import MarkdownImage
from .parse_wiki_link import parse_wiki_link
from .split_target_suffix import split_target_suffix


@dataclass(frozen=True)
class LinkToken:
    """A link token found on a single line.

    ``start``/``end`` are 0-based column offsets into the line, end exclusive.
    """

    format: str
    start: int
    end: int
    text: str

    @property
    def is_wiki(self) -> bool:
        return self.format in (FORMAT_WIKI, FORMAT_WIKI_BARE)

    def parts(self) -> LinkParts:
        """Fields of the token in format-independent form.

        Markdown and HTML targets are returned without query string or
        fragment and percent-decoded, ready for identity resolution.
        """
        if self.is_wiki:
            return parse_wiki_link(self.text)
        if self.format == FORMAT_MARKDOWN:
            image = MarkdownImage.parse(self.text)
            if image is None:
                return LinkParts()
            path, _ = split_target_suffix(image.target)
            return LinkParts(path=unquote(path), display_text=image.alt)
        if self.format == FORMAT_HTML:
            tag = HtmlImageTag.parse(self.text)
            if tag is None:
                return LinkParts()
            path, _ = split_target_suffix(tag.src)
            return LinkParts(path=unquote(path), display_text=tag.alt or "", width=tag.width, height=tag.height)
        return LinkParts()

    def raw_target(self) -> str:
        """The target exactly as written in the token."""
        if self.is_wiki:
            return parse_wiki_link(self.text).path
        if self.format == FORMAT_MARKDOWN:
            image = MarkdownImage.parse(self.text)
            return image.target if image else ""
        tag = HtmlImageTag.parse(self.text)
        return tag.src if tag else ""
