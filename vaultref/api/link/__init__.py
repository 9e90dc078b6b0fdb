"""Link syntax: parse and build the four image reference formats."""

from ._constants import ALL_FORMATS, FORMAT_HTML, FORMAT_MARKDOWN, FORMAT_WIKI, FORMAT_WIKI_BARE
from .build_wiki_link import build_wiki_link
from .HtmlImageTag import HtmlAttribute, HtmlImageTag, parse_html_image_size
from .iter_link_tokens import iter_link_tokens
from .LinkParts import LinkParts
from .LinkToken import LinkToken
from .MarkdownImage import MarkdownImage
from .parse_wiki_link import parse_wiki_link, split_segments
from .split_target_suffix import split_target_suffix

__all__ = [
    "ALL_FORMATS",
    "FORMAT_HTML",
    "FORMAT_MARKDOWN",
    "FORMAT_WIKI",
    "FORMAT_WIKI_BARE",
    "HtmlAttribute",
    "HtmlImageTag",
    "LinkParts",
    "LinkToken",
    "MarkdownImage",
    "build_wiki_link",
    "iter_link_tokens",
    "parse_html_image_size",
    "parse_wiki_link",
    "split_segments",
    "split_target_suffix",
]
