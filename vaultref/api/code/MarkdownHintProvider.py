"""Structural hints computed with markdown-it-py."""

from markdown_it import MarkdownIt

from ..link._constants import WIKI_BARE_PATTERN, WIKI_EMBED_PATTERN
from ..link.parse_wiki_link import parse_wiki_link
from ._AbstractHintProvider import _AbstractHintProvider
from .LinkHint import LinkHint
from .SectionHint import SECTION_CODE, SectionHint
from .StructuralHints import HintsAbsent, HintsPresent, StructuralHints

# Block token type -> section type
_SECTION_TYPES = {
    "fence": SECTION_CODE,
    "code_block": SECTION_CODE,
    "heading_open": "heading",
    "paragraph_open": "paragraph",
    "bullet_list_open": "list",
    "ordered_list_open": "list",
    "blockquote_open": "blockquote",
    "table_open": "table",
    "html_block": "html",
    "hr": "thematicBreak",
}


class MarkdownHintProvider(_AbstractHintProvider):
    """Sections from a CommonMark parse, wiki embeds/links from non-code lines.

    Like an editor's metadata cache it reports wiki syntax only; markdown
    images and HTML tags are left to the caller's own scan.
    """

    def __init__(self) -> None:
        self._md = MarkdownIt("commonmark").enable("table")

    def hints_for(self, doc_id: str, text: str) -> StructuralHints:  # noqa: ARG002
        try:
            tokens = self._md.parse(text)
        except Exception:
            return HintsAbsent()

        sections: list[SectionHint] = []
        for token in tokens:
            section_type = _SECTION_TYPES.get(token.type)
            if section_type is None or token.map is None:
                continue
            # Nested blocks only matter when they are code
            if token.level > 0 and section_type != SECTION_CODE:
                continue
            start, end = token.map
            sections.append(SectionHint(start_line=start, end_line=max(start, end - 1), type=section_type))

        code_lines: set[int] = set()
        for section in sections:
            if section.is_code:
                code_lines.update(range(section.start_line, section.end_line + 1))

        embeds: list[LinkHint] = []
        links: list[LinkHint] = []
        for line_index, line in enumerate(text.split("\n")):
            if line_index in code_lines:
                continue
            for match in WIKI_EMBED_PATTERN.finditer(line):
                embeds.append(self._hint(match.group(0), line_index, match.start(), match.end(), True))
            for match in WIKI_BARE_PATTERN.finditer(line):
                links.append(self._hint(match.group(0), line_index, match.start(), match.end(), False))

        return HintsPresent(sections=tuple(sections), embeds=tuple(embeds), links=tuple(links))

    @staticmethod
    def _hint(token: str, line: int, start: int, end: int, is_embed: bool) -> LinkHint:
        parts = parse_wiki_link(token)
        return LinkHint(
            link=parts.path,
            line=line,
            start_col=start,
            end_col=end,
            is_embed=is_embed,
            display_text=parts.display_text,
        )
