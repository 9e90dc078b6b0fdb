"""Single-reference display text editor (UNO: single class)."""

from __future__ import annotations

import html
import posixpath

from ..corpus._AbstractBackend import _AbstractBackend
from ..corpus.LinkResolver import LinkResolver
from ..link import (
    FORMAT_HTML,
    FORMAT_MARKDOWN,
    HtmlImageTag,
    LinkParts,
    LinkToken,
    MarkdownImage,
    build_wiki_link,
    iter_link_tokens,
)
from ..link._constants import FORMAT_WIKI, WIKI_LINK_PATTERN
from ..link.parse_wiki_link import parse_wiki_link, split_segments
from ..log.make_log_sink import LogSink, null_sink


def _escape_alt(text: str) -> str:
    return text.replace("]", "\\]").replace("(", "\\(")


class ReferenceEditor:
    """Changes the display text or size of one reference on one line."""

    def __init__(self, corpus: _AbstractBackend, log: LogSink = null_sink):
        self.corpus = corpus
        self.log = log

    async def edit(
        self,
        doc_id: str,
        line_number: int,
        old_line: str,
        identity: str,
        display_text: str,
        width: int | None = None,
        height: int | None = None,
    ) -> bool:
        """Rewrite the first reference to ``identity`` on a line.

        Args:
            doc_id: Document holding the reference
            line_number: 1-based line number
            old_line: The line as the caller last saw it
            identity: Asset the reference must resolve to
            display_text: New caption (alt text for markdown and HTML)
            width: New width, or None to keep the current one
            height: New height, or None to keep the current one

        Returns:
            True if the document was changed and written back

        Raises:
            ValueError: If ``line_number`` is outside the document
        """
        text = await self.corpus.read(doc_id)
        lines = text.split("\n")
        if line_number < 1 or line_number > len(lines):
            raise ValueError(f"Line {line_number} out of range for {doc_id} ({len(lines)} lines)")

        line_index = line_number - 1
        actual = lines[line_index]
        if actual != old_line:
            self.log("WARN", f"Line {line_number} of {doc_id} changed since it was read; editing current content")

        resolver = LinkResolver(self.corpus.iter_files())
        token = self._first_token(actual, doc_id, identity, resolver)
        if token is None:
            self.log("DEBUG", f"No reference to {identity} on line {line_number} of {doc_id}")
            return False

        replacement = self._rebuild(token, identity, display_text, width, height)
        new_line = actual[: token.start] + replacement + actual[token.end :]
        if new_line == actual:
            return False

        lines[line_index] = new_line
        await self.corpus.write(doc_id, "\n".join(lines))
        self.log("INFO", f"Updated display text of {identity} in {doc_id}:{line_number}")
        return True

    @staticmethod
    def _first_token(line: str, doc_id: str, identity: str, resolver: LinkResolver) -> LinkToken | None:
        for token in sorted(iter_link_tokens(line), key=lambda t: t.start):
            parts = token.parts()
            if parts.path and resolver.resolve(parts.path, doc_id) == identity:
                return token
        return None

    @staticmethod
    def _rebuild(token: LinkToken, identity: str, display_text: str, width: int | None, height: int | None) -> str:
        if token.is_wiki:
            parts = parse_wiki_link(token.text)
            match = WIKI_LINK_PATTERN.search(token.text)
            _, escaped = split_segments(match.group(2)) if match else ([], False)
            return build_wiki_link(
                LinkParts(
                    path=parts.path,
                    display_text=display_text,
                    width=width if width is not None else parts.width,
                    height=height if height is not None else parts.height,
                ),
                embed=token.format == FORMAT_WIKI,
                escaped_pipe=escaped,
            )
        if token.format == FORMAT_MARKDOWN:
            image = MarkdownImage.parse(token.text)
            if image is None:
                return token.text
            alt = _escape_alt(display_text) if display_text else posixpath.basename(identity)
            return image.with_alt(alt).build()
        if token.format == FORMAT_HTML:
            tag = HtmlImageTag.parse(token.text)
            if tag is None:
                return token.text
            return tag.build(alt=html.escape(display_text, quote=True), width=width, height=height)
        return token.text
