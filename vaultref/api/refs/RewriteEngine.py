"""Rename rewrite engine (UNO: single class)."""

from __future__ import annotations

from urllib.parse import quote, unquote

from ..code import NullHintProvider, is_code_excluded
from ..code._AbstractHintProvider import _AbstractHintProvider
from ..code.StructuralHints import StructuralHints
from ..corpus._AbstractBackend import _AbstractBackend
from ..corpus.LinkResolver import LinkResolver
from ..link import ALL_FORMATS, FORMAT_HTML, FORMAT_MARKDOWN, HtmlImageTag, LinkToken, MarkdownImage
from ..link._constants import FORMAT_PATTERNS, WIKI_LINK_PATTERN
from ..link.parse_wiki_link import split_segments
from ..link.split_target_suffix import split_target_suffix
from ..log.make_log_sink import LogSink, null_sink
from ._link_path_style import _link_path_style
from .LineChange import LineChange
from .RewriteResult import RewriteResult


class _Move:
    """Everything needed to rewrite tokens for one rename."""

    def __init__(self, old_identity: str, new_identity: str, before: LinkResolver, after: LinkResolver):
        self.old_identity = old_identity
        self.new_identity = new_identity
        self.before = before
        self.after = after

    def new_path(self, written: str, doc_id: str) -> str:
        return _link_path_style(written, doc_id, self.old_identity, self.new_identity, self.after)


class RewriteEngine:
    """Rewrites every reference to a renamed asset across the corpus.

    Targets are resolved against the vault as it was before the move, so
    the engine works whether or not the file already sits at its new path
    and a repeated call finds nothing left to change.
    """

    def __init__(
        self,
        corpus: _AbstractBackend,
        hint_provider: _AbstractHintProvider | None = None,
        log: LogSink = null_sink,
    ):
        self.corpus = corpus
        self.hint_provider = hint_provider or NullHintProvider()
        self.log = log

    async def rewrite(
        self,
        old_identity: str,
        new_identity: str,
        old_display_name: str | None = None,
        new_display_name: str | None = None,
    ) -> RewriteResult:
        """Point every reference to ``old_identity`` at ``new_identity``.

        Args:
            old_identity: Vault-relative path the asset had
            new_identity: Vault-relative path the asset has now
            old_display_name: File name the asset had (defaults from the path)
            new_display_name: File name the asset has now (defaults from the path)

        Returns:
            RewriteResult; failures on single documents are listed in ``errors``
        """
        old_display_name = old_display_name or old_identity.rsplit("/", 1)[-1]
        new_display_name = new_display_name or new_identity.rsplit("/", 1)[-1]
        result = RewriteResult()
        if old_identity == new_identity:
            return result

        before = LinkResolver(self.corpus.iter_files()).before_move(old_identity, new_identity)
        move = _Move(old_identity, new_identity, before, before.after_move(old_identity, new_identity))
        needles = self._needles(old_identity, old_display_name)

        for doc_id in list(self.corpus.iter_documents()):
            try:
                text = await self.corpus.read(doc_id)
            except Exception as e:
                message = f"Failed to read {doc_id}: {e}"
                self.log("ERROR", message)
                result.errors.append(message)
                continue

            lines = text.split("\n")
            candidates = [i for i, line in enumerate(lines) if any(n in line.lower() for n in needles)]
            if not candidates:
                continue

            hints = self.hint_provider.hints_for(doc_id, text)
            changes: list[LineChange] = []
            referenced = False
            for line_index in candidates:
                new_line, matched = self._rewrite_line(doc_id, lines, line_index, hints, move)
                referenced = referenced or matched
                if new_line != lines[line_index]:
                    changes.append(LineChange(doc_id=doc_id, line=line_index, old=lines[line_index], new=new_line))
                    lines[line_index] = new_line

            if referenced:
                result.referenced_files.append(doc_id)
            if not changes:
                continue

            try:
                await self.corpus.write(doc_id, "\n".join(lines))
            except Exception as e:
                message = f"Failed to write {doc_id}: {e}"
                self.log("ERROR", message)
                result.errors.append(message)
                continue

            result.updated_file_count += 1
            result.touched_files.add(doc_id)
            result.changes.extend(changes)
            self.log("DEBUG", f"Updated {len(changes)} line(s) in {doc_id}")

        return result

    @staticmethod
    def _needles(old_identity: str, old_display_name: str) -> set[str]:
        needles = {old_identity, old_display_name, quote(old_display_name), quote(old_identity)}
        return {n.lower() for n in needles if n}

    def _rewrite_line(
        self,
        doc_id: str,
        lines: list[str],
        line_index: int,
        hints: StructuralHints,
        move: _Move,
    ) -> tuple[str, bool]:
        """Rewrite one line; also report whether any token referenced the asset."""
        line = lines[line_index]
        matched = False
        for fmt in ALL_FORMATS:
            pos = 0
            while True:
                match = FORMAT_PATTERNS[fmt].search(line, pos)
                if not match:
                    break
                token = LinkToken(format=fmt, start=match.start(), end=match.end(), text=match.group(0))
                pos = token.end
                parts = token.parts()
                if not parts.path or move.before.resolve(parts.path, doc_id) != move.old_identity:
                    continue
                if is_code_excluded(line_index, line, hints, lines, span=(token.start, token.end)):
                    continue
                matched = True
                replacement = self._rewrite_token(token, doc_id, move)
                if replacement == token.text:
                    continue
                line = line[: token.start] + replacement + line[token.end :]
                pos = token.start + len(replacement)
        return line, matched

    def _rewrite_token(self, token: LinkToken, doc_id: str, move: _Move) -> str:
        if token.is_wiki:
            return self._rewrite_wiki(token.text, doc_id, move)
        if token.format == FORMAT_MARKDOWN:
            image = MarkdownImage.parse(token.text)
            if image is None:
                return token.text
            target = self._rewrite_url(image.target, doc_id, move, allow_spaces=image.angle)
            return image.with_target(target).build()
        if token.format == FORMAT_HTML:
            tag = HtmlImageTag.parse(token.text)
            if tag is None:
                return token.text
            return tag.with_src(self._rewrite_url(tag.src, doc_id, move, allow_spaces=True))
        return token.text

    @staticmethod
    def _rewrite_wiki(text: str, doc_id: str, move: _Move) -> str:
        """Replace the path segment only; caption, size, pipe style and ``#`` suffix are kept."""
        match = WIKI_LINK_PATTERN.search(text)
        if not match:
            return text
        segments, escaped = split_segments(match.group(2))
        head = segments[0]
        written, suffix = split_target_suffix(head.strip())
        lead = head[: len(head) - len(head.lstrip())]
        trail = head[len(head.rstrip()) :]
        segments[0] = f"{lead}{move.new_path(written, doc_id)}{suffix}{trail}"
        sep = "\\|" if escaped else "|"
        inner_start, inner_end = match.span(2)
        return text[:inner_start] + sep.join(segments) + text[inner_end:]

    @staticmethod
    def _rewrite_url(target: str, doc_id: str, move: _Move, allow_spaces: bool) -> str:
        """Rewrite a markdown/HTML target, keeping its query, fragment and encoding."""
        path, suffix = split_target_suffix(target)
        new_path = move.new_path(unquote(path), doc_id)
        if "%" in path or (" " in new_path and not allow_spaces):
            new_path = quote(new_path, safe="/")
        return new_path + suffix
