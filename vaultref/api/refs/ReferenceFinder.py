"""Reference finder (UNO: single class)."""

from __future__ import annotations

from ..code import NullHintProvider, is_code_excluded
from ..code._AbstractHintProvider import _AbstractHintProvider
from ..code.StructuralHints import HintsAbsent, HintsPresent, StructuralHints
from ..config.WatchConfig import WatchConfig
from ..corpus._AbstractBackend import _AbstractBackend
from ..corpus.LinkResolver import LinkResolver
from ..link import ALL_FORMATS, FORMAT_HTML, FORMAT_MARKDOWN, FORMAT_WIKI, FORMAT_WIKI_BARE, LinkToken, iter_link_tokens
from ..log.make_log_sink import LogSink, null_sink
from .DocumentReference import DocumentReference
from .LinkOccurrence import LinkOccurrence

_RESIDUAL_FORMATS = (FORMAT_MARKDOWN, FORMAT_HTML)

_Key = tuple[str, int, int, int]


def _overlaps(start: int, end: int, spans: list[tuple[int, int]]) -> bool:
    return any(start < s_end and s_start < end for s_start, s_end in spans)


class ReferenceFinder:
    """Locates every reference to an asset across the corpus.

    Structural hints are consulted first (embeds, then bare links); a
    regex pass then picks up markdown images and HTML tags, or every
    format when no hints are available. All results go through one map
    keyed by position, so an occurrence is never reported twice.
    """

    def __init__(
        self,
        corpus: _AbstractBackend,
        hint_provider: _AbstractHintProvider | None = None,
        log: LogSink = null_sink,
        watch_config: WatchConfig | None = None,
    ):
        self.corpus = corpus
        self.hint_provider = hint_provider or NullHintProvider()
        self.log = log
        self.watch_config = watch_config or WatchConfig()
        self._cache: dict[str, list[LinkOccurrence]] = {}

    def invalidate(self) -> None:
        """Drop all cached results."""
        self._cache.clear()

    def resolver(self) -> LinkResolver:
        return LinkResolver(self.corpus.iter_files())

    async def find(self, identity: str, use_cache: bool = True) -> list[LinkOccurrence]:
        """Return every occurrence referencing ``identity``, ordered by position."""
        if use_cache and identity in self._cache:
            return list(self._cache[identity])

        resolver = self.resolver()
        found: list[LinkOccurrence] = []
        for doc_id in list(self.corpus.iter_documents()):
            try:
                text = await self.corpus.read(doc_id)
            except Exception as e:
                self.log("ERROR", f"Failed to read {doc_id}: {e}")
                continue
            found.extend(self._find_in_text(doc_id, text, identity, resolver))

        self._cache[identity] = found
        return list(found)

    async def find_documents(self, identity: str) -> list[DocumentReference]:
        """Return each document referencing ``identity`` with the asset's image ordinal."""
        resolver = self.resolver()
        documents: list[DocumentReference] = []
        for doc_id in list(self.corpus.iter_documents()):
            try:
                text = await self.corpus.read(doc_id)
            except Exception as e:
                self.log("ERROR", f"Failed to read {doc_id}: {e}")
                continue
            images = self._image_references(doc_id, text, resolver)
            if identity in images:
                documents.append(DocumentReference(doc_id=doc_id, index=images.index(identity)))
        return documents

    async def is_code_excluded(self, doc_id: str, line_index: int, line_content: str) -> bool:
        """Whether ``line_content`` at ``line_index`` of ``doc_id`` lies in code."""
        try:
            text = await self.corpus.read(doc_id)
        except Exception as e:
            self.log("WARN", f"Failed to read {doc_id} for code check: {e}")
            return is_code_excluded(line_index, line_content, HintsAbsent())
        return is_code_excluded(line_index, line_content, self.hint_provider.hints_for(doc_id, text), text.split("\n"))

    def _find_in_text(self, doc_id: str, text: str, identity: str, resolver: LinkResolver) -> list[LinkOccurrence]:
        lines = text.split("\n")
        hints = self.hint_provider.hints_for(doc_id, text)
        occurrences: dict[_Key, LinkOccurrence] = {}

        if isinstance(hints, HintsPresent):
            for hint in (*hints.embeds, *hints.links):
                if not 0 <= hint.line < len(lines):
                    continue
                line = lines[hint.line]
                token = LinkToken(
                    format=FORMAT_WIKI if hint.is_embed else FORMAT_WIKI_BARE,
                    start=hint.start_col,
                    end=hint.end_col,
                    text=line[hint.start_col : hint.end_col],
                )
                self._record(occurrences, doc_id, lines, hint.line, token, identity, resolver, hints)
            residual = _RESIDUAL_FORMATS
        else:
            residual = ALL_FORMATS

        for line_index, line in enumerate(lines):
            if "[" not in line and "<" not in line:
                continue
            spans = [(o.start_col, o.end_col) for o in occurrences.values() if o.line == line_index]
            for token in iter_link_tokens(line, residual):
                if _overlaps(token.start, token.end, spans):
                    continue
                if self._record(occurrences, doc_id, lines, line_index, token, identity, resolver, hints):
                    spans.append((token.start, token.end))

        return [occurrences[key] for key in sorted(occurrences)]

    def _record(
        self,
        occurrences: dict[_Key, LinkOccurrence],
        doc_id: str,
        lines: list[str],
        line_index: int,
        token: LinkToken,
        identity: str,
        resolver: LinkResolver,
        hints: StructuralHints,
    ) -> bool:
        parts = token.parts()
        if not parts.path:
            return False
        if resolver.resolve(parts.path, doc_id) != identity:
            return False
        line = lines[line_index]
        if is_code_excluded(line_index, line, hints, lines, span=(token.start, token.end)):
            return False
        occurrence = LinkOccurrence(
            format=token.format,
            raw_match=token.text,
            target_raw=token.raw_target(),
            resolved_path=identity,
            display_text=parts.display_text or None,
            width=parts.width,
            height=parts.height,
            file=doc_id,
            line=line_index,
            start_col=token.start,
            end_col=token.end,
        )
        occurrences.setdefault(occurrence.position_key, occurrence)
        return True

    def _image_references(self, doc_id: str, text: str, resolver: LinkResolver) -> list[str]:
        """Identities of every image referenced in ``doc_id``, in document order."""
        lines = text.split("\n")
        hints = self.hint_provider.hints_for(doc_id, text)
        images: list[str] = []
        for line_index, line in enumerate(lines):
            tokens = sorted(iter_link_tokens(line), key=lambda t: (t.start, t.end))
            last_end = -1
            for token in tokens:
                if token.start < last_end:
                    continue
                last_end = token.end
                if is_code_excluded(line_index, line, hints, lines, span=(token.start, token.end)):
                    continue
                parts = token.parts()
                resolved = resolver.resolve(parts.path, doc_id) if parts.path else None
                if resolved is not None and self.watch_config.is_image(resolved):
                    images.append(resolved)
        return images
