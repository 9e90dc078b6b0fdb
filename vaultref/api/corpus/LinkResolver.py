"""Identity resolution for link targets."""

from __future__ import annotations

__all__ = ["LinkResolver"]

import posixpath
from collections import defaultdict
from collections.abc import Callable, Iterable
from urllib.parse import unquote

from ..link.split_target_suffix import split_target_suffix


def _doc_dir(source_doc: str) -> str:
    return posixpath.dirname(source_doc)


class LinkResolver:
    """Resolves link targets written in a document to vault identities.

    An identity is the vault-relative POSIX path of a file. Resolution is
    done against a fixed snapshot of the vault's files, so the same
    resolver can describe the vault before or after a move. Matching
    ignores case; an exact-case match wins when there is one.
    """

    def __init__(self, files: Iterable[str]):
        self.files: frozenset[str] = frozenset(files)
        # Both keyed by the lowercased name / path
        self._by_name: dict[str, list[str]] = defaultdict(list)
        self._by_path: dict[str, list[str]] = defaultdict(list)
        for path in sorted(self.files):
            self._by_name[posixpath.basename(path).lower()].append(path)
            self._by_path[path.lower()].append(path)
        self.resolvers: list[tuple[Callable[[str], bool], Callable[[str, str], str | None]]] = [
            (self._is_external, self._resolve_external),
            (self._is_rooted, self._resolve_rooted),
            (self._is_dot_relative, self._resolve_dot_relative),
            (self._has_folder, self._resolve_with_folder),
        ]

    def resolve(self, target: str, source_doc: str) -> str | None:
        """Resolve ``target`` as written in ``source_doc``.

        Args:
            target: The link target (path part of the link)
            source_doc: Identity of the document containing the link

        Returns:
            The identity of the referenced file, or None if nothing matches
        """
        target = target.strip()
        if not target:
            return None
        resolved = self._resolve(target, source_doc)
        if resolved is None:
            path, _ = split_target_suffix(target)
            cleaned = unquote(path)
            if cleaned and cleaned != target:
                resolved = self._resolve(cleaned, source_doc)
        return resolved

    def _resolve(self, target: str, source_doc: str) -> str | None:
        for predicate, resolver in self.resolvers:
            if predicate(target):
                return resolver(target, source_doc)
        return self._resolve_bare(target, source_doc)

    def before_move(self, old: str, new: str) -> LinkResolver:
        """View of the vault as it was before ``old`` was moved to ``new``."""
        return LinkResolver((self.files - {new}) | {old})

    def after_move(self, old: str, new: str) -> LinkResolver:
        """View of the vault once ``old`` has been moved to ``new``."""
        return LinkResolver((self.files - {old}) | {new})

    def matches(self, name: str) -> list[str]:
        """All identities whose file name is ``name``, exact case first."""
        found = self._by_name.get(name.lower(), ())
        return [p for p in found if posixpath.basename(p) == name] + [
            p for p in found if posixpath.basename(p) != name
        ]

    @staticmethod
    def relative_path(source_doc: str, target: str) -> str:
        """Path of ``target`` relative to the folder holding ``source_doc``."""
        return posixpath.relpath(target, _doc_dir(source_doc) or ".")

    def _lookup(self, path: str) -> str | None:
        normalized = posixpath.normpath(path)
        if normalized.startswith("../") or normalized in ("..", "."):
            return None
        if normalized in self.files:
            return normalized
        found = self._by_path.get(normalized.lower())
        return found[0] if found else None

    # Predicates
    def _is_external(self, target: str) -> bool:
        return "://" in target or target.lower().startswith(("data:", "mailto:"))

    def _is_rooted(self, target: str) -> bool:
        return target.startswith("/")

    def _is_dot_relative(self, target: str) -> bool:
        return target.startswith(("./", "../"))

    def _has_folder(self, target: str) -> bool:
        return "/" in target

    # Resolvers
    def _resolve_external(self, target: str, source_doc: str) -> str | None:  # noqa: ARG002
        return None

    def _resolve_rooted(self, target: str, source_doc: str) -> str | None:  # noqa: ARG002
        return self._lookup(target.lstrip("/"))

    def _resolve_dot_relative(self, target: str, source_doc: str) -> str | None:
        return self._lookup(posixpath.join(_doc_dir(source_doc), target))

    def _resolve_with_folder(self, target: str, source_doc: str) -> str | None:
        """Vault root first, then the document folder, then a unique path suffix."""
        found = self._lookup(target)
        if found is not None:
            return found
        found = self._lookup(posixpath.join(_doc_dir(source_doc), target))
        if found is not None:
            return found
        suffix = "/" + posixpath.normpath(target)
        candidates = [p for p in self.matches(posixpath.basename(target)) if p.endswith(suffix)]
        if not candidates:
            candidates = [
                p for p in self.matches(posixpath.basename(target)) if p.lower().endswith(suffix.lower())
            ]
        return candidates[0] if len(candidates) == 1 else None

    def _resolve_bare(self, target: str, source_doc: str) -> str | None:
        """Same folder as the document first, then the shallowest match."""
        candidates = self.matches(target)
        if not candidates:
            return None
        exact = [p for p in candidates if posixpath.basename(p) == target]
        candidates = exact or candidates
        folder = _doc_dir(source_doc)
        for candidate in candidates:
            if _doc_dir(candidate) == folder:
                return candidate
        return min(candidates, key=lambda p: (p.count("/"), p))
