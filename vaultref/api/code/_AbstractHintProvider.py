"""Abstract base class for structural hint providers."""

from abc import ABC, abstractmethod

from .StructuralHints import StructuralHints


class _AbstractHintProvider(ABC):
    """Produces structural hints for a document's text."""

    @abstractmethod
    def hints_for(self, doc_id: str, text: str) -> StructuralHints:
        """Return hints for ``text``, or ``HintsAbsent`` when none can be given."""
        pass
