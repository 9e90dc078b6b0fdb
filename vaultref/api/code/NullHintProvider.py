"""Hint provider that never has hints."""

from ._AbstractHintProvider import _AbstractHintProvider
from .StructuralHints import HintsAbsent, StructuralHints


class NullHintProvider(_AbstractHintProvider):
    """Forces every caller onto the manual line-scan path."""

    def hints_for(self, doc_id: str, text: str) -> StructuralHints:  # noqa: ARG002
        return HintsAbsent()
