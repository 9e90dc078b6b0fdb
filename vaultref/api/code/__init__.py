"""Code span detection and structural hints."""

from ._AbstractHintProvider import _AbstractHintProvider
from .is_code_excluded import is_code_excluded
from .LinkHint import LinkHint
from .MarkdownHintProvider import MarkdownHintProvider
from .NullHintProvider import NullHintProvider
from .SectionHint import SECTION_CODE, SectionHint
from .StructuralHints import HintsAbsent, HintsPresent, StructuralHints


def make_hint_provider(kind: str) -> _AbstractHintProvider:
    """Return the hint provider named in configuration (``markdown`` or ``none``)."""
    if kind == "markdown":
        return MarkdownHintProvider()
    if kind == "none":
        return NullHintProvider()
    raise ValueError(f"Unsupported hint provider: {kind!r} (supported: ['markdown', 'none'])")


__all__ = [
    "SECTION_CODE",
    "HintsAbsent",
    "HintsPresent",
    "LinkHint",
    "MarkdownHintProvider",
    "NullHintProvider",
    "SectionHint",
    "StructuralHints",
    "is_code_excluded",
    "make_hint_provider",
]
