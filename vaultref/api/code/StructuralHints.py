"""Structural hint capability: either present or absent, never null."""

from dataclasses import dataclass, field
from typing import ClassVar

from .LinkHint import LinkHint
from .SectionHint import SectionHint


class StructuralHints:
    """Base for the two hint variants."""

    present: ClassVar[bool] = False


@dataclass(frozen=True)
class HintsPresent(StructuralHints):
    """Hints produced by a markdown parser for one document."""

    present: ClassVar[bool] = True

    sections: tuple[SectionHint, ...] = field(default_factory=tuple)
    embeds: tuple[LinkHint, ...] = field(default_factory=tuple)
    links: tuple[LinkHint, ...] = field(default_factory=tuple)

    def in_code_section(self, line_index: int) -> bool:
        return any(section.is_code and section.contains(line_index) for section in self.sections)


@dataclass(frozen=True)
class HintsAbsent(StructuralHints):
    """No structural information; callers must fall back to line scanning."""
