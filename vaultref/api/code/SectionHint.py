"""Section hint model (UNO: single model)."""

from dataclasses import dataclass

SECTION_CODE = "code"


@dataclass(frozen=True)
class SectionHint:
    """A block of a document. Lines are 0-based and inclusive."""

    start_line: int
    end_line: int
    type: str

    def contains(self, line_index: int) -> bool:
        return self.start_line <= line_index <= self.end_line

    @property
    def is_code(self) -> bool:
        return self.type == SECTION_CODE
