"""Link occurrence model (UNO: single model)."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class LinkOccurrence:
    """One reference to an asset found in a document.

    ``line`` is 0-based; ``start_col``/``end_col`` are 0-based column
    offsets into that line, end exclusive. ``resolved_path`` is the
    identity the target resolves to, however it was spelled.
    """

    format: str
    raw_match: str
    target_raw: str
    resolved_path: str
    display_text: str | None
    width: int | None
    height: int | None
    file: str
    line: int
    start_col: int
    end_col: int

    @property
    def position_key(self) -> tuple[str, int, int, int]:
        return (self.file, self.line, self.start_col, self.end_col)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
