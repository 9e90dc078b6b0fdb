"""Rewrite result model (UNO: single model)."""

from dataclasses import dataclass, field
from typing import Any

from .LineChange import LineChange


@dataclass
class RewriteResult:
    """Outcome of one rewrite pass over the corpus."""

    updated_file_count: int = 0
    touched_files: set[str] = field(default_factory=set)
    referenced_files: list[str] = field(default_factory=list)
    changes: list[LineChange] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "updated_file_count": self.updated_file_count,
            "touched_files": sorted(self.touched_files),
            "referenced_files": list(self.referenced_files),
            "changes": [
                {"doc_id": c.doc_id, "line": c.line, "old": c.old, "new": c.new} for c in self.changes
            ],
            "errors": list(self.errors),
        }
