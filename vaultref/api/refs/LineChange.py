"""Line change model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LineChange:
    """A single rewritten line, recorded for history collaborators."""

    doc_id: str
    line: int
    old: str
    new: str
