"""Document reference model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class DocumentReference:
    """A document referencing an asset, with the asset's image ordinal.

    ``index`` is the 0-based position of the first reference to the asset
    among all image references in the document.
    """

    doc_id: str
    index: int
