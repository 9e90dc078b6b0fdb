"""Output schemas for refs commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema


class RefsFindOutput(BaseOutputSchema):
    """Output schema for refs find command.

    Output structure:
    - asset: str - identity that was searched for
    - occurrences: list[dict] - one entry per reference (format, file, line, columns, target, caption, size)
    - count: int - number of occurrences
    """

    asset: str = Field(..., description="Vault-relative path of the asset")
    occurrences: list[dict[str, Any]] = Field(..., description="References to the asset")
    count: int = Field(..., description="Number of references")


class RefsDocsOutput(BaseOutputSchema):
    """Output schema for refs docs command."""

    asset: str = Field(..., description="Vault-relative path of the asset")
    documents: list[dict[str, Any]] = Field(..., description="Referencing documents with the asset's image index")
    count: int = Field(..., description="Number of referencing documents")


class RefsRewriteOutput(BaseOutputSchema):
    """Output schema for refs rewrite command."""

    old: str = Field(..., description="Previous vault-relative path")
    new: str = Field(..., description="New vault-relative path")
    admitted: bool = Field(..., description="False if the rename was rejected as a duplicate")
    updated_file_count: int = Field(..., description="Number of documents written")
    touched_files: list[str] = Field(..., description="Documents written")
    referenced_files: list[str] = Field(..., description="Documents that referenced the asset")
    changes: list[dict[str, Any]] = Field(..., description="Rewritten lines")


class RefsEditOutput(BaseOutputSchema):
    """Output schema for refs edit command."""

    document: str = Field(..., description="Edited document")
    line: int = Field(..., description="1-based line number")
    asset: str = Field(..., description="Vault-relative path of the asset")
    changed: bool = Field(..., description="Whether the document was written")


class RefsWatchOutput(BaseOutputSchema):
    """Output schema for refs watch command."""

    vault: str = Field(..., description="Watched vault directory")
    renames_seen: int = Field(..., description="Image moves observed")
    renames_processed: int = Field(..., description="Moves that triggered a rewrite")
