"""Pydantic output schemas for API commands."""

from ._base import BaseOutputSchema
from .config import ConfigShowOutput
from .refs import RefsDocsOutput, RefsEditOutput, RefsFindOutput, RefsRewriteOutput, RefsWatchOutput

__all__ = [
    "BaseOutputSchema",
    "ConfigShowOutput",
    "RefsDocsOutput",
    "RefsEditOutput",
    "RefsFindOutput",
    "RefsRewriteOutput",
    "RefsWatchOutput",
]
