"""Corpus collaborator: document access and identity resolution."""

from .Corpus import Corpus
from .LinkResolver import LinkResolver

__all__ = ["Corpus", "LinkResolver"]
