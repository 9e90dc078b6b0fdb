"""Reference finding, rewriting and editing."""

from .DocumentReference import DocumentReference
from .LineChange import LineChange
from .LinkOccurrence import LinkOccurrence
from .ReferenceEditor import ReferenceEditor
from .ReferenceFinder import ReferenceFinder
from .RenameGuard import RenameGuard
from .RenameService import RenameService
from .RenameTransition import RenameTransition
from .RewriteEngine import RewriteEngine
from .RewriteResult import RewriteResult

__all__ = [
    "DocumentReference",
    "LineChange",
    "LinkOccurrence",
    "ReferenceEditor",
    "ReferenceFinder",
    "RenameGuard",
    "RenameService",
    "RenameTransition",
    "RewriteEngine",
    "RewriteResult",
]
