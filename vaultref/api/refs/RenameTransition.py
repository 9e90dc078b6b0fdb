"""Rename transition model (UNO: single model)."""

from __future__ import annotations

import posixpath
import time
from dataclasses import dataclass


@dataclass(frozen=True)
class RenameTransition:
    """One rename notification, normalized to identities and display names."""

    old_identity: str
    new_identity: str
    old_display_name: str
    new_display_name: str
    observed_at: float

    @classmethod
    def from_paths(cls, old: str, new: str, observed_at: float | None = None) -> RenameTransition:
        """Build a transition from two vault-relative paths."""
        old_identity = posixpath.normpath(old.replace("\\", "/")).lstrip("/")
        new_identity = posixpath.normpath(new.replace("\\", "/")).lstrip("/")
        return cls(
            old_identity=old_identity,
            new_identity=new_identity,
            old_display_name=posixpath.basename(old_identity),
            new_display_name=posixpath.basename(new_identity),
            observed_at=time.time() if observed_at is None else observed_at,
        )
