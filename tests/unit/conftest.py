"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
This file contains unit-test-specific helpers for the in-memory corpus.
"""

import pytest

from tests.conftest import minimal_config_dict, minimal_vaultref_config, run, run_cmd
from vaultref.api.corpus._memory._Backend import _Backend as MemoryBackend

__all__ = [
    "make_corpus",
    "minimal_config_dict",
    "minimal_vaultref_config",
    "run",
    "run_cmd",
]


def make_corpus(documents: dict[str, str], files=()) -> MemoryBackend:
    """In-memory corpus holding ``documents`` plus asset ``files``."""
    return MemoryBackend(documents=documents, files=files)


@pytest.fixture
def photo_corpus() -> MemoryBackend:
    """A small vault with one photo referenced in several styles."""
    return make_corpus(
        {
            "note.md": "# Trip\n\n![[photo.png|Summer Trip|800x600]]\n",
            "sub/page.md": "See ![a photo](../photo.png) and <img src=\"../photo.png\" alt=\"P\">\n",
            "other.md": "Nothing to see here.\n",
        },
        files=["photo.png", "img/other.png"],
    )
