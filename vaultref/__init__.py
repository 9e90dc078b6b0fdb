"""vaultref - keep image references in a markdown vault consistent across renames."""

__version__ = "0.1.0"
