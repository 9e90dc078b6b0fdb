"""vaultref public API."""
