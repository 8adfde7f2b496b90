"""Infrastructure adapters for the ledger engine."""
