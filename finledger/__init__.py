"""Account-balance ledger consistency engine."""

__version__ = "0.1.0"
