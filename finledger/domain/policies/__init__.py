"""Domain policies package."""

from .default_account import resolve_default_flag

__all__ = ["resolve_default_flag"]
