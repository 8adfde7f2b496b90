"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from typing import Optional

from finledger.infrastructure.logging.logger import get_app_logger

DEFAULT_POOL_SIZE = 5


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for the ledger database engine.

    Attributes:
        isolation_level: Optional isolation level applied to every connection.
        pool_size: Number of pooled connections kept open.
    """

    isolation_level: Optional[str] = None
    pool_size: int = DEFAULT_POOL_SIZE

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        raw_isolation = os.getenv("LEDGER_ISOLATION_LEVEL", "").strip()
        isolation_level = raw_isolation.upper() or None
        pool_size = cls._parse_pool_size(os.getenv("LEDGER_POOL_SIZE"))
        return cls(isolation_level=isolation_level, pool_size=pool_size)

    @staticmethod
    def _parse_pool_size(raw_value: str | None) -> int:
        if not raw_value:
            return DEFAULT_POOL_SIZE
        try:
            value = int(raw_value)
        except ValueError:
            value = 0
        if value < 1:
            get_app_logger().warning(
                f"Invalid LEDGER_POOL_SIZE '{raw_value}', "
                f"using {DEFAULT_POOL_SIZE}"
            )
            return DEFAULT_POOL_SIZE
        return value


__all__ = ["LedgerSettings", "DEFAULT_POOL_SIZE"]
