"""Runtime settings read from the environment."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_CURRENCY = "BRL"
DEFAULT_LOG_LEVEL = "WARNING"

_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """Application settings.

    Attributes:
        database_path: SQLite file, or None for the default location
        default_currency: Currency code used for new transactions
        log_level: Name of the stdlib logging level
        log_json: Render log events as JSON instead of console text
    """

    database_path: Optional[str] = None
    default_currency: str = DEFAULT_CURRENCY
    log_level: str = DEFAULT_LOG_LEVEL
    log_json: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Build settings from PENNYWISE_* environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            database_path=env.get("PENNYWISE_DB_PATH") or None,
            default_currency=env.get("PENNYWISE_DEFAULT_CURRENCY", DEFAULT_CURRENCY).upper(),
            log_level=env.get("PENNYWISE_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
            log_json=env.get("PENNYWISE_LOG_JSON", "").strip().lower() in _TRUE_VALUES,
        )
