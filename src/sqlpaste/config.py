"""Runtime settings read from the environment"""
import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load .env file if present
load_dotenv()

DEFAULT_SAMPLE_ROWS = 5
DEFAULT_LOG_LEVEL = 'WARNING'
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def _int_env(key: str, default: int) -> int:
    value = os.getenv(key, '')
    try:
        return int(value) if value.strip() else default
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    sample_rows: int = DEFAULT_SAMPLE_ROWS      # Preview rows kept per parse
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> 'Settings':
        log_level = (os.getenv('SQLPASTE_LOG_LEVEL') or DEFAULT_LOG_LEVEL).strip().upper()
        if log_level not in LOG_LEVELS:
            log_level = DEFAULT_LOG_LEVEL
        return cls(
            sample_rows=max(0, _int_env('SQLPASTE_SAMPLE_ROWS', DEFAULT_SAMPLE_ROWS)),
            log_level=log_level,
        )


def get_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings.from_env()
