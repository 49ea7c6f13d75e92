"""
Single place to:
- Read settings from env (a local .env is loaded if present)
- Decide where random colors come from (local generator or random.org)
- Pick the log level for the process

The board itself (6 colors, 4 pegs, 12 guesses) is fixed and lives in types.py.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

log = logging.getLogger(__name__)

RANDOM_SOURCES = ("local", "random.org")


@dataclass(frozen=True)
class Settings:
    random_source: str = "local"
    random_timeout: float = 3.0
    log_level: str = "WARNING"


def _float(env_value: str | None, default: float) -> float:
    """Convert an environment variable to float, keeping the default on bad input."""
    if not env_value:
        return default
    try:
        return float(env_value)
    except ValueError:
        log.warning("Ignoring non-numeric value %r, using %s", env_value, default)
        return default


def load_settings() -> Settings:
    # 1) Load env vars from .env if present
    load_dotenv()

    # 2) Where do automated players get their colors?
    source = os.getenv("MASTERMIND_RANDOM_SOURCE", "local").strip().lower()
    if source not in RANDOM_SOURCES:
        log.warning("Unknown MASTERMIND_RANDOM_SOURCE %r, using 'local'", source)
        source = "local"

    # 3) Keep network quick; on timeout random_client falls back to local draws
    timeout = _float(os.getenv("MASTERMIND_RANDOM_TIMEOUT"), 3.0)

    # 4) Log level name, e.g. DEBUG / INFO / WARNING
    level = os.getenv("MASTERMIND_LOG_LEVEL", "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        log.warning("Unknown MASTERMIND_LOG_LEVEL %r, using WARNING", level)
        level = "WARNING"

    return Settings(random_source=source, random_timeout=timeout, log_level=level)
