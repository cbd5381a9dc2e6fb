from __future__ import annotations
import logging
import os
import sys
from pathlib import Path
from typing import Optional


_TRUTHY = {"1", "true", "yes", "on"}

# Defaults
DEFAULT_PROMPT = "user> "
DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_HISTORY_FILE = Path.home() / ".kappa_history"


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def debug_enabled() -> bool:
    """KAPPA_DEBUG turns on evaluator tracing."""
    return flag_from_env("KAPPA_DEBUG")


def get_log_level() -> str:
    return os.environ.get("KAPPA_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def get_prompt() -> str:
    return os.environ.get("KAPPA_PROMPT", DEFAULT_PROMPT)


def get_history_file() -> Optional[Path]:
    # Set but empty disables history
    raw = os.environ.get("KAPPA_HISTORY")
    if raw is None:
        return _DEFAULT_HISTORY_FILE
    return Path(raw).expanduser() if raw.strip() else None


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Send log records to stderr so they never mix with printed results."""
    numeric_level = getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
