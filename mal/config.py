from __future__ import annotations
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

# Defaults
_DEFAULT_HISTORY_PATH = Path(".mal-history")
_DEFAULT_PROMPT = "user> "
_DEFAULT_LOG_LEVEL = "WARNING"


def get_history_path() -> Path:
    raw = os.environ.get("MAL_HISTORY_PATH")
    if not raw or not raw.strip():
        return _DEFAULT_HISTORY_PATH
    return Path(raw.strip()).expanduser()


def get_prompt() -> str:
    return os.environ.get("MAL_PROMPT", _DEFAULT_PROMPT)


def get_log_level() -> str:
    level = os.environ.get("MAL_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip().upper() or _DEFAULT_LOG_LEVEL
    # getLevelName maps a registered name to its number and anything else to a "Level ..." string
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Unknown MAL_LOG_LEVEL '%s', using %s", level, _DEFAULT_LOG_LEVEL)
        return _DEFAULT_LOG_LEVEL
    return level
