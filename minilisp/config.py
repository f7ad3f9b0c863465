from __future__ import annotations
import logging
import os

QUIT_COMMAND = 'q'
RESULT_PREFIX = '=> '

# Defaults
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_RECURSION_LIMIT = 10000
_DEFAULT_PROMPT = '> '


def get_log_level() -> int:
    raw = os.environ.get('MINILISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    # getLevelName returns a string for unknown names
    return level if isinstance(level, int) else logging.WARNING


def get_recursion_limit() -> int:
    raw = os.environ.get('MINILISP_RECURSION_LIMIT')
    if not raw:
        return _DEFAULT_RECURSION_LIMIT
    try:
        limit = int(raw)
    except ValueError:
        return _DEFAULT_RECURSION_LIMIT
    return limit if limit > 0 else _DEFAULT_RECURSION_LIMIT


def get_prompt() -> str:
    return os.environ.get('MINILISP_PROMPT', _DEFAULT_PROMPT)
