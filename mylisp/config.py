from __future__ import annotations
import logging
import os

# Defaults
_DEFAULT_MAX_DEPTH = 128
_DEFAULT_PROMPT = "MyLisp> "
_DEFAULT_LOG_LEVEL = "WARNING"

_TRUTHY = {"1", "true", "yes", "on"}


def int_from_env(var: str, default: int) -> int:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def flag_from_env(var: str, default: bool = False) -> bool:
    raw = os.environ.get(var)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def get_max_depth() -> int:
    """Maximum nesting depth accepted by the parser and the evaluator."""
    return int_from_env('MYLISP_MAX_DEPTH', _DEFAULT_MAX_DEPTH)


def get_show_ast() -> bool:
    return flag_from_env('MYLISP_SHOW_AST')


def get_prompt() -> str:
    return os.environ.get('MYLISP_PROMPT', _DEFAULT_PROMPT)


def get_log_level() -> int:
    name = os.environ.get('MYLISP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING
