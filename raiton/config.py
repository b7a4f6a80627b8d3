from __future__ import annotations
import logging
import os
import sys
from pathlib import Path
from typing import Optional


def _raw(var: str) -> Optional[str]:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return None
    return raw.strip()


def get_log_level() -> Optional[int]:
    """Level named by RAITON_LOG_LEVEL, or None when unset."""
    raw = _raw('RAITON_LOG_LEVEL')
    if raw is None:
        return None
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelName(raw.upper())
    if not isinstance(level, int):
        raise ValueError(f"RAITON_LOG_LEVEL: unknown logging level {raw!r}")
    return level


def get_recursion_limit() -> Optional[int]:
    raw = _raw('RAITON_RECURSION_LIMIT')
    if raw is None:
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"RAITON_RECURSION_LIMIT: expected an integer, got {raw!r}") from None
    if limit <= 0:
        raise ValueError(f"RAITON_RECURSION_LIMIT: expected a positive integer, got {limit}")
    return limit


def get_prelude_path() -> Optional[Path]:
    raw = _raw('RAITON_PRELUDE_PATH')
    return Path(raw) if raw is not None else None


def configure_logging() -> None:
    level = get_log_level()
    if level is not None:
        logging.basicConfig(level=level)


def apply_recursion_limit() -> None:
    # Only ever raised; a lower setting would break the host interpreter.
    limit = get_recursion_limit()
    if limit is not None and limit > sys.getrecursionlimit():
        sys.setrecursionlimit(limit)
