from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List, Optional


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_prelude_paths() -> List[Path]:
    """Lisp files to load into the REPL environment before the first prompt."""
    return paths_from_env('KLISP_PRELUDE_PATH', [])


def get_recursion_limit() -> Optional[int]:
    raw = os.environ.get('KLISP_RECURSION_LIMIT', '').strip()
    if not raw:
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"KLISP_RECURSION_LIMIT must be an integer, got {raw!r}") from None
    if limit <= 0:
        raise ValueError(f"KLISP_RECURSION_LIMIT must be positive, got {limit}")
    return limit


def get_log_level() -> str:
    return os.environ.get('KLISP_LOG_LEVEL', 'WARNING').strip().upper() or 'WARNING'
