from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Resolve installation dir (malt package directory)
_MALT_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _MALT_DIR / 'prelude'
DEFAULT_PROMPT = 'user> '
DEFAULT_LOG_LEVEL = 'WARNING'
PRELUDE_FILE = 'core.mal'


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_prelude_root() -> Path:
    roots = paths_from_env('MALT_PRELUDE_PATH', [_DEFAULT_PRELUDE_DIR])
    # treat as single directory; if a file path is set, return its parent
    p = roots[0]
    return p if p.is_dir() else p.parent


def get_prelude_file() -> Path:
    return get_prelude_root() / PRELUDE_FILE


def get_prompt() -> str:
    return os.environ.get('MALT_PROMPT', DEFAULT_PROMPT)


def get_log_level() -> int:
    name = os.environ.get('MALT_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"MALT_LOG_LEVEL: unknown level {name!r}")
    return level


def get_recursion_limit() -> Optional[int]:
    raw = os.environ.get('MALT_RECURSION_LIMIT')
    if not raw:
        return None
    try:
        limit = int(raw)
    except ValueError:
        raise ValueError(f"MALT_RECURSION_LIMIT: not an integer: {raw!r}") from None
    if limit <= 0:
        raise ValueError(f"MALT_RECURSION_LIMIT: must be positive, got {limit}")
    return limit


def configure_logging() -> None:
    logging.basicConfig(
        level=get_log_level(),
        format='%(asctime)s %(name)s %(levelname)s: %(message)s',
    )
