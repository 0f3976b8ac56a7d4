from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Iterable, List


# Resolve installation dir (lisplet package directory)
_LISPLET_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _LISPLET_DIR / 'prelude'
PRELUDE_FILE = 'stdlib.lisp'
# Each Lisp call costs several Python frames.
DEFAULT_RECURSION_LIMIT = 10000


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_prelude_root() -> Path:
    roots = paths_from_env('LISPLET_PRELUDE_PATH', [_DEFAULT_PRELUDE_DIR])
    # treat as single directory; if a file path is set, return its parent
    p = roots[0]
    return p if p.is_dir() else p.parent


def get_load_path() -> List[Path]:
    return [Path.cwd(), *paths_from_env('LISPLET_LOAD_PATH', [])]


def resolve_source(name: str | Path) -> Path:
    """Locate a source file: absolute paths as given, else the first load-path hit."""
    path = Path(name)
    if path.is_absolute():
        return path
    for root in get_load_path():
        candidate = root / path
        if candidate.is_file():
            return candidate
    return path


def get_log_level() -> int:
    level = getattr(logging, os.environ.get('LOGLEVEL', 'WARNING').upper(), None)
    return level if isinstance(level, int) else logging.WARNING


def get_recursion_limit() -> int:
    raw = os.environ.get('LISPLET_RECURSION_LIMIT', '')
    return int(raw) if raw.isdigit() else DEFAULT_RECURSION_LIMIT
