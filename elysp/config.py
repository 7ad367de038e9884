from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


def _sep() -> str:
    return ';' if os.name == 'nt' else ':'


# Resolve installation dir (elysp package directory)
_ELYSP_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _ELYSP_DIR / 'prelude'
_DEFAULT_LOG_LEVEL = 'WARNING'
_DEFAULT_RECURSION_LIMIT = 10000


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    sep = _sep()
    return [Path(p.strip()) for p in raw.split(sep) if p.strip()]


def get_module_roots() -> List[Path]:
    """Directories searched by `import` after the current directory."""
    return paths_from_env('ELYSP_PATH', [])


def get_prelude_root() -> Path:
    roots = paths_from_env('ELYSP_PRELUDE_PATH', [_DEFAULT_PRELUDE_DIR])
    # treat as single directory; if a file path is set, return its parent
    p = roots[0]
    return p if p.is_dir() else p.parent


def get_log_level() -> str:
    return os.environ.get('ELYSP_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()


def get_recursion_limit() -> int:
    raw = os.environ.get('ELYSP_RECURSION_LIMIT')
    return int(raw) if raw else _DEFAULT_RECURSION_LIMIT
