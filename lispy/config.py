from __future__ import annotations
import os
from pathlib import Path


# Resolve installation dir (lispy package directory)
_LISPY_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_PRELUDE_DIR = _LISPY_DIR / 'prelude'
_DEFAULT_PROMPT = 'lispy> '

PRELUDE_FILE = 'prelude.lspy'


def path_from_env(var: str, default: Path) -> Path:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return Path(raw.strip())


def get_prelude_file() -> Path:
    # LISPY_PRELUDE_PATH may name the prelude file itself or its directory
    p = path_from_env('LISPY_PRELUDE_PATH', _DEFAULT_PRELUDE_DIR)
    return p if p.is_file() else p / PRELUDE_FILE


def get_prompt() -> str:
    return os.environ.get('LISPY_PROMPT') or _DEFAULT_PROMPT
