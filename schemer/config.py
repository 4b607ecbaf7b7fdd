from __future__ import annotations
import os
from pathlib import Path


# Resolve installation dir (schemer package directory)
_SCHEMER_DIR = Path(__file__).resolve().parent

_DEFAULT_PRELUDE_DIR = _SCHEMER_DIR / 'prelude'


def get_prelude_root() -> Path:
    """Prelude directory from SCHEMER_PRELUDE_PATH, or the packaged one; a file path yields its parent."""
    raw = os.environ.get('SCHEMER_PRELUDE_PATH', '').strip()
    p = Path(raw) if raw else _DEFAULT_PRELUDE_DIR
    return p if p.is_dir() else p.parent
