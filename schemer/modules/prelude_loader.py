from __future__ import annotations
from pathlib import Path
from typing import Protocol

from schemer.config import get_prelude_root


class _HasEvalPrelude(Protocol):
    def eval_prelude(self, code: str) -> None: ...


def prelude_files(root: Path | None = None) -> list[Path]:
    """Prelude sources under `root`: base.scm first, then the rest by name."""
    root = root if root is not None else get_prelude_root()
    if not root.is_dir():
        raise FileNotFoundError(f"Prelude directory '{root}' not found (SCHEMER_PRELUDE_PATH)")
    files = sorted(root.glob('*.scm'))
    files.sort(key=lambda p: p.name != 'base.scm')
    return files


def load_prelude(itp: _HasEvalPrelude, root: Path | None = None) -> None:
    for path in prelude_files(root):
        itp.eval_prelude(path.read_text(encoding='utf-8'))
