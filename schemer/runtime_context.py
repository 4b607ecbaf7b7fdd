from __future__ import annotations
import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

# NOTE: process-global. If threading is introduced,
# consider switching to contextvars or threading.local.
_current_output: Optional[TextIO] = None


def set_output(stream: Optional[TextIO]) -> None:
    global _current_output
    _current_output = stream


def get_output() -> TextIO:
    # Resolve sys.stdout lazily so captured/replaced stdout is honoured
    return _current_output if _current_output is not None else sys.stdout


@contextmanager
def redirect_output(stream: TextIO) -> Iterator[TextIO]:
    previous = _current_output
    set_output(stream)
    try:
        yield stream
    finally:
        set_output(previous)
