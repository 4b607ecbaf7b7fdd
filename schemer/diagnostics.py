"""Reporting of user-facing errors.

An error is reported exactly once, at the boundary that turns it into the
INVALID value. Diagnostics share the output stream with `display`.
"""

from __future__ import annotations

from schemer.errors import SchemerError
from schemer.runtime_context import get_output


def report(error: SchemerError) -> None:
    print(str(error), file=get_output())
