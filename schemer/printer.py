"""Textual rendering of values, as a driver displays them.

Quote markers are re-emitted per quote level. Children of a list only emit
the levels they add beyond the list's own depth, so `'(a 'b)` round-trips.
"""

from __future__ import annotations

from io import StringIO

from schemer.errors import SchemerInternalError
from schemer.types.value import Kind, Value, is_empty_list


def render(value: Value, enclosing_depth: int = 0) -> str:
    with StringIO() as buffer:
        _write(buffer, value, enclosing_depth)
        return buffer.getvalue()


def display_text(value: Value) -> str:
    """Rendering used by `display`: no leading quote markers, strings without quotes."""
    if value.kind is Kind.SYMBOL and not value.elements and len(value.text) >= 2 \
            and value.text[0] == '"' and value.text[-1] == '"':
        return value.text[1:-1]
    return render(value, value.quote_depth)


def _write(buffer: StringIO, value: Value, enclosing_depth: int) -> None:
    kind = value.kind
    if kind is Kind.INVALID:
        buffer.write(value.text or "#<invalid>")
        return
    if kind in (Kind.PROCEDURE, Kind.LAMBDA):
        buffer.write(f"#<procedure:{value.text}>" if value.text else "#<procedure>")
        return

    buffer.write("'" * max(0, value.quote_depth - enclosing_depth))
    if kind is Kind.LIST or (kind is Kind.SYMBOL and value.elements):
        _write_list(buffer, value)
    elif kind is Kind.SYMBOL and not value.text:
        buffer.write("()")
    else:
        buffer.write(value.text)


def _write_list(buffer: StringIO, value: Value) -> None:
    elements = value.elements
    if not elements:
        raise SchemerInternalError("cannot render a code list with no elements")

    depth = value.quote_depth
    items = elements
    tail = None
    if value.kind is Kind.SYMBOL:
        items, last = elements[:-1], elements[-1]
        if not is_empty_list(last):
            tail = last

    buffer.write("(")
    buffer.write(" ".join(render(item, depth) for item in items))
    if tail is not None:
        buffer.write(" . ")
        buffer.write(render(tail, depth))
    buffer.write(")")
