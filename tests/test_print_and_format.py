import pytest

from schemer.errors import SchemerInternalError
from schemer.printer import display_text, render
from schemer.reader.parser import read_all
from schemer.types.value import (
    EMPTY_LIST, FALSE, INVALID, TRUE, VOID, Kind, Value, make_list, make_real,
)


def read_one(source):
    return next(iter(read_all(source)))


@pytest.mark.parametrize(
    "source",
    ["0", "42", "-17", "3.14", "-0.5", "1.0", "'a", "''a", "'(1 2 3)", "'(a (b c) ())", "'(a 'b)", '"hi"', "'()"],
)
def test_render_read_is_idempotent(source):
    assert render(read_one(source)) == source


def test_render_constants():
    assert render(EMPTY_LIST) == "'()"
    assert render(TRUE) == "#t"
    assert render(FALSE) == "#f"
    assert render(VOID) == "#<void>"
    assert render(INVALID) == "#<invalid>"


def test_render_improper_list():
    pair = Value(Kind.SYMBOL, "", (Value(Kind.INTEGER, "1"), Value(Kind.INTEGER, "2")), 1)
    assert render(pair) == "'(1 . 2)"
    dotted = Value(Kind.SYMBOL, "", (Value(Kind.INTEGER, "1"), Value(Kind.INTEGER, "2"), Value(Kind.INTEGER, "3")), 1)
    assert render(dotted) == "'(1 2 . 3)"


def test_render_built_list_of_unquoted_values():
    lst = make_list([Value(Kind.INTEGER, "1"), make_list([Value(Kind.INTEGER, "2")])])
    assert render(lst) == "'(1 (2))"


def test_render_code_list():
    assert render(read_one("(+ 1 2)")) == "(+ 1 2)"


def test_render_empty_code_list_is_internal_error():
    with pytest.raises(SchemerInternalError):
        render(Value(Kind.LIST))


def test_render_non_finite_reals():
    assert render(make_real(float("inf"))) == "+inf.0"
    assert render(make_real(float("-inf"))) == "-inf.0"
    assert render(make_real(float("nan"))) == "+nan.0"


def test_display_text_strips_string_quotes():
    assert display_text(read_one('"hello"')) == "hello"
    assert display_text(read_one("'(1 2)")) == "(1 2)"
    assert display_text(read_one("''a")) == "a"


def test_value_str_uses_render():
    assert str(read_one("'(x y)")) == "'(x y)"
