"""Runtime value representation for schemer.

Every datum, whether read from source or produced by evaluation, is a `Value`:
a tagged variant discriminated by `Kind`. Two cases carry extra payload and
are modelled as subclasses so the payload only exists where it means
something:

- `Procedure` carries the native operation of a built-in.
- `Lambda` carries the environment it was defined in.

Values are frozen. Code that needs a modified value builds a copy with
`dataclasses.replace`, so bindings never share mutable state.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Callable, Optional

from schemer.errors import ContractViolationError, SchemerInternalError

if TYPE_CHECKING:
    from schemer.types.environment import Environment


class Kind(Enum):
    INVALID = "invalid"
    INTEGER = "integer"
    REAL = "real"
    VARIABLE = "variable"
    LIST = "list"
    PROCEDURE = "procedure"
    SYMBOL = "symbol"
    LAMBDA = "lambda"


@dataclass(frozen=True)
class Value:
    kind: Kind
    text: str = ""
    elements: tuple[Value, ...] = ()
    quote_depth: int = 0

    @property
    def failed(self) -> bool:
        """True for the failure value, false for everything else (void included)."""
        return self.kind is Kind.INVALID and self.text == ""

    def __str__(self) -> str:
        from schemer.printer import render
        return render(self)


# Native operations receive the calling environment and the evaluated arguments.
NativeFn = Callable[["Environment", list[Value]], Value]


@dataclass(frozen=True)
class Procedure(Value):
    native: Optional[NativeFn] = field(default=None, compare=False)

    def __post_init__(self):
        if self.native is None:
            raise SchemerInternalError(f"procedure {self.text!r} has no native operation")
        if self.elements:
            raise SchemerInternalError(f"procedure {self.text!r} cannot carry elements")


@dataclass(frozen=True)
class Lambda(Value):
    """A user procedure: elements are (parameter-list, body-form, ...)."""

    env: Optional[Environment] = field(default=None, compare=False, repr=False)

    @property
    def params(self) -> tuple[Value, ...]:
        return self.elements[0].elements

    @property
    def body(self) -> tuple[Value, ...]:
        return self.elements[1:]


# ---------------------------------
# Shared constants
# ---------------------------------
EMPTY_LIST = Value(Kind.SYMBOL, "", (), 1)
TRUE = Value(Kind.SYMBOL, "#t")
FALSE = Value(Kind.SYMBOL, "#f")
VOID = Value(Kind.INVALID, "#<void>")
INVALID = Value(Kind.INVALID)


# ---------------------------------
# Constructors
# ---------------------------------
def make_integer(n: int, name: str = "number") -> Value:
    try:
        text = str(n)
    except ValueError:
        # past the interpreter's integer string conversion limit
        raise ContractViolationError(name, "number in range", f"an integer of {n.bit_length()} bits") from None
    return Value(Kind.INTEGER, text)


def make_real(x: float) -> Value:
    if math.isnan(x):
        return Value(Kind.REAL, "+nan.0")
    if math.isinf(x):
        return Value(Kind.REAL, "+inf.0" if x > 0 else "-inf.0")
    return Value(Kind.REAL, repr(float(x)))


def make_boolean(flag: bool) -> Value:
    return TRUE if flag else FALSE


def make_list(items: list[Value], tail: Value = EMPTY_LIST) -> Value:
    """Build a quoted (data) list; `tail` becomes the final element."""
    if not items:
        return tail
    return Value(Kind.SYMBOL, "", (*items, tail), 1)


def make_procedure(name: str, native: NativeFn) -> Procedure:
    return Procedure(Kind.PROCEDURE, name, native=native)


def make_lambda(params: Value, body: tuple[Value, ...], env: Environment, name: str = "") -> Lambda:
    return Lambda(Kind.LAMBDA, name, (params, *body), env=env)


def renamed(proc: Value, name: str) -> Value:
    """Return a copy of `proc` under a new name."""
    return replace(proc, text=name)


# ---------------------------------
# Predicates
# ---------------------------------
def is_empty_list(v: Value) -> bool:
    return v == EMPTY_LIST


def is_false(v: Value) -> bool:
    return v.kind is Kind.SYMBOL and v.text == "#f" and not v.elements


def is_number(v: Value) -> bool:
    return v.kind in (Kind.INTEGER, Kind.REAL)


def is_procedure(v: Value) -> bool:
    return v.kind in (Kind.PROCEDURE, Kind.LAMBDA)


def is_string(v: Value) -> bool:
    return v.kind is Kind.SYMBOL and len(v.text) >= 2 and v.text[0] == '"' and v.text[-1] == '"'


def is_pair(v: Value) -> bool:
    return v.kind in (Kind.SYMBOL, Kind.LIST) and len(v.elements) >= 2


def is_list(v: Value) -> bool:
    """Proper list: the empty list, or list-shaped and terminated by it."""
    if is_empty_list(v):
        return True
    return v.kind in (Kind.SYMBOL, Kind.LIST) and bool(v.elements) and is_empty_list(v.elements[-1])


def list_items(v: Value) -> list[Value]:
    """Elements of a proper list without the terminator."""
    if is_empty_list(v):
        return []
    return list(v.elements[:-1])


# ---------------------------------
# Numeric conversion (never cached)
# ---------------------------------
_SPECIAL_REALS = {"+inf.0": math.inf, "-inf.0": -math.inf, "+nan.0": math.nan}


def _abbreviated(text: str, limit: int = 40) -> str:
    return text if len(text) <= limit else f"{text[:limit]}..."


def to_python_number(v: Value, name: str = "number") -> int | float:
    if v.kind is Kind.INTEGER:
        try:
            return int(v.text)
        except ValueError:
            raise ContractViolationError(name, "number in range", _abbreviated(v.text)) from None
    if v.kind is Kind.REAL:
        special = _SPECIAL_REALS.get(v.text)
        return special if special is not None else float(v.text)
    raise SchemerInternalError(f"{v.kind.value} value is not numeric")
