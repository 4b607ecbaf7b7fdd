"""Built-in procedures for the schemer root environment.

This module defines arithmetic, comparison, logic, list processing,
predicates, numeric helpers and output, plus `register` which installs them
(and the boolean/null literals) into an Environment.

Every built-in takes the calling environment and the list of evaluated
arguments, and returns a Value or raises a SchemerError.
"""
from __future__ import annotations

import math
import operator
from typing import Callable

from schemer import LispValue
from schemer.errors import (
    ArityMismatchError,
    ContractViolationError,
    DivisionByZeroError,
)
from schemer.printer import display_text, render
from schemer.runtime_context import get_output
from schemer.types.environment import Environment
from schemer.types.value import (
    EMPTY_LIST,
    FALSE,
    TRUE,
    VOID,
    Kind,
    Value,
    is_empty_list,
    is_false,
    is_list,
    is_number,
    is_pair,
    is_string,
    make_boolean,
    make_integer,
    make_list,
    make_procedure,
    make_real,
    to_python_number,
)


# -------------------------------
# Argument checking helpers
# -------------------------------
def _check_arity(name: str, args: list[LispValue], expected: int) -> None:
    if len(args) != expected:
        raise ArityMismatchError(name, str(expected), len(args))


def _check_min_arity(name: str, args: list[LispValue], minimum: int) -> None:
    if len(args) < minimum:
        raise ArityMismatchError(name, f"at least {minimum}", len(args))


def _numbers(name: str, args: list[LispValue]) -> list[int | float]:
    """Convert every argument to a Python number, or raise a contract violation."""
    for a in args:
        if not is_number(a):
            raise ContractViolationError(name, "number?", render(a))
    return [to_python_number(a, name) for a in args]


def _to_float(n: int | float) -> float:
    """Inexact value of `n`; integers beyond the float range become infinities."""
    try:
        return float(n)
    except OverflowError:
        return math.inf if n > 0 else -math.inf


def _is_inexact(args: list[LispValue]) -> bool:
    return any(a.kind is Kind.REAL for a in args)


def _numeric_result(name: str, x: int | float, inexact: bool) -> Value:
    return make_real(_to_float(x)) if inexact else make_integer(x, name)


# -------------------------------
# Arithmetic
# -------------------------------
def add(env: Environment, args: list[LispValue]) -> LispValue:
    """Sum of all arguments; (+) is 0."""
    nums = _numbers("+", args)
    inexact = _is_inexact(args)
    total: int | float = 0.0 if inexact else 0
    for n in nums:
        total += _to_float(n) if inexact else n
    return _numeric_result("+", total, inexact)


def sub(env: Environment, args: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    _check_min_arity("-", args, 1)
    nums = _numbers("-", args)
    inexact = _is_inexact(args)
    if inexact:
        nums = [_to_float(n) for n in nums]
    if len(nums) == 1:
        return _numeric_result("-", -nums[0], inexact)
    result = nums[0]
    for n in nums[1:]:
        result -= n
    return _numeric_result("-", result, inexact)


def mul(env: Environment, args: list[LispValue]) -> LispValue:
    """Product of all arguments; (*) is 1."""
    nums = _numbers("*", args)
    inexact = _is_inexact(args)
    result: int | float = 1.0 if inexact else 1
    for n in nums:
        result *= _to_float(n) if inexact else n
    return _numeric_result("*", result, inexact)


def div(env: Environment, args: list[LispValue]) -> LispValue:
    """Divide left-to-right, always inexact; with one arg returns the reciprocal."""
    _check_min_arity("/", args, 1)
    nums = [_to_float(n) for n in _numbers("/", args)]
    if len(nums) == 1:
        nums = [1.0, nums[0]]
    result = nums[0]
    for n in nums[1:]:
        if n == 0:
            raise DivisionByZeroError("/")
        result /= n
    return make_real(result)


# -------------------------------
# Comparison
# -------------------------------
def _exact(name: str, arg: LispValue, n: int | float) -> int:
    if isinstance(n, float) and not math.isfinite(n):
        raise ContractViolationError(name, "rational?", render(arg))
    return int(n)


def _comparison(name: str, op: Callable[[float, float], bool]):
    def compare(env: Environment, args: list[LispValue]) -> LispValue:
        _check_min_arity(name, args, 1)
        nums = _numbers(name, args)
        # The first operand decides exactness for the whole chain
        if args[0].kind is Kind.INTEGER:
            nums = [_exact(name, a, n) for a, n in zip(args, nums)]
        else:
            nums = [_to_float(n) for n in nums]
        return make_boolean(all(op(a, b) for a, b in zip(nums, nums[1:])))

    compare.__name__ = f"compare_{op.__name__}"
    return compare


num_eq = _comparison("=", operator.eq)
lt = _comparison("<", operator.lt)
lte = _comparison("<=", operator.le)
gt = _comparison(">", operator.gt)
gte = _comparison(">=", operator.ge)


# -------------------------------
# Boolean logic
# -------------------------------
def logical_and(env: Environment, args: list[LispValue]) -> LispValue:
    """#f if any argument is #f, else #t."""
    for a in args:
        if is_false(a):
            return FALSE
    return TRUE


def logical_or(env: Environment, args: list[LispValue]) -> LispValue:
    """#t if any argument is not #f, else #f."""
    for a in args:
        if not is_false(a):
            return TRUE
    return FALSE


# -------------------------------
# List operations
# -------------------------------
def list_builtin(env: Environment, args: list[LispValue]) -> LispValue:
    return make_list(list(args))


def cons(env: Environment, args: list[LispValue]) -> LispValue:
    """Pair `head` with `tail`; a list or pair tail is spliced so the result stays flat."""
    _check_arity("cons", args, 2)
    head, tail = args
    if is_empty_list(tail):
        return make_list([head])
    if tail.kind is Kind.SYMBOL and is_pair(tail):
        return Value(Kind.SYMBOL, "", (head, *tail.elements), 1)
    return Value(Kind.SYMBOL, "", (head, tail), 1)


def car(env: Environment, args: list[LispValue]) -> LispValue:
    _check_arity("car", args, 1)
    pair = args[0]
    if not is_pair(pair):
        raise ContractViolationError("car", "pair?", render(pair))
    return pair.elements[0]


def cdr(env: Environment, args: list[LispValue]) -> LispValue:
    _check_arity("cdr", args, 1)
    pair = args[0]
    if not is_pair(pair):
        raise ContractViolationError("cdr", "pair?", render(pair))
    if len(pair.elements) == 2:
        return pair.elements[1]
    return Value(pair.kind, "", pair.elements[1:], pair.quote_depth)


def null(env: Environment, args: list[LispValue]) -> LispValue:
    _check_arity("null?", args, 1)
    return make_boolean(is_empty_list(args[0]))


def pair_p(env: Environment, args: list[LispValue]) -> LispValue:
    _check_arity("pair?", args, 1)
    return make_boolean(is_pair(args[0]))


def list_p(env: Environment, args: list[LispValue]) -> LispValue:
    _check_arity("list?", args, 1)
    return make_boolean(is_list(args[0]))


# -------------------------------
# Type predicates
# -------------------------------
def number_p(env: Environment, args: list[LispValue]) -> LispValue:
    _check_arity("number?", args, 1)
    return make_boolean(is_number(args[0]))


def integer_p(env: Environment, args: list[LispValue]) -> LispValue:
    """Integers, and reals with no fractional part."""
    _check_arity("integer?", args, 1)
    v = args[0]
    if v.kind is Kind.INTEGER:
        return TRUE
    if v.kind is Kind.REAL:
        x = to_python_number(v)
        return make_boolean(math.isfinite(x) and x.is_integer())
    return FALSE


def real_p(env: Environment, args: list[LispValue]) -> LispValue:
    _check_arity("real?", args, 1)
    return make_boolean(is_number(args[0]))


def string_p(env: Environment, args: list[LispValue]) -> LispValue:
    _check_arity("string?", args, 1)
    return make_boolean(is_string(args[0]))


# -------------------------------
# Other numeric operations
# -------------------------------
def _integer_operands(name: str, args: list[LispValue]) -> tuple[int, int]:
    _check_arity(name, args, 2)
    for a in args:
        if a.kind is not Kind.INTEGER:
            raise ContractViolationError(name, "integer?", render(a))
    n, d = (to_python_number(a, name) for a in args)
    if d == 0:
        raise DivisionByZeroError(name)
    return n, d


def _truncated_quotient(n: int, d: int) -> int:
    q = abs(n) // abs(d)
    return -q if (n < 0) != (d < 0) else q


def quotient(env: Environment, args: list[LispValue]) -> LispValue:
    """(quotient n d), truncating toward zero."""
    n, d = _integer_operands("quotient", args)
    return make_integer(_truncated_quotient(n, d), "quotient")


def remainder(env: Environment, args: list[LispValue]) -> LispValue:
    """(remainder n d); the sign follows the dividend."""
    n, d = _integer_operands("remainder", args)
    return make_integer(n - d * _truncated_quotient(n, d), "remainder")


def expt(env: Environment, args: list[LispValue]) -> LispValue:
    """(expt base power), always inexact."""
    _check_arity("expt", args, 2)
    base, power = (_to_float(n) for n in _numbers("expt", args))
    try:
        return make_real(math.pow(base, power))
    except OverflowError:
        odd = power.is_integer() and int(power) % 2 == 1
        return make_real(math.copysign(math.inf, base) if odd else math.inf)
    except ValueError:
        # negative base with a fractional power has no real result
        return make_real(math.nan)


def _extremum(name: str, pick: Callable):
    def extremum(env: Environment, args: list[LispValue]) -> LispValue:
        _check_min_arity(name, args, 1)
        nums = _numbers(name, args)
        inexact = _is_inexact(args)
        if inexact:
            nums = [_to_float(n) for n in nums]
        return _numeric_result(name, pick(nums), inexact)

    extremum.__name__ = name
    return extremum


max_builtin = _extremum("max", max)
min_builtin = _extremum("min", min)


# -------------------------------
# Output
# -------------------------------
def display(env: Environment, args: list[LispValue]) -> LispValue:
    """Write the argument to the output stream; strings are written without quotes."""
    _check_arity("display", args, 1)
    print(display_text(args[0]), end="", file=get_output())
    return VOID


def newline(env: Environment, args: list[LispValue]) -> LispValue:
    _check_arity("newline", args, 0)
    print(file=get_output())
    return VOID


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, Callable[[Environment, list[LispValue]], LispValue]] = {
    "+": add,
    "-": sub,
    "*": mul,
    "/": div,
    "=": num_eq,
    "<": lt,
    "<=": lte,
    ">": gt,
    ">=": gte,
    "and": logical_and,
    "or": logical_or,
    "list": list_builtin,
    "cons": cons,
    "car": car,
    "cdr": cdr,
    "null?": null,
    "pair?": pair_p,
    "list?": list_p,
    "number?": number_p,
    "integer?": integer_p,
    "real?": real_p,
    "string?": string_p,
    "remainder": remainder,
    "quotient": quotient,
    "expt": expt,
    "max": max_builtin,
    "min": min_builtin,
    "display": display,
    "newline": newline,
}

LITERALS: dict[str, Value] = {
    "#t": TRUE,
    "#f": FALSE,
    "true": TRUE,
    "false": FALSE,
    "null": EMPTY_LIST,
    "empty": EMPTY_LIST,
}


def register(env: Environment) -> None:
    env.update({name: make_procedure(name, fn) for name, fn in BUILTINS.items()})
    env.update(LITERALS)
