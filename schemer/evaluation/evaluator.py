"""Core evaluator for the schemer interpreter.

Dispatches on a value's kind, hands special forms to their handlers and
everything else list-shaped to the application engine. Errors raised below
an `evaluate` call are reported there, once, and become INVALID; callers
only ever see INVALID and pass it upward untouched.
"""

from __future__ import annotations

from schemer import SExpression, LispValue
from schemer.diagnostics import report
from schemer.errors import MissingProcedureError, NotAProcedureError, SchemerError
from schemer.evaluation.apply import apply
from schemer.evaluation.special_forms import SPECIAL_FORMS
from schemer.printer import render
from schemer.types.environment import Environment
from schemer.types.value import INVALID, Kind, is_procedure


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env`, reporting any error and yielding INVALID for it."""
    try:
        return evaluate0(expr, env)
    except SchemerError as err:
        report(err)
        return INVALID


def evaluate0(expr: SExpression, env: Environment) -> LispValue:
    """Single evaluation step; errors propagate as exceptions."""
    match expr.kind:
        case Kind.VARIABLE:
            return env.lookup(expr.text)
        case Kind.LIST:
            return _evaluate_list(expr, env)

    # --- Symbols, numbers, procedures and INVALID evaluate to themselves ---
    return expr


def _evaluate_list(expr: SExpression, env: Environment) -> LispValue:
    if not expr.elements:
        raise MissingProcedureError()

    head, *tail_args = expr.elements

    # --- Special forms handling ---
    if head.kind is Kind.VARIABLE and head.text in SPECIAL_FORMS:
        return SPECIAL_FORMS[head.text](tuple(tail_args), env, evaluate)

    proc = evaluate(head, env)
    if proc.failed:
        return proc
    if not is_procedure(proc):
        raise NotAProcedureError(render(proc))

    # Arguments left to right; the first failure aborts the application.
    args: list[LispValue] = []
    for arg in tail_args:
        val = evaluate(arg, env)
        if val.failed:
            return val
        args.append(val)
    return apply(proc, args, env, evaluate)
