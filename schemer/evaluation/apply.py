"""Application engine for schemer.

Centralizes procedure application so the evaluator and the `apply`/`map`
special forms share one set of semantics:
- Lambdas bind their parameters in a fresh frame whose parent is the
  lambda's defining environment, then evaluate their bodies in order.
- Procedures (built-ins) are called with the caller's environment and the
  already-evaluated arguments.
"""

from __future__ import annotations

from schemer import EvaluatorFn, LispValue
from schemer.errors import ArityMismatchError, NotAProcedureError
from schemer.printer import render
from schemer.types.environment import Environment
from schemer.types.value import VOID, Lambda, Procedure


def apply_lambda(fn: Lambda, args: list[LispValue], evaluate_fn: EvaluatorFn) -> LispValue:
    """Apply a user lambda.

    The argument count must equal the parameter count exactly; on a mismatch
    the body is not evaluated at all. Evaluation of the body stops at the
    first failed form and returns it.
    """
    params = fn.params
    if len(args) != len(params):
        raise ArityMismatchError(fn.text or "#<procedure>", str(len(params)), len(args))

    frame = fn.env.extend((p.text for p in params), args)
    result: LispValue = VOID
    for form in fn.body:
        result = evaluate_fn(form, frame)
        if result.failed:
            return result
    return result


def apply(
    head: LispValue,
    args: list[LispValue],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply either a Lambda or a built-in Procedure.

    Raises NotAProcedureError for anything else.
    """
    if isinstance(head, Lambda):
        return apply_lambda(head, args, evaluate_fn)
    if isinstance(head, Procedure):
        return head.native(env, args)
    raise NotAProcedureError(render(head))
