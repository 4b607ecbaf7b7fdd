from schemer import EvaluatorFn
from schemer import SExpression, LispValue
from schemer.errors import ArityMismatchError
from schemer.types.environment import Environment
from schemer.types.value import VOID, is_false


def if_form(
    tail: tuple[SExpression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    if len(tail) not in (2, 3):
        raise ArityMismatchError("if", "2 or 3", len(tail))

    cond = evaluate_fn(tail[0], env)
    if cond.failed:
        return cond

    # Only #f is false; 0 and the empty list are true
    if not is_false(cond):
        return evaluate_fn(tail[1], env)
    elif len(tail) == 3:
        return evaluate_fn(tail[2], env)
    else:
        return VOID
