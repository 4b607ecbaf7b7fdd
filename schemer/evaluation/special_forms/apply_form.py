from schemer import EvaluatorFn
from schemer import SExpression, LispValue
from schemer.errors import ArityMismatchError, ContractViolationError
from schemer.evaluation.apply import apply as apply_engine
from schemer.printer import render
from schemer.types.environment import Environment
from schemer.types.value import is_list, is_procedure, list_items


def apply_form(
    tail: tuple[SExpression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (apply proc arglist)
    Applies `proc` to the elements of the proper list `arglist`, through the
    same engine as an ordinary application.
    """
    if len(tail) != 2:
        raise ArityMismatchError("apply", "2", len(tail))

    fn_expr, args_expr = tail

    fn_val = evaluate_fn(fn_expr, env)
    if fn_val.failed:
        return fn_val
    args_val = evaluate_fn(args_expr, env)
    if args_val.failed:
        return args_val

    if not is_procedure(fn_val):
        raise ContractViolationError("apply", "procedure?", render(fn_val))
    if not is_list(args_val):
        raise ContractViolationError("apply", "list?", render(args_val))

    return apply_engine(fn_val, list_items(args_val), env, evaluate_fn)
