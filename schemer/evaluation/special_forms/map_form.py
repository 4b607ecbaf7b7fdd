from schemer import EvaluatorFn
from schemer import SExpression, LispValue
from schemer.errors import ArityMismatchError, ContractViolationError
from schemer.evaluation.apply import apply as apply_engine
from schemer.printer import render
from schemer.types.environment import Environment
from schemer.types.value import is_list, is_procedure, list_items, make_list


def map_form(
    tail: tuple[SExpression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (map proc list1 list2 ...)
    Applies `proc` element-wise across equally long proper lists, in index
    order, and collects the results into a new proper list.
    """
    if len(tail) < 2:
        raise ArityMismatchError("map", "at least 2", len(tail))

    evaluated: list[LispValue] = []
    for expr in tail:
        val = evaluate_fn(expr, env)
        if val.failed:
            return val
        evaluated.append(val)

    fn_val, *list_vals = evaluated
    if not is_procedure(fn_val):
        raise ContractViolationError("map", "procedure?", render(fn_val))
    for lst in list_vals:
        if not is_list(lst):
            raise ContractViolationError("map", "list?", render(lst))

    columns = [list_items(lst) for lst in list_vals]
    lengths = {len(col) for col in columns}
    if len(lengths) != 1:
        raise ContractViolationError(
            "map", "lists of the same length", " ".join(render(lst) for lst in list_vals)
        )

    results: list[LispValue] = []
    for args in zip(*columns):
        val = apply_engine(fn_val, list(args), env, evaluate_fn)
        if val.failed:
            return val
        results.append(val)
    return make_list(results)
