"""Special form: cond, the multi-branch conditional."""

from schemer import EvaluatorFn
from schemer import SExpression, LispValue
from schemer.errors import BadSyntaxError
from schemer.types.environment import Environment
from schemer.types.value import VOID, Kind, is_false


def _is_else(test: SExpression) -> bool:
    return test.kind is Kind.VARIABLE and test.text == "else"


def _check_clauses(tail: tuple[SExpression, ...]) -> None:
    for idx, clause in enumerate(tail):
        if clause.kind is not Kind.LIST or not clause.elements:
            raise BadSyntaxError("cond", "clause is not a test-value pair")
        if _is_else(clause.elements[0]):
            if len(clause.elements) < 2:
                raise BadSyntaxError("cond", "missing expressions in `else' clause")
            if idx != len(tail) - 1:
                raise BadSyntaxError("cond", "`else' clause must be last")


def cond_form(
    tail: tuple[SExpression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Evaluate (cond (test expr...) ... [(else expr...)]).

    For each clause in order:
    - `else` is taken without evaluating anything.
    - Otherwise the test is evaluated; if it is not #f the clause body is
      evaluated left to right and the last value returned. A clause with
      only a test returns the test's value.
    If no clause matches, the void marker is returned.
    """
    _check_clauses(tail)

    for clause in tail:
        test, *body = clause.elements

        if _is_else(test):
            result = VOID
        else:
            result = evaluate_fn(test, env)
            if result.failed:
                return result
            if is_false(result):
                continue

        for expr in body:
            result = evaluate_fn(expr, env)
            if result.failed:
                return result
        return result

    # No clause matched
    return VOID
