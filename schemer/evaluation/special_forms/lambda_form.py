from schemer import EvaluatorFn
from schemer import SExpression, LispValue
from schemer.errors import BadSyntaxError
from schemer.types.environment import Environment
from schemer.types.value import Kind, make_lambda


def check_params(form_name: str, params: tuple[SExpression, ...]) -> None:
    """Parameters must be distinct plain identifiers."""
    seen: set[str] = set()
    for p in params:
        if p.kind is not Kind.VARIABLE:
            raise BadSyntaxError(form_name, "not an identifier in parameter list")
        if p.text in seen:
            raise BadSyntaxError(form_name, f"duplicate argument name {p.text}")
        seen.add(p.text)


def lambda_form(
    tail: tuple[SExpression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (lambda (params...) body...)
    The parameter list and bodies are kept verbatim; nothing is evaluated
    until the lambda is applied.
    """
    if len(tail) < 2:
        raise BadSyntaxError("lambda", "missing body")

    params = tail[0]
    if params.kind is not Kind.LIST:
        raise BadSyntaxError("lambda", "expected a parameter list")
    check_params("lambda", params.elements)

    return make_lambda(params, tail[1:], env)
