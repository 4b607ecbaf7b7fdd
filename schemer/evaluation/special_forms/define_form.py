from schemer import EvaluatorFn
from schemer import SExpression, LispValue
from schemer.errors import BadSyntaxError
from schemer.evaluation.special_forms.lambda_form import check_params
from schemer.types.environment import Environment
from schemer.types.value import VOID, Kind, Value, make_lambda, renamed


def define_form(
    tail: tuple[SExpression, ...],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (define name expr)
    (define (name params...) body...)

    Binds in the current frame and returns the void marker. An anonymous
    lambda bound by name is copied under that name so it prints as it is
    known.
    """
    if len(tail) < 2:
        raise BadSyntaxError("define", "expected a name and an expression")

    target, *body = tail

    if target.kind is Kind.VARIABLE:
        if len(body) != 1:
            raise BadSyntaxError("define", "multiple expressions after identifier")
        value = evaluate_fn(body[0], env)
        if value.failed:
            return value
        if value.kind is Kind.LAMBDA and not value.text:
            value = renamed(value, target.text)
        env.define(target.text, value)
        return VOID

    if target.kind is Kind.LIST and target.elements and target.elements[0].kind is Kind.VARIABLE:
        name, *params = target.elements
        check_params("define", tuple(params))
        param_list = Value(Kind.LIST, "", tuple(params))
        env.define(name.text, make_lambda(param_list, tuple(body), env, name.text))
        return VOID

    raise BadSyntaxError("define", "not an identifier or procedure header")
