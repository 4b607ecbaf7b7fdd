import pytest

from schemer.evaluation.evaluator import evaluate
from schemer.printer import render
from schemer.reader.parser import read_all
from schemer.types.environment import Environment
from schemer.types.value import (
    EMPTY_LIST, INVALID, VOID, Kind, Value, make_integer, make_procedure,
)


def test_self_evaluating_literals(env):
    for v in (Value(Kind.INTEGER, "1"), Value(Kind.REAL, "2.5"), Value(Kind.SYMBOL, "a", (), 1), EMPTY_LIST):
        assert evaluate(v, env) == v


def test_invalid_propagates_without_report(env, capsys):
    assert evaluate(INVALID, env) == INVALID
    assert capsys.readouterr().out == ""


def test_variable_lookup(env):
    env.define("x", make_integer(42))
    assert evaluate(Value(Kind.VARIABLE, "x"), env) == make_integer(42)


def test_undefined_variable(env, capsys):
    result = evaluate(Value(Kind.VARIABLE, "zzz"), env)
    assert result == INVALID
    assert capsys.readouterr().out == (
        "zzz: undefined;\n cannot reference an identifier before its definition\n"
    )
    assert "zzz" not in env.vars


def test_procedure_evaluates_to_itself(env):
    proc = env.lookup("car")
    assert evaluate(proc, env) == proc


def test_simple_application(show):
    assert show("(+ 1 2)") == "3"
    assert show("(+ (* 2 3) (- 10 4))") == "12"


def test_empty_application_is_missing_procedure(run, capsys):
    assert run("()") == INVALID
    assert capsys.readouterr().out.startswith("#%app: missing procedure expression;")


def test_not_a_procedure(run, capsys):
    assert run("(1 2 3)") == INVALID
    out = capsys.readouterr().out
    assert out.startswith("application: not a procedure;")
    assert "given: 1" in out


def test_application_aborts_on_first_failed_argument(run, capsys):
    result = run("(+ (display 1) undefined-thing (display 2))")
    out = capsys.readouterr().out
    assert result == INVALID
    # display 1 ran, display 2 never did, and the error was reported once
    assert out.startswith("1undefined-thing: undefined;")
    assert "2" not in out
    assert out.count("undefined;") == 1


def test_error_is_reported_once_when_nested(run, capsys):
    assert run("(+ 1 (+ 2 (car 5)))") == INVALID
    assert capsys.readouterr().out.count("contract violation") == 1


def test_lambda_closure_is_lexical(show):
    source = """
    (define x 10)
    (define (make-adder n) (lambda (y) (+ n y)))
    (define add5 (make-adder 5))
    (define (call-with-x f) (define x 1000) (f x))
    (call-with-x add5)
    """
    assert show(source) == "1005"


def test_lambda_does_not_see_caller_frame(run, capsys):
    source = """
    (define (get-secret) secret)
    (define (caller secret) (get-secret))
    (caller 1)
    """
    assert run(source) == INVALID
    assert "secret: undefined;" in capsys.readouterr().out


def test_call_frame_does_not_leak(run, env):
    run("(define (f a) (* a 2)) (f 3)")
    assert "a" not in env.vars


def test_lambda_arity_mismatch_skips_body(run, capsys):
    run("(define (two a b) (display 99) (+ a b))")
    capsys.readouterr()
    assert run("(two 1)") == INVALID
    out = capsys.readouterr().out
    assert "99" not in out
    assert out == (
        "two: arity mismatch;\n"
        " the expected number of arguments does not match the given number\n"
        "  expected: 2\n"
        "  given: 1\n"
    )


def test_lambda_body_evaluates_in_order_returns_last(show, capsys):
    assert show("((lambda (x) (display x) (display 2) (* x 3)) 1)") == "3"
    assert capsys.readouterr().out == "12"


def test_immediately_applied_anonymous_lambda(show):
    assert show("((lambda () 7))") == "7"
    assert show("(lambda (x) x)") == "#<procedure>"


def test_recursion(show):
    source = """
    (define (fact n) (if (= n 0) 1 (* n (fact (- n 1)))))
    (fact 10)
    """
    assert show(source) == "3628800"


def test_native_procedure_receives_env_and_args(env):
    seen = {}

    def spy(call_env, args):
        seen["env"] = call_env
        seen["args"] = args
        return VOID

    env.define("spy", make_procedure("spy", spy))
    frame = Environment(outer=env)
    form = next(iter(read_all("(spy 1 'a)")))
    assert evaluate(form, frame) == VOID
    assert seen["env"] is frame
    assert [render(a) for a in seen["args"]] == ["1", "'a"]


def test_special_form_names_cannot_be_shadowed(show):
    assert show("(define (if a b c) 0) (if #t 1 2)") == "1"
