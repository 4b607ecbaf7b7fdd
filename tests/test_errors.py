import pytest

from schemer import errors
from schemer.diagnostics import report


@pytest.mark.parametrize(
    "error,kind,text",
    [
        (errors.ArityMismatchError("f", "2", 1), "ArityMismatch",
         "f: arity mismatch;\n the expected number of arguments does not match the given number\n  expected: 2\n  given: 1"),
        (errors.NotAProcedureError("5"), "NotAProcedure",
         "application: not a procedure;\n expected a procedure that can be applied to arguments\n  given: 5"),
        (errors.ContractViolationError("car", "pair?", "1"), "ContractViolation",
         "car: contract violation\n  expected: pair?\n  given: 1"),
        (errors.UndefinedError("x"), "Undefined",
         "x: undefined;\n cannot reference an identifier before its definition"),
        (errors.BadSyntaxError("define"), "BadSyntax", "define: bad syntax"),
        (errors.BadSyntaxError("cond", "missing clause"), "BadSyntax", "cond: bad syntax (missing clause)"),
        (errors.ReadSyntaxError("unexpected `)`"), "ReadSyntax", "read-syntax: unexpected `)`"),
        (errors.DivisionByZeroError("/"), "DivisionByZero", "/: division by zero"),
    ]
)
def test_error_text(error, kind, text):
    assert isinstance(error, errors.SchemerError)
    assert error.kind == kind
    assert str(error) == text


def test_missing_procedure_text():
    err = errors.MissingProcedureError()
    assert err.kind == "MissingProcedure"
    assert str(err).startswith("#%app: missing procedure expression;")


def test_internal_error_is_not_user_error():
    assert not issubclass(errors.SchemerInternalError, errors.SchemerError)


def test_report_writes_to_output(capsys):
    report(errors.UndefinedError("y"))
    assert capsys.readouterr().out.startswith("y: undefined;")
