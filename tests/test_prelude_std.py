import pytest

from schemer.config import get_prelude_root
from schemer.interpreter import Interpreter
from schemer.modules.prelude_loader import prelude_files
from schemer.types.value import TRUE, VOID, Kind


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(not #f)", "#t"),
        ("(not 0)", "#f"),
        ("(abs -4)", "4"),
        ("(abs 2.5)", "2.5"),
        ("(length '())", "0"),
        ("(length '(1 2 3))", "3"),
        ("(append '(1 2) '(3 4))", "'(1 2 3 4)"),
        ("(append '() '(1))", "'(1)"),
    ]
)
def test_prelude_procedures(interp, source, expected):
    assert interp.run(source) == [expected]


def test_prelude_is_skipped_when_disabled():
    itp = Interpreter(prelude=None)
    assert "length" not in itp.env.vars


def test_custom_prelude_source():
    itp = Interpreter(prelude="(define answer 42)")
    assert itp.run("answer") == ["42"]


def test_prelude_path_from_environment(tmp_path, monkeypatch):
    (tmp_path / "base.scm").write_text("(define (inc x) (+ x 1))", encoding="utf-8")
    (tmp_path / "extra.scm").write_text("(define two (inc 1))", encoding="utf-8")
    monkeypatch.setenv("SCHEMER_PRELUDE_PATH", str(tmp_path))
    assert [p.name for p in prelude_files()] == ["base.scm", "extra.scm"]
    itp = Interpreter()
    assert itp.run("two") == ["2"]
    assert "length" not in itp.env.vars


def test_prelude_root_defaults_to_packaged_directory(monkeypatch):
    monkeypatch.delenv("SCHEMER_PRELUDE_PATH", raising=False)
    root = get_prelude_root()
    assert root.name == "prelude"
    assert (root / "base.scm").is_file()


def test_prelude_root_from_file_path_uses_parent(tmp_path, monkeypatch):
    (tmp_path / "base.scm").write_text("", encoding="utf-8")
    monkeypatch.setenv("SCHEMER_PRELUDE_PATH", str(tmp_path / "base.scm"))
    assert get_prelude_root() == tmp_path


def test_missing_prelude_directory_is_tolerated(tmp_path, monkeypatch):
    monkeypatch.setenv("SCHEMER_PRELUDE_PATH", str(tmp_path / "nowhere" / "base.scm"))
    itp = Interpreter()
    assert itp.run("(+ 1 1)") == ["2"]


# ------------------ interpreter facade ------------------

def test_definitions_persist_between_calls(interp):
    interp.eval("(define (sq x) (* x x))")
    result = interp.eval("(sq 5)")
    assert result.kind is Kind.INTEGER
    assert result.text == "25"


def test_eval_all_and_last(interp):
    results = interp.eval_all("1 2.5 'a")
    assert [r.text for r in results] == ["1", "2.5", "a"]
    assert interp.eval("1 #t") == TRUE
    assert interp.eval("") == VOID


def test_run_skips_void_and_failures(interp, capsys):
    out = interp.run("(define x 1) (display x) x (car 1) (list x x)")
    assert out == ["1", "'(1 1)"]
    printed = capsys.readouterr().out
    assert printed.startswith("1car: contract violation")


def test_run_stops_at_read_error(interp, capsys):
    assert interp.run("1 2 ) 3") == ["1", "2"]
    assert capsys.readouterr().out == "read-syntax: unexpected `)`\n"


def test_output_can_be_redirected(interp):
    import io
    from schemer.runtime_context import redirect_output

    buffer = io.StringIO()
    with redirect_output(buffer):
        interp.eval("(display \"to buffer\") (car 1)")
    assert buffer.getvalue().startswith("to buffercar: contract violation")
