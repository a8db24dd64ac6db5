import pytest

from malt.interpreter import Interpreter
from malt.types.errors import MaltUnboundSymbol
from malt.types.lambda_fn import Closure
from malt.types.nil import Nil
from malt.types.symbol import Symbol


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(not true)", False),
        ("(not false)", True),
        ("(not nil)", True),
        ("(not 0)", False),
        ("(not (list))", False),
    ],
)
def test_not(interp, source, expected):
    assert interp.eval(source) is expected


def test_prelude_defines_closures_in_root(interp):
    assert isinstance(interp.env.vars[Symbol("not")], Closure)


def test_no_prelude():
    itp = Interpreter(prelude=None)
    with pytest.raises(MaltUnboundSymbol):
        itp.eval("(not true)")
    assert itp.eval("(+ 1 2)") == 3


def test_inline_prelude():
    itp = Interpreter(prelude="(def! inc (fn* (x) (+ x 1))) (def! two 2)")
    assert itp.eval("(inc two)") == 3


def test_prelude_path_from_environment(tmp_path, monkeypatch):
    (tmp_path / "core.mal").write_text("(def! answer 42)", encoding="utf-8")
    monkeypatch.setenv("MALT_PRELUDE_PATH", str(tmp_path))
    assert Interpreter().eval("answer") == 42


def test_eval_returns_last_form(interp):
    assert interp.eval("(def! a 1) (def! b 2) (+ a b)") == 3
    assert interp.eval("") is Nil
    assert interp.eval("; nothing") is Nil


def test_rep_prints(interp):
    assert interp.rep("(list 1 \"a\" nil true)") == '(1 "a" nil true)'
    assert interp.rep("(fn* (x) x)") == "#<function>"
    assert interp.rep("   ") is None


def test_definitions_persist_across_calls(interp):
    interp.eval("(def! counter 1)")
    interp.eval("(def! counter (+ counter 1))")
    assert interp.eval("counter") == 2
