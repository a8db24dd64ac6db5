import io

import pytest

from malt.interpreter import Interpreter
from malt.repl import repl


def feed(*lines):
    """A read_line stand-in that returns `lines` in turn, then signals EOF."""
    it = iter(lines)

    def read_line(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read_line


def run_repl(*lines, interp=None):
    out = io.StringIO()
    repl(interp or Interpreter(), read_line=feed(*lines), out=out, prompt="")
    return out.getvalue()


def test_prints_results():
    assert run_repl("(+ 1 2)", "(list 1 2)") == "3\n(1 2)\n\n"


def test_blank_lines_print_nothing():
    assert run_repl("", "   ", "; comment") == "\n"


def test_errors_do_not_end_the_loop():
    out = run_repl("(+ 1 nil)", "undefined-thing", "(", "(1 2)", "(+ 2 2)")
    lines = out.splitlines()
    assert lines[0].startswith("error: +: argument 2 isn't an integer")
    assert lines[1] == "error: 'undefined-thing' not found"
    assert lines[2] == "error: expected ')', got EOF"
    assert lines[3] == "error: 1 is not a function"
    assert lines[4] == "4"


def test_definitions_survive_errors():
    out = run_repl("(def! x 5)", "(x)", "x")
    assert out.splitlines() == ["5", "error: 5 is not a function", "5", ""]


def test_stack_overflow_is_reported():
    interp = Interpreter()
    interp.eval("(def! deep (fn* (n) (if (= n 0) 0 (+ 1 (deep (- n 1))))))")
    out = run_repl("(deep 100000)", "(deep 3)", interp=interp)
    assert out.splitlines() == ["error: stack overflow", "3", ""]


def test_prn_output_interleaves(capsys):
    interp = Interpreter()
    out = io.StringIO()
    repl(interp, read_line=feed('(do (prn "a") (prn "b") 3)'), out=out, prompt="")
    assert capsys.readouterr().out == '"a"\n"b"\n'
    assert out.getvalue() == "3\n\n"


def test_keyboard_interrupt_returns_to_prompt():
    calls = iter([KeyboardInterrupt, "(+ 1 1)"])

    def read_line(prompt):
        try:
            item = next(calls)
        except StopIteration:
            raise EOFError from None
        if item is KeyboardInterrupt:
            raise KeyboardInterrupt
        return item

    out = io.StringIO()
    repl(Interpreter(), read_line=read_line, out=out, prompt="")
    assert out.getvalue() == "\n2\n\n"


def test_prompt_from_environment(monkeypatch):
    monkeypatch.setenv("MALT_PROMPT", "malt> ")
    prompts = []

    def read_line(prompt):
        prompts.append(prompt)
        raise EOFError

    repl(Interpreter(prelude=None), read_line=read_line, out=io.StringIO())
    assert prompts == ["malt> "]


def test_prn_writes_to_stdout_not_out(capsys):
    out = io.StringIO()
    repl(Interpreter(), read_line=feed('(prn 1)'), out=out, prompt="")
    assert capsys.readouterr().out == "1\n"
    assert out.getvalue() == "nil\n\n"
