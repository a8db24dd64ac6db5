import pytest

from malt.printer import pr_str, FUNCTION_PLACEHOLDER
from malt.reader.parser import read_str
from malt.types.environment import Environment
from malt.types.lambda_fn import Closure
from malt.types.native_fn import Native
from malt.types.nil import Nil
from malt.types.symbol import Symbol


@pytest.mark.parametrize(
    "value,expected",
    [
        (Nil, "nil"),
        (True, "true"),
        (False, "false"),
        (0, "0"),
        (-42, "-42"),
        (Symbol("abc"), "abc"),
        ([], "()"),
        ([1, [2, 3], Nil], "(1 (2 3) nil)"),
        ("hi", '"hi"'),
        ('a"b\\c\nd', '"a\\"b\\\\c\\nd"'),
    ],
)
def test_pr_str(value, expected):
    assert pr_str(value) == expected


def test_pr_str_not_readably():
    assert pr_str('a"b\nc', print_readably=False) == 'a"b\nc'
    assert pr_str(["x"], print_readably=False) == "(x)"


def test_functions_print_opaquely():
    native = Native("id", lambda args: args[0], 1)
    closure = Closure([Symbol("x")], Symbol("x"), Environment())
    assert pr_str(native) == FUNCTION_PLACEHOLDER
    assert pr_str(closure) == FUNCTION_PLACEHOLDER
    assert pr_str([native]) == "(#<function>)"


@pytest.mark.parametrize(
    "source",
    ["nil", "true", "-7", "(1 (a b) nil false)", '"esc \\" \\\\ \\n"', "()"],
)
def test_printed_form_reads_back(source):
    value = read_str(source)
    assert read_str(pr_str(value)) == value


def test_non_malt_value_is_rejected():
    with pytest.raises(TypeError):
        pr_str(3.5)
