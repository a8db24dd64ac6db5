import pytest

from malt.types.environment import Environment
from malt.types.symbol import Symbol
from malt.types.errors import MaltUnboundSymbol, MaltInvalidSymbol


def test_root_has_no_outer():
    root = Environment()
    assert root.outer is None
    assert root.vars == {}
    assert root.root() is root


def test_child_links_to_outer():
    root = Environment()
    child = root.child()
    grandchild = Environment(child)
    assert child.outer is root
    assert grandchild.root() is root


def test_shadowing_does_not_touch_outer_binding():
    root = Environment()
    root.define(Symbol("x"), 10)
    child = root.child()
    child.define(Symbol("x"), 20)
    assert child.lookup(Symbol("x")) == 20
    assert root.lookup(Symbol("x")) == 10


def test_lookup_walks_outward():
    root = Environment()
    root.define(Symbol("x"), 1)
    inner = root.child().child()
    assert inner.lookup(Symbol("x")) == 1
    assert inner.find(Symbol("x")) is root


def test_define_overwrites_in_current_frame():
    env = Environment()
    env.define(Symbol("x"), 1)
    env.define(Symbol("x"), 2)
    assert env.lookup(Symbol("x")) == 2


def test_unbound_symbol_is_an_error():
    env = Environment().child()
    with pytest.raises(MaltUnboundSymbol) as excinfo:
        env.lookup(Symbol("missing"))
    assert excinfo.value.name == Symbol("missing")
    assert "missing" in str(excinfo.value)


def test_define_requires_a_symbol():
    with pytest.raises(MaltInvalidSymbol):
        Environment().define("x", 1)


def test_update_defines_every_entry():
    env = Environment()
    env.update({Symbol("a"): 1, Symbol("b"): 2})
    assert env.vars == {Symbol("a"): 1, Symbol("b"): 2}
    assert Symbol("a") in env.child()
    assert Symbol("c") not in env


def test_str_and_repr():
    root = Environment()
    root.define(Symbol("a"), 1)
    child = root.child()
    child.define(Symbol("b"), 2)
    assert str(child) == "{b: 2} -> ..."
    assert repr(child) == "<Environment chain: {b: 2} -> <root: 1 bindings>>"
