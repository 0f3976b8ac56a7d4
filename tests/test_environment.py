import pytest

from lisplet.types.environment import Environment
from lisplet.types.errors import LispletUnboundSymbol
from lisplet.types.symbol import Symbol

X = Symbol("x")


def test_lookup_walks_outward():
    root = Environment()
    root.define(X, 1.0)
    child = root.extend().extend()
    assert child.lookup(X) == 1.0
    assert child.find(X) is root


def test_lookup_unbound_names_the_symbol():
    with pytest.raises(LispletUnboundSymbol) as exc:
        Environment().lookup(Symbol("missing"))
    assert exc.value.symbol == Symbol("missing")


def test_define_only_touches_current_scope():
    root = Environment()
    root.define(X, 1.0)
    child = root.extend()
    child.define(X, 2.0)
    assert child.lookup(X) == 2.0
    assert root.lookup(X) == 1.0


def test_define_overwrites_last_write_wins():
    env = Environment()
    env.define(X, 1.0)
    env.define(X, 2.0)
    assert env.vars == {X: 2.0}


def test_assign_updates_nearest_binding():
    root = Environment()
    root.define(X, 1.0)
    middle = root.extend()
    leaf = middle.extend()
    leaf.assign(X, 5.0)
    assert root.lookup(X) == 5.0
    assert X not in leaf.vars


def test_assign_never_creates():
    env = Environment().extend()
    with pytest.raises(LispletUnboundSymbol):
        env.assign(X, 1.0)
    assert env.find(X) is None


def test_extend_shares_parent():
    root = Environment()
    a, b = root.extend(), root.extend()
    assert a.outer is root and b.outer is root
    root.define(X, 3.0)
    assert a.lookup(X) == b.lookup(X) == 3.0


def test_symbols_are_interned_and_distinct_from_strings():
    assert Symbol("abc") == Symbol("abc")
    assert hash(Symbol("abc")) == hash(Symbol("abc"))
    assert Symbol("abc") != "abc"
    env = Environment()
    env.define(Symbol("abc"), 1.0)
    assert "abc" not in env.vars


def test_str_and_repr():
    root = Environment()
    root.define(X, 1.0)
    child = root.extend()
    assert str(root) == "{x: 1.0}"
    assert str(child) == "{} -> ..."
    assert repr(child) == "<Environment chain: {} -> {x: 1.0}>"
