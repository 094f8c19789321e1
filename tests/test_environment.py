import pytest

from mal.errors import UnknownSymbol
from mal.types.environment import Environment
from mal.types.symbol import Symbol


def test_set_and_get():
    env = Environment()
    env.set(Symbol("a"), 1)
    assert env.get(Symbol("a")) == 1
    assert env.get("a") == 1


def test_last_set_wins():
    env = Environment()
    env.set(Symbol("a"), 1)
    env.set(Symbol("a"), 2)
    assert env.get(Symbol("a")) == 2


def test_get_walks_outward():
    outer = Environment()
    outer.set(Symbol("a"), 1)
    inner = Environment(outer)
    assert inner.get(Symbol("a")) == 1
    assert inner.find(Symbol("a")) is outer


def test_get_unbound_is_none():
    assert Environment(Environment()).get(Symbol("missing")) is None


def test_lookup_unbound_raises():
    with pytest.raises(UnknownSymbol) as exc:
        Environment().lookup(Symbol("missing"))
    assert exc.value.name == "missing"


def test_set_shadows_without_touching_outer():
    outer = Environment()
    outer.set(Symbol("a"), 1)
    inner = Environment(outer)
    inner.set(Symbol("a"), 2)
    assert inner.get(Symbol("a")) == 2
    assert outer.get(Symbol("a")) == 1


def test_innermost_binding_wins():
    root = Environment()
    root.set(Symbol("x"), "root")
    middle = Environment(root)
    middle.set(Symbol("x"), "middle")
    leaf = Environment(middle)
    assert leaf.get(Symbol("x")) == "middle"
    assert leaf.root() is root


def test_non_symbol_key_rejected():
    with pytest.raises(TypeError):
        Environment().set(1, 2)


def test_str_and_repr():
    outer = Environment()
    outer.set(Symbol("a"), 1)
    inner = Environment(outer)
    inner.set(Symbol("b"), 2)
    assert str(inner) == "{b: 2} -> ..."
    assert repr(inner) == "<Environment chain: {b: 2} -> {a: 1}>"
