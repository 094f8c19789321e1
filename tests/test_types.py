import pytest

from mal.types.environment import Environment
from mal.types.function import Closure
from mal.types.integer import truncating_div
from mal.types.nil import Nil
from mal.types.ordering import compare
from mal.types.sequences import List, MapLiteral, Vector, is_equal
from mal.types.symbol import Keyword, Symbol


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (List([1, 2]), List([1, 2]), True),
        (List([1, 2]), Vector([1, 2]), False),
        (Vector([]), MapLiteral([]), False),
        (List([1]), List([True]), False),
        (1, True, False),
        (0, False, False),
        (Symbol("a"), Keyword("a"), False),
        (Symbol("a"), "a", False),
        (Nil, Nil, True),
        (Nil, False, False),
        (List([List([1]), Vector([2])]), List([List([1]), Vector([2])]), True),
    ],
)
def test_structural_equality(a, b, expected):
    assert is_equal(a, b) is expected
    if isinstance(a, list):
        assert (a == b) is expected
        assert (a != b) is (not expected)


def test_sequences_are_unhashable():
    with pytest.raises(TypeError):
        hash(List([]))


def test_symbols_intern_and_hash():
    assert Symbol("x") == Symbol("x")
    assert hash(Symbol("x")) == hash(Symbol("x"))
    assert str(Keyword("k")) == ":k"
    assert repr(Vector([1])) == "Vector([1])"


@pytest.mark.parametrize(
    "a, b, sign",
    [
        (1, 2, -1),
        (2, 2, 0),
        (False, True, -1),
        (5, False, -1),
        (Nil, Symbol("a"), -1),
        (Symbol("a"), Symbol("b"), -1),
        (Keyword("b"), Keyword("a"), 1),
        ("b", "a", 1),
        (List([1, 2]), List([1, 3]), -1),
        (List([1, 2]), List([1]), 1),
        (List([]), Vector([]), -1),
    ],
)
def test_compare(a, b, sign):
    c = compare(a, b)
    assert (c > 0) - (c < 0) == sign


def test_functions_are_unordered():
    f = Closure([], 1, Environment())
    with pytest.raises(TypeError):
        compare(f, f)


@pytest.mark.parametrize(
    "x, y, q",
    [(7, 2, 3), (-7, 2, -3), (7, -2, -3), (-7, -2, 3), (6, 3, 2), (1, 5, 0)],
)
def test_truncating_div(x, y, q):
    assert truncating_div(x, y) == q
