import pytest

from lispy.errors import LispyTypeError
from lispy.types.environment import Environment
from lispy.types.error import Error
from lispy.types.expr import QExpr
from lispy.types.function import Lambda
from lispy.types.symbol import Symbol

X = Symbol("x")
Y = Symbol("y")


@pytest.fixture
def chain():
    """root <- middle <- leaf"""
    root = Environment()
    middle = Environment(root)
    leaf = Environment(middle)
    return root, middle, leaf


def test_lookup_walks_to_root(chain):
    root, middle, leaf = chain
    root.bind(X, 1)
    assert leaf.lookup(X) == 1
    middle.bind(X, 2)
    assert leaf.lookup(X) == 2
    assert root.lookup(X) == 1


def test_lookup_miss_is_an_error_value(chain):
    _, _, leaf = chain
    assert leaf.lookup(Symbol("nope")) == Error("Symbol 'nope' not defined.", "UnresolvedSymbolError")


def test_bind_stores_a_copy():
    env = Environment()
    xs = QExpr([1, 2])
    env.bind(X, xs)
    xs.append(3)
    assert env.lookup(X) == QExpr([1, 2])


def test_lookup_returns_a_copy():
    env = Environment()
    env.bind(X, QExpr([1, 2]))
    got = env.lookup(X)
    got.append(9)
    assert env.lookup(X) == QExpr([1, 2])


def test_bind_replaces_in_this_scope_only(chain):
    root, middle, _ = chain
    root.bind(X, 1)
    middle.bind(X, 2)
    middle.bind(X, 3)
    assert middle.lookup(X) == 3
    assert root.lookup(X) == 1
    assert list(middle.vars) == [X]


def test_define_binds_at_root(chain):
    root, middle, leaf = chain
    leaf.define(Y, 3)
    assert Y in root.vars
    assert Y not in leaf.vars and Y not in middle.vars
    assert root.lookup(Y) == 3


def test_root(chain):
    root, _, leaf = chain
    assert leaf.root() is root
    assert root.root() is root


def test_copy_shares_parent_and_copies_bindings(chain):
    root, middle, _ = chain
    middle.bind(X, QExpr([1]))
    dup = middle.copy()
    assert dup.outer is root
    assert dup == middle
    dup.vars[X].append(2)
    dup.bind(Y, 5)
    assert middle.lookup(X) == QExpr([1])
    assert Y not in middle.vars


def test_copy_of_closure_binding_is_deep():
    env = Environment()
    lam = Lambda(QExpr([Symbol("a")]), QExpr([Symbol("a")]))
    env.bind(X, lam)
    dup = env.copy()
    assert dup.vars[X] is not env.vars[X]
    assert dup.vars[X].env is not env.vars[X].env


def test_bind_rejects_non_symbol():
    with pytest.raises(LispyTypeError):
        Environment().bind("x", 1)


def test_contains_and_len(chain):
    root, _, leaf = chain
    root.update({X: 1, Y: 2})
    assert X in leaf
    assert Symbol("z") not in leaf
    assert len(root) == 2 and len(leaf) == 0


def test_str_and_repr(chain):
    root, middle, _ = chain
    root.bind(X, 1)
    middle.bind(Y, QExpr([2]))
    assert str(middle) == "{y: {2}} -> ..."
    assert repr(middle) == "<Environment chain: {y: {2}} -> {x: 1}>"
