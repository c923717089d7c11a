import pytest
from hypothesis import given, strategies as st

from lispy.builtin.env_builtin import head
from lispy.types.environment import Environment
from lispy.types.error import Error
from lispy.types.expr import QExpr, SExpr
from lispy.types.function import Builtin, Lambda
from lispy.types.number import NUM_MAX, NUM_MIN
from lispy.types.symbol import Symbol
from lispy.types.values import copy_value, render, type_name


def _lambda():
    lam = Lambda(QExpr([Symbol("a"), Symbol("b")]), QExpr([Symbol("+"), Symbol("a"), Symbol("b")]))
    lam.env.bind(Symbol("c"), QExpr([1]))
    return lam


@pytest.mark.parametrize(
    "value,expected",
    [
        (5, "5"),
        (-12, "-12"),
        (Error("Symbol 'x' not defined."), "Error: Symbol 'x' not defined."),
        (Symbol("head"), "head"),
        (Builtin("head", head), "<builtin>"),
        (_lambda(), r"\{a b} {+ a b}"),
        (SExpr(), "()"),
        (QExpr(), "{}"),
        (SExpr([Symbol("+"), 1, QExpr([2, 3])]), "(+ 1 {2 3})"),
        (QExpr([QExpr([]), SExpr([1])]), "{{} (1)}"),
    ],
)
def test_render(value, expected):
    assert render(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        (1, "Number"),
        (Error("x"), "Error"),
        (Symbol("x"), "Symbol"),
        (Builtin("head", head), "Function"),
        (_lambda(), "Function"),
        (SExpr(), "S-Expression"),
        (QExpr(), "Q-Expression"),
        ("text", "Unknown"),
    ],
)
def test_type_name(value, expected):
    assert type_name(value) == expected


def test_list_kinds_are_distinct():
    assert SExpr([1, 2]) != QExpr([1, 2])
    assert QExpr([1, 2]) == QExpr([1, 2])
    assert QExpr([SExpr([1])]) != QExpr([QExpr([1])])
    assert SExpr([1]) != [1]


def test_pop_removes_and_shifts():
    q = QExpr([1, 2, 3])
    assert q.pop(1) == 2
    assert q == QExpr([1, 3])


def test_take_discards_the_rest():
    q = QExpr([1, 2, 3])
    assert q.take(1) == 2
    assert q == QExpr()


def test_relabel_moves_elements():
    s = SExpr([1, 2])
    q = s.relabel(QExpr)
    assert q == QExpr([1, 2])
    assert s == SExpr()


def test_errors_compare_by_kind_and_message():
    assert Error("m", "TypeError") == Error("m", "TypeError")
    assert Error("m", "TypeError") != Error("m", "ArityError")
    assert Error("m") != Error("n")


def test_builtin_copy_is_itself():
    b = Builtin("head", head)
    assert copy_value(b) is b


def test_lambda_copy_is_independent():
    lam = _lambda()
    dup = copy_value(lam)
    assert dup == lam
    assert dup is not lam and dup.env is not lam.env

    dup.env.bind(Symbol("a"), 1)
    dup.formals.pop(0)
    dup.body.append(9)
    dup.env.vars[Symbol("c")].append(2)

    assert lam.formals == QExpr([Symbol("a"), Symbol("b")])
    assert lam.body == QExpr([Symbol("+"), Symbol("a"), Symbol("b")])
    assert Symbol("a") not in lam.env.vars
    assert lam.env.lookup(Symbol("c")) == QExpr([1])


def test_lambda_copy_keeps_parent_reference():
    parent = Environment()
    lam = Lambda(QExpr(), QExpr(), Environment(parent))
    assert copy_value(lam).env.outer is parent


# -------------------------------
# Property: copies are equal and independent
# -------------------------------
names = st.from_regex(r"[a-z+\-*/%=<>!&_][a-z0-9_]{0,5}", fullmatch=True).filter(
    lambda s: not s.lstrip("-").isdigit()
)
leaves = st.one_of(
    st.integers(min_value=NUM_MIN, max_value=NUM_MAX),
    names.map(Symbol),
    st.text(max_size=10).map(Error),
)
values = st.recursive(
    leaves,
    lambda children: st.one_of(
        st.lists(children, max_size=4).map(SExpr),
        st.lists(children, max_size=4).map(QExpr),
    ),
    max_leaves=20,
)


@given(values)
def test_copy_equals_original(v):
    assert copy_value(v) == v


@given(st.lists(values, max_size=4).map(QExpr))
def test_mutating_copy_leaves_original(v):
    before = render(v)
    dup = copy_value(v)
    dup.append(0)
    for x in dup:
        if isinstance(x, (SExpr, QExpr)):
            x.clear()
    assert render(v) == before


def test_render_deeply_nested_list():
    v = QExpr([1])
    for _ in range(5000):
        v = QExpr([v, Symbol("x")])
    text = render(v)
    assert text.startswith("{" * 5001 + "1} x}")
    assert text.endswith(" x}")
    assert str(v) == text
