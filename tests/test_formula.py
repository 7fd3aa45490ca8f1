import itertools

import pytest

from symform.algebra import Environment, Expression, Variable, Variables
from symform.firstorder import (And, Eq, F, Forall, Formula, FormulaKind, Ge, Gt, Le, Lt, Ne,
                                Not, Or, T, eq, forall, ge, gt, le, logical_and, logical_not,
                                logical_or, lt, ne)


@pytest.fixture
def xyz():
    return Variable('x'), Variable('y'), Variable('z')


@pytest.fixture
def formulas(xyz):
    x, y, z = xyz
    X = Expression(x)
    return [
        T, F,
        X == y, X != y, X > y, X >= y, X < y, X <= y,
        (X == y) & (Expression(y) > z), (X == y) | (Expression(y) > z), ~(X == y),
        forall(Variables([x]), X > y),
        ((x + y > 1) | ~(z < 0)) & (x * z == 2),
    ]


@pytest.fixture
def environments(xyz):
    x, y, z = xyz
    return [Environment({x: a, y: b, z: c})
            for a, b, c in itertools.product((-1, 0, 2), repeat=3)]


def test_truth_values():
    assert Formula.true() is T
    assert Formula.false() is F
    assert T.kind is FormulaKind.TRUE
    assert F.kind is FormulaKind.FALSE


@pytest.mark.parametrize('factory, operator, expected', [
    (eq, Expression.__eq__, T),
    (ne, Expression.__ne__, F),
    (lt, Expression.__lt__, F),
    (le, Expression.__le__, T),
    (gt, Expression.__gt__, F),
    (ge, Expression.__ge__, T),
])
def test_relation_between_equal_expressions(xyz, factory, operator, expected):
    x, y, _ = xyz
    e = x * (y + 1)
    assert factory(e, (1 + y) * x) is expected
    assert operator(e, e) is expected
    assert factory(2, Expression(2)) is expected


@pytest.mark.parametrize('factory, op, kind, symbol', [
    (eq, Eq, FormulaKind.EQ, '='),
    (ne, Ne, FormulaKind.NEQ, '!='),
    (gt, Gt, FormulaKind.GT, '>'),
    (ge, Ge, FormulaKind.GEQ, '>='),
    (lt, Lt, FormulaKind.LT, '<'),
    (le, Le, FormulaKind.LEQ, '<='),
])
def test_relation_nodes(xyz, factory, op, kind, symbol):
    x, y, _ = xyz
    f = factory(x + 1, y)
    assert isinstance(f, op)
    assert f.kind is kind
    assert f.lhs.equal_to(x + 1)
    assert f.rhs.equal_to(Expression(y))
    assert str(f) == '(' + str(x + 1) + ' ' + symbol + ' ' + str(Expression(y)) + ')'
    assert f.free_variables() == Variables([x, y])


def test_numeric_literals_on_either_side(xyz):
    x, _, _ = xyz
    assert str(lt(1, x)) == '(1 < x)'
    assert str(lt(x, 1)) == '(x < 1)'
    assert str(1 < Expression(x)) == '(x > 1)'
    assert eq(0, Expression(0)) is T


def test_and_simplification(xyz, formulas):
    x, y, _ = xyz
    for f in formulas:
        assert logical_and(f, T) is f
        assert logical_and(T, f) is f
        assert logical_and(f, F) is F
        assert logical_and(F, f) is F
    f = Expression(x) > y
    g = Expression(y) > x
    assert isinstance(f & g, And)
    assert (f & g).args == (f, g)


def test_or_simplification(xyz, formulas):
    x, y, _ = xyz
    for f in formulas:
        assert logical_or(f, T) is T
        assert logical_or(T, f) is T
        assert logical_or(f, F) is f
        assert logical_or(F, f) is f
    f = Expression(x) > y
    g = Expression(y) > x
    assert isinstance(f | g, Or)


def test_not_simplification(xyz):
    x, y, _ = xyz
    assert logical_not(T) is F
    assert logical_not(F) is T
    f = Expression(x) > y
    assert isinstance(~f, Not)
    assert isinstance(~~f, Not)
    assert (~~f).arg.arg is f


def test_true_and_false_is_structurally_false():
    assert (T & F).equal_to(F)
    assert T & F is F
    assert (T | F) is T


def test_double_negation_evaluates_like_original(formulas, environments):
    for f in formulas:
        if f.kind is FormulaKind.FORALL:
            continue
        for env in environments:
            assert (~~f).evaluate(env) == f.evaluate(env)


def test_equal_to_is_reflexive_and_symmetric(formulas):
    for f, g in itertools.product(formulas, repeat=2):
        assert f.equal_to(g) == g.equal_to(f)
        if f.equal_to(g):
            assert hash(f) == hash(g)
    for f in formulas:
        assert f.equal_to(f)


def test_structurally_equal_formulas_from_separate_construction(xyz):
    x, y, z = xyz

    def build():
        X = Expression(x)
        return forall(Variables([z, x]), ((X + y == 0) | ~(X < z)) & (y >= 1))

    f, g = build(), build()
    assert f is not g
    assert f == g
    assert f.equal_to(g)
    assert hash(f) == hash(g)
    assert {f: 1}[g] == 1


def test_order_sensitive_hash(xyz):
    x, y, _ = xyz
    f = Expression(x) == y
    g = Expression(y) == x
    assert not f.equal_to(g)
    f, g = (Expression(x) > 0) & (Expression(y) > 0), (Expression(y) > 0) & (Expression(x) > 0)
    assert not f.equal_to(g)


def test_kind_mismatch(xyz):
    x, y, _ = xyz
    assert not (Expression(x) < y).equal_to(Expression(x) > y)
    assert not (Expression(x) < y).equal_to(Expression(x) <= y)
    assert (Expression(x) < y) != (Expression(x) <= y)


def test_display(xyz):
    x, y, z = xyz
    X = Expression(x)
    assert str(T) == 'True'
    assert str(F) == 'False'
    assert str(X == y) == '(x = y)'
    assert str(X != y) == '(x != y)'
    assert str(X > y) == '(x > y)'
    assert str(X >= y) == '(x >= y)'
    assert str(X < y) == '(x < y)'
    assert str(X <= y) == '(x <= y)'
    assert str((X == y) & (X > z)) == '((x = y) and (x > z))'
    assert str((X == y) | (X > z)) == '((x = y) or (x > z))'
    assert str(~(X == y)) == '!((x = y))'
    assert str(forall(Variables([y, x]), X == y)) == 'forall({x, y}. (x = y))'


def test_repr(xyz):
    x, y, _ = xyz
    f = (Expression(x) == y) & ~T
    assert f is F
    assert repr(~(Expression(x) == y) | (x > 1)) == 'Or(Not(Eq(x, y)), Gt(x, 1))'


def test_evaluate_scenario(xyz):
    x, y, _ = xyz
    f = Expression(x) == y
    assert f.evaluate(Environment({x: 1, y: 1})) is True
    assert f.evaluate(Environment({x: 1, y: 2})) is False


def test_evaluate_relations(xyz):
    x, y, _ = xyz
    X = Expression(x)
    env = Environment({x: 1, y: 2})
    assert (X != y).evaluate(env)
    assert (X < y).evaluate(env)
    assert (X <= y).evaluate(env)
    assert not (X > y).evaluate(env)
    assert not (X >= y).evaluate(env)
    assert ((X < y) & ~(X == y)).evaluate(env)
    assert ((X > y) | (X + 1 == y)).evaluate(env)
    assert T.evaluate(env) and not F.evaluate(env)


def test_evaluate_forall_is_not_implemented(xyz):
    x, _, _ = xyz
    f = forall(Variables([x]), Expression(x) == x + 1)
    for env in (Environment(), Environment({x: 0})):
        with pytest.raises(NotImplementedError, match='not implemented'):
            f.evaluate(env)
    # eq(x, x) collapses to T before the quantifier is built.
    g = forall(Variables([x]), eq(x, x))
    assert g.arg is T
    with pytest.raises(NotImplementedError):
        g.evaluate(Environment())


def test_free_variables(xyz):
    x, y, z = xyz
    X = Expression(x)
    assert T.free_variables() == Variables()
    f = (X + y == 0) | ~(X < z)
    assert f.free_variables() == Variables([x, y, z])
    assert forall(Variables([x, z]), f).free_variables() == Variables([y])
    assert forall(x, f).free_variables() == Variables([y, z])


def test_forall_copies_bound_variables(xyz):
    x, y, _ = xyz
    V = Variables([x])
    f = forall(V, Expression(x) > y)
    h = hash(f)
    V.insert(y)
    assert f.variables == Variables([x])
    assert hash(f) == h
    assert isinstance(f, Forall)


def test_forall_bound_variables_cannot_be_mutated(xyz):
    x, y, z = xyz
    X = Expression(x)
    f = forall(Variables([x]), X > y)
    g = forall(Variables([x, z]), X > y)
    h = hash(f)
    f.variables.insert(z)
    f.args[0].insert(z)
    assert f.variables == Variables([x])
    assert str(f) == 'forall({x}. (x > y))'
    assert hash(f) == h
    assert not f.equal_to(g)
    assert f.equal_to(forall(x, X > y))


def test_constructors_validate_arguments(xyz):
    x, _, _ = xyz
    with pytest.raises(ValueError):
        And(T, True)
    with pytest.raises(ValueError):
        Not(Expression(x))
    with pytest.raises(ValueError):
        Eq(x, Expression(1))
    with pytest.raises(ValueError):
        forall(Variables([x]), 1)
    with pytest.raises(ValueError):
        forall([x, 'y'], T)


def test_bool(xyz):
    x, y, _ = xyz
    assert bool(T) and not bool(F)
    assert not bool(Eq(Expression(x), Expression(y)))
    assert bool(Ne(Expression(x), Expression(y)))
    with pytest.raises(TypeError):
        bool(Expression(x) < y)
    with pytest.raises(TypeError):
        bool((Expression(x) == y) & (Expression(x) > 0))


def test_atoms_and_depth(xyz):
    x, y, _ = xyz
    a = Expression(x) == y
    b = Expression(y) > 0
    f = forall(x, a | ~b)
    assert list(f.atoms()) == [a, b]
    assert f.depth() == 3
    assert T.depth() == 0
    assert list(T.atoms()) == []


def test_latex(xyz):
    x, y, _ = xyz
    assert T.as_latex() == '\\top'
    assert (~(Expression(x) <= y)).as_latex() == '\\neg \\, (x \\leq y)'
    assert T._repr_latex_() == '$\\displaystyle \\top$'
