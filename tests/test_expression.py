from fractions import Fraction
import math

import pytest

from symform.algebra import Environment, Expression, Variable, Variables
from symform.firstorder import Eq, F, Gt, T, gt


def test_construction_from_literals():
    assert str(Expression()) == '0'
    assert str(Expression(3)) == '3'
    assert str(Expression(2.5)) == '2.5'
    assert str(Expression(Fraction(1, 3))) == '1/3'
    for arg in (True, 'x', None, float('nan')):
        with pytest.raises(ValueError):
            Expression(arg)


def test_copy_construction():
    x = Variable('x')
    e = x + 1
    assert Expression(e).equal_to(e)
    assert hash(Expression(e)) == hash(e)


def test_structural_equality_distinguishes_same_names():
    x, x_prime = Variable('x'), Variable('x')
    assert not Expression(x).equal_to(Expression(x_prime))
    assert str(Expression(x)) == str(Expression(x_prime))


def test_variables():
    x, y = Variable('x'), Variable('y')
    assert (x * y + 1).variables() == Variables([x, y])
    assert Expression(7).variables() == Variables()
    assert Expression(x).is_variable()
    assert not (x + 1).is_variable()


def test_evaluate():
    x, y = Variable('x'), Variable('y')
    env = Environment({x: 2, y: 3})
    assert (x * y + 1).evaluate(env) == 7.0
    assert (x ** 2 - y).evaluate(env) == 1.0


def test_evaluate_unbound_variable():
    x, y = Variable('x'), Variable('y')
    with pytest.raises(KeyError):
        (x + y).evaluate(Environment({x: 1}))


def test_comparisons_build_formulas():
    x, y = Variable('x'), Variable('y')
    e = Expression(x)
    assert isinstance(e == y, Eq)
    assert isinstance(e > y, Gt)
    assert (e == x) is T
    assert (e != x) is F


def test_expression_as_dictionary_key():
    x, y = Variable('x'), Variable('y')
    d = {x + y: 'sum'}
    assert d[y + x] == 'sum'
    assert (x - y) not in d


def test_xor_is_rejected():
    with pytest.raises(NotImplementedError):
        Expression(Variable('x')) ^ 2


def test_environment():
    x, y = Variable('x'), Variable('y')
    env = Environment([(y, 2), (x, 1)])
    assert list(env) == [x, y]
    assert env.domain() == Variables([x, y])
    assert x in env
    assert len(env) == 2
    with pytest.raises(ValueError):
        env.insert('x', 1.0)
    with pytest.raises(ValueError):
        env.insert(x, float('nan'))


def test_numbers_have_a_single_canonical_form():
    x = Variable('x')
    assert Expression(1).equal_to(Expression(1.0))
    assert Expression(Fraction(1, 2)).equal_to(Expression(0.5))
    assert str(Expression(1.0)) == '1'
    assert str(x + 0.5) == 'x + 0.5'
    assert (x + 1 == x + 1.0) is T
    assert (2 * x <= 2.0 * x) is T
    assert (x + 0.5 != x + Fraction(1, 2)) is F
    assert not Expression(0.1).equal_to(Expression(Fraction(1, 10)))


def test_evaluate_singular_and_non_real_results():
    x, y = Variable('x'), Variable('y')
    env = Environment({x: 0, y: -1})
    assert (1 / x).evaluate(env) == math.inf
    assert math.isnan((y ** 0.5).evaluate(env))
    assert (Expression(float('-inf')) * 2).evaluate() == -math.inf
    assert (x + float('inf')).evaluate(env) == math.inf
    assert gt(1 / Expression(x), 0).evaluate(env)
