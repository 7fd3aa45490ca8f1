r"""Implementation of formulas over arithmetic expressions.

An abstract base class :class:`Formula` implements representations of and
methods on formulas recursively built using the following operators:

1. Truth values :math:`\top` and :math:`\bot`

2. Relations :math:`=, \neq, >, \geq, <, \leq` between expressions

3. Negation :math:`\lnot`, conjunction :math:`\land`, and disjunction
   :math:`\lor`

4. The universal quantifier :math:`\forall` binding a set of variables

The truth values are operators of arity 0. As such, they are implemented as
singleton classes :class:`_T` and :class:`_F` with unique instances :data:`T`
and :data:`F`, respectively.

>>> T is _T()
True

Formulas are usually built via operators on expressions and formulas, which
simplify trivial cases:

>>> from symform.algebra import Expression, Variable
>>> x, y = Variable('x'), Variable('y')
>>> (Expression(x) == x) & (x + y > 0)
Gt(x + y, 0)
>>> print(forall(x, (x**2 >= 0) | (0 < x)))
forall({x}. ((x**2 >= 0) or (x > 0)))

Note the last line: Python evaluates ``0 < x`` by the reflected comparison
``x > 0``. Use :func:`lt` to preserve the orientation. Rich comparisons
between two variables compare their identities and do not construct
formulas.
"""  # noqa

from .formula import Formula, FormulaKind  # noqa

from .atomic import AtomicFormula, Eq, Ne, Gt, Ge, Lt, Le, eq, ne, gt, ge, lt, le  # noqa

from .boolean import (BooleanFormula, And, Or, Not, _T, T, _F, F,  # noqa
                      logical_and, logical_or, logical_not)

from .quantified import Forall, forall  # noqa


__all__ = [
    'Formula', 'FormulaKind',

    'AtomicFormula', 'Eq', 'Ne', 'Gt', 'Ge', 'Lt', 'Le',
    'eq', 'ne', 'gt', 'ge', 'lt', 'le',

    'BooleanFormula', 'And', 'Or', 'Not', 'T', 'F',
    'logical_and', 'logical_or', 'logical_not',

    'Forall', 'forall'
]
