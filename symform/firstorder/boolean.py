"""We introduce formulas with Boolean toplevel operators as subclasses of
:class:`.Formula`, together with the factories :func:`logical_and`,
:func:`logical_or`, and :func:`logical_not`, which apply the laws for truth
values.
"""
from __future__ import annotations

import logging
from typing import final, Optional

from ..support.logging import get_logger
from .formula import Formula, FormulaKind


logger = get_logger(__name__)


class BooleanFormula(Formula):
    r"""A class whose instances are Boolean formulas in the sense that their
    toplevel operator is one of the Boolean operators :math:`\top`,
    :math:`\bot`, :math:`\lnot`, :math:`\wedge`, :math:`\vee`.
    """

    def __init__(self, *args: Formula) -> None:
        for arg in args:
            if not isinstance(arg, Formula):
                raise ValueError(f'{arg!r} is not a Formula')
        super().__init__(*args)


class BinaryBooleanFormula(BooleanFormula):

    @property
    def lhs(self) -> Formula:
        """The left-hand side of the operator.
        """
        return self.args[0]

    @property
    def rhs(self) -> Formula:
        """The right-hand side of the operator.
        """
        return self.args[1]

    def __init__(self, lhs: Formula, rhs: Formula) -> None:
        super().__init__(lhs, rhs)


@final
class And(BinaryBooleanFormula):
    """A class whose instances are conjunctions in the sense that their
    toplevel operator represents the Boolean operator :math:`\\wedge`. The
    constructor does not simplify:

    >>> And(T, F)
    And(T, F)

    .. seealso::
        * :func:`logical_and` -- simplifying factory
        * :meth:`&, __and__() <.formula.Formula.__and__>` -- \
            infix notation of :func:`logical_and`
    """
    kind = FormulaKind.AND


@final
class Or(BinaryBooleanFormula):
    """A class whose instances are disjunctions in the sense that their
    toplevel operator represents the Boolean operator :math:`\\vee`.

    .. seealso::
        * :func:`logical_or` -- simplifying factory
        * :meth:`|, __or__() <.formula.Formula.__or__>` -- \
            infix notation of :func:`logical_or`
    """
    kind = FormulaKind.OR


@final
class Not(BooleanFormula):
    """A class whose instances are negated formulas in the sense that their
    toplevel operator is the Boolean operator :math:`\\neg`.

    .. seealso::
        * :func:`logical_not` -- simplifying factory
        * :meth:`~, __invert__() <.formula.Formula.__invert__>` -- \
            short notation of :func:`logical_not`
    """
    kind = FormulaKind.NOT

    @property
    def arg(self) -> Formula:
        """The one argument of the operator :math:`\\neg`.
        """
        return self.args[0]

    def __init__(self, arg: Formula) -> None:
        super().__init__(arg)


@final
class _T(BooleanFormula):
    """A singleton class whose sole instance represents the constant Formula
    that is always true.

    >>> _T()
    T
    >>> _T() is _T()
    True
    >>> print(_T())
    True
    """

    # This is a quite basic implementation of a singleton class. It does not
    # support subclassing. We do not use a module because we need _T to be a
    # subclass itself.

    kind = FormulaKind.TRUE

    _instance: Optional[_T] = None

    def __init__(self) -> None:
        super().__init__()

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'T'


T: _T = _T()
"""Support use as a constant without parentheses.

>>> T is _T() is Formula.true()
True
"""


@final
class _F(BooleanFormula):
    """A singleton class whose sole instance represents the constant Formula
    that is always false.

    >>> _F()
    F
    >>> _F() is _F()
    True
    >>> print(_F())
    False
    """

    kind = FormulaKind.FALSE

    _instance: Optional[_F] = None

    def __init__(self) -> None:
        super().__init__()

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'F'


F: _F = _F()
"""Support use as a constant without parentheses.

>>> F is _F() is Formula.false()
True
"""


def _log_simplification(op: str, args: tuple[Formula, ...], result: Formula) -> None:
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(f'{op}{args} simplified to {result!r}')


def logical_and(lhs: Formula, rhs: Formula) -> Formula:
    """Construct a formula equivalent to ``And(lhs, rhs)``. If one argument is
    :data:`F`, the result is :data:`F`. Otherwise an argument :data:`T` is
    dropped.

    >>> from symform.algebra import Variable
    >>> x = Variable('x')
    >>> logical_and(x > 0, x < 1)
    And(Gt(x, 0), Lt(x, 1))
    >>> logical_and(T, x > 0)
    Gt(x, 0)
    >>> logical_and(x > 0, F)
    F
    """
    if Formula.is_false(lhs) or Formula.is_false(rhs):
        _log_simplification('And', (lhs, rhs), _F())
        return _F()
    if Formula.is_true(lhs):
        _log_simplification('And', (lhs, rhs), rhs)
        return rhs
    if Formula.is_true(rhs):
        _log_simplification('And', (lhs, rhs), lhs)
        return lhs
    return And(lhs, rhs)


def logical_or(lhs: Formula, rhs: Formula) -> Formula:
    """Construct a formula equivalent to ``Or(lhs, rhs)``. If one argument is
    :data:`T`, the result is :data:`T`. Otherwise an argument :data:`F` is
    dropped.

    >>> from symform.algebra import Variable
    >>> x = Variable('x')
    >>> logical_or(x > 0, T)
    T
    >>> logical_or(F, x > 0)
    Gt(x, 0)
    """
    if Formula.is_true(lhs) or Formula.is_true(rhs):
        _log_simplification('Or', (lhs, rhs), _T())
        return _T()
    if Formula.is_false(lhs):
        _log_simplification('Or', (lhs, rhs), rhs)
        return rhs
    if Formula.is_false(rhs):
        _log_simplification('Or', (lhs, rhs), lhs)
        return lhs
    return Or(lhs, rhs)


def logical_not(arg: Formula) -> Formula:
    """Construct a formula equivalent to ``Not(arg)``. Truth values are
    negated. Double negations are kept:

    >>> from symform.algebra import Variable
    >>> x = Variable('x')
    >>> logical_not(F)
    T
    >>> logical_not(logical_not(x > 0))
    Not(Not(Gt(x, 0)))
    """
    if Formula.is_true(arg):
        _log_simplification('Not', (arg,), _F())
        return _F()
    if Formula.is_false(arg):
        _log_simplification('Not', (arg,), _T())
        return _T()
    return Not(arg)
