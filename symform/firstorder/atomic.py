"""Atomic formulas are relations between two :class:`Expression
<symform.algebra.expression.Expression>` arguments. The factories :func:`eq`,
:func:`ne`, :func:`gt`, :func:`ge`, :func:`lt`, :func:`le`, which are also
used by the rich comparisons of expressions, recognize relations between
structurally equal expressions and return a truth value instead.
"""

from __future__ import annotations

import logging
from typing import ClassVar, final

from ..algebra.expression import Expression, ExpressionLike
from ..support.logging import get_logger
from .formula import Formula, FormulaKind


logger = get_logger(__name__)


class AtomicFormula(Formula):
    """A class whose instances are binary relations between expressions.

    .. seealso::
        Final subclasses: :class:`Eq`, :class:`Ne`, :class:`Gt`, :class:`Ge`,
        :class:`Lt`, :class:`Le`
    """

    SYMBOL: ClassVar[str]
    """The infix relation symbol used by :meth:`.Formula.__str__`.
    """

    LATEX_SYMBOL: ClassVar[str]
    """The infix relation symbol used by :meth:`.Formula.as_latex`.
    """

    @property
    def lhs(self) -> Expression:
        """The left-hand side of the relation.
        """
        return self.args[0]

    @property
    def rhs(self) -> Expression:
        """The right-hand side of the relation.
        """
        return self.args[1]

    def __init__(self, lhs: Expression, rhs: Expression) -> None:
        for arg in (lhs, rhs):
            if not isinstance(arg, Expression):
                raise ValueError(f'{arg!r} is not an Expression')
        super().__init__(lhs, rhs)


@final
class Eq(AtomicFormula):
    """
    >>> from symform.algebra import Expression, Variable
    >>> x = Variable('x')
    >>> print(Eq(Expression(x), Expression(1)))
    (x = 1)
    """
    kind = FormulaKind.EQ
    SYMBOL = '='
    LATEX_SYMBOL = '='


@final
class Ne(AtomicFormula):
    kind = FormulaKind.NEQ
    SYMBOL = '!='
    LATEX_SYMBOL = '\\neq'


@final
class Gt(AtomicFormula):
    kind = FormulaKind.GT
    SYMBOL = '>'
    LATEX_SYMBOL = '>'


@final
class Ge(AtomicFormula):
    kind = FormulaKind.GEQ
    SYMBOL = '>='
    LATEX_SYMBOL = '\\geq'


@final
class Lt(AtomicFormula):
    kind = FormulaKind.LT
    SYMBOL = '<'
    LATEX_SYMBOL = '<'


@final
class Le(AtomicFormula):
    kind = FormulaKind.LEQ
    SYMBOL = '<='
    LATEX_SYMBOL = '\\leq'


def _relation(op: type[AtomicFormula], lhs: ExpressionLike, rhs: ExpressionLike,
              reflexive: bool) -> Formula:
    # A relation between structurally equal expressions holds if and only if
    # the relation is reflexive.
    e1 = Expression(lhs)
    e2 = Expression(rhs)
    if e1.equal_to(e2):
        result = Formula.true() if reflexive else Formula.false()
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f'{op.__name__}({e1}, {e2}) simplified to {result}')
        return result
    return op(e1, e2)


def eq(lhs: ExpressionLike, rhs: ExpressionLike) -> Formula:
    """Construct an equation. Numbers are admitted on both sides.

    >>> from symform.algebra import Variable
    >>> x = Variable('x')
    >>> eq(1, x)
    Eq(1, x)
    >>> eq(x + 1, 1 + x)
    T
    """
    return _relation(Eq, lhs, rhs, reflexive=True)


def ne(lhs: ExpressionLike, rhs: ExpressionLike) -> Formula:
    """Construct an inequation.

    >>> from symform.algebra import Variable
    >>> x = Variable('x')
    >>> ne(x, 0)
    Ne(x, 0)
    >>> ne(x, x)
    F
    """
    return _relation(Ne, lhs, rhs, reflexive=False)


def gt(lhs: ExpressionLike, rhs: ExpressionLike) -> Formula:
    """Construct a strict inequality :math:`>`.

    >>> gt(2, 1.5)
    Gt(2, 1.5)
    >>> gt(0.5, 0.5)
    F
    """
    return _relation(Gt, lhs, rhs, reflexive=False)


def ge(lhs: ExpressionLike, rhs: ExpressionLike) -> Formula:
    """Construct a weak inequality :math:`\\geq`.
    """
    return _relation(Ge, lhs, rhs, reflexive=True)


def lt(lhs: ExpressionLike, rhs: ExpressionLike) -> Formula:
    """Construct a strict inequality :math:`<`. In contrast to the operator
    :obj:`< <object.__lt__>`, the orientation is preserved when the left hand
    side is a number:

    >>> from symform.algebra import Variable
    >>> x = Variable('x')
    >>> 0 < x + 1
    Gt(x + 1, 0)
    >>> lt(0, x + 1)
    Lt(0, x + 1)
    """
    return _relation(Lt, lhs, rhs, reflexive=False)


def le(lhs: ExpressionLike, rhs: ExpressionLike) -> Formula:
    """Construct a weak inequality :math:`\\leq`.
    """
    return _relation(Le, lhs, rhs, reflexive=True)
