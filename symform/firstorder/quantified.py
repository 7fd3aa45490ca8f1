r"""We provide a subclass of :class:`Formula <.formula.Formula>` that
implements universally quantified formulas in the sense that their toplevel
operator is the quantifier :math:`\forall`, which binds a set of variables.
"""
from __future__ import annotations

from typing import Any, final, Iterable

from ..algebra.variable import Variable
from ..algebra.variables import Variables
from .formula import Formula, FormulaKind


@final
class Forall(Formula):
    r"""A class whose instances are universally quantified formulas in the
    sense that their toplevel operator represents the quantifier symbol
    :math:`\forall`. Besides sets of variables, the quantifier accepts single
    variables and iterables of variables as a shorthand. The bound variables
    are copied, so that later modification of the argument does not affect
    the formula.

    >>> from symform.algebra import Variable
    >>> x, y = Variable('x'), Variable('y')
    >>> Forall(x, x * y >= 0)
    Forall(Variables({x}), Ge(x*y, 0))
    >>> print(Forall([y, x], x**2 + y**2 >= 0))
    forall({x, y}. (x**2 + y**2 >= 0))
    """
    kind = FormulaKind.FORALL

    @property
    def args(self) -> tuple[Any, ...]:
        # The stored set enters the hash and must not leak.
        return (self.variables, self.arg)

    @property
    def variables(self) -> Variables:
        """A copy of the set of variables bound by the quantifier.

        >>> from symform.algebra import Variable
        >>> x, y = Variable('x'), Variable('y')
        >>> f = Forall(x, x > 0)
        >>> f.variables.insert(y)
        >>> f
        Forall(Variables({x}), Gt(x, 0))
        """
        return Variables(self._args[0])

    @property
    def arg(self) -> Formula:
        """The subformula in the scope of the quantifier.
        """
        return self._args[1]

    def __init__(self, vars_: Variables | Variable | Iterable[Variable], arg: Formula) -> None:
        if not isinstance(arg, Formula):
            raise ValueError(f'{arg!r} is not a Formula')
        match vars_:
            case Variable():
                bound = Variables([vars_])
            case _:
                bound = Variables(vars_)
        super().__init__(bound, arg)


def forall(vars_: Variables | Variable | Iterable[Variable], arg: Formula) -> Formula:
    """Construct a universally quantified formula. There is no
    simplification, not even for truth values or empty sets of variables:

    >>> forall(Variables(), Formula.true())
    Forall(Variables({}), T)
    """
    return Forall(vars_, arg)
