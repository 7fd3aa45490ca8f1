"""Arithmetic expressions over :class:`.variable.Variable`. We use sympy
expressions as the internal representation. Each variable is represented by a
:class:`sympy.Dummy` whose dummy index is the identity of the variable, so that
sympy distinguishes variables with equal names just as we do.
"""

from __future__ import annotations

from fractions import Fraction
import math
from typing import Any, Optional, TypeAlias, TypeGuard

import sympy
from sympy.printing.latex import LatexPrinter
from sympy.printing.str import StrPrinter

from .variable import Variable
from .variables import Variables


ExpressionLike: TypeAlias = 'Expression | Variable | int | float | Fraction'
"""Objects accepted wherever an :class:`Expression` is expected.
"""


class _StrPrinter(StrPrinter):
    """Print dummies by their names. Rationals whose denominator is a power of
    two print like the float literals they stem from.
    """

    def _print_Dummy(self, expr: sympy.Dummy) -> str:
        return expr.name

    def _print_Rational(self, expr: sympy.Rational) -> str:
        q = expr.q
        if q > 1 and q & (q - 1) == 0 and sympy.Rational(float(expr)) == expr:
            return repr(float(expr))
        return super()._print_Rational(expr)

    _print_Half = _print_Rational


class _LatexPrinter(LatexPrinter):

    def _print_Dummy(self, expr: sympy.Dummy) -> str:
        return self._print_Symbol(expr)


def _as_symbol(v: Variable) -> sympy.Dummy:
    return sympy.Dummy(v.name, dummy_index=v.id, real=True)


def _as_variable(s: sympy.Dummy) -> Variable:
    return Variable._restore(s.dummy_index, s.name)


class Expression:
    """An immutable arithmetic expression.

    >>> x, y = Variable('x'), Variable('y')
    >>> e = Expression(x) * 2 + 1
    >>> e
    2*x + 1
    >>> e.variables()
    Variables({x})
    >>> from symform.algebra.environment import Environment
    >>> e.evaluate(Environment({x: 3}))
    7.0

    Expressions are compared structurally with :meth:`equal_to`. Rich
    comparisons construct atomic formulas:

    >>> (x + 1).equal_to(1 + Expression(x))
    True
    >>> x + 1 == y
    Eq(x + 1, y)
    >>> x + 1 == 1 + x
    T
    """

    _expr: sympy.Expr
    _hash: int

    def __init__(self, arg: ExpressionLike = 0) -> None:
        match arg:
            case Expression():
                self._expr = arg._expr
            case Variable():
                self._expr = _as_symbol(arg)
            case bool():
                raise ValueError(f'{arg!r} is not an expression')
            case int():
                self._expr = sympy.Integer(arg)
            case float():
                # Floats are dyadic rationals. Converting them exactly gives
                # equal numbers a single canonical form, e.g. 1.0 and 1.
                if math.isnan(arg):
                    raise ValueError(f'{arg!r} is not a number')
                if math.isinf(arg):
                    self._expr = sympy.oo if arg > 0 else -sympy.oo
                else:
                    self._expr = sympy.Rational(arg)
            case Fraction():
                self._expr = sympy.Rational(arg.numerator, arg.denominator)
            case _:
                raise ValueError(f'{arg!r} is not an expression')
        self._hash = hash(self._expr)

    @classmethod
    def _from_sympy(cls, expr: sympy.Expr) -> Expression:
        e = object.__new__(cls)
        e._expr = expr
        e._hash = hash(expr)
        return e

    @staticmethod
    def is_expression_like(obj: object) -> TypeGuard[ExpressionLike]:
        """Test whether `obj` can be converted into an :class:`Expression`.

        >>> Expression.is_expression_like(1.5)
        True
        >>> Expression.is_expression_like(True)
        False
        """
        if isinstance(obj, bool):
            return False
        return isinstance(obj, (Expression, Variable, int, float, Fraction))

    def _binary(self, other: object, func: Any, reflected: bool = False) -> Any:
        if not Expression.is_expression_like(other):
            return NotImplemented
        other_expr = Expression(other)._expr
        if reflected:
            return Expression._from_sympy(func(other_expr, self._expr))
        return Expression._from_sympy(func(self._expr, other_expr))

    def __add__(self, other: object) -> Expression:
        return self._binary(other, lambda a, b: a + b)

    def __radd__(self, other: object) -> Expression:
        return self._binary(other, lambda a, b: a + b, reflected=True)

    def __sub__(self, other: object) -> Expression:
        return self._binary(other, lambda a, b: a - b)

    def __rsub__(self, other: object) -> Expression:
        return self._binary(other, lambda a, b: a - b, reflected=True)

    def __mul__(self, other: object) -> Expression:
        return self._binary(other, lambda a, b: a * b)

    def __rmul__(self, other: object) -> Expression:
        return self._binary(other, lambda a, b: a * b, reflected=True)

    def __truediv__(self, other: object) -> Expression:
        return self._binary(other, lambda a, b: a / b)

    def __rtruediv__(self, other: object) -> Expression:
        return self._binary(other, lambda a, b: a / b, reflected=True)

    def __pow__(self, other: object) -> Expression:
        return self._binary(other, lambda a, b: a ** b)

    def __neg__(self) -> Expression:
        return Expression._from_sympy(-self._expr)

    def __xor__(self, other: object) -> Expression:
        raise NotImplementedError(
            "Use ** for exponentiation, not '^', which means xor "
            "in Python, and has the wrong precedence")

    # Rich comparisons construct atomic formulas. Note that Python swaps the
    # sides for reflected comparisons, e.g., 1 < e is evaluated as e > 1. Use
    # the factories in symform.firstorder.atomic to preserve the orientation.

    def __eq__(self, other: object) -> Any:  # type: ignore[override]
        if not Expression.is_expression_like(other):
            return NotImplemented
        return atomic.eq(self, other)

    def __ne__(self, other: object) -> Any:  # type: ignore[override]
        if not Expression.is_expression_like(other):
            return NotImplemented
        return atomic.ne(self, other)

    def __lt__(self, other: object) -> Any:
        if not Expression.is_expression_like(other):
            return NotImplemented
        return atomic.lt(self, other)

    def __le__(self, other: object) -> Any:
        if not Expression.is_expression_like(other):
            return NotImplemented
        return atomic.le(self, other)

    def __gt__(self, other: object) -> Any:
        if not Expression.is_expression_like(other):
            return NotImplemented
        return atomic.gt(self, other)

    def __ge__(self, other: object) -> Any:
        if not Expression.is_expression_like(other):
            return NotImplemented
        return atomic.ge(self, other)

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        return str(self)

    def __str__(self) -> str:
        return _StrPrinter().doprint(self._expr)

    def as_latex(self) -> str:
        """LaTeX representation as a string.

        >>> e = Expression(Variable('x')) ** 2
        >>> e.as_latex()
        'x^{2}'
        """
        return _LatexPrinter().doprint(self._expr)

    def equal_to(self, other: Expression) -> bool:
        """Structural equality. Note that sympy brings sums and products into
        a canonical order on construction.

        >>> x, y = Variable('x'), Variable('y')
        >>> (x * y).equal_to(y * x)
        True
        >>> (x + y).equal_to(Expression(x))
        False
        """
        if self is other:
            return True
        if self._hash != other._hash:
            return False
        return self._expr == other._expr

    def evaluate(self, env: Optional[Environment] = None) -> float:
        """Evaluate under the assignment `env` of numbers to variables. All
        variables of `self` must be bound in `env`.

        >>> x = Variable('x')
        >>> (x / 4 - 1).evaluate(Environment({x: 2}))
        -0.5
        >>> Expression(3).evaluate()
        3.0

        As with IEEE floating point arithmetic, singular and non-real results
        yield infinities and NaN instead of raising:

        >>> (1 / x).evaluate(Environment({x: 0}))
        inf
        >>> (x ** Fraction(1, 2)).evaluate(Environment({x: -1}))
        nan
        """
        if env is None:
            env = Environment()
        substitution = {}
        for s in self._expr.free_symbols:
            assert isinstance(s, sympy.Dummy), s
            substitution[s] = sympy.Float(env[_as_variable(s)])
        value = self._expr.xreplace(substitution)
        if value is sympy.zoo:
            return math.inf
        if value is sympy.nan:
            return math.nan
        c = complex(value)
        if c.imag != 0:
            return math.nan
        return c.real

    def is_constant(self) -> bool:
        """
        >>> Expression(2).is_constant()
        True
        >>> Expression(Variable('x')).is_constant()
        False
        """
        return self._expr.is_number

    def is_variable(self) -> bool:
        return isinstance(self._expr, sympy.Dummy)

    def variables(self) -> Variables:
        """The variables occurring in `self`.
        """
        return Variables(_as_variable(s) for s in self._expr.free_symbols)


# The following imports are intentionally late to avoid circularity.
from .environment import Environment  # noqa: E402
from ..firstorder import atomic  # noqa: E402
