from __future__ import annotations

from abc import abstractmethod
from enum import auto, Enum
from typing import Any, ClassVar, Final, Iterator
from typing_extensions import TypeIs

from IPython.lib import pretty

from ..algebra.environment import Environment
from ..algebra.expression import Expression
from ..algebra.variables import Variables


class FormulaKind(Enum):
    """The closed set of kinds of formula nodes. Each final subclass of
    :class:`Formula` has exactly one kind, which is available as the class
    attribute :attr:`Formula.kind`.
    """

    TRUE = auto()
    FALSE = auto()
    EQ = auto()
    NEQ = auto()
    GT = auto()
    GEQ = auto()
    LT = auto()
    LEQ = auto()
    AND = auto()
    OR = auto()
    NOT = auto()
    FORALL = auto()


class Formula:
    r"""This abstract base class implements representations of and methods on
    formulas recursively built from the following operators:

    1. Truth values :math:`\top` and :math:`\bot`

    2. Relations :math:`=`, :math:`\neq`, :math:`>`, :math:`\geq`,
       :math:`<`, :math:`\leq` between expressions

    3. Negation :math:`\lnot`, conjunction :math:`\land`, and disjunction
       :math:`\lor`

    4. Universal quantification :math:`\forall` over a set of variables

    Operators are mapped to subclasses as follows:

    +--------------+--------------+------------------------------------------------+---------------+---------------+--------------+------------------+
    | :math:`\top` | :math:`\bot` | relations                                      | :math:`\lnot` | :math:`\land` | :math:`\lor` | :math:`\forall`  |
    +--------------+--------------+------------------------------------------------+---------------+---------------+--------------+------------------+
    | :class:`_T`  | :class:`_F`  | :class:`Eq`, :class:`Ne`, :class:`Gt`, ...     | :class:`Not`  | :class:`And`  | :class:`Or`  | :class:`Forall`  |
    +--------------+--------------+------------------------------------------------+---------------+---------------+--------------+------------------+

    Formulas are immutable. The hash is computed once on construction from
    the kind and the hashes of the arguments. Instances are usually not
    created via the constructors but via operators and factories, which apply
    simplifications:

    >>> from symform.algebra import Variable
    >>> x, y = Variable('x'), Variable('y')
    >>> f = (x + 1 > y) & ~(x == 0)
    >>> f
    And(Gt(x + 1, y), Not(Eq(x, 0)))
    >>> print(f)
    ((x + 1 > y) and !((x = 0)))
    >>> (x >= x + 0) & f
    And(Gt(x + 1, y), Not(Eq(x, 0)))

    .. note::

        Each method that traverses formulas dispatches on the closed set of
        final subclasses. A new kind of formula must be added to all of
        them.
    """  # noqa

    kind: ClassVar[FormulaKind]
    """The :class:`FormulaKind` of instances of the class.
    """

    _args: tuple[Any, ...]
    _hash: int

    @property
    def op(self) -> type[Formula]:
        """Operator. This property can be used with instances of subclasses of
        :class:`Formula`. It yields the respective subclass.
        """
        return type(self)

    @property
    def args(self) -> tuple[Any, ...]:
        """The arguments of a formula as a tuple.

        .. seealso::
            * :attr:`AtomicFormula.lhs <.atomic.AtomicFormula.lhs>` \
                -- left hand side of a relation
            * :attr:`AtomicFormula.rhs <.atomic.AtomicFormula.rhs>` \
                -- right hand side of a relation
            * :attr:`Not.arg <.boolean.Not.arg>` \
                -- argument formula of a logical :math:`\\neg`
            * :attr:`Forall.variables <.quantified.Forall.variables>` \
                -- bound variables of a quantifier :math:`\\forall`
            * :attr:`Forall.arg <.quantified.Forall.arg>` \
                -- argument formula of a quantifier :math:`\\forall`
        """
        return self._args

    def __and__(self, other: Formula) -> Formula:
        """Override the :obj:`& <object.__and__>` operator to apply
        :func:`.boolean.logical_and`.

        >>> from symform.algebra import Variable
        >>> x = Variable('x')
        >>> (x > 0) & T
        Gt(x, 0)
        """
        if not isinstance(other, Formula):
            return NotImplemented
        return logical_and(self, other)

    def __bool__(self) -> bool:
        """In boolean contexts, :data:`T` is true and :data:`F` is false.
        Equations and inequations are decided by structural comparison of
        their sides. This allows to use expressions as dictionary keys and to
        search them in sequences. All other formulas have no truth value
        without an :class:`.Environment`.

        >>> from symform.algebra import Expression, Variable
        >>> x, y = Variable('x'), Variable('y')
        >>> bool(Eq(Expression(x), Expression(y)))
        False
        >>> x + y in [y + x]
        True
        >>> bool(x < y + 1)
        Traceback (most recent call last):
        ...
        TypeError: cannot determine the truth value of (x < y + 1)
        """
        match self:
            case _T():
                return True
            case _F():
                return False
            case Eq():
                return self.lhs.equal_to(self.rhs)
            case Ne():
                return not self.lhs.equal_to(self.rhs)
            case _:
                raise TypeError(f'cannot determine the truth value of {self}')

    def __eq__(self, other: object) -> bool:
        """A recursive test for structural equality of `self` and `other`.

        Note that this is not a logical operator for equality.

        >>> from symform.algebra import Variable
        >>> x = Variable('x')
        >>> f1 = x > 0
        >>> f2 = x > 0
        >>> f1 == f2
        True
        >>> f1 is f2
        False

        .. seealso:: :meth:`equal_to`
        """
        if not isinstance(other, Formula):
            return NotImplemented
        return self.equal_to(other)

    def __hash__(self) -> int:
        """
        Hash function. The hash is computed once on construction.

        hash() yields deterministic results for a fixed hash seed. Set the
        environment variable PYTHONHASHSEED to a positive integer when
        comparing hashes from various Python sessions, e.g. for debugging.
        Recall from the Python documentation that PYTHONHASHSEED should not be
        fixed in general.
        """
        return self._hash

    @abstractmethod
    def __init__(self, *args: Any) -> None:
        """This abstract base class is not supposed to have instances itself.
        Subclasses validate their arguments and then call this initializer,
        which stores the arguments and computes the hash.
        """
        self._args = args
        self._hash = hash((self.kind, *args))

    def __invert__(self) -> Formula:
        """Override the :obj:`~ <object.__invert__>` operator to apply
        :func:`.boolean.logical_not`.

        >>> from symform.algebra import Variable
        >>> x = Variable('x')
        >>> ~ (x == 0)
        Not(Eq(x, 0))
        >>> ~ T
        F
        """
        return logical_not(self)

    def __or__(self, other: Formula) -> Formula:
        """Override the :obj:`| <object.__or__>` operator to apply
        :func:`.boolean.logical_or`.

        >>> from symform.algebra import Variable
        >>> x = Variable('x')
        >>> (x > 0) | (x == 0) | F
        Or(Gt(x, 0), Eq(x, 0))
        """
        if not isinstance(other, Formula):
            return NotImplemented
        return logical_or(self, other)

    def __repr__(self) -> str:
        """A representation of the :class:`Formula` `self` that is suitable
        for use as an input.
        """
        r = self.op.__name__
        r += '('
        if self.args:
            r += self.args[0].__repr__()
            for a in self.args[1:]:
                r += ', ' + a.__repr__()
        r += ')'
        return r

    def __str__(self) -> str:
        """Fully parenthesized infix representation used in printing.

        >>> from symform.algebra import Expression, Variable, Variables
        >>> x, y = Variable('x'), Variable('y')
        >>> X = Expression(x)
        >>> print(forall(Variables([x, y]), (X >= y) | (X < y)))
        forall({x, y}. ((x >= y) or (x < y)))
        """
        match self:
            case _T():
                return 'True'
            case _F():
                return 'False'
            case AtomicFormula():
                return f'({self.lhs} {self.SYMBOL} {self.rhs})'
            case And():
                return f'({self.lhs} and {self.rhs})'
            case Or():
                return f'({self.lhs} or {self.rhs})'
            case Not():
                return f'!({self.arg})'
            case Forall():
                return f'forall({self.variables}. {self.arg})'
            case _:
                assert False, type(self)

    def as_latex(self) -> str:
        r"""LaTeX representation as a string, which can be used elsewhere.

        >>> from symform.algebra import Variable, Variables
        >>> x = Variable('x')
        >>> f = forall(Variables([x]), (x**2 >= 0) & (x != 1))
        >>> f.as_latex()
        '\\forall x \\, (x^{2} \\geq 0 \\, \\wedge \\, x \\neq 1)'

        .. seealso:: :meth:`_repr_latex_` -- LaTeX representation for Jupyter notebooks
        """
        SYMBOL: Final = {And: '\\wedge', Or: '\\vee', Not: '\\neg', _F: '\\bot', _T: '\\top'}
        SPACING: Final = ' \\, '
        match self:
            case _T() | _F():
                return SYMBOL[self.op]
            case AtomicFormula():
                return f'{self.lhs.as_latex()} {self.LATEX_SYMBOL} {self.rhs.as_latex()}'
            case And() | Or():
                L = []
                for arg in self.args:
                    arg_as_latex = arg.as_latex()
                    if not Formula.is_atomic(arg) and arg.op not in (_T, _F, Not):
                        arg_as_latex = f'({arg_as_latex})'
                    L.append(arg_as_latex)
                return f'{SPACING}{SYMBOL[self.op]}{SPACING}'.join(L)
            case Not():
                return f'{SYMBOL[Not]}{SPACING}({self.arg.as_latex()})'
            case Forall():
                vars_as_latex = ', '.join(Expression(v).as_latex() for v in self.variables)
                return f'\\forall {vars_as_latex}{SPACING}({self.arg.as_latex()})'
            case _:
                assert False, type(self)

    def atoms(self) -> Iterator[AtomicFormula]:
        """
        An iterator over all instances of :class:`AtomicFormula
        <.atomic.AtomicFormula>` occurring in `self`.

        Recall that the truth values :data:`T <.boolean.T>` and :data:`F
        <.boolean.F>` are not atoms:

        >>> from symform.algebra import Variable
        >>> x, y = Variable('x'), Variable('y')
        >>> f = (x == 0) | ((y > 2 * x) & ~(x == 0))
        >>> list(f.atoms())
        [Eq(x, 0), Gt(y, 2*x), Eq(x, 0)]

        Note that rich comparisons between two variables compare their
        identities. Use :class:`Expression <.expression.Expression>` to obtain
        an atomic formula:

        >>> y > x
        True
        >>> list((Expression(y) > x).atoms())
        [Gt(y, x)]
        """
        match self:
            case _T() | _F():
                yield from ()
            case AtomicFormula():
                yield self
            case And() | Or() | Not():
                for arg in self.args:
                    yield from arg.atoms()
            case Forall():
                yield from self.arg.atoms()
            case _:
                assert False, type(self)

    def depth(self) -> int:
        """The depth of a formula is the maximal length of a path from the root
        to a truth value or an :class:`AtomicFormula <.atomic.AtomicFormula>`
        in the expression tree:

        >>> from symform.algebra import Variable, Variables
        >>> x, y = Variable('x'), Variable('y')
        >>> forall(Variables([x]), (x == y + 1) | ~(x > 2 * y)).depth()
        3
        """
        match self:
            case _T() | _F() | AtomicFormula():
                return 0
            case And() | Or() | Not():
                return max(arg.depth() for arg in self.args) + 1
            case Forall():
                return self.arg.depth() + 1
            case _:
                assert False, type(self)

    def equal_to(self, other: Formula) -> bool:
        """Structural equality. Identical objects are equal. Otherwise
        formulas of different kinds or with different hashes are unequal.
        Only if both kind and hash match, the arguments are compared
        recursively.

        >>> from symform.algebra import Expression, Variable
        >>> x, y = Variable('x'), Variable('y')
        >>> (Expression(x) == y).equal_to(Expression(x) == y)
        True
        >>> (Expression(x) == y).equal_to(Expression(y) == x)
        False
        >>> (T & F).equal_to(F)
        True
        """
        if self is other:
            return True
        if self.kind is not other.kind:
            return False
        if self._hash != other._hash:
            return False
        # Same kind and hash. Compare structurally in case of a hash collision.
        match self:
            case _T() | _F():
                return True
            case AtomicFormula():
                assert isinstance(other, AtomicFormula)
                return self.lhs.equal_to(other.lhs) and self.rhs.equal_to(other.rhs)
            case And() | Or() | Not():
                return all(arg.equal_to(other_arg)
                           for arg, other_arg in zip(self.args, other.args))
            case Forall():
                assert isinstance(other, Forall)
                return self.variables == other.variables and self.arg.equal_to(other.arg)
            case _:
                assert False, type(self)

    def evaluate(self, env: Environment) -> bool:
        """Evaluate `self` under the assignment `env` of numbers to
        variables. All free variables of `self` must be bound in `env`.

        >>> from symform.algebra import Environment, Expression, Variable
        >>> x, y = Variable('x'), Variable('y')
        >>> f = (Expression(x) == y) | (x > 2 * y)
        >>> f.evaluate(Environment({x: 1, y: 1}))
        True
        >>> f.evaluate(Environment({x: 1, y: 2}))
        False

        Evaluation of universally quantified formulas is not supported:

        >>> forall(Variables([x]), x >= y + 1).evaluate(Environment({y: 0}))
        Traceback (most recent call last):
        ...
        NotImplementedError: evaluation of forall is not implemented yet
        """
        match self:
            case _T():
                return True
            case _F():
                return False
            case Eq():
                return self.lhs.evaluate(env) == self.rhs.evaluate(env)
            case Ne():
                return self.lhs.evaluate(env) != self.rhs.evaluate(env)
            case Gt():
                return self.lhs.evaluate(env) > self.rhs.evaluate(env)
            case Ge():
                return self.lhs.evaluate(env) >= self.rhs.evaluate(env)
            case Lt():
                return self.lhs.evaluate(env) < self.rhs.evaluate(env)
            case Le():
                return self.lhs.evaluate(env) <= self.rhs.evaluate(env)
            case And():
                return self.lhs.evaluate(env) and self.rhs.evaluate(env)
            case Or():
                return self.lhs.evaluate(env) or self.rhs.evaluate(env)
            case Not():
                return not self.arg.evaluate(env)
            case Forall():
                # Checking for a counterexample would require deciding
                # Ex(variables, Not(arg)).
                raise NotImplementedError('evaluation of forall is not implemented yet')
            case _:
                assert False, type(self)

    @classmethod
    def false(cls) -> _F:
        """The unique instance :data:`F <.boolean.F>` of :class:`_F
        <.boolean._F>`.
        """
        return _F()

    def free_variables(self) -> Variables:
        """The set of all variables occurring free in `self`.

        >>> from symform.algebra import Variable, Variables
        >>> x, y, z = Variable('x'), Variable('y'), Variable('z')
        >>> f = (x + y == 0) & forall(Variables([x, z]), x * z > y)
        >>> f.free_variables()
        Variables({x, y})
        """
        match self:
            case _T() | _F():
                return Variables()
            case AtomicFormula():
                return self.lhs.variables() + self.rhs.variables()
            case And() | Or() | Not():
                result = Variables()
                for arg in self.args:
                    result += arg.free_variables()
                return result
            case Forall():
                return self.arg.free_variables() - self.variables
            case _:
                assert False, type(self)

    @staticmethod
    def is_atomic(f: Formula) -> TypeIs[AtomicFormula]:
        """Type narrowing :func:`isinstance` test for
        :class:`.atomic.AtomicFormula`.
        """
        return isinstance(f, AtomicFormula)

    @staticmethod
    def is_false(f: Formula) -> TypeIs[_F]:
        """Type narrowing :func:`isinstance` test for :class:`.boolean._F`.
        """
        return isinstance(f, _F)

    @staticmethod
    def is_true(f: Formula) -> TypeIs[_T]:
        """Type narrowing :func:`isinstance` test for :class:`.boolean._T`.
        """
        return isinstance(f, _T)

    def _repr_latex_(self) -> str:
        """A LaTeX representation for Jupyter notebooks. In general, the
        underlying method :meth:`as_latex` should be used instead.

        Due to a current limitation of Jupyter, the LaTeX representration is
        cut off after at most 5000 characters.

        .. seealso:: :meth:`as_latex` -- LaTeX representation
        """
        limit = 5000
        as_latex = self.as_latex()
        if len(as_latex) > limit:
            as_latex = as_latex[:limit]
            opc = 0
            for pos in range(limit):
                match as_latex[pos]:
                    case '{':
                        opc += 1
                    case '}':
                        opc -= 1
            assert opc >= 0
            while opc > 0:
                match as_latex[-1]:
                    case '{':
                        opc -= 1
                    case '}':
                        opc += 1
                as_latex = as_latex[:-1]
            as_latex += '{}\\dots'
        return f'$\\displaystyle {as_latex}$'

    def _repr_pretty_(self, p: pretty.RepresentationPrinter, cycle: bool) -> None:
        assert not cycle
        if not self.args:
            p.text(repr(self))
            return
        op = self.op.__name__
        with p.group(len(op) + 1, op + '(', ')'):
            for idx, arg in enumerate(self.args):
                if idx:
                    p.text(',')
                    p.breakable()
                p.pretty(arg)

    @classmethod
    def true(cls) -> _T:
        """The unique instance :data:`T <.boolean.T>` of :class:`_T
        <.boolean._T>`.

        >>> Formula.true() is T
        True
        """
        return _T()


# The following imports are intentionally late to avoid circularity.
from .atomic import AtomicFormula, Eq, Ge, Gt, Le, Lt, Ne  # noqa: E402
from .boolean import And, logical_and, logical_not, logical_or, Not, Or, _F, _T  # noqa: E402
from .boolean import F, T  # noqa: E402
from .quantified import Forall, forall  # noqa: E402
