"""Variables are the atomic symbols of expressions and formulas. In contrast
to many computer algebra systems, a variable is *not* identified by its name.
Each construction of a :class:`Variable` creates a new identity, which is an
integer drawn from an :class:`IdCounter`.

>>> x = Variable('x')
>>> x_prime = Variable('x')
>>> x == x_prime
False
>>> str(x) == str(x_prime)
True
"""

from __future__ import annotations

import threading
from typing import Any, Final, Optional


ID_START: Final[int] = 1
"""The first identity handed out by a freshly created or reset
:class:`IdCounter`.
"""


class IdCounter:
    """A thread-safe source of strictly increasing integers. Identities are
    never reused unless the counter is explicitly :meth:`reset`, which is
    meant for test isolation only.

    >>> counter = IdCounter(start=10)
    >>> next(counter), next(counter)
    (10, 11)
    >>> counter.reset()
    >>> next(counter)
    10
    """

    def __init__(self, start: int = ID_START) -> None:
        self._lock = threading.Lock()
        self._start = start
        self._next = start

    def __iter__(self) -> IdCounter:
        return self

    def __next__(self) -> int:
        with self._lock:
            id_ = self._next
            self._next += 1
        return id_

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(start={self._start}, next={self._next})'

    def reset(self, start: Optional[int] = None) -> None:
        """Restart the counter at `start`, or at the initial start value if
        `start` is :obj:`None`.
        """
        with self._lock:
            if start is not None:
                self._start = start
            self._next = self._start


id_counter = IdCounter()
"""The process-wide default :class:`IdCounter` used by :class:`Variable`.
"""


class Variable:
    """A named symbol with a process-unique identity.

    Equality, hashing, and ordering between variables depend only on the
    identity:

    >>> x, y = Variable('x'), Variable('y')
    >>> x == x, x == y, x != y
    (True, False, True)
    >>> x < y, y < x
    (True, False)
    >>> hash(x) == hash(x.id)
    True

    Comparing a variable with an expression or a number, in contrast,
    constructs an atomic formula. Arithmetic yields expressions:

    >>> x == 1
    Eq(x, 1)
    >>> 2*x <= 1
    Le(2*x, 1)

    .. seealso::
        * :meth:`sort_key` -- a key for :func:`sorted`
        * :class:`.variables.Variables` -- ordered sets of variables
    """

    _hash: int
    _id: int
    _name: str

    @property
    def id(self) -> int:
        """The identity of the variable.
        """
        return self._id

    @property
    def name(self) -> str:
        """The name used for printing. It is not necessarily unique.
        """
        return self._name

    def __init__(self, name: str, *, counter: Optional[IdCounter] = None) -> None:
        if not isinstance(name, str):
            raise ValueError(f'{name!r} is not a str')
        if counter is None:
            counter = id_counter
        self._id = next(counter)
        self._name = name
        self._hash = hash(self._id)

    @classmethod
    def _restore(cls, id_: int, name: str) -> Variable:
        # Recreate an existing variable without drawing a new identity.
        v = object.__new__(cls)
        v._id = id_
        v._name = name
        v._hash = hash(id_)
        return v

    def __copy__(self) -> Variable:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Variable:
        return self

    def __reduce__(self) -> tuple[Any, ...]:
        return (Variable._restore, (self._id, self._name))

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        return self._name

    def __str__(self) -> str:
        return self._name

    def sort_key(self) -> int:
        """A sort key ordering variables by their identities, i.e., in order
        of construction.

        >>> a, b = Variable('b'), Variable('a')
        >>> sorted([b, a], key=Variable.sort_key)
        [b, a]
        """
        return self._id

    # Rich comparisons. Between two variables they compare identities.
    # Otherwise they construct atomic formulas via Expression.

    def __eq__(self, other: object) -> Any:
        if isinstance(other, Variable):
            return self._id == other._id
        if Expression.is_expression_like(other):
            return Expression(self) == other
        return NotImplemented

    def __ne__(self, other: object) -> Any:
        if isinstance(other, Variable):
            return self._id != other._id
        if Expression.is_expression_like(other):
            return Expression(self) != other
        return NotImplemented

    def __lt__(self, other: object) -> Any:
        if isinstance(other, Variable):
            return self._id < other._id
        if Expression.is_expression_like(other):
            return Expression(self) < other
        return NotImplemented

    def __le__(self, other: object) -> Any:
        if isinstance(other, Variable):
            return self._id <= other._id
        if Expression.is_expression_like(other):
            return Expression(self) <= other
        return NotImplemented

    def __gt__(self, other: object) -> Any:
        if isinstance(other, Variable):
            return self._id > other._id
        if Expression.is_expression_like(other):
            return Expression(self) > other
        return NotImplemented

    def __ge__(self, other: object) -> Any:
        if isinstance(other, Variable):
            return self._id >= other._id
        if Expression.is_expression_like(other):
            return Expression(self) >= other
        return NotImplemented

    # Arithmetic

    def __add__(self, other: object) -> Expression:
        return Expression(self) + other

    def __radd__(self, other: object) -> Expression:
        return other + Expression(self)

    def __sub__(self, other: object) -> Expression:
        return Expression(self) - other

    def __rsub__(self, other: object) -> Expression:
        return other - Expression(self)

    def __mul__(self, other: object) -> Expression:
        return Expression(self) * other

    def __rmul__(self, other: object) -> Expression:
        return other * Expression(self)

    def __truediv__(self, other: object) -> Expression:
        return Expression(self) / other

    def __rtruediv__(self, other: object) -> Expression:
        return other / Expression(self)

    def __pow__(self, other: object) -> Expression:
        return Expression(self) ** other

    def __neg__(self) -> Expression:
        return -Expression(self)


# The following import is intentionally late to avoid circularity.
from .expression import Expression  # noqa: E402
