from __future__ import annotations

from collections.abc import Mapping
import math
from typing import Iterable, Iterator

from .variable import Variable
from .variables import Variables


class Environment(Mapping[Variable, float]):
    """An assignment of floating point numbers to variables, which serves as
    the context for :meth:`Expression.evaluate
    <.expression.Expression.evaluate>` and :meth:`Formula.evaluate
    <symform.firstorder.formula.Formula.evaluate>`.

    >>> x, y = Variable('x'), Variable('y')
    >>> env = Environment({x: 1, y: 2.5})
    >>> env
    Environment({x: 1.0, y: 2.5})
    >>> env[y]
    2.5
    >>> env.domain()
    Variables({x, y})

    Lookup of a variable that is not bound raises :exc:`KeyError`:

    >>> z = Variable('z')
    >>> env[z]
    Traceback (most recent call last):
    ...
    KeyError: 'z is not bound in this environment'
    """

    _map: dict[Variable, float]

    def __init__(self, assignment: Mapping[Variable, float] | Iterable[tuple[Variable, float]] = ()
                 ) -> None:
        self._map = {}
        items = assignment.items() if isinstance(assignment, Mapping) else assignment
        for v, value in items:
            self.insert(v, value)

    def __getitem__(self, v: Variable) -> float:
        try:
            return self._map[v]
        except KeyError:
            raise KeyError(f'{v} is not bound in this environment') from None

    def __iter__(self) -> Iterator[Variable]:
        return iter(sorted(self._map, key=Variable.sort_key))

    def __len__(self) -> int:
        return len(self._map)

    def __repr__(self) -> str:
        s = ', '.join(f'{v}: {value!r}' for v, value in self.items())
        return f'{self.__class__.__name__}({{{s}}})'

    def domain(self) -> Variables:
        """The set of all bound variables.
        """
        return Variables(self._map)

    def insert(self, v: Variable, value: float) -> None:
        """Bind `v` to `value`, replacing an existing binding.

        >>> x = Variable('x')
        >>> env = Environment()
        >>> env.insert(x, 3)
        >>> env[x]
        3.0
        >>> env.insert(x, float('nan'))
        Traceback (most recent call last):
        ...
        ValueError: cannot bind x to nan
        """
        if not isinstance(v, Variable):
            raise ValueError(f'{v!r} is not a Variable')
        value = float(value)
        if math.isnan(value):
            raise ValueError(f'cannot bind {v} to {value}')
        self._map[v] = value
