from __future__ import annotations

from typing import Iterable, Iterator

from .variable import Variable


class Variables:
    """An ordered set of variables. Members are identified and ordered by
    their :attr:`id <.variable.Variable.id>`, so that iteration, printing,
    and hashing do not depend on the order of insertion.

    >>> x, y, z = Variable('x'), Variable('y'), Variable('z')
    >>> V = Variables([z, x, y, x])
    >>> V
    Variables({x, y, z})
    >>> len(V)
    3
    >>> V == Variables([x, y, z])
    True
    >>> hash(V) == hash(Variables([y, z, x]))
    True

    Union and difference are pure and accept single variables as well:

    >>> Variables([x]) + y
    Variables({x, y})
    >>> V - Variables([x, z])
    Variables({y})
    >>> V
    Variables({x, y, z})
    """

    _vars: dict[int, Variable]

    def __init__(self, vars_: Iterable[Variable] = ()) -> None:
        self._vars = {}
        self.update(vars_)

    def __add__(self, other: Variables | Variable) -> Variables:
        result = Variables(self)
        result += other
        return result

    def __contains__(self, v: object) -> bool:
        return isinstance(v, Variable) and v.id in self._vars

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Variables):
            return NotImplemented
        return self._vars.keys() == other._vars.keys()

    def __hash__(self) -> int:
        # Mutating a Variables instance changes its hash. Do not mutate sets
        # that are in use as dictionary keys or as arguments of formulas.
        return hash(tuple(sorted(self._vars)))

    def __iadd__(self, other: Variables | Variable) -> Variables:
        if isinstance(other, Variable):
            self.insert(other)
        else:
            self.update(other)
        return self

    def __isub__(self, other: Variables | Variable) -> Variables:
        match other:
            case Variable():
                self._vars.pop(other.id, None)
            case Variables():
                for v in other:
                    self._vars.pop(v.id, None)
            case _:
                raise ValueError(f'{other!r} is neither Variables nor a Variable')
        return self

    def __iter__(self) -> Iterator[Variable]:
        for id_ in sorted(self._vars):
            yield self._vars[id_]

    def __len__(self) -> int:
        return len(self._vars)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self})'

    def __str__(self) -> str:
        return '{' + ', '.join(str(v) for v in self) + '}'

    def __sub__(self, other: Variables | Variable) -> Variables:
        result = Variables(self)
        result -= other
        return result

    def insert(self, v: Variable) -> None:
        """Insert `v`. Nothing happens if `v` is already a member.

        >>> x = Variable('x')
        >>> V = Variables()
        >>> V.insert(x)
        >>> V.insert(x)
        >>> V
        Variables({x})
        """
        if not isinstance(v, Variable):
            raise ValueError(f'{v!r} is not a Variable')
        self._vars.setdefault(v.id, v)

    def is_subset_of(self, other: Variables) -> bool:
        """
        >>> x, y = Variable('x'), Variable('y')
        >>> Variables([x]).is_subset_of(Variables([x, y]))
        True
        >>> Variables([x, y]).is_subset_of(Variables([y]))
        False
        """
        return self._vars.keys() <= other._vars.keys()

    def is_superset_of(self, other: Variables) -> bool:
        return other.is_subset_of(self)

    def update(self, vars_: Iterable[Variable]) -> None:
        """Insert all elements of `vars_`.
        """
        for v in vars_:
            self.insert(v)
