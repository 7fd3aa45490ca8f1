__version__ = 0.1

from . import algebra

from .algebra import Environment, Expression, Variable, Variables  # noqa

from . import firstorder

from .firstorder import (Formula, FormulaKind, AtomicFormula,  # noqa
                         Eq, Ne, Gt, Ge, Lt, Le, eq, ne, gt, ge, lt, le,
                         BooleanFormula, And, Or, Not, T, F,
                         logical_and, logical_or, logical_not, Forall, forall)

from .support.logging import get_logger, set_log_level  # noqa

__all__ = algebra.__all__ + firstorder.__all__ + ['get_logger', 'set_log_level']
