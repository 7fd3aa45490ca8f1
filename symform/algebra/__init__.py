"""Variables, sets of variables, arithmetic expressions, and environments.
These are the building blocks of the formulas in :mod:`symform.firstorder`.
"""

from .variable import ID_START, IdCounter, id_counter, Variable  # noqa
from .variables import Variables  # noqa
from .expression import Expression  # noqa
from .environment import Environment  # noqa

__all__ = [
    'ID_START', 'IdCounter', 'id_counter', 'Variable',

    'Variables',

    'Expression',

    'Environment'
]
