"""
Fragment Library

Composable regular-expression fragments for the number, name, date and
vocabulary formats of the game screens. The functions in the submodules are
pure; ``FragmentLibrary`` binds them to a ``LocaleConfig``.
"""

from .library import FragmentLibrary
from .numbers import (
    NEVER,
    thousand_separator,
    comma_separator,
    decimal_number,
    floating_double,
    unsigned_double,
    points_per_day,
)
from .temporal import date, datetime_, mixed_duration, mixed_time

__all__ = [
    'FragmentLibrary',
    'NEVER',
    'thousand_separator',
    'comma_separator',
    'decimal_number',
    'floating_double',
    'unsigned_double',
    'points_per_day',
    'date',
    'datetime_',
    'mixed_duration',
    'mixed_time',
]
