"""
Number fragments

Regular-expression fragments for the number formats used on game screens.
Thousands may be grouped with any of the configured separators
("1.234.567", "1'234'567", "1 234 567"), decimals use a comma or a dot
followed by exactly two digits.

Every function is pure: the same separators always give the same pattern,
and the pattern is non-capturing so callers can wrap it in named groups.
"""

import re
from typing import Iterable

# A class that can never match; used when no separators are configured
NEVER = r'[^\s\S]'

# Left/right anchors; a number never touches letters or digits
_START = r'(?<![^\s(])'
_START_UNSIGNED = r'(?<![^\s(+])'
_END = r'(?![^\s)%])'
_END_SIGNED = r'(?![^\s)*%])'
_END_UNSIGNED = r'(?![^\s)+])'


def _char_class(separators: Iterable[str]) -> str:
    parts = []
    for sep in separators:
        if sep == ' ':
            parts.append(r' \t')
        else:
            parts.append(re.escape(sep))
    if not parts:
        return NEVER
    return '[' + ''.join(parts) + ']'


def thousand_separator(separators: Iterable[str]) -> str:
    """Character class of the accepted thousand separators. Space also accepts a tab."""
    return _char_class(separators)


def comma_separator(separators: Iterable[str]) -> str:
    """Character class of the accepted decimal separators."""
    return _char_class(separators)


def _integer_part(thousands: Iterable[str]) -> str:
    sep = thousand_separator(thousands)
    return r'(?:\d{1,3}(?:' + sep + r'\d{3})*|\d+)'


def decimal_number(thousands: Iterable[str]) -> str:
    """
    Whole number with optional thousand grouping and optional minus sign.

    Matches "1.234.567", "-42", "(17)" but not "12.34" or "abc12".
    """
    return '(?:' + _START + '-?' + _integer_part(thousands) + _END + ')'


def floating_double(thousands: Iterable[str], decimals: Iterable[str]) -> str:
    """Signed number with optional two-digit fraction, e.g. "+1.234,50" or "-0,75"."""
    return (
        '(?:' + _START + '[-+]?' + _integer_part(thousands)
        + '(?:' + comma_separator(decimals) + r'\d{2})?' + _END_SIGNED + ')'
    )


def unsigned_double(thousands: Iterable[str], decimals: Iterable[str]) -> str:
    """Unsigned number with optional two-digit fraction; may be glued to a '+'."""
    return (
        '(?:' + _START_UNSIGNED + _integer_part(thousands)
        + '(?:' + comma_separator(decimals) + r'\d{2})?' + _END_UNSIGNED + ')'
    )


def points_per_day(thousands: Iterable[str], decimals: Iterable[str]) -> str:
    """Score gained per day, e.g. "1.234,56"."""
    return (
        '(?:' + _START + _integer_part(thousands)
        + '(?:' + comma_separator(decimals) + r'\d{2})?' + _END + ')'
    )
