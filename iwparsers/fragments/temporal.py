"""
Date and time fragments

The game prints absolute times in three shapes depending on the account
language, and durations as "[N Tage ]H:MM[:SS]".
"""

_TIME = r'\d{1,2}:\d{1,2}(?::\d{1,2})?'

# 24.12.2010 15:30 / 24. Dezember 2010 15:30:10
DAY_MONTH_YEAR = (
    r'\d{1,2}[^\d\n]{0,2}[\s.](?:\d{1,2}|[^\d\s.]+)[\s.]\d{4}\s' + _TIME
)
# 2010-12-24 15:30
YEAR_MONTH_DAY = r'\d{4}[-.]\d{1,2}[-.]\d{1,2}\s' + _TIME
# December 24th, 2010, 3:30 pm
VERBOSE = (
    r'[^\d\s][^\d\n]*\s\d{1,2}[^\d\s]{0,2},?\s\d{4},?\s' + _TIME + r'(?:\s(?:am|pm))?'
)


def date() -> str:
    """Calendar date "DD.MM.YYYY" standing alone between whitespace."""
    return r'(?:(?<!\S)\d{2}\.\d{2}\.\d{4}(?!\S))'


def datetime_() -> str:
    """Absolute date and time in any of the three printed shapes."""
    return r'(?:\b(?:' + DAY_MONTH_YEAR + '|' + YEAR_MONTH_DAY + '|' + VERBOSE + r')\b)'


def mixed_duration() -> str:
    """Duration "H:MM[:SS]" with an optional leading day count."""
    return r'(?:(?<!\S)(?:\d+\s(?:Tag|Tage|day|days)\s+)?' + _TIME + r'(?!\S))'


def mixed_time() -> str:
    """Like mixed_duration, but may carry an am/pm suffix."""
    return (
        r'(?:(?<!\S)(?:\d+\s(?:Tag|Tage|day|days)\s+)?' + _TIME
        + r'(?:\s(?:am|pm))?(?!\S))'
    )
