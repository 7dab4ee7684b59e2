"""
Locale Normalizer

Converts raw captured substrings into typed values. Normalization is the
bridge between the loose screen text and the typed result records.

What normalization does:
- Numbers → int / float, with the configured thousand separators removed
- Dates → Unix timestamps in the configured timezone
- Durations → seconds
- Labels → enum members, with known alternate spellings collapsed
- Parenthesized lists → list of strings

Every conversion either returns a value or raises ``NormalizationError``;
there is no silent fallback to zero. Whether a failure is fatal is decided
by the result assembler, not here.
"""

import re
from datetime import datetime
from enum import Enum
from functools import lru_cache
from typing import List, Optional, Type, TypeVar

from dateutil import parser as date_parser
from dateutil import tz
from loguru import logger

from ..config import LocaleConfig
from ..enums import lookup
from ..exceptions import ConfigError, NormalizationError
from ..results import Coordinates

E = TypeVar('E', bound=Enum)


class DateTimeFamily(Enum):
    """The three shapes absolute times are printed in."""
    DAY_MONTH_YEAR = 'day_month_year'    # 24.12.2010 15:30
    YEAR_MONTH_DAY = 'year_month_day'    # 2010-12-24 15:30
    VERBOSE = 'verbose'                  # December 24, 2010, 3:30 pm


_TIME = r'(?P<hour>\d{1,2}):(?P<minute>\d{1,2})(?::(?P<second>\d{1,2}))?'

_DATETIME_PATTERNS = {
    DateTimeFamily.DAY_MONTH_YEAR: re.compile(
        r'(?P<day>\d{1,2})[^\d\s]{0,2}[\s.](?P<month>\d{1,2}|[^\d\s.]+)[\s.]'
        r'(?P<year>\d{4})\s' + _TIME
    ),
    DateTimeFamily.YEAR_MONTH_DAY: re.compile(
        r'(?P<year>\d{4})[-.](?P<month>\d{1,2})[-.](?P<day>\d{1,2})\s' + _TIME
    ),
    DateTimeFamily.VERBOSE: re.compile(
        r'(?P<month>[^\d\s][^\d]*?)\s(?P<day>\d{1,2})[^\d\s]{0,2},?\s(?P<year>\d{4}),?\s'
        + _TIME + r'(?:\s(?P<ampm>am|pm))?',
        re.IGNORECASE,
    ),
}

_DURATION = re.compile(
    r'(?:(?P<days>\d+)\s(?:Tage|Tag|days|day)\s+)?'
    r'(?P<hours>\d{1,2}):(?P<minutes>\d{1,2})(?::(?P<seconds>\d{1,2}))?'
    r'(?:\s(?:am|pm))?'
)

MONTHS = {
    'januar': 1, 'jan': 1, 'january': 1,
    'februar': 2, 'feb': 2, 'february': 2,
    'märz': 3, 'maerz': 3, 'mär': 3, 'march': 3, 'mar': 3,
    'april': 4, 'apr': 4,
    'mai': 5, 'may': 5,
    'juni': 6, 'jun': 6, 'june': 6,
    'juli': 7, 'jul': 7, 'july': 7,
    'august': 8, 'aug': 8,
    'september': 9, 'sep': 9, 'sept': 9,
    'oktober': 10, 'okt': 10, 'october': 10, 'oct': 10,
    'november': 11, 'nov': 11,
    'dezember': 12, 'dez': 12, 'december': 12, 'dec': 12,
}


class TextNormalizer:
    """Normalizes text values."""

    @staticmethod
    def to_string(raw: Optional[str]) -> str:
        """Collapse whitespace runs (including newlines) and trim."""
        if raw is None:
            raise NormalizationError(raw, 'string')
        return ' '.join(raw.split())

    @staticmethod
    def bracket_string_to_list(raw: Optional[str]) -> List[str]:
        """
        Split "(A (x)) (B)" into ["A (x)", "B"].

        Only top-level groups are split; nested parentheses stay inside
        their item. Text outside any group is ignored.
        """
        if raw is None:
            raise NormalizationError(raw, 'bracket list')

        items: List[str] = []
        depth = 0
        start = 0
        for pos, char in enumerate(raw):
            if char == '(':
                if depth == 0:
                    start = pos + 1
                depth += 1
            elif char == ')':
                if depth == 0:
                    raise NormalizationError(raw, 'bracket list')
                depth -= 1
                if depth == 0:
                    items.append(' '.join(raw[start:pos].split()))

        if depth != 0:
            raise NormalizationError(raw, 'bracket list')
        return items


class NumberNormalizer:
    """
    Normalizes numbers printed with locale thousand/decimal separators.

    - "1.234.567", "1'234'567", "1 234 567" → 1234567
    - "1.234,50" → 1234.5
    - "0,75" → 0.75

    A separator followed by one or two digits at the very end is the decimal
    separator; thousand groups always have three digits.
    """

    def __init__(self, locale: Optional[LocaleConfig] = None):
        self.locale = locale or LocaleConfig()
        self._fraction = None
        if self.locale.decimal_separators:
            seps = ''.join(re.escape(s) for s in self.locale.decimal_separators)
            self._fraction = re.compile(r'[' + seps + r'](\d{1,2})$')

    def _strip_thousands(self, value: str) -> str:
        for sep in self.locale.thousand_separators:
            if sep == ' ':
                value = re.sub(r'[ \t]', '', value)
            else:
                value = value.replace(sep, '')
        return value

    def to_integer(self, raw: Optional[str]) -> int:
        if raw is None:
            raise NormalizationError(raw, 'integer')

        value = self._strip_thousands(raw.strip())
        if not re.fullmatch(r'[-+]?\d+', value):
            logger.debug(f"Could not parse integer: {raw!r}")
            raise NormalizationError(raw, 'integer')
        return int(value)

    def to_float(self, raw: Optional[str]) -> float:
        if raw is None:
            raise NormalizationError(raw, 'float')

        value = raw.strip()
        fraction = '0'
        if self._fraction:
            match = self._fraction.search(value)
            if match:
                fraction = match.group(1)
                value = value[:match.start()]

        value = self._strip_thousands(value)
        if not re.fullmatch(r'[-+]?\d+', value):
            logger.debug(f"Could not parse float: {raw!r}")
            raise NormalizationError(raw, 'float')
        return float(f"{value}.{fraction}")


class DateTimeNormalizer:
    """
    Normalizes absolute date/times to Unix timestamps.

    The three printed shapes are parsed with explicit patterns; month names
    are resolved in German or English. Anything the patterns cannot resolve
    falls back to dateutil.
    """

    def __init__(self, timezone: str = 'Europe/Berlin'):
        self.tzinfo = tz.gettz(timezone)
        if self.tzinfo is None:
            raise ConfigError(f"Unknown timezone: {timezone}")

    def to_timestamp(
        self,
        raw: Optional[str],
        family: Optional[DateTimeFamily] = None,
    ) -> int:
        """
        Convert a date/time string to seconds since the epoch.

        Args:
            raw: Captured date/time text
            family: Restrict parsing to one printed shape; by default all
                shapes are tried in order

        Raises:
            NormalizationError: If the text is not a valid date/time
        """
        if raw is None:
            raise NormalizationError(raw, 'timestamp')

        value = ' '.join(raw.split())
        families = [family] if family else list(DateTimeFamily)

        for fam in families:
            match = _DATETIME_PATTERNS[fam].fullmatch(value)
            if not match:
                continue
            try:
                return int(self._from_match(match).timestamp())
            except (KeyError, ValueError):
                break

        return self._fallback(raw, value)

    def _from_match(self, match: re.Match) -> datetime:
        month = match.group('month')
        if month.isdigit():
            month_number = int(month)
        else:
            # The verbose shape may carry leading words before the month
            month_number = MONTHS[month.split()[-1].lower().rstrip('.')]

        hour = int(match.group('hour'))
        ampm = match.groupdict().get('ampm')
        if ampm:
            hour = hour % 12 + (12 if ampm.lower() == 'pm' else 0)

        return datetime(
            int(match.group('year')),
            month_number,
            int(match.group('day')),
            hour,
            int(match.group('minute')),
            int(match.group('second') or 0),
            tzinfo=self.tzinfo,
        )

    def _fallback(self, raw: str, value: str) -> int:
        try:
            parsed = date_parser.parse(value)
        except (ValueError, OverflowError):
            logger.debug(f"Could not parse date: {raw!r}")
            raise NormalizationError(raw, 'timestamp')

        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=self.tzinfo)
        return int(parsed.timestamp())


class DurationNormalizer:
    """Normalizes "[N Tage ]H:MM[:SS]" to seconds."""

    @staticmethod
    def to_duration_seconds(raw: Optional[str]) -> int:
        if raw is None:
            raise NormalizationError(raw, 'duration')

        match = _DURATION.fullmatch(' '.join(raw.split()))
        if not match:
            raise NormalizationError(raw, 'duration')

        return (
            int(match.group('days') or 0) * 86400
            + int(match.group('hours')) * 3600
            + int(match.group('minutes')) * 60
            + int(match.group('seconds') or 0)
        )


class LocaleNormalizer:
    """
    All normalizers bound to one locale.

    Usage:
        norm = LocaleNormalizer(LocaleConfig())
        norm.to_integer('1.234')           # 1234
        norm.to_duration_seconds('1:00')   # 3600
        norm.to_enum('KB', ObjectType)     # ObjectType.KAMPFBASIS
    """

    def __init__(self, locale: Optional[LocaleConfig] = None):
        self.locale = locale or LocaleConfig()
        self.numbers = NumberNormalizer(self.locale)
        self.dates = DateTimeNormalizer(self.locale.timezone)

    def to_integer(self, raw: Optional[str]) -> int:
        return self.numbers.to_integer(raw)

    def to_float(self, raw: Optional[str]) -> float:
        return self.numbers.to_float(raw)

    def to_string(self, raw: Optional[str]) -> str:
        return TextNormalizer.to_string(raw)

    def to_enum(self, raw: Optional[str], enum_cls: Type[E]) -> E:
        """Resolve a label to a member of ``enum_cls``, honouring synonyms."""
        label = TextNormalizer.to_string(raw)
        member = lookup(enum_cls, label)
        if member is None:
            raise NormalizationError(raw, enum_cls.__name__)
        return member

    def to_timestamp(
        self,
        raw: Optional[str],
        family: Optional[DateTimeFamily] = None,
    ) -> int:
        return self.dates.to_timestamp(raw, family)

    def to_duration_seconds(self, raw: Optional[str]) -> int:
        return DurationNormalizer.to_duration_seconds(raw)

    def to_coordinates(self, gal: Optional[str], sol: Optional[str], pla: Optional[str]) -> Coordinates:
        return Coordinates(self.to_integer(gal), self.to_integer(sol), self.to_integer(pla))

    def bracket_string_to_list(self, raw: Optional[str]) -> List[str]:
        return TextNormalizer.bracket_string_to_list(raw)


# Convenience functions

@lru_cache(maxsize=None)
def _default_normalizer() -> LocaleNormalizer:
    return LocaleNormalizer()


def to_integer(raw: Optional[str]) -> int:
    """Convert with the default locale."""
    return _default_normalizer().to_integer(raw)


def to_float(raw: Optional[str]) -> float:
    return _default_normalizer().to_float(raw)


def to_timestamp(raw: Optional[str], family: Optional[DateTimeFamily] = None) -> int:
    return _default_normalizer().to_timestamp(raw, family)


def to_duration_seconds(raw: Optional[str]) -> int:
    return DurationNormalizer.to_duration_seconds(raw)
