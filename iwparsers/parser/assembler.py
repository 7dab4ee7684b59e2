"""
Result Assembler

Folds normalized captures into result records.

Architecture:
1. Required fields: a failed conversion aborts the whole record
2. Optional fields: an absent capture stays absent, a failed conversion is
   reported as a warning and the field stays absent
3. Keyed records: created once per key, later occurrences merge into them
4. Time-ordered lists: kept sorted by timestamp, stable on ties
   (``insert_in_time_order``)

The assembler only collects diagnostics; converting them into a
``ParseOutcome`` is the screen parser's job.
"""

import bisect
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, TypeVar

from loguru import logger

from ..exceptions import DegenerateKeyError, NormalizationError

T = TypeVar('T')
R = TypeVar('R')

CaptureSet = Mapping[str, Optional[str]]


def insert_in_time_order(entries: List[T], entry: T, timestamp: Callable[[T], int]) -> None:
    """
    Insert ``entry`` keeping ``entries`` sorted ascending by ``timestamp``.

    Entries with equal timestamps keep their insertion order.
    """
    bisect.insort_right(entries, entry, key=timestamp)


class ResultAssembler:
    """
    Collects typed values from capture sets and records diagnostics.

    Usage:
        asm = ResultAssembler()
        attack = asm.required(captures, 'attack', norm.to_integer)
        parking = asm.optional(captures, 'parking_lot', norm.to_integer)
        site = asm.keyed(sites, key, {'planet name': name}, make_site)
    """

    def __init__(self):
        self.warnings: List[str] = []

    def warn(self, message: str) -> None:
        logger.warning(message)
        self.warnings.append(message)

    def required(
        self,
        captures: CaptureSet,
        group: str,
        convert: Callable[[Optional[str]], R],
    ) -> R:
        """
        Convert a required capture.

        Raises:
            NormalizationError: If the capture is missing or cannot be converted
        """
        raw = captures.get(group)
        try:
            return convert(raw)
        except NormalizationError as e:
            raise e.for_field(group) from e

    def optional(
        self,
        captures: CaptureSet,
        group: str,
        convert: Callable[[Optional[str]], R],
    ) -> Optional[R]:
        """Convert an optional capture; absent or unconvertible values give None."""
        raw = captures.get(group)
        if raw is None or not raw.strip():
            return None
        try:
            return convert(raw)
        except NormalizationError as e:
            self.warn(str(e.for_field(group)))
            return None

    def keyed(
        self,
        records: Dict[str, T],
        key: str,
        identity: Mapping[str, Any],
        factory: Callable[[], T],
    ) -> Optional[T]:
        """
        Return the record for ``key``, creating it on first sight.

        The first occurrence of a key must carry every identity field;
        otherwise the occurrence is dropped with a warning and None is
        returned. Later occurrences merge into the existing record.
        """
        if key in records:
            return records[key]

        missing = [name for name, value in identity.items() if value in (None, '')]
        if missing:
            self.warn(str(DegenerateKeyError(key, ', '.join(missing))))
            return None

        record = factory()
        records[key] = record
        return record

    def fold(self, capture_sets: Iterable[CaptureSet], step: Callable[[CaptureSet], None]) -> int:
        """Apply ``step`` to each capture set in order. Returns the count."""
        count = 0
        for captures in capture_sets:
            step(captures)
            count += 1
        return count
