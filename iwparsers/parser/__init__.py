"""
Parser module - normalization of captured text and assembly of result records.
"""

from .normalizers import (
    DateTimeFamily,
    TextNormalizer,
    NumberNormalizer,
    DateTimeNormalizer,
    DurationNormalizer,
    LocaleNormalizer,
    to_integer,
    to_float,
    to_timestamp,
    to_duration_seconds,
)
from .assembler import CaptureSet, ResultAssembler, insert_in_time_order

__all__ = [
    'DateTimeFamily',
    'TextNormalizer',
    'NumberNormalizer',
    'DateTimeNormalizer',
    'DurationNormalizer',
    'LocaleNormalizer',
    'to_integer',
    'to_float',
    'to_timestamp',
    'to_duration_seconds',
    'CaptureSet',
    'ResultAssembler',
    'insert_in_time_order',
]
