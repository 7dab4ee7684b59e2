"""
Table handling for screens with dynamically declared columns.
"""

from .header_table import TableCell, CorrelatedRow, HeaderTable

__all__ = [
    'TableCell',
    'CorrelatedRow',
    'HeaderTable',
]
