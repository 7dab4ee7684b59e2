"""
Dynamic-header tables

Some screens print a table whose columns are declared by a header block of
variable length (one column per colony), followed by rows of
tab-separated cells:

    <name> <one cell per header column> <fixed trailing summary cells>

The number of header columns is only known at parse time, so cells are
correlated to headers by position between a fixed number of leading and
trailing cells.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, Sequence

from loguru import logger


@dataclass
class TableCell:
    """A single cell of a data row."""
    value: str
    row_index: int
    column_index: int
    header: Optional[str] = None

    @property
    def text(self) -> str:
        return self.value.strip()

    @property
    def is_empty(self) -> bool:
        return not self.text


@dataclass
class CorrelatedRow:
    """
    One data row split into its parts.

    lead: leading cells (the row label)
    cells: header key → cell, only for columns the row has a cell for
    trail: trailing summary cells, None where the row is too short
    surplus: positional cells beyond the last declared header
    """
    row_index: int
    lead: List[str] = field(default_factory=list)
    cells: Dict[str, TableCell] = field(default_factory=dict)
    trail: List[Optional[str]] = field(default_factory=list)
    surplus: List[TableCell] = field(default_factory=list)

    @property
    def label(self) -> str:
        return self.lead[0].strip() if self.lead else ''


class HeaderTable:
    """
    Correlates data rows with dynamically declared header columns.

    Usage:
        table = HeaderTable(['1:2:3', '4:5:6'], lead=1, trail=3)
        for row in table.rows(data_lines):
            row.label, row.cells['1:2:3'].text, row.trail
    """

    def __init__(self, headers: Sequence[str], lead: int = 1, trail: int = 3):
        self.headers = list(headers)
        self.lead = lead
        self.trail = trail

    @property
    def column_count(self) -> int:
        return len(self.headers)

    def correlate(self, cells: Sequence[str], row_index: int = 0) -> CorrelatedRow:
        lead = list(cells[:self.lead])
        body = list(cells[self.lead:])

        if len(body) >= self.trail:
            split = len(body) - self.trail
            positional, trail = body[:split], list(body[split:])
        else:
            positional = []
            trail = [None] * (self.trail - len(body)) + body

        row = CorrelatedRow(row_index=row_index, lead=lead, trail=trail)

        for index, value in enumerate(positional):
            if index < len(self.headers):
                header = self.headers[index]
                row.cells[header] = TableCell(value, row_index, index, header)
            else:
                row.surplus.append(TableCell(value, row_index, index))

        if row.surplus:
            logger.debug(
                f"Row {row_index} has {len(row.surplus)} cells beyond "
                f"{len(self.headers)} header columns"
            )
        return row

    def rows(self, lines: Iterable[str], separator: str = '\t') -> Iterator[CorrelatedRow]:
        """Split each non-blank line on ``separator`` and correlate it."""
        row_index = 0
        for line in lines:
            if not line.strip():
                continue
            yield self.correlate(line.split(separator), row_index)
            row_index += 1
