"""
Military ship overview ("Schiffsübersicht")

A table with one column per colony. The header block declares the columns:

    <tab>1:2:3
    (Kolonie)<tab>1:2:7
    (Kampfbasis)<tab>Im Flug<tab>Stat<tab>Gesamt

followed by one tab-separated row per ship model: name, one count per
colony, then ships in flight, stationed and total. Long lists repeat the
header block; the columns are the same, so only the first one is read.

Identifier: de_mil_schiff_uebersicht
"""

from __future__ import annotations

import re
from functools import cached_property
from typing import List

from ..doctypes.document_type import create_descriptor
from ..enums import ObjectType
from ..parser.assembler import CaptureSet, ResultAssembler
from ..results import ColonyResult, ShipCountResult, ShipOverviewResult
from ..tables.header_table import CorrelatedRow, HeaderTable
from .base import ScreenParser


class ShipOverviewParser(ScreenParser):
    """Parser for the military ship overview table."""

    descriptor = create_descriptor(
        identifier='de_mil_schiff_uebersicht',
        name='Schiffsübersicht',
        can_parse=r'Milit.+r[\s\S]*Schiff.+bersicht[\s\S]*Schiffs.+bersicht',
        begin_data=r'HILFE',
        marker_flags=re.DOTALL | re.MULTILINE,
    )

    @cached_property
    def pattern(self) -> re.Pattern:
        f = self.fragments
        coords = f.kolo_coords()
        types = f.kolo_types()
        return re.compile(
            r'^\s'
            r'(?P<kolo_line>' + coords
            + r'(?:[\n\r]+\(' + types + r'\)\s' + coords + r')*'
            + r'[\n\r]+\(' + types + r'\)\sIm\sFlug\sStat\sGesamt)'
            r'(?P<data_lines>(?:[\n\r]+[^\t\n]+(?:[ \t](?:' + f.decimal_number() + r')?)+)*)'
            r'$',
            re.MULTILINE,
        )

    @cached_property
    def kolo_pattern(self) -> re.Pattern:
        return re.compile(
            r'(?P<coords>(?P<coords_gal>\d{1,2}):(?P<coords_sol>\d{1,3}):(?P<coords_pla>\d{1,2}))'
            r'[\n\r]+\((?P<kolo_type>' + self.fragments.kolo_types() + r')\)'
        )

    def parse_text(self, text: str, assembler: ResultAssembler) -> ShipOverviewResult:
        result = ShipOverviewResult()
        table = None

        for block in self.match_all(self.pattern, text):
            if table is None:
                table = HeaderTable(self._read_header(block, result, assembler), lead=1, trail=3)

            lines = block.get('data_lines', '').replace('\r', '').split('\n')
            for row in table.rows(lines):
                result.ships.append(self._ship(row, table, assembler))

        return result

    def _read_header(
        self,
        block: CaptureSet,
        result: ShipOverviewResult,
        assembler: ResultAssembler,
    ) -> List[str]:
        """Register each declared colony; returns the column keys in order."""
        norm = self.normalizer
        columns: List[str] = []

        for kolo in self.guard.find_all(self.kolo_pattern, block['kolo_line']):
            coords = norm.to_coordinates(
                kolo['coords_gal'], kolo['coords_sol'], kolo['coords_pla']
            )
            object_type = assembler.required(
                kolo, 'kolo_type', lambda raw: norm.to_enum(raw, ObjectType)
            )
            result.colonies[coords.key] = ColonyResult(coords, object_type)
            columns.append(coords.key)

        return columns

    def _ship(self, row: CorrelatedRow, table: HeaderTable, assembler: ResultAssembler) -> ShipCountResult:
        norm = self.normalizer
        ship = ShipCountResult(name=norm.to_string(row.label))

        for key, cell in row.cells.items():
            count = assembler.optional({key: cell.value}, key, norm.to_integer)
            if count is not None:
                ship.counts[key] = count

        if row.surplus:
            assembler.warn(
                f"Ship '{ship.name}': {len(row.surplus)} value(s) without a colony "
                f"column ({table.column_count} declared)"
            )

        in_flight, stationed, total = row.trail
        summary = {'in_flight': in_flight, 'stationed': stationed, 'total': total}
        ship.in_flight = assembler.optional(summary, 'in_flight', norm.to_integer)
        ship.stationed = assembler.optional(summary, 'stationed', norm.to_integer)
        ship.total = assembler.optional(summary, 'total', norm.to_integer)
        return ship
