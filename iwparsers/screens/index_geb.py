"""
Building construction on the main page ("Gebäudebau")

Each line names a planet, its coordinates and either the building under
construction with its completion time, or "nüscht" when nothing is queued:

    Erde (1:2:3) Kraftwerk bis 24.12.2010 15:30 - 02:15:00
    Erde (1:2:3) Forschungslabor bis 25.12.2010 10:00
    Mars (1:2:7) nüscht

Planets are keyed by coordinates; their construction entries are kept in
order of completion.

Identifier: de_index_geb
"""

from __future__ import annotations

import re
from functools import cached_property

from ..doctypes.document_type import create_descriptor
from ..parser.assembler import CaptureSet, ResultAssembler, insert_in_time_order
from ..results import BuildingQueueResult, BuildingSiteResult, ConstructionEntry
from .base import ScreenParser


class BuildingQueueParser(ScreenParser):
    """Parser for the building construction block of the main page."""

    descriptor = create_descriptor(
        identifier='de_index_geb',
        name='Gebäudebau (Startseite)',
        can_parse=r'Geb.{1,3}udebau',
        begin_data=r'Geb.{1,3}udebau',
    )

    @cached_property
    def pattern(self) -> re.Pattern:
        f = self.fragments
        # Planet and building names are the shortest text before the next anchor
        return re.compile(
            r'^(?P<planet_name>[^\n]*?)[ \t]*'
            r'\((?P<coords_gal>\d+):(?P<coords_sol>\d+):(?P<coords_pla>\d+)\)\s+'
            r'(?:(?P<building>[^\n]*?)\s+bis\s(?P<finish>' + f.datetime() + r')'
            r'(?:\s(?:-\s)?(?P<remaining>' + f.mixed_time() + r'))?'
            r'|n.{1,5}scht)',
            re.MULTILINE,
        )

    def parse_text(self, text: str, assembler: ResultAssembler) -> BuildingQueueResult:
        result = BuildingQueueResult()
        assembler.fold(
            self.match_all(self.pattern, text),
            lambda captures: self._add(captures, result, assembler),
        )
        return result

    def _add(self, captures: CaptureSet, result: BuildingQueueResult, assembler: ResultAssembler) -> None:
        norm = self.normalizer
        coords = norm.to_coordinates(
            captures['coords_gal'], captures['coords_sol'], captures['coords_pla']
        )
        planet_name = norm.to_string(captures['planet_name'])

        site = assembler.keyed(
            result.sites,
            coords.key,
            {'planet name': planet_name},
            lambda: BuildingSiteResult(planet_name=planet_name, coords=coords),
        )
        if site is None or not captures.get('building'):
            return

        finish_time = assembler.optional(captures, 'finish', norm.to_timestamp)
        if finish_time is None:
            return

        entry = ConstructionEntry(
            finish_time=finish_time,
            building_name=norm.to_string(captures['building']),
            remaining_seconds=assembler.optional(captures, 'remaining', norm.to_duration_seconds),
        )
        insert_in_time_order(site.buildings, entry, lambda e: e.finish_time)
