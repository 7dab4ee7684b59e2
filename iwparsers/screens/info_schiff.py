"""
Ship information screen ("Schiffsinformation")

Parses the detail page of one ship model: costs, build time, required
research, shipyards, civil data (speed, consumption, cargo), combat data and
the effectiveness table against other ship classes.

Identifier: de_info_schiff
"""

from __future__ import annotations

import re
from functools import cached_property
from typing import List, Optional

from ..doctypes.document_type import create_descriptor
from ..enums import Resource, WeaponClass, canonical_area_name
from ..exceptions import StructuralNoMatch
from ..parser.assembler import CaptureSet, ResultAssembler
from ..results import CostEntry, EffectivenessEntry, ShipInfoResult
from .base import ScreenParser

_WEAPON_CLASSES = r'(?:keine|elektrisch|gravimetrisch|kinetisch|unbekannt)'


class ShipInfoParser(ScreenParser):
    """Parser for the ship information page."""

    descriptor = create_descriptor(
        identifier='de_info_schiff',
        name='Schiffsinformation',
        can_parse=r'Schiffinfo\s+Schiffinfo|Schiffinfo.+Daten.+Kampfdaten.+Besonderheiten',
        begin_data=r'Schiffinfo:',
        end_data=r'Besonderheiten',
        flags=re.DOTALL,
    )
    no_match_message = 'Unable to match the de_info_schiff pattern.'

    # ------------------------------------------------------------------
    # Patterns
    # ------------------------------------------------------------------

    @cached_property
    def head_pattern(self) -> re.Pattern:
        # Everything before the first line starting with "Kosten"
        return re.compile(r'\A(?P<head>[\s\S]*?)^(?=Kosten\s)', re.MULTILINE)

    @cached_property
    def name_pattern(self) -> re.Pattern:
        return re.compile(
            r'^(?:Schiffinfo:[ \t]*)?(?P<name>' + self.fragments.single_line_text3() + r')\s*?\n',
            re.MULTILINE,
        )

    @cached_property
    def pattern(self) -> re.Pattern:
        f = self.fragments
        name = f.single_line_text3()
        num = f.decimal_number()
        bonus = f.floating_double()

        def line(label: str, group: str, value: str = num) -> str:
            return label + r'\s+?(?P<' + group + '>' + value + r')\s*?\n+'

        def carried(klass: str) -> str:
            return (
                r'(?:Schifftransportkapazit.t\sKlasse\s' + klass + r'\s+?'
                r'(?P<ship_capacity' + klass + '>' + num + r')\s*?\n+'
                r'^kann\sfolgende\sSchiffe\stransportieren\s*?'
                r'(?P<carried' + klass + r'>(?:' + name + r'\n)+))?'
            )

        parts = [
            r'\AKosten\s+?(?P<costs>(?:\s?' + f.resource() + r':\s' + num + r')*|.*?)\n+',
            line(r'Dauer', 'production_time', f.mixed_time()),
            r'Voraussetzungen\sForschungen\s+?(?P<researches>' + f.bracket_string() + r')?\s*\n+',
            r'(?:aufr.{1,3}stbar\szu\s+?(?P<upgrade_to>' + name + r')\n+)?',
            r'ben.{1,3}tigt\sWerften\s+?(?P<yards>(?:' + f.yard_name() + r'\s*)*)\n+',
            r'm.{1,3}gliche\sAktionen\s+?(?P<actions>(?:' + f.ship_capabilities() + r'\s*)+)\n+',

            r'Daten\n+',
            line(r'Geschwindigkeit\sSol', 'speed_sol'),
            line(r'Geschwindigkeit\sGal', 'speed_gal'),
            r'(?:\s*?Schiff\skann\sdie\s(?P<leave_galaxy>Galaxie\sverlassen)\s*?\n+)?',
            line(r'Verbrauch\schem\.\sElemente', 'consumption_chem'),
            line(r'Verbrauch\sEnergie', 'consumption_energy'),

            r'Zivile\sDaten\n+',
            r'(?:^kann\svon\sfolgende\sSchiffen\s(?P<transportable>transportiert\swerden)\s*?'
            r'(?:(?:' + name + r'\n)+|\n+)'
            r'^belegt\sbei\seinem\sTransport\s+?(?P<parking_lot>' + num + r')\sEinheit\(en\)\sPlatz\n+)?',
            r'(?:' + line(r'Ladekapazit.t\sKlasse\s1', 'capacity1') + ')?',
            r'(?:' + line(r'Ladekapazit.t\sKlasse\s2', 'capacity2') + ')?',
            r'(?:' + line(r'Ladekapazit.t\sBev.lkerung', 'capacity_population') + ')?',
            carried('1'),
            carried('2'),
            carried('3'),

            r'Kampfdaten\n+',
            line(r'Angriff', 'attack'),
            line(r'Waffenklasse', 'weapon_class', _WEAPON_CLASSES),
            line(r'Verteidigung', 'defence'),
            line(r'Panzerung\s\(kinetisch\)', 'armour_kinetic'),
            line(r'Panzerung\s\(elektrisch\)', 'armour_electric'),
            line(r'Panzerung\s\(gravimetrisch\)', 'armour_gravimetric'),
            line(r'Schilde', 'shields'),
            line(r'Wendigkeit', 'mobility'),
            line(r'Zielgenauigkeit', 'accuracy'),
            r'Effektivit.{1,3}t\sgegen\s*\n(?P<effectiveness>(?:^' + name + r'\s*\d+%[ \t]*\n)+)',

            r'(?:Geleitschutz\s*\n+',
            line(r'Ben.{1,3}tigte\sJ.{1,3}geranzahl\sf.{1,3}r\sBonus', 'escort_fighters'),
            r'Geleitschutzbonus\sAngriff\s*?(?P<bonus_attack>' + bonus + r')\s*\n+',
            r'Geleitschutzbonus\sVerteidigung\s+?(?P<bonus_defence>' + bonus + r')\s*?(?:\n+|$))?',
            r'(?:Spionagef.{1,3}higkeiten\s*?(?:\n+|$))?',
            r'(?:Bombenschaden\s+?(?P<bomb_damage>' + num + r')\s*?(?:\n+|$))?',
        ]
        return re.compile(''.join(parts), re.MULTILINE)

    @cached_property
    def cost_pattern(self) -> re.Pattern:
        f = self.fragments
        return re.compile(
            r'(?P<resource_name>' + f.resource() + r'):\s(?P<resource_count>' + f.decimal_number() + ')'
        )

    @cached_property
    def effectiveness_pattern(self) -> re.Pattern:
        return re.compile(
            r'(?P<area_name>' + self.fragments.areas() + r')\s+(?P<effective_count>\d+)%'
        )

    @cached_property
    def yard_pattern(self) -> re.Pattern:
        return re.compile(
            r'(?P<yard>(?P<yard_type>' + self.fragments.yard_type() + r')\s(?:(?:orbitale|planetare)\s)?Werft)'
        )

    @cached_property
    def area_pattern(self) -> re.Pattern:
        return re.compile(r'(?P<area>' + self.fragments.bracket_string() + ')')

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse_text(self, text: str, assembler: ResultAssembler) -> ShipInfoResult:
        norm = self.normalizer
        c = self._match_sections(text)

        result = ShipInfoResult()
        result.name = assembler.required(c, 'name', norm.to_string)
        result.production_time = assembler.required(c, 'production_time', norm.to_duration_seconds)

        result.researches = assembler.optional(c, 'researches', norm.bracket_string_to_list) or []
        if result.researches:
            result.area_names = self._area_names(result.researches[0], assembler)

        result.upgrade_to = assembler.optional(c, 'upgrade_to', norm.to_string)

        for yard in self.guard.find_all(self.yard_pattern, c.get('yards') or ''):
            result.yards.append(norm.to_string(yard['yard']))
            result.yard_type = norm.to_string(yard['yard_type'])

        if c.get('actions'):
            result.actions = [
                norm.to_string(action)
                for action in re.split(r'\n+', c['actions'])
                if action.strip()
            ]

        # Daten
        result.speed_sol = assembler.required(c, 'speed_sol', norm.to_integer)
        result.speed_gal = assembler.required(c, 'speed_gal', norm.to_integer)
        result.can_leave_galaxy = bool(c.get('leave_galaxy'))
        result.consumption_chem = assembler.required(c, 'consumption_chem', norm.to_integer)
        result.consumption_energy = assembler.required(c, 'consumption_energy', norm.to_integer)

        # Zivile Daten
        result.can_be_transported = bool(c.get('transportable'))
        result.parking_lot = assembler.optional(c, 'parking_lot', norm.to_integer)

        result.capacity1 = assembler.optional(c, 'capacity1', norm.to_integer)
        result.capacity2 = assembler.optional(c, 'capacity2', norm.to_integer)
        result.capacity_population = assembler.optional(c, 'capacity_population', norm.to_integer)
        result.is_transporter = any(
            value is not None
            for value in (result.capacity1, result.capacity2, result.capacity_population)
        )

        for klass in (1, 2, 3):
            capacity = assembler.optional(c, f'ship_capacity{klass}', norm.to_integer)
            setattr(result, f'ship_capacity{klass}', capacity)
            if capacity is not None:
                result.is_carrier = True
                result.carried_ships[klass] = self._lines(c.get(f'carried{klass}'))

        # Kampfdaten
        result.attack = assembler.required(c, 'attack', norm.to_integer)
        result.weapon_class = assembler.required(
            c, 'weapon_class', lambda raw: norm.to_enum(raw, WeaponClass)
        )
        result.defence = assembler.required(c, 'defence', norm.to_integer)
        result.armour_kinetic = assembler.required(c, 'armour_kinetic', norm.to_integer)
        result.armour_electric = assembler.required(c, 'armour_electric', norm.to_integer)
        result.armour_gravimetric = assembler.required(c, 'armour_gravimetric', norm.to_integer)
        result.shields = assembler.required(c, 'shields', norm.to_integer)
        result.mobility = assembler.required(c, 'mobility', norm.to_integer)
        result.accuracy = assembler.required(c, 'accuracy', norm.to_integer)

        result.escort_fighters = assembler.optional(c, 'escort_fighters', norm.to_integer)
        result.bonus_attack = assembler.optional(c, 'bonus_attack', norm.to_float)
        result.bonus_defence = assembler.optional(c, 'bonus_defence', norm.to_float)
        result.bomb_damage = assembler.optional(c, 'bomb_damage', norm.to_integer)

        result.costs = self._costs(c.get('costs') or '', assembler)
        result.effectiveness = self._effectiveness(c.get('effectiveness') or '', assembler)

        return result

    def _match_sections(self, text: str) -> CaptureSet:
        """
        Match the page in three anchored steps.

        The ship name is the first suitable line before the costs; the rest
        of the page is matched from the costs line on.
        """
        head = self.guard.search(self.head_pattern, text)
        if head is None:
            raise StructuralNoMatch(self.no_match_message, text)

        name = self.guard.search(self.name_pattern, head['head'])
        body = self.guard.search(self.pattern, text[len(head['head']):])
        if name is None or body is None:
            raise StructuralNoMatch(self.no_match_message, text)

        return {**name, **body}

    def _area_names(self, research: str, assembler: ResultAssembler) -> List[str]:
        """Ship class named in parentheses after the first research."""
        names = []
        for match in self.guard.find_all(self.area_pattern, research):
            items = assembler.optional(match, 'area', self.normalizer.bracket_string_to_list)
            if items:
                names.append(canonical_area_name(items[0]))
        return names

    def _costs(self, text: str, assembler: ResultAssembler) -> List[CostEntry]:
        norm = self.normalizer
        costs = []

        def add(captures: CaptureSet) -> None:
            resource = assembler.optional(
                captures, 'resource_name', lambda raw: norm.to_enum(raw, Resource)
            )
            count = assembler.optional(captures, 'resource_count', norm.to_integer)
            if resource is not None and count is not None:
                costs.append(CostEntry(resource, count))

        assembler.fold(self.guard.find_all(self.cost_pattern, text), add)
        return costs

    def _effectiveness(self, text: str, assembler: ResultAssembler) -> List[EffectivenessEntry]:
        norm = self.normalizer
        entries = []

        def add(captures: CaptureSet) -> None:
            count = assembler.optional(captures, 'effective_count', norm.to_integer)
            if count is not None:
                entries.append(EffectivenessEntry(norm.to_string(captures['area_name']), count))

        assembler.fold(self.guard.find_all(self.effectiveness_pattern, text), add)
        return entries

    def _lines(self, raw: Optional[str]) -> List[str]:
        if not raw:
            return []
        return [self.normalizer.to_string(line) for line in raw.split('\n') if line.strip()]
