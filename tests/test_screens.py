"""
Tests for the screen parsers.

Run with: pytest tests/ -v
"""

import json
import time

from iwparsers.doctypes import create_descriptor
from iwparsers.enums import ObjectType, Resource, WeaponClass
from iwparsers.screens import (
    BuildingQueueParser,
    ScreenParser,
    ShipInfoParser,
    ShipOverviewParser,
)

CHRISTMAS_EVE = 1293201000           # 24.12.2010 15:30 Berlin
CHRISTMAS_MORNING = 1293267600       # 25.12.2010 10:00 Berlin


class TestShipInfoParser:
    """Tests for the ship information page."""

    def setup_method(self):
        self.parser = ShipInfoParser()

    def test_header(self, ship_info_text):
        outcome = self.parser.parse(ship_info_text)
        assert outcome.success, outcome.errors
        ship = outcome.record
        assert ship.name == 'Kamel Z-98 (Hyperraumtransporter)'
        assert ship.production_time == 45000
        assert ship.researches == ['Hyperraumtransporter (Korvette)', 'Raumfahrt']
        assert ship.area_names == ['Korvetten']
        assert ship.upgrade_to == 'Kamel Z-99'
        assert ship.yards == ['kleine orbitale Werft', 'mittlere orbitale Werft']
        assert ship.yard_type == 'mittlere'
        assert ship.actions == ['Transport', 'Stationierbar']

    def test_costs(self, ship_info_text):
        ship = self.parser.parse(ship_info_text).record
        assert [(c.resource, c.count) for c in ship.costs] == [
            (Resource.EISEN, 4000),
            (Resource.STAHL, 2500),
            (Resource.VV4A, 500),
            (Resource.CHEM_ELEMENTE, 300),
            (Resource.ENERGIE, 200),
        ]

    def test_data_sections(self, ship_info_text):
        ship = self.parser.parse(ship_info_text).record
        assert ship.speed_sol == 1200
        assert ship.speed_gal == 2500
        assert ship.can_leave_galaxy
        assert ship.consumption_chem == 10
        assert ship.consumption_energy == 20
        assert ship.is_transporter
        assert ship.capacity1 == 5000
        assert ship.capacity2 is None
        assert not ship.is_carrier
        assert not ship.can_be_transported

    def test_combat_data(self, ship_info_text):
        ship = self.parser.parse(ship_info_text).record
        assert ship.attack == 0
        assert ship.weapon_class is WeaponClass.KEINE
        assert ship.defence == 50
        assert (ship.armour_kinetic, ship.armour_electric, ship.armour_gravimetric) == (5, 6, 7)
        assert ship.shields == 10
        assert ship.mobility == 40
        assert ship.accuracy == 30
        assert [(e.area_name, e.effectiveness) for e in ship.effectiveness] == [
            ('Jäger', 100),
            ('Bomber', 90),
        ]

    def test_absent_values_not_serialized(self, ship_info_text):
        data = self.parser.parse(ship_info_text).record.to_dict()
        assert data['capacity1'] == 5000
        assert 'capacity2' not in data
        assert 'parking_lot' not in data
        assert 'escort_fighters' not in data
        assert data['weapon_class'] == 'keine'

    def test_escort_section(self, escort_ship_info_text):
        outcome = self.parser.parse(escort_ship_info_text)
        assert outcome.success, outcome.errors
        ship = outcome.record
        assert ship.escort_fighters == 20
        assert ship.bonus_attack == 1.5
        assert ship.bonus_defence == 2.25
        assert ship.bomb_damage == 300

    def test_structural_failure(self, ship_info_text):
        broken = ship_info_text.replace(
            'Kosten Eisen: 4.000 Stahl: 2.500 VV4A: 500 chem. Elemente: 300 Energie: 200\n', ''
        )
        outcome = self.parser.parse(broken)
        assert not outcome.success
        assert outcome.record is None
        assert outcome.errors[0] == 'Unable to match the de_info_schiff pattern.'
        assert outcome.errors[1].startswith('Schiffinfo:')

    def test_missing_costs_fails_quickly(self):
        # Default budget: no timeout, so the match itself must stay linear
        text = 'Schiffinfo Schiffinfo\n' + 'abcdefghij\n' * 20000
        started = time.perf_counter()
        outcome = self.parser.parse(text)
        assert time.perf_counter() - started < 5
        assert not outcome.success
        assert outcome.errors[0] == 'Unable to match the de_info_schiff pattern.'

    def test_costs_after_long_preamble(self, ship_info_text):
        text = ship_info_text.replace(
            'Kamel Z-98 (Hyperraumtransporter)\nKosten',
            'Kamel Z-98 (Hyperraumtransporter)\n' + 'Beschreibung\n' * 500 + 'Kosten',
        )
        outcome = self.parser.parse(text)
        assert outcome.success, outcome.errors
        assert outcome.record.name == 'Kamel Z-98 (Hyperraumtransporter)'
        assert outcome.record.production_time == 45000


class TestShipOverviewParser:
    """Tests for the military ship overview."""

    def setup_method(self):
        self.parser = ShipOverviewParser()

    def test_colonies(self, ship_overview_text):
        outcome = self.parser.parse(ship_overview_text)
        assert outcome.success, outcome.errors
        colonies = outcome.record.colonies
        assert list(colonies) == ['1:2:3', '1:2:7']
        assert colonies['1:2:3'].object_type is ObjectType.KOLONIE
        assert colonies['1:2:7'].object_type is ObjectType.KAMPFBASIS

    def test_ship_rows(self, ship_overview_text):
        ships = self.parser.parse(ship_overview_text).record.ships
        assert [s.name for s in ships] == ['Kamel Z-98', 'Gorgol 9']

        kamel = ships[0]
        assert kamel.counts == {'1:2:3': 5, '1:2:7': 3}
        assert (kamel.in_flight, kamel.stationed, kamel.total) == (1, 2, 11)

    def test_empty_cell_is_absent(self, ship_overview_text):
        gorgol = self.parser.parse(ship_overview_text).record.ships[1]
        assert gorgol.counts == {'1:2:7': 1}
        assert (gorgol.in_flight, gorgol.stationed, gorgol.total) == (0, 0, 1)

    def test_repeated_header_block(self, long_ship_overview_text):
        result = self.parser.parse(long_ship_overview_text).record
        assert list(result.colonies) == ['1:2:3', '1:2:7']
        sirius = result.ships[-1]
        assert sirius.name == 'Sirius X300'
        assert sirius.counts == {'1:2:3': 2, '1:2:7': 4}
        assert sirius.total == 6

    def test_surplus_cells_warn(self, ship_overview_text):
        text = ship_overview_text + 'Sirius X300\t1\t2\t3\t0\t0\t6\n'
        outcome = self.parser.parse(text)
        assert outcome.success
        assert len(outcome.warnings) == 1
        assert 'without a colony column' in outcome.warnings[0]
        assert outcome.record.ships[-1].counts == {'1:2:3': 1, '1:2:7': 2}

    def test_serialization(self, ship_overview_text):
        data = self.parser.parse(ship_overview_text).record.to_dict()
        assert data['colonies']['1:2:7']['object_type'] == 'Kampfbasis'
        assert data['ships'][1] == {
            'name': 'Gorgol 9',
            'counts': {'1:2:7': 1},
            'in_flight': 0,
            'stationed': 0,
            'total': 1,
        }

    def test_missing_table(self):
        outcome = self.parser.parse('Militär - Schiffsübersicht\nSchiffsübersicht\nHILFE\nleer\n')
        assert not outcome.success
        assert outcome.errors[0] == 'Unable to match the pattern.'


class TestBuildingQueueParser:
    """Tests for the building construction block."""

    def setup_method(self):
        self.parser = BuildingQueueParser()

    def test_sites(self, building_queue_text):
        outcome = self.parser.parse(building_queue_text)
        assert outcome.success, outcome.errors
        sites = outcome.record.sites
        assert list(sites) == ['1:2:3', '1:2:7']
        assert sites['1:2:3'].planet_name == 'Erde'
        assert sites['1:2:7'].planet_name == 'Mars'
        assert sites['1:2:7'].buildings == []

    def test_time_order(self, building_queue_text):
        buildings = self.parser.parse(building_queue_text).record.sites['1:2:3'].buildings
        assert [b.building_name for b in buildings] == ['Kraftwerk', 'Forschungslabor']
        assert [b.finish_time for b in buildings] == [CHRISTMAS_EVE, CHRISTMAS_MORNING]

    def test_remaining_time(self, building_queue_text):
        buildings = self.parser.parse(building_queue_text).record.sites['1:2:3'].buildings
        assert buildings[0].remaining_seconds == 86400 + 2 * 3600 + 15 * 60
        assert buildings[1].remaining_seconds is None

    def test_degenerate_first_occurrence(self):
        text = (
            'Gebäudebau\n'
            '(1:2:3) Kraftwerk bis 24.12.2010 15:30\n'
            'Erde (1:2:3) Forschungslabor bis 25.12.2010 10:00\n'
        )
        outcome = self.parser.parse(text)
        assert outcome.success
        assert outcome.warnings == ("Dropped occurrence for key '1:2:3': missing planet name",)
        site = outcome.record.sites['1:2:3']
        assert site.planet_name == 'Erde'
        assert [b.building_name for b in site.buildings] == ['Forschungslabor']

    def test_nothing_queued(self):
        outcome = self.parser.parse('Gebäudebau\nleer\n')
        assert not outcome.success
        assert outcome.errors[0] == 'Unable to match the pattern.'


class ConversionFailureParser(ScreenParser):
    """Parser whose required field can never be converted."""

    descriptor = create_descriptor('test_conversion', 'Conversion', r'Broken')

    def parse_text(self, text, assembler):
        assembler.warn('first line looked odd')
        return assembler.required({'attack': 'viel'}, 'attack', self.normalizer.to_integer)


class TestScreenParserBase:
    """Tests for the error boundary of parse()."""

    def test_conversion_failure_becomes_outcome(self):
        parser = ConversionFailureParser()
        outcome = parser.parse('Broken text')
        assert not outcome.success
        assert outcome.identifier == 'test_conversion'
        assert outcome.errors == (
            "Cannot convert 'viel' to integer for field 'attack'",
            'Broken text',
        )
        assert outcome.warnings == ('first line looked odd',)

    def test_can_parse(self, building_queue_text):
        assert BuildingQueueParser().can_parse(building_queue_text)
        assert not ShipInfoParser().can_parse(building_queue_text)


class TestRepeatedParsing:
    """Parsing the same text twice yields identical outcomes."""

    def _assert_stable(self, parser_class, text):
        first = parser_class().parse(text)
        second = parser_class().parse(text)
        assert first.success, first.errors
        assert first.record is not second.record
        assert json.dumps(first.to_dict()) == json.dumps(second.to_dict())

    def test_ship_info(self, escort_ship_info_text):
        self._assert_stable(ShipInfoParser, escort_ship_info_text)

    def test_ship_overview(self, long_ship_overview_text):
        self._assert_stable(ShipOverviewParser, long_ship_overview_text)

    def test_building_queue(self, building_queue_text):
        self._assert_stable(BuildingQueueParser, building_queue_text)

    def test_same_parser_instance(self, building_queue_text):
        parser = BuildingQueueParser()
        assert json.dumps(parser.parse(building_queue_text).to_dict()) == json.dumps(
            parser.parse(building_queue_text).to_dict()
        )
