"""
Shared sample screens.

Each sample is the text a browser produces when the whole page is selected
and copied, including navigation above and below the data.
"""

import pytest


SHIP_INFO_TEXT = """Startseite  Planeten  Schiffe  Forschung
Schiffinfo Schiffinfo
Schiffinfo: Kamel Z-98 (Hyperraumtransporter)
Kamel Z-98 (Hyperraumtransporter)
Kosten Eisen: 4.000 Stahl: 2.500 VV4A: 500 chem. Elemente: 300 Energie: 200
Dauer 12:30:00
Voraussetzungen Forschungen (Hyperraumtransporter (Korvette)) (Raumfahrt)
aufrüstbar zu Kamel Z-99
benötigt Werften kleine orbitale Werft mittlere orbitale Werft
mögliche Aktionen Transport
Stationierbar
Daten
Geschwindigkeit Sol 1200
Geschwindigkeit Gal 2500
Schiff kann die Galaxie verlassen
Verbrauch chem. Elemente 10
Verbrauch Energie 20
Zivile Daten
Ladekapazität Klasse 1 5000
Kampfdaten
Angriff 0
Waffenklasse keine
Verteidigung 50
Panzerung (kinetisch) 5
Panzerung (elektrisch) 6
Panzerung (gravimetrisch) 7
Schilde 10
Wendigkeit 40
Zielgenauigkeit 30
Effektivität gegen
Jäger 100%
Bomber 90%
Besonderheiten
nichts
Impressum
"""

ESCORT_SECTION = """Geleitschutz
Benötigte Jägeranzahl für Bonus 20
Geleitschutzbonus Angriff 1,50
Geleitschutzbonus Verteidigung 2,25
Bombenschaden 300
"""

SHIP_OVERVIEW_TEXT = (
    "Startseite\n"
    "Militär - Schiffsübersicht\n"
    "Schiffsübersicht\n"
    "HILFE\n"
    "\t1:2:3\n(Kolonie)\t1:2:7\n(Kampfbasis)\tIm Flug\tStat\tGesamt\n"
    "Kamel Z-98\t5\t3\t1\t2\t11\n"
    "Gorgol 9\t\t1\t0\t0\t1\n"
)

# A long list repeats the header block; its coordinates are not re-read
SECOND_OVERVIEW_BLOCK = (
    "\t9:9:9\n(Kolonie)\t9:9:8\n(SB)\tIm Flug\tStat\tGesamt\n"
    "Sirius X300\t2\t4\t0\t0\t6\n"
)

BUILDING_QUEUE_TEXT = (
    "Startseite\n"
    "Gebäudebau\n"
    "Erde (1:2:3) Forschungslabor bis 25.12.2010 10:00\n"
    "Erde (1:2:3) Kraftwerk bis 24.12.2010 15:30 - 1 Tag 02:15:00\n"
    "Mars (1:2:7) nüscht\n"
)


@pytest.fixture
def ship_info_text():
    return SHIP_INFO_TEXT


@pytest.fixture
def escort_ship_info_text():
    return SHIP_INFO_TEXT.replace("Besonderheiten\n", ESCORT_SECTION + "Besonderheiten\n")


@pytest.fixture
def ship_overview_text():
    return SHIP_OVERVIEW_TEXT


@pytest.fixture
def long_ship_overview_text():
    return SHIP_OVERVIEW_TEXT + SECOND_OVERVIEW_BLOCK


@pytest.fixture
def building_queue_text():
    return BUILDING_QUEUE_TEXT
