"""
Vocabulary fragments

Alternations over the fixed word lists of the game: object and planet types,
fleet actions, research areas, defences, resources and the like.

Where one entry is a prefix of another ("Wirtschaft" and
"Wirtschaft & Verwaltung"), the longer entry is listed first so the
alternation prefers it.
"""

from typing import Iterable


def _alternation(words: Iterable[str]) -> str:
    return '(?:' + '|'.join(words) + ')'


KOLO_TYPES = (
    'Kolonie', 'KB', 'RB', 'AB', 'SB', 'Kampfbasis', 'Sammelbasis',
    'Artefaktsammelbasis', 'Artefaktbasis',
)

OBJECT_TYPES = (
    'Kolonie', '---', 'Kampfbasis', 'KB', 'Sammelbasis', 'Artefaktsammelbasis',
    'Artefaktbasis', 'RB', 'AB', 'SB', 'Raumstation',
)

PLANET_TYPES = (
    'Steinklumpen', 'S', 'Nichts', 'N', 'Eisplanet', 'E', 'Gasgigant', 'G',
    'Asteroid', 'A', 'Elektrosturm', 'Ionensturm', 'Raumverzerrung',
    r'grav\.\sAnomalie',
)

SHIP_ACTIONS = (
    r'Übergabe\s\(tr\sSchiffe\)',
    r'Übergabe',
    r'Transport',
    r'Stationieren\s&\sVerteidigen',
    r'Stationieren',
    r'Ressourcenhandel',
    r'Ressourcen\sabholen',
    r'Angriff',
    r'Sondierung\s\(Geologie\)\s\(Scout\)',
    r'Sondierung\s\(Geologie\)',
    r'Sondierung\s\(Gebäude\)\s\(Scout\)',
    r'Sondierung\s\(Gebäude/Ress\)',
    r'Sondierung\s\(Schiff\)\s\(Scout\)',
    r'Sondierung\s\(Schiffe/Def/Ress\)',
    r'Kolonisation',
    r'Saveflug',
    r'Basisaufbau\s\(Kampf\)',
    r'Basisaufbau\s\(Ressourcen\)',
    r'Basisaufbau\s\(Artefakte\)',
    r'Massdriverpaket',
    r'Rückkehr',
)

# Random flavour lines shown for fleets that have arrived
SHIP_TEXTS = (
    r'Lädt\sRess\sein\sund\saus',
    r'Surft\sim\sBordnetz',
    r'Schaut\sder\sfeschen\sPilotin\shinterher',
    r'Hört\sMusik',
    r'Erforscht\sgrade\sseine\sNase',
    r'Faselt\swas\svon\sWurzelzwergen',
    r'Im\sLandeanflug',
    r'Sabbert\sdie\sInstrumente\svoll',
    r'Versucht\sdie\srichtigen\sKnöpfe\sfür\sdie\sLandung\szu\sfinden',
    r'Faselt\swirres\sZeug\sins\sInterkom',
    r'Pfeift\sder\sfeschen\sPilotin\shinterher\sund\smacht\skomische\sAndeutungen',
    r'Wartet\sauf\sWeihnachten',
    r'Erklaert\sdie\sInfinitesimalrechnung',
    r'Quatscht\smit\sder\sBodenkontrolle',
    r'Wurzelzwergen,\süberall\sWurzelzwergen',
    r'Liegt\sbesoffen\sin\sder\sEcke',
)

AREAS = (
    r'Beobachtung', r'Bevölkerung', r'blubbernde\sGallertmasse', r'Brause',
    r'Bomber', r'Chemie', r'Dreadnoughts', r'Ethik', r'Evolution',
    r'Forschung', r'Freizeit', r'Förderungsanlagen',
    r'Imperiale\sHilfsgüter', r'Industrie', r'Informatik', r'Jäger',
    r'Kolonisation', r'Korvetten', r'Kreuzer', r'Lager\s&\sBunker',
    r'Militär', r'orbitale\sVerteidigung', r'orbitale\sDef',
    r'planetare\sVerteidigung', r'planetare\sDef', r'Physik', r'Prototypen',
    r'Raumfahrt', r'Schlachtschiffe', r'Sondenverteidigung', r'Sonden',
    r'Spezielle\sAktionen', r'Spezielle\sSchiffe', r'Unbekannt', r'Unifragen',
    r'Verteidigung', r'Wirtschaft\s&\sVerwaltung', r'Wirtschaft', r'Zerstörer',
    r'Zivile\sSchiffe',
)

DEFENCE = (
    r'SDI\sRaketensystem', r'SDI\sAtomraketen', r'SDI\sPlasmalaser',
    r'SDI\sGravitonbeam', r'Stopfentenwerfer', r'Raketensatellit',
    r'Gausskanonensatellit', r'PulslaserSat', r'LaserSat', r'SD01\sGatling',
    r'SD02\sPulslaser', r'SDI\sStellarkonverter', r'Fusiontorpedowerfer\s\(Sat\)',
    r'MassdriverSat',
)

RESOURCES = (
    r'Eisen', r'Eis', r'Wasser', r'Stahl', r'Energie', r'VV4A', r'FP',
    r'Forschungspunkte', r'chem\.\sElemente', r'Bevölkerung', r'Credits',
)

SHIP_CAPABILITIES = (
    r'.{1,3}bergebbar\san\seigene\sPlaneten',
    r'.{1,3}bergebbar',
    r'Stationierbar',
    r'Transport',
    r'Angreifen\s/\sVerteidigen',
    r'Pl.{1,3}ndern',
    r'Sondieren',
    r'Kolonisieren',
    r'Kampfbasis\saufbauen',
    r'Ressbasis\saufbauen',
    r'Artefaktbasis\saufbauen',
    r'Bombardieren',
    r'Tarnbar',
    r'Terraformer',
)

YARD_TYPES = (r'kleine', r'mittlere', r'gro.{1,3}e', r'Dreadnought')


def kolo_types() -> str:
    return _alternation(KOLO_TYPES)


def object_types() -> str:
    return _alternation(OBJECT_TYPES)


def planet_types() -> str:
    return _alternation(PLANET_TYPES)


def kolo_coords() -> str:
    """Planet coordinates "gal:sol:pla"."""
    return r'(?:\d{1,2}:\d{1,3}:\d{1,2})'


def ship_actions() -> str:
    """Fleet orders as listed in the fleet overview."""
    return _alternation(SHIP_ACTIONS)


def ship_texts() -> str:
    return _alternation(SHIP_TEXTS)


def areas() -> str:
    """Research areas, also used as ship classes in effectiveness tables."""
    return _alternation(AREAS)


def defence() -> str:
    return _alternation(DEFENCE)


def resource() -> str:
    """Resource name followed by ':', ',', whitespace or the end."""
    return r'(?:(?<!\S)' + _alternation(RESOURCES) + r'(?=[:,\s]|$))'


def ship_name() -> str:
    """Ship model name such as "Kamel Z-98" or "Sirius X300 (Bomber)"."""
    return r'(?:(?<!\S)\w+[- \t(\w]+[ \t\w]+[)\w]*(?!\S))'


def building_name() -> str:
    return ship_name()


def yard_type() -> str:
    return _alternation(YARD_TYPES)


def yard_name() -> str:
    """Shipyard, e.g. "kleine orbitale Werft" or "Dreadnought Werft"."""
    return r'(?:' + yard_type() + r'\s(?:(?:orbitale|planetare)\s)?Werft)'


def planetary_problems(duration: str) -> str:
    """Warnings shown for a planet; ``duration`` is the mixed-duration fragment."""
    return _alternation((
        r'Bev.{1,3}lkerungsmangel',
        r'Scannerabschaltung\swegen\sChemiemangel',
        r'Werften\ssind\sruntergefallen\s\*n.{1,3}l\*',
        r'Werften\ssind\swieder\soben\sin\s' + duration,
        r'Forschungsausfall\sdurch\sEnergiemangel',
        r'Energiemangel',
        r'Wassermangel',
    ))


def ship_capabilities() -> str:
    """Capabilities listed under "mögliche Aktionen" on the ship info page."""
    return _alternation(SHIP_CAPABILITIES)
