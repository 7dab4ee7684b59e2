"""
Closed vocabularies

Enumerations for the categorical values that appear on game screens, plus
synonym tables for labels the game spells in more than one way.
"""

from enum import Enum
from typing import Dict, Optional, Type, TypeVar

E = TypeVar('E', bound=Enum)


class ObjectType(str, Enum):
    """Kind of object sitting on a planet."""

    NO_OBJECT = 'noObject'
    KOLONIE = 'Kolonie'
    RAUMSTATION = 'Raumstation'
    ARTEFAKTBASIS = 'Artefaktbasis'
    KAMPFBASIS = 'Kampfbasis'
    SAMMELBASIS = 'Sammelbasis'


class Resource(str, Enum):
    EISEN = 'Eisen'
    STAHL = 'Stahl'
    VV4A = 'VV4A'
    CHEM_ELEMENTE = 'chem. Elemente'
    EIS = 'Eis'
    WASSER = 'Wasser'
    ENERGIE = 'Energie'
    BEVOELKERUNG = 'Bevölkerung'
    CREDITS = 'Credits'
    FP = 'FP'


class WeaponClass(str, Enum):
    KEINE = 'keine'
    ELEKTRISCH = 'elektrisch'
    GRAVIMETRISCH = 'gravimetrisch'
    KINETISCH = 'kinetisch'
    UNBEKANNT = 'unbekannt'


class UserRank(str, Enum):
    """Alliance roles."""

    HASENPRIESTER = 'Hasenpriester'
    HC = 'HC'
    INTERNER_HC = 'interner HC'
    MITGLIEDERVERWALTER = 'Mitgliederverwalter'
    MITGLIEDER = 'Mitglieder'


# Alternate spellings that must collapse onto one member
SYNONYMS: Dict[Type[Enum], Dict[str, Enum]] = {
    ObjectType: {
        '---': ObjectType.NO_OBJECT,
        'KB': ObjectType.KAMPFBASIS,
        'SB': ObjectType.SAMMELBASIS,
        'RB': ObjectType.SAMMELBASIS,
        'AB': ObjectType.ARTEFAKTBASIS,
        'Artefaktsammelbasis': ObjectType.ARTEFAKTBASIS,
        'colony': ObjectType.KOLONIE,
        'spaceStation': ObjectType.RAUMSTATION,
        'artifactStation': ObjectType.ARTEFAKTBASIS,
        'battleStation': ObjectType.KAMPFBASIS,
        'miningStation': ObjectType.SAMMELBASIS,
    },
    Resource: {
        'Forschungspunkte': Resource.FP,
        'chemische Elemente': Resource.CHEM_ELEMENTE,
    },
    UserRank: {
        'Memberverwalter': UserRank.MITGLIEDERVERWALTER,
        'Member': UserRank.MITGLIEDER,
    },
}

# Ship class names as they appear in research names, mapped to area names
AREA_NAME_SYNONYMS: Dict[str, str] = {
    'Korvette': 'Korvetten',
    'Schlachtschiff': 'Schlachtschiffe',
    'Dreadnought': 'Dreadnoughts',
}


def lookup(enum_cls: Type[E], label: str) -> Optional[E]:
    """
    Resolve a label to an enum member.

    Tries the member values first, then the synonym table. Returns None
    for unknown labels.
    """
    try:
        return enum_cls(label)
    except ValueError:
        pass
    return SYNONYMS.get(enum_cls, {}).get(label)


def canonical_area_name(name: str) -> str:
    """Map a singular ship class to its area name; other names pass through."""
    return AREA_NAME_SYNONYMS.get(name, name)
