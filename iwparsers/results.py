"""
Result records

Typed records produced by the screen parsers, and the ``ParseOutcome``
wrapper returned by every parse.

``to_dict()`` output is JSON-safe and deterministic: optional values that
were not present on the screen are omitted rather than written as null,
so an absent value is never confused with zero.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


def _compact(data: Dict[str, Any]) -> Dict[str, Any]:
    """Drop keys whose value is None."""
    return {k: v for k, v in data.items() if v is not None}


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if hasattr(value, 'to_dict'):
        return value.to_dict()
    if isinstance(value, dict):
        return {str(k): _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


@dataclass(frozen=True)
class Coordinates:
    """Planet position "gal:sol:pla"."""
    gal: int
    sol: int
    pla: int

    @property
    def key(self) -> str:
        return f"{self.gal}:{self.sol}:{self.pla}"

    @classmethod
    def from_key(cls, key: str) -> 'Coordinates':
        gal, sol, pla = (int(part) for part in key.split(':'))
        return cls(gal, sol, pla)

    def to_dict(self) -> Dict[str, int]:
        return {'coords_gal': self.gal, 'coords_sol': self.sol, 'coords_pla': self.pla}

    def __str__(self) -> str:
        return self.key


# ============================================================================
# Ship information
# ============================================================================

@dataclass
class CostEntry:
    resource: Enum
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {'resource': _plain(self.resource), 'count': self.count}


@dataclass
class EffectivenessEntry:
    area_name: str
    effectiveness: int

    def to_dict(self) -> Dict[str, Any]:
        return {'area_name': self.area_name, 'effectiveness': self.effectiveness}


@dataclass
class ShipInfoResult:
    """Everything the ship information page tells about one ship model."""
    name: str = ''
    production_time: int = 0
    costs: List[CostEntry] = field(default_factory=list)
    researches: List[str] = field(default_factory=list)
    area_names: List[str] = field(default_factory=list)
    upgrade_to: Optional[str] = None
    yards: List[str] = field(default_factory=list)
    yard_type: Optional[str] = None
    actions: List[str] = field(default_factory=list)

    # Daten
    speed_sol: int = 0
    speed_gal: int = 0
    can_leave_galaxy: bool = False
    consumption_chem: int = 0
    consumption_energy: int = 0

    # Zivile Daten
    can_be_transported: bool = False
    parking_lot: Optional[int] = None
    is_transporter: bool = False
    capacity1: Optional[int] = None
    capacity2: Optional[int] = None
    capacity_population: Optional[int] = None
    is_carrier: bool = False
    ship_capacity1: Optional[int] = None
    ship_capacity2: Optional[int] = None
    ship_capacity3: Optional[int] = None
    carried_ships: Dict[int, List[str]] = field(default_factory=dict)

    # Kampfdaten
    attack: int = 0
    weapon_class: Optional[Enum] = None
    defence: int = 0
    armour_kinetic: int = 0
    armour_electric: int = 0
    armour_gravimetric: int = 0
    shields: int = 0
    mobility: int = 0
    accuracy: int = 0
    effectiveness: List[EffectivenessEntry] = field(default_factory=list)

    # Geleitschutz / Bomben
    escort_fighters: Optional[int] = None
    bonus_attack: Optional[float] = None
    bonus_defence: Optional[float] = None
    bomb_damage: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact({
            name: _plain(getattr(self, name))
            for name in self.__dataclass_fields__
        })


# ============================================================================
# Military ship overview
# ============================================================================

@dataclass
class ColonyResult:
    coords: Coordinates
    object_type: Enum

    def to_dict(self) -> Dict[str, Any]:
        return {
            'coords': self.coords.key,
            'position': self.coords.to_dict(),
            'object_type': _plain(self.object_type),
        }


@dataclass
class ShipCountResult:
    """One row of the overview: where the ships of one model are."""
    name: str
    counts: Dict[str, int] = field(default_factory=dict)
    in_flight: Optional[int] = None
    stationed: Optional[int] = None
    total: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact({
            'name': self.name,
            'counts': dict(self.counts),
            'in_flight': self.in_flight,
            'stationed': self.stationed,
            'total': self.total,
        })


@dataclass
class ShipOverviewResult:
    colonies: Dict[str, ColonyResult] = field(default_factory=dict)
    ships: List[ShipCountResult] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'colonies': _plain(self.colonies),
            'ships': _plain(self.ships),
        }


# ============================================================================
# Building queue on the main page
# ============================================================================

@dataclass
class ConstructionEntry:
    finish_time: int
    building_name: str
    remaining_seconds: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return _compact({
            'finish_time': self.finish_time,
            'building_name': self.building_name,
            'remaining_seconds': self.remaining_seconds,
        })


@dataclass
class BuildingSiteResult:
    planet_name: str
    coords: Coordinates
    buildings: List[ConstructionEntry] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'planet_name': self.planet_name,
            'coords': self.coords.key,
            'position': self.coords.to_dict(),
            'buildings': _plain(self.buildings),
        }


@dataclass
class BuildingQueueResult:
    sites: Dict[str, BuildingSiteResult] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {'sites': _plain(self.sites)}


# ============================================================================
# Outcome
# ============================================================================

@dataclass(frozen=True)
class ParseOutcome:
    """
    Result of one parse call.

    errors: fatal diagnostics; on failure the reason comes first, followed
        by the text that failed to match
    warnings: non-fatal diagnostics such as dropped occurrences
    """
    identifier: Optional[str]
    success: bool
    record: Any = None
    errors: Tuple[str, ...] = ()
    warnings: Tuple[str, ...] = ()

    @classmethod
    def failed(
        cls,
        identifier: Optional[str],
        *errors: str,
        warnings: Tuple[str, ...] = (),
    ) -> 'ParseOutcome':
        return cls(identifier, False, None, tuple(errors), tuple(warnings))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'identifier': self.identifier,
            'success': self.success,
            'record': _plain(self.record) if self.record is not None else None,
            'errors': list(self.errors),
            'warnings': list(self.warnings),
        }
