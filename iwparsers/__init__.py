"""
Game Screen Parsers

Extracts typed records from text pasted out of the browser game's screens.

Features:
- Composable regex fragments for German-locale numbers, dates and names
- Layout detection and stripping of the pasted page to its data
- Parsers for the ship information page, the military ship overview and
  the building construction block of the main page
- Keyed, deduplicated, time-ordered result records
- Optional time budget for pattern matching

Quick Start:
    from iwparsers import parse_text

    outcome = parse_text(pasted_text)
    if outcome.success:
        print(outcome.record.to_dict())
    else:
        print(outcome.errors)

    # Custom locale
    from iwparsers import LocaleConfig, create_registry

    registry = create_registry(LocaleConfig(thousand_separators=('.',)))
    outcome = registry.parse(pasted_text, 'de_info_schiff')

CLI Usage:
    iwparsers parse screen.txt --json
    iwparsers detect screen.txt
    iwparsers list-types
"""

__version__ = '1.0.0'

from .config import LocaleConfig, MatchBudget, ConfigLoader
from .exceptions import (
    ParserError,
    ConfigError,
    LayoutMismatch,
    StructuralNoMatch,
    NormalizationError,
    DegenerateKeyError,
    MatchBudgetExceeded,
)
from .enums import ObjectType, Resource, WeaponClass, UserRank
from .results import (
    Coordinates,
    ParseOutcome,
    ShipInfoResult,
    ShipOverviewResult,
    BuildingQueueResult,
)
from .fragments import FragmentLibrary
from .parser import LocaleNormalizer, ResultAssembler
from .doctypes import (
    DocumentDescriptor,
    ParserRegistry,
    classify,
    strip,
    create_registry,
    get_registry,
    detect_screen,
    list_screen_types,
    parse_text,
)
from .screens import (
    ScreenParser,
    ShipInfoParser,
    ShipOverviewParser,
    BuildingQueueParser,
)

__all__ = [
    '__version__',
    'LocaleConfig',
    'MatchBudget',
    'ConfigLoader',
    'ParserError',
    'ConfigError',
    'LayoutMismatch',
    'StructuralNoMatch',
    'NormalizationError',
    'DegenerateKeyError',
    'MatchBudgetExceeded',
    'ObjectType',
    'Resource',
    'WeaponClass',
    'UserRank',
    'Coordinates',
    'ParseOutcome',
    'ShipInfoResult',
    'ShipOverviewResult',
    'BuildingQueueResult',
    'FragmentLibrary',
    'LocaleNormalizer',
    'ResultAssembler',
    'DocumentDescriptor',
    'ParserRegistry',
    'classify',
    'strip',
    'create_registry',
    'get_registry',
    'detect_screen',
    'list_screen_types',
    'parse_text',
    'ScreenParser',
    'ShipInfoParser',
    'ShipOverviewParser',
    'BuildingQueueParser',
]
