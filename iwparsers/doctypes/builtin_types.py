"""
Built-in screen types

The screen parsers shipped with the package, in priority order.
"""

from typing import Optional

from ..config import LocaleConfig, MatchBudget
from ..screens import BuildingQueueParser, ShipInfoParser, ShipOverviewParser
from .registry import ParserRegistry

# Priority order for detection
BUILTIN_PARSERS = (
    ShipInfoParser,
    ShipOverviewParser,
    BuildingQueueParser,
)


def register_builtin_parsers(
    registry: ParserRegistry,
    locale: Optional[LocaleConfig] = None,
    budget: Optional[MatchBudget] = None,
) -> ParserRegistry:
    """Register all built-in parsers, replacing existing ones with the same id."""
    for parser_cls in BUILTIN_PARSERS:
        registry.register(parser_cls(locale=locale, budget=budget), overwrite=True)
    return registry


def create_registry(
    locale: Optional[LocaleConfig] = None,
    budget: Optional[MatchBudget] = None,
) -> ParserRegistry:
    """New registry with the built-in parsers bound to ``locale`` and ``budget``."""
    return register_builtin_parsers(ParserRegistry(), locale, budget)
