"""
Screen Parser Registry

Ordered registry of screen parsers with layout detection. Registration
order is priority order: when several layouts' quick-match patterns hit the
same text, the one registered first wins.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional

from loguru import logger

from ..exceptions import LayoutMismatch
from ..results import ParseOutcome
from .document_type import DocumentDescriptor, classify

if TYPE_CHECKING:
    from ..screens.base import ScreenParser


class ParserRegistry:
    """
    Registry for screen parsers.

    Provides:
    - Registration of parsers in priority order
    - Detection of the layout of a pasted text
    - Parsing with the detected (or an explicitly chosen) parser

    Usage:
        registry = ParserRegistry()
        registry.register(ShipInfoParser())

        parser = registry.detect(text)
        outcome = registry.parse(text)
    """

    def __init__(self):
        self._parsers: Dict[str, ScreenParser] = {}

    def register(self, parser: ScreenParser, overwrite: bool = False) -> None:
        """
        Register a parser under its descriptor's identifier.

        Overwriting keeps the original priority position.

        Raises:
            ValueError: If the identifier is taken and overwrite=False
        """
        if parser.identifier in self._parsers and not overwrite:
            raise ValueError(f"Screen parser '{parser.identifier}' already registered")

        self._parsers[parser.identifier] = parser
        logger.debug(f"Registered screen parser: {parser.identifier}")

    def unregister(self, identifier: str) -> bool:
        """Remove a parser. Returns True if it was registered."""
        if identifier in self._parsers:
            del self._parsers[identifier]
            logger.debug(f"Unregistered screen parser: {identifier}")
            return True
        return False

    def get(self, identifier: str) -> Optional[ScreenParser]:
        return self._parsers.get(identifier)

    def get_all(self) -> List[ScreenParser]:
        """All parsers in priority order."""
        return list(self._parsers.values())

    def list_names(self) -> List[str]:
        return list(self._parsers.keys())

    def descriptors(self) -> List[DocumentDescriptor]:
        return [parser.descriptor for parser in self._parsers.values()]

    def detect(self, text: str) -> Optional[ScreenParser]:
        """First parser, in priority order, whose layout matches ``text``."""
        descriptor = classify(text, self.descriptors())
        if descriptor is None:
            return None
        return self._parsers[descriptor.identifier]

    def detect_all(self, text: str) -> List[ScreenParser]:
        """Every parser whose layout matches, in priority order."""
        return [parser for parser in self._parsers.values() if parser.can_parse(text)]

    def parse(self, text: str, identifier: Optional[str] = None) -> ParseOutcome:
        """
        Parse ``text`` with the parser for ``identifier``, or the detected one.

        Returns a failed outcome for unknown identifiers and for texts no
        registered layout recognizes.
        """
        if identifier is not None:
            parser = self.get(identifier)
            if parser is None:
                return ParseOutcome.failed(identifier, f"Unknown screen type '{identifier}'.")
        else:
            parser = self.detect(text)
            if parser is None:
                logger.info("No screen layout matches the text")
                return ParseOutcome.failed(None, str(LayoutMismatch()), text)

        return parser.parse(text)

    def clear(self) -> None:
        self._parsers.clear()

    def __contains__(self, identifier: str) -> bool:
        return identifier in self._parsers

    def __len__(self) -> int:
        return len(self._parsers)


# Global registry instance, populated with the built-in parsers on first use
_global_registry: Optional[ParserRegistry] = None


def get_registry() -> ParserRegistry:
    """Get the global registry instance."""
    global _global_registry
    if _global_registry is None:
        from .builtin_types import register_builtin_parsers

        _global_registry = ParserRegistry()
        register_builtin_parsers(_global_registry)
    return _global_registry


def register_screen_parser(parser: ScreenParser, overwrite: bool = False) -> None:
    """Register a parser in the global registry."""
    get_registry().register(parser, overwrite)


def get_screen_parser(identifier: str) -> Optional[ScreenParser]:
    return get_registry().get(identifier)


def detect_screen(text: str) -> Optional[ScreenParser]:
    """Detect the layout of ``text`` using the global registry."""
    return get_registry().detect(text)


def list_screen_types() -> List[str]:
    """List all registered screen identifiers."""
    return get_registry().list_names()


def parse_text(text: str, identifier: Optional[str] = None) -> ParseOutcome:
    """Parse ``text`` using the global registry."""
    return get_registry().parse(text, identifier)
