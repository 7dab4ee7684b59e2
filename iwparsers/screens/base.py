"""
Screen Parser base

Every layout parser follows the same steps:

1. Strip the text to the data span of its descriptor
2. Match its outer pattern (built once from the fragment library)
3. Run secondary patterns over sub-captures
4. Normalize captures and fold them into a result record

Errors raised in steps 2-4 never escape ``parse()``; they become
diagnostics on the returned ``ParseOutcome``.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, List, Optional

from loguru import logger

from ..config import LocaleConfig, MatchBudget
from ..doctypes.document_type import DocumentDescriptor
from ..exceptions import MatchBudgetExceeded, NormalizationError, StructuralNoMatch
from ..fragments import FragmentLibrary
from ..parser.assembler import CaptureSet, ResultAssembler
from ..parser.normalizers import LocaleNormalizer
from ..performance.guard import MatchGuard
from ..results import ParseOutcome


class ScreenParser(ABC):
    """
    Base class for layout parsers.

    Subclasses set ``descriptor`` and implement ``parse_text``.

    Usage:
        parser = ShipInfoParser()
        if parser.can_parse(text):
            outcome = parser.parse(text)
    """

    descriptor: DocumentDescriptor
    # Reported when the outer pattern does not match
    no_match_message = 'Unable to match the pattern.'

    def __init__(
        self,
        locale: Optional[LocaleConfig] = None,
        budget: Optional[MatchBudget] = None,
    ):
        self.locale = locale or LocaleConfig()
        self.fragments = FragmentLibrary(self.locale)
        self.normalizer = LocaleNormalizer(self.locale)
        self.guard = MatchGuard(budget)

    @property
    def identifier(self) -> str:
        return self.descriptor.identifier

    @property
    def name(self) -> str:
        return self.descriptor.name

    def can_parse(self, text: str) -> bool:
        return self.descriptor.matches(text)

    def parse(self, text: str) -> ParseOutcome:
        """
        Parse a pasted screen.

        Returns:
            ParseOutcome; on failure ``record`` is None and ``errors`` holds
            the reason followed by the offending text
        """
        stripped = self.descriptor.strip(text)
        assembler = ResultAssembler()

        try:
            record = self.parse_text(stripped, assembler)
        except StructuralNoMatch as e:
            logger.info(f"{self.identifier}: {e}")
            return ParseOutcome.failed(
                self.identifier, str(e), e.text, warnings=tuple(assembler.warnings)
            )
        except NormalizationError as e:
            logger.info(f"{self.identifier}: {e}")
            return ParseOutcome.failed(
                self.identifier, str(e), stripped, warnings=tuple(assembler.warnings)
            )
        except MatchBudgetExceeded as e:
            logger.warning(f"{self.identifier}: {e}")
            return ParseOutcome.failed(
                self.identifier, str(e), warnings=tuple(assembler.warnings)
            )

        logger.debug(
            f"{self.identifier}: parsed with {len(assembler.warnings)} warning(s)"
        )
        return ParseOutcome(
            identifier=self.identifier,
            success=True,
            record=record,
            warnings=tuple(assembler.warnings),
        )

    @abstractmethod
    def parse_text(self, text: str, assembler: ResultAssembler) -> Any:
        """
        Build the result record from stripped text.

        Raises:
            StructuralNoMatch: If the outer pattern does not match
            NormalizationError: If a required field cannot be converted
        """

    # ------------------------------------------------------------------
    # Helpers for subclasses
    # ------------------------------------------------------------------

    def match_one(self, pattern: re.Pattern, text: str) -> CaptureSet:
        """Search once; a miss is a structural failure."""
        captures = self.guard.search(pattern, text)
        if captures is None:
            raise StructuralNoMatch(self.no_match_message, text)
        return captures

    def match_all(self, pattern: re.Pattern, text: str, required: bool = True) -> List[CaptureSet]:
        """Find all occurrences; with ``required`` an empty result is a structural failure."""
        matches = self.guard.find_all(pattern, text)
        if required and not matches:
            raise StructuralNoMatch(self.no_match_message, text)
        return matches
