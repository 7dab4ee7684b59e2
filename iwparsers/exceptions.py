"""
Parser Exceptions

Error taxonomy for screen parsing. These are raised inside parsers and the
result assembler and converted to diagnostics at the ``parse()`` boundary,
so callers of a screen parser only ever see a ``ParseOutcome``.
"""

from typing import Optional


class ParserError(Exception):
    """Base class for all parsing errors."""


class ConfigError(ParserError):
    """Configuration file could not be read or is malformed."""


class LayoutMismatch(ParserError):
    """No registered screen layout recognizes the text."""

    def __init__(self, message: str = "No known screen layout matches the text."):
        super().__init__(message)


class StructuralNoMatch(ParserError):
    """
    The layout was recognized but its outer pattern did not match.

    Carries the (stripped) text that failed so it can be reported back.
    """

    def __init__(self, message: str, text: str = ""):
        super().__init__(message)
        self.text = text


class NormalizationError(ParserError):
    """A captured substring could not be converted to its target type."""

    def __init__(self, raw: Optional[str], target: str, field: Optional[str] = None):
        self.raw = raw
        self.target = target
        self.field = field
        where = f" for field '{field}'" if field else ""
        super().__init__(f"Cannot convert {raw!r} to {target}{where}")

    def for_field(self, field: str) -> "NormalizationError":
        """Return a copy of this error bound to a result field name."""
        return NormalizationError(self.raw, self.target, field)


class DegenerateKeyError(ParserError):
    """A keyed record's first occurrence lacks its identity fields."""

    def __init__(self, key: str, missing: str):
        self.key = key
        self.missing = missing
        super().__init__(f"Dropped occurrence for key '{key}': missing {missing}")


class MatchBudgetExceeded(ParserError):
    """Matching was aborted because the input or the time budget was exceeded."""
