"""
Document Descriptor

Describes how a screen layout is recognized and which part of the pasted
text holds its data:

- can_parse: quick-match pattern deciding whether the layout applies
- begin_data: marker where the data starts (included in the stripped text)
- end_data: marker where the data ends (excluded)

Browsers copy the whole page including navigation and footers; stripping
to the span between the markers keeps the layout patterns from matching
unrelated parts of the page.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from loguru import logger


@dataclass(frozen=True)
class DocumentDescriptor:
    """
    A recognizable screen layout.

    Use ``create_descriptor`` to build one from pattern strings.
    """
    identifier: str
    name: str
    can_parse: re.Pattern
    begin_data: Optional[re.Pattern] = None
    end_data: Optional[re.Pattern] = None

    def matches(self, text: str) -> bool:
        """Quick check whether ``text`` looks like this layout."""
        return self.can_parse.search(text) is not None

    def strip(self, text: str) -> str:
        """
        Cut ``text`` down to the data span.

        The span starts at the begin marker (inclusive) and ends at the first
        end marker after it (exclusive). A missing or unfound begin marker
        means the start of the text, a missing or unfound end marker the end.
        """
        start = 0
        if self.begin_data is not None:
            begin = self.begin_data.search(text)
            if begin:
                start = begin.start()

        end = len(text)
        if self.end_data is not None:
            finish = self.end_data.search(text, start)
            if finish:
                end = finish.start()

        return text[start:end]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'identifier': self.identifier,
            'name': self.name,
            'can_parse': self.can_parse.pattern,
            'begin_data': self.begin_data.pattern if self.begin_data else '',
            'end_data': self.end_data.pattern if self.end_data else '',
        }


def create_descriptor(
    identifier: str,
    name: str,
    can_parse: str,
    begin_data: str = '',
    end_data: str = '',
    flags: int = 0,
    marker_flags: int = 0,
) -> DocumentDescriptor:
    """
    Build a descriptor from pattern strings.

    Empty marker strings mean "no marker".

    Args:
        identifier: Unique layout id, e.g. 'de_info_schiff'
        name: Human-readable layout name
        can_parse: Quick-match pattern
        begin_data: Begin marker pattern
        end_data: End marker pattern
        flags: re flags for the quick-match pattern
        marker_flags: re flags for the marker patterns
    """
    return DocumentDescriptor(
        identifier=identifier,
        name=name,
        can_parse=re.compile(can_parse, flags),
        begin_data=re.compile(begin_data, marker_flags) if begin_data else None,
        end_data=re.compile(end_data, marker_flags) if end_data else None,
    )


def classify(text: str, descriptors: Iterable[DocumentDescriptor]) -> Optional[DocumentDescriptor]:
    """Return the first descriptor, in priority order, whose quick-match hits."""
    for descriptor in descriptors:
        if descriptor.matches(text):
            logger.debug(f"Text classified as '{descriptor.identifier}'")
            return descriptor
    return None


def strip(text: str, descriptor: DocumentDescriptor) -> str:
    return descriptor.strip(text)
