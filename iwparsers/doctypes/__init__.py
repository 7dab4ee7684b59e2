"""
Screen layouts

Descriptors that recognize a screen layout and strip a pasted page down to
its data, plus the ordered registry that picks the parser for a text.
"""

from .document_type import (
    DocumentDescriptor,
    create_descriptor,
    classify,
    strip,
)
from .registry import (
    ParserRegistry,
    get_registry,
    register_screen_parser,
    get_screen_parser,
    detect_screen,
    list_screen_types,
    parse_text,
)
from .builtin_types import (
    BUILTIN_PARSERS,
    register_builtin_parsers,
    create_registry,
)

__all__ = [
    'DocumentDescriptor',
    'create_descriptor',
    'classify',
    'strip',
    'ParserRegistry',
    'get_registry',
    'register_screen_parser',
    'get_screen_parser',
    'detect_screen',
    'list_screen_types',
    'parse_text',
    'BUILTIN_PARSERS',
    'register_builtin_parsers',
    'create_registry',
]
