"""
Performance module - budgeted pattern matching.
"""

from .guard import MatchGuard, collect_matches

__all__ = [
    'MatchGuard',
    'collect_matches',
]
