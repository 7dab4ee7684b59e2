"""
Tests for budgeted pattern matching.

Run with: pytest tests/ -v
"""

import re

import pytest

from iwparsers.config import MatchBudget
from iwparsers.exceptions import MatchBudgetExceeded
from iwparsers.performance import MatchGuard, collect_matches
from iwparsers.screens import BuildingQueueParser


class TestCollectMatches:
    """Tests for plain capture extraction."""

    def test_search(self):
        captures = collect_matches(re.compile(r'(?P<n>\d+)'), 'abc 42 7', find_all=False)
        assert captures == [{'n': '42'}]

    def test_find_all(self):
        captures = collect_matches(re.compile(r'(?P<n>\d+)'), 'abc 42 7', find_all=True)
        assert [c['n'] for c in captures] == ['42', '7']

    def test_no_match(self):
        assert collect_matches(re.compile(r'x'), 'abc', find_all=False) == []


class TestMatchGuard:
    """Tests for length and time limits."""

    def test_inline_by_default(self):
        guard = MatchGuard()
        assert guard.budget.timeout is None
        assert guard.search(re.compile(r'(?P<word>[a-z]+)'), '12 abc')['word'] == 'abc'
        assert guard.search(re.compile(r'z'), 'abc') is None

    def test_text_too_long(self):
        guard = MatchGuard(MatchBudget(max_text_length=10))
        with pytest.raises(MatchBudgetExceeded) as exc_info:
            guard.find_all(re.compile(r'a'), 'a' * 11)
        assert 'exceeds the limit of 10' in str(exc_info.value)

    def test_timed_match_completes(self):
        guard = MatchGuard(MatchBudget(timeout=30))
        matches = guard.find_all(re.compile(r'(?P<n>\d+)'), '1 22 333')
        assert [m['n'] for m in matches] == ['1', '22', '333']

    def test_runaway_match_aborted(self):
        guard = MatchGuard(MatchBudget(timeout=0.5))
        with pytest.raises(MatchBudgetExceeded):
            guard.search(re.compile(r'(a+)+$'), 'a' * 40 + 'b')

    def test_budget_failure_becomes_outcome(self, building_queue_text):
        parser = BuildingQueueParser(budget=MatchBudget(max_text_length=20))
        outcome = parser.parse(building_queue_text)
        assert not outcome.success
        assert outcome.identifier == 'de_index_geb'
        assert len(outcome.errors) == 1
        assert 'exceeds the limit of 20' in outcome.errors[0]
