"""
Match Guard

Runs pattern matches under a budget so a pathological input cannot hang
the caller.

Two limits apply:
- max_text_length: checked before matching, always cheap
- timeout: the match runs in a single-worker child process which is
  terminated once the deadline passes

Python's ``re`` cannot be interrupted from another thread, so the timed
path needs a process. It is off by default; matches then run inline.
"""

from __future__ import annotations

import multiprocessing
import re
from typing import Dict, List, Optional

from loguru import logger

from ..config import MatchBudget
from ..exceptions import MatchBudgetExceeded

CaptureSet = Dict[str, Optional[str]]


def collect_matches(pattern: re.Pattern, text: str, find_all: bool) -> List[CaptureSet]:
    """
    Run ``pattern`` over ``text`` and return plain capture dicts.

    Module level and returning only builtins so it can run in a worker
    process.
    """
    if find_all:
        return [m.groupdict() for m in pattern.finditer(text)]
    match = pattern.search(text)
    return [match.groupdict()] if match else []


class MatchGuard:
    """
    Budgeted ``search``/``finditer`` returning capture dicts.

    Usage:
        guard = MatchGuard(MatchBudget(timeout=2.0))
        captures = guard.search(pattern, text)      # dict or None
        for captures in guard.find_all(pattern, text):
            ...

    Raises MatchBudgetExceeded when either limit is hit.
    """

    def __init__(self, budget: Optional[MatchBudget] = None):
        self.budget = budget or MatchBudget()

    def search(self, pattern: re.Pattern, text: str) -> Optional[CaptureSet]:
        results = self._run(pattern, text, find_all=False)
        return results[0] if results else None

    def find_all(self, pattern: re.Pattern, text: str) -> List[CaptureSet]:
        return self._run(pattern, text, find_all=True)

    def _run(self, pattern: re.Pattern, text: str, find_all: bool) -> List[CaptureSet]:
        limit = self.budget.max_text_length
        if limit is not None and len(text) > limit:
            raise MatchBudgetExceeded(
                f"Text of {len(text)} characters exceeds the limit of {limit}"
            )

        if self.budget.timeout is None:
            return collect_matches(pattern, text, find_all)

        return self._run_with_timeout(pattern, text, find_all, self.budget.timeout)

    def _run_with_timeout(
        self,
        pattern: re.Pattern,
        text: str,
        find_all: bool,
        timeout: float,
    ) -> List[CaptureSet]:
        pool = multiprocessing.Pool(processes=1)
        try:
            pending = pool.apply_async(collect_matches, (pattern, text, find_all))
            try:
                return pending.get(timeout)
            except multiprocessing.TimeoutError:
                logger.warning(f"Pattern match exceeded {timeout}s, worker terminated")
                raise MatchBudgetExceeded(
                    f"Pattern match exceeded the time budget of {timeout}s"
                ) from None
        finally:
            pool.terminate()
            pool.join()
