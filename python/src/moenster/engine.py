"""Pattern set evaluation."""

from __future__ import annotations

import logging
from typing import Any

from .match import matches
from .models import CaseMode, Defaults, MatchResult, Pattern, PatternSet

logger = logging.getLogger(__name__)


def _as_bytes(value: str | bytes) -> bytes:
    if isinstance(value, str):
        return value.encode("utf-8")
    return bytes(value)


class PatternMatcher:
    """Matches subjects against a PatternSet.

    Patterns are sorted by priority (ascending).  The first enabled
    pattern that matches wins.  Each pattern uses its own case mode, or
    the set's default when it has none.
    """

    def __init__(self, pattern_set: PatternSet | None = None) -> None:
        self._defaults = Defaults()
        self._patterns: list[Pattern] = []
        if pattern_set is not None:
            self.load(pattern_set)

    # ── Loading ──────────────────────────────────────────────────────

    def load(self, pattern_set: PatternSet) -> None:
        """Load (or replace) the active pattern set."""
        self._defaults = pattern_set.defaults
        self._patterns = sorted(pattern_set.patterns, key=lambda p: p.priority)

    @property
    def patterns(self) -> list[Pattern]:
        """Return the currently loaded patterns (sorted by priority)."""
        return list(self._patterns)

    @property
    def defaults(self) -> Defaults:
        return self._defaults

    # ── Matching ─────────────────────────────────────────────────────

    def _case_for(self, pattern: Pattern) -> CaseMode:
        return pattern.case if pattern.case is not None else self._defaults.case

    def match(self, subject: str | bytes) -> MatchResult | None:
        """Return the first enabled pattern matching *subject*, or ``None``."""
        data = _as_bytes(subject)
        for pattern in self._patterns:
            if not pattern.enabled:
                continue
            case = self._case_for(pattern)
            if matches(pattern.pattern.encode("utf-8"), data, case):
                logger.debug(
                    "[moenster.match] pattern=%s case=%s subject=%r",
                    pattern.id,
                    case.value,
                    subject,
                )
                return MatchResult(pattern_id=pattern.id, pattern=pattern.pattern, case=case)

        logger.debug("[moenster.nomatch] subject=%r patterns=%d", subject, len(self._patterns))
        return None

    def matches(self, subject: str | bytes) -> bool:
        """Convenience wrapper: True when any enabled pattern matches."""
        return self.match(subject) is not None

    def match_all(self, subject: str | bytes) -> list[dict[str, Any]]:
        """Evaluate every pattern and report the outcome of each.

        Useful for debugging and audit trails.  Disabled patterns are
        listed with ``matched`` False.
        """
        data = _as_bytes(subject)
        results: list[dict[str, Any]] = []
        for pattern in self._patterns:
            case = self._case_for(pattern)
            matched = pattern.enabled and matches(pattern.pattern.encode("utf-8"), data, case)
            results.append({
                "pattern_id": pattern.id,
                "name": pattern.name,
                "priority": pattern.priority,
                "pattern": pattern.pattern,
                "case": case.value,
                "matched": matched,
                "enabled": pattern.enabled,
            })
        return results
