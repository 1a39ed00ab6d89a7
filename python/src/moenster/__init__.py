"""moenster: Simple glob-style pattern matching for strings and bytes."""

from __future__ import annotations

__version__ = "0.1.0"

from .engine import PatternMatcher
from .loader import load_pattern_set, load_pattern_set_from_dict, load_pattern_set_from_str
from .match import list_matches, matches, stringmatch
from .models import (
    CaseMode,
    Defaults,
    MatchResult,
    Metadata,
    Pattern,
    PatternSet,
)

__all__ = [
    "CaseMode",
    "Defaults",
    "MatchResult",
    "Metadata",
    "Pattern",
    "PatternMatcher",
    "PatternSet",
    "list_matches",
    "load_pattern_set",
    "load_pattern_set_from_dict",
    "load_pattern_set_from_str",
    "matches",
    "stringmatch",
]
