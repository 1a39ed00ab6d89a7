"""Data models for moenster."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class CaseMode(str, Enum):
    """How literal bytes and class members are compared.

    ``insensitive`` folds ASCII ``A``-``Z`` to lowercase on both sides
    before comparing; all other bytes compare as-is.
    """

    sensitive = "sensitive"
    insensitive = "insensitive"


# ── Pattern definition ──────────────────────────────────────────────────


@dataclass
class Pattern:
    """A single named glob pattern.

    ``case`` of ``None`` means the pattern follows the set's defaults.
    """

    id: str
    pattern: str
    name: str = ""
    description: str = ""
    enabled: bool = True
    priority: int = 100
    case: CaseMode | None = None


# ── PatternSet (top-level document) ─────────────────────────────────────


@dataclass
class Metadata:
    """Descriptive metadata for a pattern set."""

    name: str
    description: str = ""
    version: str = ""
    labels: dict[str, str] = field(default_factory=dict)


@dataclass
class Defaults:
    """Settings applied to patterns that do not override them."""

    case: CaseMode = CaseMode.sensitive


@dataclass
class PatternSet:
    """A complete set of patterns loaded from YAML."""

    api_version: str = "moenster/v1"
    kind: str = "PatternSet"
    metadata: Metadata = field(default_factory=lambda: Metadata(name="unnamed"))
    defaults: Defaults = field(default_factory=Defaults)
    patterns: list[Pattern] = field(default_factory=list)


# ── Match result ────────────────────────────────────────────────────────


@dataclass(frozen=True)
class MatchResult:
    """The pattern that matched a subject, and the case mode it used."""

    pattern_id: str
    pattern: str
    case: CaseMode = CaseMode.sensitive
