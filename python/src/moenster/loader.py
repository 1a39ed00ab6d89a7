"""YAML/dict loader for PatternSet documents."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .models import CaseMode, Defaults, Metadata, Pattern, PatternSet


def _parse_pattern(raw: dict[str, Any]) -> Pattern:
    try:
        pattern_id = raw["id"]
        pattern = raw["pattern"]
    except KeyError as exc:
        raise ValueError(f"Pattern entry is missing required field {exc}") from exc
    case = raw.get("case")
    return Pattern(
        id=str(pattern_id),
        pattern=str(pattern),
        name=raw.get("name", ""),
        description=raw.get("description", ""),
        enabled=raw.get("enabled", True),
        priority=raw.get("priority", 100),
        case=CaseMode(case) if case is not None else None,
    )


def _parse_defaults(raw: dict[str, Any] | None) -> Defaults:
    if not raw:
        return Defaults()
    return Defaults(case=CaseMode(raw.get("case", "sensitive")))


def _parse_metadata(raw: dict[str, Any] | None) -> Metadata:
    if not raw:
        return Metadata(name="unnamed")
    return Metadata(
        name=raw.get("name", "unnamed"),
        description=raw.get("description", ""),
        version=str(raw.get("version", "")),
        labels=raw.get("labels") or {},
    )


def load_pattern_set_from_dict(data: dict[str, Any]) -> PatternSet:
    """Parse a PatternSet from a raw dictionary (e.g. parsed YAML/JSON)."""
    api_version = data.get("apiVersion", "moenster/v1")
    kind = data.get("kind", "PatternSet")
    if kind != "PatternSet":
        raise ValueError(f"Unsupported kind: {kind} (expected PatternSet)")
    return PatternSet(
        api_version=api_version,
        kind=kind,
        metadata=_parse_metadata(data.get("metadata")),
        defaults=_parse_defaults(data.get("defaults")),
        patterns=[_parse_pattern(p) for p in data.get("patterns") or []],
    )


def load_pattern_set_from_str(text: str) -> PatternSet:
    """Parse a PatternSet from a YAML string."""
    data = yaml.safe_load(text)
    if not isinstance(data, dict):
        raise ValueError("Expected a YAML mapping at the top level")
    return load_pattern_set_from_dict(data)


def load_pattern_set(path: str | Path) -> PatternSet:
    """Load a PatternSet from a YAML file on disk."""
    p = Path(path)
    return load_pattern_set_from_str(p.read_text(encoding="utf-8"))
