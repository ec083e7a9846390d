"""Descriptor lookup — option code → long-form instruction paragraph.

Codes are matched case-insensitively after trimming; spaces and hyphens are
treated as underscores and known aliases resolve to their canonical key.
A code that is not in the catalog is returned exactly as received, so custom
values typed by users still reach the prompt.
"""

from __future__ import annotations

import re

from prompts.copy_types import COPY_TYPE_ALIASES, COPY_TYPE_DESCRIPTIONS
from prompts.emotional_focus import EMOTIONAL_FOCUS_ALIASES, EMOTIONAL_FOCUS_DESCRIPTIONS
from prompts.frameworks import FRAMEWORK_ALIASES, FRAMEWORK_DESCRIPTIONS
from prompts.objectives import OBJECTIVE_ALIASES, OBJECTIVE_DESCRIPTIONS
from prompts.styles import STYLE_ALIASES, STYLE_DESCRIPTIONS

# catalog name → (descriptions, aliases)
CATALOGS: dict[str, tuple[dict[str, str], dict[str, str]]] = {
    "copy_type": (COPY_TYPE_DESCRIPTIONS, COPY_TYPE_ALIASES),
    "framework": (FRAMEWORK_DESCRIPTIONS, FRAMEWORK_ALIASES),
    "objective": (OBJECTIVE_DESCRIPTIONS, OBJECTIVE_ALIASES),
    "style": (STYLE_DESCRIPTIONS, STYLE_ALIASES),
    "emotional_focus": (EMOTIONAL_FOCUS_DESCRIPTIONS, EMOTIONAL_FOCUS_ALIASES),
}


def normalize_code(code: str) -> str:
    """Lower-case, trim, and collapse spaces/hyphens into underscores."""
    return re.sub(r"[\s\-]+", "_", code.strip().lower())


def canonical_code(catalog: str, code: str | None) -> str | None:
    """Return the catalog key for a code, or None if the catalog doesn't know it."""
    if not code:
        return None
    descriptions, aliases = CATALOGS[catalog]
    key = normalize_code(code)
    key = aliases.get(key, key)
    return key if key in descriptions else None


def describe(catalog: str, code: str | None) -> str:
    """Look up a code in a catalog, falling back to the raw code."""
    if not code:
        return ""
    descriptions, _ = CATALOGS[catalog]
    key = canonical_code(catalog, code)
    if key is None:
        return code
    return descriptions[key]


def describe_copy_type(code: str | None) -> str:
    return describe("copy_type", code)


def describe_framework(code: str | None) -> str:
    return describe("framework", code)


def describe_objective(code: str | None) -> str:
    return describe("objective", code)


def describe_style(code: str | None) -> str:
    return describe("style", code)


def describe_emotional_focus(code: str | None) -> str:
    return describe("emotional_focus", code)


def list_codes(catalog: str) -> list[str]:
    """Return the canonical codes of a catalog, in declaration order."""
    descriptions, _ = CATALOGS[catalog]
    return list(descriptions)
