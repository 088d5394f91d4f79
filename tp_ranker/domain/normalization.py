"""Canonical form for free-text player names."""
from __future__ import annotations

import re

_SPELLING_FIXES = ((re.compile("christiian", re.IGNORECASE), "christian"),)
_DISALLOWED = re.compile(r"[^a-z0-9 ]")
_WHITESPACE = re.compile(r"\s+")


def _fix_spelling(name: str) -> str:
    for pattern, replacement in _SPELLING_FIXES:
        name = pattern.sub(replacement, name)
    return name


def normalize_name(raw_name: str | None) -> str:
    """Lower-case, correct known misspellings and drop punctuation.

    ``None`` and empty input normalize to an empty string. The result is a
    fixed point: normalizing it again returns it unchanged.
    """
    if not raw_name:
        return ""
    name = _fix_spelling(str(raw_name).strip().lower())
    name = _DISALLOWED.sub("", name)
    # dropping punctuation can expose a misspelling or leave edge spaces
    name = _fix_spelling(name)
    return _WHITESPACE.sub(" ", name).strip()
