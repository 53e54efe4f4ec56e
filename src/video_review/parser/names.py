"""Category name normalization and fuzzy matching.

Every site that compares category names (category extraction, custom
category reconciliation, improvement merging) goes through
:func:`normalize_name` so that they cannot drift apart.

Matching is deliberately loose: two names match when either normalized name
contains the other.  This tolerates the model paraphrasing a category
("Clarity" vs "Clarity and Presentation") at the cost of occasional false
positive merges ("Quality" vs "Video Quality").
"""

from __future__ import annotations

import re
from collections.abc import Iterable

# Markdown emphasis markers and anything that is not a word char or space
_PUNCTUATION_RE = re.compile(r"[^\w\s]|_")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_name(name: str) -> str:
    """Lowercase, strip punctuation and markup, collapse whitespace."""
    if not name:
        return ""
    cleaned = _PUNCTUATION_RE.sub(" ", name.lower())
    return _WHITESPACE_RE.sub(" ", cleaned).strip()


def names_match(a: str, b: str) -> bool:
    """Return True if *a* and *b* match by bidirectional substring containment.

    Empty names (after normalization) never match anything.
    """
    left = normalize_name(a)
    right = normalize_name(b)
    if not left or not right:
        return False
    return left in right or right in left


def contains_keyword(name: str, keywords: Iterable[str]) -> bool:
    """Return True if the normalized *name* contains any of *keywords*."""
    normalized = normalize_name(name)
    if not normalized:
        return False
    return any(normalize_name(kw) in normalized for kw in keywords)
