"""Improvement suggestion extraction.

Isolates the "Suggested Improvements" (or "Improvement Suggestions")
section, segments it by bolded category labels and splits each segment into
individual suggestion sentences.  A response without the section yields no
improvements: nothing is considered to need improving.
"""

from __future__ import annotations

import logging
import re

from video_review.parser.names import normalize_name
from video_review.parser.schemas import Improvement

logger = logging.getLogger(__name__)

_SECTION_TITLES = ("Suggested Improvements", "Improvement Suggestions")

# ## Suggested Improvements   |   4. **Suggested Improvements:**
_SECTION_HEADING_RE = re.compile(
    r"^[ \t]*(?:#{1,6}[ \t]*)?(?:\d+\.[ \t]*)?\**[ \t]*"
    r"(?:Suggested Improvements|Improvement Suggestions)\b",
    re.MULTILINE | re.IGNORECASE,
)

# **Clarity:** body   |   * **Clarity**: body   |   1. **Clarity:** body
_LABEL_RE = re.compile(
    r"^[ \t]*(?:[-*+•][ \t]+|\d+\.[ \t]+)?\*\*[ \t]*(?P<name>[^*\n]+?)[ \t]*"
    r"(?::[ \t]*\*\*|\*\*[ \t]*:)",
    re.MULTILINE,
)

# The section ends at the next level-1/2 heading or horizontal rule.
_SECTION_END_RE = re.compile(
    r"^[ \t]*(?:#{1,2}(?!#)|-{3,}[ \t]*$|\*{3,}[ \t]*$)", re.MULTILINE
)
# A single segment also ends at any sub-heading.
_SEGMENT_END_RE = re.compile(r"^[ \t]*#{3,6}[ \t]", re.MULTILINE)

# Period+space, bullet characters, or numbered-list markers.
_SPLIT_RE = re.compile(
    r"\.\s+|•\s*|^[ \t]*[-*+][ \t]+|(?:^|\s)\d+\.\s+", re.MULTILINE
)

# Fragments made only of punctuation, markup or digits are splitting artifacts.
_ARTIFACT_RE = re.compile(r"^[\W_\d]*$")

_TERMINAL_PUNCTUATION = (".", "!", "?")


def _find_section(text: str) -> str | None:
    """Return the text after the improvements heading line, if present.

    A heading or label line wins over a title mentioned in running prose;
    the first plain occurrence is used only when no heading line exists.
    """
    heading = _SECTION_HEADING_RE.search(text)
    if heading is not None:
        idx = heading.start()
    else:
        found = [i for i in (text.find(t) for t in _SECTION_TITLES) if i != -1]
        if not found:
            return None
        idx = min(found)

    line_end = text.find("\n", idx)
    section = "" if line_end == -1 else text[line_end + 1:]
    end = _SECTION_END_RE.search(section)
    return section[: end.start()] if end else section


def split_suggestions(body: str) -> list[str]:
    """Split a category's improvement text into individual suggestions.

    Empty fragments and bare punctuation artifacts are dropped; every
    retained suggestion ends in terminal punctuation.
    """
    suggestions: list[str] = []
    for fragment in _SPLIT_RE.split(body):
        cleaned = " ".join(fragment.replace("**", "").split()).rstrip(":;,")
        if not cleaned or _ARTIFACT_RE.match(cleaned):
            continue
        if not cleaned.endswith(_TERMINAL_PUNCTUATION):
            cleaned += "."
        suggestions.append(cleaned)
    return suggestions


def extract_improvements(text: str) -> list[Improvement]:
    """Extract per-category improvement suggestions.

    Never raises.  Returns an empty list if the section is missing or has
    no bolded category labels.

    Args:
        text: Raw model response.

    Returns:
        Improvements in order of first appearance; repeated labels for the
        same category are merged.
    """
    if not text:
        return []

    section = _find_section(text)
    if section is None:
        logger.debug("No improvements section in response")
        return []

    labels = list(_LABEL_RE.finditer(section))
    if not labels:
        logger.info("Improvements section present but no category labels found")
        return []

    merged: dict[str, tuple[str, list[str]]] = {}
    for idx, label in enumerate(labels):
        end = labels[idx + 1].start() if idx + 1 < len(labels) else len(section)
        body = section[label.end():end]
        segment_end = _SEGMENT_END_RE.search(body)
        if segment_end:
            body = body[: segment_end.start()]

        category = label.group("name").strip()
        suggestions = split_suggestions(body)
        if not category or not suggestions:
            continue

        key = normalize_name(category)
        if key in merged:
            merged[key][1].extend(suggestions)
        else:
            merged[key] = (category, suggestions)

    improvements = [
        Improvement(category=category, suggestions=suggestions)
        for category, suggestions in merged.values()
    ]
    logger.debug("Extracted improvements for %d categories", len(improvements))
    return improvements
