"""Category score extraction from the model's Markdown answer.

Uses an ordered fallback chain, stopping at the first strategy that finds
anything:

    Strategy 1 -- "Individual Category Scores" section with ``- Name: N/10``
                  bullet lines; assessments looked up from ``* Name: text``
                  justification clauses anywhere in the response.
    Strategy 2 -- Inline ``Name: N(/10) - text`` lines across the whole text.

Neither strategy matching is a valid outcome (empty list), not an error.

A secondary pass then applies explicit ``Custom Category: Name: ... Score: N``
clauses, which override the score of a fuzzy-matching category or add a new
one.  All functions here are total: malformed input never raises.
"""

from __future__ import annotations

import logging
import re

from video_review.parser.names import names_match, normalize_name
from video_review.parser.schemas import CategoryResult

logger = logging.getLogger(__name__)

MIN_SCORE = 0
MAX_SCORE = 10

# Total Score: 8   |   **Total Score:** 8/10   |   Total Score (out of 10): 8
_TOTAL_SCORE_RE = re.compile(
    r"(?:Total|Overall)\s+Score[ \t]*(?:\([^)\n]*\))?\**[ \t]*:?[ \t]*\**\s*\**(\d{1,3})",
    re.IGNORECASE,
)

# Heading (or bold label) for the score section, optionally numbered.
_SECTION_HEADING_RE = re.compile(
    r"^[ \t]*#{0,6}[ \t]*(?:\d+\.[ \t]*)?\**[ \t]*Individual Category Scores"
    r"[ \t]*(?:\([^)\n]*\))?[ \t]*:?[ \t]*\**[ \t]*:?[ \t]*$",
    re.IGNORECASE | re.MULTILINE,
)
# Section body ends at the next level-1 or level-2 heading.
_NEXT_SECTION_RE = re.compile(r"^[ \t]*#{1,2}(?!#)", re.MULTILINE)

# - **Clarity:** 9/10   |   - Clarity: 9/10   |   * **Clarity**: 9 / 10
_SCORE_LINE_RE = re.compile(
    r"^[ \t]*[-*+][ \t]+\**[ \t]*(?P<name>[^*\n]+?)[ \t]*\**[ \t]*:[ \t]*\**[ \t]*"
    r"(?P<score>\d{1,3})[ \t]*/[ \t]*10\b",
    re.MULTILINE,
)

# * **Clarity:** The reviewer speaks clearly ...
# Clause text runs to the next bullet, heading, blank line or end of text.
_JUSTIFICATION_RE = re.compile(
    r"^[ \t]*\*[ \t]+\**[ \t]*(?P<name>[^*\n]+?)[ \t]*\**[ \t]*:[ \t]*\**[ \t]*"
    r"(?!\d{1,3}[ \t]*/[ \t]*10\b)"
    r"(?P<text>\S.*?)(?=\n[ \t]*[-*+][ \t]|\n[ \t]*#|\n[ \t]*\n|\Z)",
    re.MULTILINE | re.DOTALL,
)

# **Clarity:** 7/10 - Clear audio and framing.   |   Clarity: 7/10
_INLINE_RE = re.compile(
    r"^[ \t]*(?:[-*+][ \t]+|\d+\.[ \t]+)?\**[ \t]*(?P<name>[^*:\n]+?)[ \t]*\**[ \t]*:"
    r"[ \t]*\**[ \t]*(?P<score>\d{1,3})(?P<out_of>[ \t]*/[ \t]*10)?[ \t]*\**"
    r"(?:[ \t]+[-–—][ \t]*(?P<text>.*?))?[ \t]*$",
    re.MULTILINE,
)

# Custom Category: Talking Head: <commentary> Score: 9   (within one paragraph)
_CUSTOM_CLAUSE_RE = re.compile(
    r"Custom Category\**[ \t]*:?[ \t]*\**[ \t]*"
    r"(?P<name>[^:*\n]+?)"
    r"(?=[ \t]*\**[ \t]*:|[ \t]+[-–—]|[ \t]*\(|[ \t]+Score\b|[ \t]*$)"
    r"(?P<body>(?:(?!\n[ \t]*\n|\n[ \t]*#|Custom Category).)*?)"
    r"(?<!Total )(?<!Overall )Score\**[ \t]*:?[ \t]*\**[ \t]*(?P<score>\d{1,3})",
    re.IGNORECASE | re.DOTALL | re.MULTILINE,
)

# Names that label the overall score rather than a category.
_NON_CATEGORY_NAMES = {"total score", "overall score", "score", "final score"}

# Inline matches with longer "names" are prose, not category labels.
_MAX_INLINE_NAME_LENGTH = 60


def _clamp_score(raw: str, name: str) -> int:
    """Parse *raw* as an int and clamp it into [0, 10]."""
    value = int(raw)
    if value < MIN_SCORE or value > MAX_SCORE:
        clamped = max(MIN_SCORE, min(MAX_SCORE, value))
        logger.warning(
            "Score for %r out of range (%d), clamped to %d", name, value, clamped
        )
        return clamped
    return value


def _clean_name(name: str) -> str:
    return name.strip().strip("*.…-–— \t").strip()


def extract_total_score(text: str) -> int | None:
    """Return the model's explicit ``Total Score`` (clamped), or None."""
    if not text:
        return None
    match = _TOTAL_SCORE_RE.search(text)
    if not match:
        return None
    return _clamp_score(match.group(1), "Total Score")


def _find_section(text: str) -> str | None:
    """Return the body of the "Individual Category Scores" section, if any."""
    heading = _SECTION_HEADING_RE.search(text)
    if heading is None:
        return None
    body = text[heading.end():]
    next_heading = _NEXT_SECTION_RE.search(body)
    return body[: next_heading.start()] if next_heading else body


def _find_assessment(text: str, name: str) -> str:
    """Find the first justification clause whose label matches *name*.

    An exact (normalized) label match is preferred over a fuzzy one.
    """
    fuzzy: str | None = None
    target = normalize_name(name)
    for match in _JUSTIFICATION_RE.finditer(text):
        label = _clean_name(match.group("name"))
        body = " ".join(match.group("text").replace("**", "").split())
        if normalize_name(label) == target:
            return body
        if fuzzy is None and names_match(label, name):
            fuzzy = body
    return fuzzy or ""


def _add_unique(categories: list[CategoryResult], candidate: CategoryResult) -> None:
    """Append *candidate* unless a category with the same name already exists."""
    key = normalize_name(candidate.name)
    if any(normalize_name(c.name) == key for c in categories):
        logger.debug("Ignoring duplicate category %r", candidate.name)
        return
    categories.append(candidate)


def _strategy_score_section(text: str) -> list[CategoryResult]:
    """Strategy 1: bullet lines inside the labeled score section."""
    section = _find_section(text)
    if section is None:
        return []

    categories: list[CategoryResult] = []
    for match in _SCORE_LINE_RE.finditer(section):
        name = _clean_name(match.group("name"))
        if not name or normalize_name(name) in _NON_CATEGORY_NAMES:
            continue
        _add_unique(
            categories,
            CategoryResult(
                name=name,
                score=_clamp_score(match.group("score"), name),
                assessment=_find_assessment(text, name),
            ),
        )
    return categories


def _strategy_inline(text: str) -> list[CategoryResult]:
    """Strategy 2: ``Name: N(/10) - text`` lines anywhere in the response."""
    categories: list[CategoryResult] = []
    for match in _INLINE_RE.finditer(text):
        name = _clean_name(match.group("name"))
        assessment = match.group("text")
        # A bare "Name: 7" is too ambiguous; need "/10" or a dash comment.
        if match.group("out_of") is None and assessment is None:
            continue
        if (
            not name
            or len(name) > _MAX_INLINE_NAME_LENGTH
            or normalize_name(name) in _NON_CATEGORY_NAMES
        ):
            continue
        _add_unique(
            categories,
            CategoryResult(
                name=name,
                score=_clamp_score(match.group("score"), name),
                assessment=(assessment or "").strip(),
            ),
        )
    return categories


def _apply_custom_clauses(
    text: str, categories: list[CategoryResult]
) -> list[CategoryResult]:
    """Apply explicit ``Custom Category ... Score`` clauses.

    A clause overrides the score of the first fuzzy-matching category;
    otherwise it adds a new category.  Returns a new list.
    """
    result = list(categories)
    for match in _CUSTOM_CLAUSE_RE.finditer(text):
        name = _clean_name(match.group("name"))
        if not name:
            continue
        score = _clamp_score(match.group("score"), name)

        for idx, existing in enumerate(result):
            if names_match(existing.name, name):
                if existing.score != score:
                    logger.debug(
                        "Custom category clause overrides %r score %d -> %d",
                        existing.name,
                        existing.score,
                        score,
                    )
                result[idx] = existing.model_copy(update={"score": score})
                break
        else:
            logger.debug("Custom category clause adds %r (%d/10)", name, score)
            result.append(
                CategoryResult(
                    name=name,
                    score=score,
                    assessment=f"This custom category received a score of {score}/10.",
                )
            )
    return result


def extract_categories(text: str) -> list[CategoryResult]:
    """Extract per-category scores from the model's answer.

    Never raises; returns an empty list when nothing recognizable is found.

    Args:
        text: Raw model response.

    Returns:
        Categories in the order they appear in the response, with custom
        category clauses applied.
    """
    if not text or not text.strip():
        return []

    categories = _strategy_score_section(text)
    if categories:
        logger.debug("Category extraction: score section matched %d", len(categories))
    else:
        categories = _strategy_inline(text)
        if categories:
            logger.info(
                "Category extraction: fell back to inline patterns (%d found)",
                len(categories),
            )
        else:
            logger.info("Category extraction: no category scores found")

    return _apply_custom_clauses(text, categories)
