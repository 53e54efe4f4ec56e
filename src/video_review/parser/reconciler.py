"""Reconcile requester-declared categories with model-reported scores.

Policy:
    1. If the model reported a catch-all bucket category (its name contains
       one of the framing's bucket keywords, e.g. "Merchant-Specific
       Requirements"), that single score applies to every declaration.
    2. Otherwise each declaration is matched independently against the
       extracted categories by fuzzy name; a hit inherits that score.
    3. A miss falls back to the overall score when known, else the neutral
       default.

Each declaration's outcome depends only on the declaration itself and the
extracted categories, so permuting the declarations permutes the output.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from video_review.parser.framing import CUSTOM_FRAMING, CategoryFraming
from video_review.parser.names import contains_keyword, names_match
from video_review.parser.schemas import (
    CategoryResult,
    CustomCategoryDeclaration,
    ReconciledCustomCategory,
)

logger = logging.getLogger(__name__)

DEFAULT_SCORE = 5
FULFILLED_THRESHOLD = 6


def find_bucket_category(
    categories: Sequence[CategoryResult],
    framing: CategoryFraming = CUSTOM_FRAMING,
) -> CategoryResult | None:
    """Return the first category that is a merchant/custom catch-all bucket."""
    for category in categories:
        if contains_keyword(category.name, framing.bucket_keywords):
            return category
    return None


def _match_declaration(
    declaration: CustomCategoryDeclaration,
    categories: Sequence[CategoryResult],
) -> CategoryResult | None:
    """Find the first category fuzzy-matching the declaration's names."""
    for candidate in (declaration.formatted, declaration.raw):
        if not candidate or not candidate.strip():
            continue
        for category in categories:
            if names_match(category.name, candidate):
                return category
    return None


def reconcile(
    declarations: Sequence[CustomCategoryDeclaration],
    categories: Sequence[CategoryResult],
    total_score: float | None = None,
    *,
    framing: CategoryFraming = CUSTOM_FRAMING,
    default_score: int = DEFAULT_SCORE,
    fulfilled_threshold: int = FULFILLED_THRESHOLD,
) -> list[ReconciledCustomCategory]:
    """Attach a score and fulfilled verdict to each declared category.

    Args:
        declarations: Requester-declared categories, in request order.
        categories: Categories extracted from the model response.
        total_score: Overall score used when a declaration has no match.
        framing: Custom vs. merchant framing (decides bucket keywords).
        default_score: Score used when there is no match and no total.
        fulfilled_threshold: Minimum score for ``fulfilled``.

    Returns:
        One ReconciledCustomCategory per declaration, in the same order.
    """
    if not declarations:
        return []

    bucket = find_bucket_category(categories, framing)
    if bucket is not None:
        logger.info(
            "Applying %s bucket score %d/10 (%r) to %d declaration(s)",
            framing.name,
            bucket.score,
            bucket.name,
            len(declarations),
        )

    reconciled: list[ReconciledCustomCategory] = []
    for declaration in declarations:
        matched = bucket or _match_declaration(declaration, categories)
        if matched is not None:
            score: int | float = matched.score
        elif total_score is not None:
            score = total_score
        else:
            score = default_score

        if matched is None:
            logger.debug(
                "No category matched %r, falling back to score %s",
                declaration.display_name,
                score,
            )

        reconciled.append(
            ReconciledCustomCategory(
                declaration=declaration,
                score=score,
                fulfilled=score >= fulfilled_threshold,
                matched_category=matched.name if matched else None,
            )
        )
    return reconciled
