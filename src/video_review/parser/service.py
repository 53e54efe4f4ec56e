"""Top-level orchestrator: raw model text in, AnalysisResult out.

Runs the extraction facets in a fixed order.  Each facet degrades to an
empty value on malformed input, so parsing never fails; the worst case is
an AnalysisResult with no categories and a null total.
"""

from __future__ import annotations

import datetime
import logging
from collections.abc import Sequence

from video_review.parser.categories import extract_categories, extract_total_score
from video_review.parser.framing import CUSTOM_FRAMING, CategoryFraming
from video_review.parser.improvements import extract_improvements
from video_review.parser.reconciler import (
    DEFAULT_SCORE,
    FULFILLED_THRESHOLD,
    reconcile,
)
from video_review.parser.schemas import AnalysisResult, CustomCategoryDeclaration
from video_review.parser.scoring import compute_total, provisional_total
from video_review.parser.summary import summarize

logger = logging.getLogger(__name__)


def parse_analysis(
    text: str,
    declarations: Sequence[CustomCategoryDeclaration] = (),
    *,
    framing: CategoryFraming = CUSTOM_FRAMING,
    default_score: int = DEFAULT_SCORE,
    fulfilled_threshold: int = FULFILLED_THRESHOLD,
    analysis_date: datetime.datetime | None = None,
) -> AnalysisResult:
    """Parse a model response into a structured analysis record.

    Pipeline:
        1. Extract the explicit total and the per-category scores.
        2. Reconcile declared custom categories, falling back to the
           provisional total for unmatched declarations.
        3. Extract improvement suggestions.
        4. Aggregate the final total.
        5. Generate the summary.

    Args:
        text: Raw Markdown response from the model.
        declarations: Requester-declared custom categories.
        framing: Custom vs. merchant framing.
        default_score: Reconciliation score when nothing else is known.
        fulfilled_threshold: Minimum score for a fulfilled declaration.
        analysis_date: Timestamp for the record; defaults to now (UTC).

    Returns:
        The AnalysisResult.  ``total_score`` is None only when there was no
        explicit total, no category and no declaration.
    """
    text = text or ""

    explicit_total = extract_total_score(text)
    categories = extract_categories(text)
    logger.debug(
        "Parsed response: explicit_total=%s, categories=%d",
        explicit_total,
        len(categories),
    )

    reconciled = reconcile(
        declarations,
        categories,
        provisional_total(explicit_total, categories),
        framing=framing,
        default_score=default_score,
        fulfilled_threshold=fulfilled_threshold,
    )

    improvements = extract_improvements(text)

    if explicit_total is None and not categories and not reconciled:
        total_score = None
        logger.warning("No score data found in response (%d chars)", len(text))
    else:
        total_score = compute_total(explicit_total, categories, reconciled, framing)

    summary = summarize(categories, total_score, reconciled, framing)

    fields = {
        "total_score": total_score,
        "categories": categories,
        "custom_categories": reconciled,
        "improvements": improvements,
        "summary": summary,
        "framing": framing,
    }
    if analysis_date is not None:
        fields["analysis_date"] = analysis_date

    result = AnalysisResult(**fields)
    logger.info(
        "Analysis parsed: total=%s, categories=%d, %s=%d, improvements=%d",
        result.total_score,
        len(result.categories),
        framing.field_name,
        len(result.custom_categories),
        len(result.improvements),
    )
    return result
