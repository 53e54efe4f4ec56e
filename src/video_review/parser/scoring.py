"""Deterministic score aggregation. Pure math, no model calls.

The authoritative total is the model's explicit ``Total Score`` when it gave
one.  Otherwise a fallback is computed from the extracted categories.

The prompt asks the model to weight general quality 65% and custom
categories 35%, but the fallback here is an unweighted mean over every
category.  The weighting is a request to the model only.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from video_review.parser.framing import CUSTOM_FRAMING, CategoryFraming
from video_review.parser.reconciler import find_bucket_category
from video_review.parser.schemas import CategoryResult, ReconciledCustomCategory

MIN_TOTAL = 0.0
MAX_TOTAL = 10.0


def round_score(value: float) -> float:
    """Round half-up to one decimal place (5.25 -> 5.3, not banker's 5.2)."""
    return float(Decimal(str(value)).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _clamp(value: float) -> float:
    return max(MIN_TOTAL, min(MAX_TOTAL, value))


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def compute_total(
    explicit_total: float | None,
    categories: Sequence[CategoryResult],
    custom_categories: Sequence[ReconciledCustomCategory] = (),
    framing: CategoryFraming = CUSTOM_FRAMING,
) -> float:
    """Determine the overall score in [0, 10], rounded to one decimal.

    Priority:
        1. The model's explicit total.
        2. No standard categories: mean of custom category scores.
        3. Standard categories only, or a merchant/custom bucket already
           among them: mean of standard scores.
        4. Both present: unweighted mean over standard and custom scores.
        5. Nothing at all: 0.

    Args:
        explicit_total: Total parsed from the response, or None.
        categories: Extracted standard categories.
        custom_categories: Reconciled custom categories.
        framing: Framing used to recognise a bucket category.

    Returns:
        The total score.
    """
    if explicit_total is not None:
        return round_score(_clamp(explicit_total))

    standard = [c.score for c in categories]
    custom = [c.score for c in custom_categories]

    if not standard:
        return round_score(_clamp(_mean(custom))) if custom else 0.0

    if not custom or find_bucket_category(categories, framing) is not None:
        return round_score(_clamp(_mean(standard)))

    return round_score(_clamp(_mean(standard + custom)))


def provisional_total(
    explicit_total: float | None,
    categories: Sequence[CategoryResult],
) -> float | None:
    """Overall score known before custom categories are reconciled.

    Used as the reconciliation fallback for unmatched declarations: the
    explicit total, else the mean of standard categories, else None.
    """
    if explicit_total is not None:
        return compute_total(explicit_total, categories)
    if categories:
        return compute_total(None, categories)
    return None
