"""Short natural-language summary derived from the scores."""

from __future__ import annotations

from collections.abc import Sequence

from video_review.parser.framing import CUSTOM_FRAMING, CategoryFraming
from video_review.parser.schemas import CategoryResult, ReconciledCustomCategory

UNABLE_TO_SUMMARIZE = "Unable to generate a summary due to missing score data."

# Stand-in name when the response had a total but no per-category scores.
_OVERALL_LABEL = "overall quality"


def _format_score(score: float) -> str:
    return str(int(score)) if float(score).is_integer() else f"{score:.1f}"


def strongest_and_weakest(
    categories: Sequence[CategoryResult],
) -> tuple[CategoryResult, CategoryResult] | None:
    """Return (strongest, weakest) by score; ties go to the first seen."""
    if not categories:
        return None
    strongest = weakest = categories[0]
    for category in categories[1:]:
        if category.score > strongest.score:
            strongest = category
        if category.score < weakest.score:
            weakest = category
    return strongest, weakest


def _custom_clause(
    reconciled: Sequence[ReconciledCustomCategory],
    framing: CategoryFraming,
) -> str:
    unmet = [r.name for r in reconciled if not r.fulfilled]
    if unmet:
        return f" The following {framing.label} still need attention: {', '.join(unmet)}."
    return f" All {framing.label} were met."


def summarize(
    categories: Sequence[CategoryResult],
    total_score: float | None,
    reconciled: Sequence[ReconciledCustomCategory] = (),
    framing: CategoryFraming = CUSTOM_FRAMING,
) -> str:
    """Build a one-paragraph summary from the score band.

    Bands: >= 8 excellent, >= 6 good, >= 4 needs significant improvement,
    otherwise needs a complete overhaul.  The strongest and weakest
    categories are named in lowercase with their scores.  A clause about
    unmet custom categories (or all met) is appended when any were
    reconciled.
    """
    if total_score is None:
        return UNABLE_TO_SUMMARIZE

    pair = strongest_and_weakest(categories)
    if pair is None:
        strong_name = weak_name = _OVERALL_LABEL
        strong_score = weak_score = _format_score(total_score)
    else:
        strongest, weakest = pair
        strong_name, strong_score = strongest.name.lower(), _format_score(strongest.score)
        weak_name, weak_score = weakest.name.lower(), _format_score(weakest.score)

    if total_score >= 8:
        summary = (
            f"This video review is excellent with strong {strong_name} "
            f"({strong_score}/10). Minor improvements to {weak_name} would "
            "further enhance overall effectiveness."
        )
    elif total_score >= 6:
        summary = (
            f"This video review is good with adequate {strong_name} "
            f"({strong_score}/10). Focus on improving {weak_name} "
            f"({weak_score}/10) to enhance viewer engagement and message clarity."
        )
    elif total_score >= 4:
        summary = (
            "This video review requires significant improvements to be "
            f"effective. While {strong_name} ({strong_score}/10) shows some "
            f"promise, major enhancements to {weak_name} ({weak_score}/10) "
            "are needed."
        )
    else:
        summary = (
            f"This video review needs a complete overhaul to improve "
            f"{weak_name} and overall quality. Addressing these issues will "
            "enhance professionalism, viewer retention, and product messaging "
            "effectiveness."
        )

    if reconciled:
        summary += _custom_clause(reconciled, framing)
    return summary
