"""Tests for the summary generator."""

from video_review.parser.framing import MERCHANT_FRAMING
from video_review.parser.schemas import (
    CategoryResult,
    CustomCategoryDeclaration,
    ReconciledCustomCategory,
)
from video_review.parser.summary import (
    UNABLE_TO_SUMMARIZE,
    strongest_and_weakest,
    summarize,
)


def _cat(name, score):
    return CategoryResult(name=name, score=score)


def _custom(name, score, fulfilled):
    return ReconciledCustomCategory(
        declaration=CustomCategoryDeclaration.from_raw(name),
        score=score,
        fulfilled=fulfilled,
    )


class TestBands:
    def test_excellent(self):
        summary = summarize([_cat("Clarity", 9)], 8.0)
        assert summary == (
            "This video review is excellent with strong clarity (9/10). "
            "Minor improvements to clarity would further enhance overall effectiveness."
        )

    def test_good(self):
        summary = summarize([_cat("Clarity", 8), _cat("Engagement", 5)], 6.5)
        assert summary.startswith("This video review is good with adequate clarity (8/10).")
        assert "Focus on improving engagement (5/10)" in summary

    def test_needs_significant_improvement(self):
        summary = summarize([_cat("Clarity", 7), _cat("Engagement", 3)], 5.0)
        assert summary == (
            "This video review requires significant improvements to be effective. "
            "While clarity (7/10) shows some promise, major enhancements to "
            "engagement (3/10) are needed."
        )

    def test_complete_overhaul(self):
        summary = summarize([_cat("Clarity", 3), _cat("Engagement", 2)], 2.5)
        assert summary.startswith(
            "This video review needs a complete overhaul to improve engagement "
            "and overall quality."
        )

    def test_band_edges(self):
        categories = [_cat("Clarity", 5)]
        assert "excellent" in summarize(categories, 8.0)
        assert "is good" in summarize(categories, 6.0)
        assert "significant improvements" in summarize(categories, 4.0)
        assert "complete overhaul" in summarize(categories, 3.9)


class TestEdgeCases:
    def test_missing_total(self):
        assert summarize([_cat("Clarity", 9)], None) == UNABLE_TO_SUMMARIZE

    def test_total_without_categories(self):
        summary = summarize([], 7.0)
        assert "overall quality (7/10)" in summary

    def test_ties_go_to_first_seen(self):
        categories = [_cat("Clarity", 7), _cat("Engagement", 7)]
        strongest, weakest = strongest_and_weakest(categories)
        assert strongest.name == "Clarity"
        assert weakest.name == "Clarity"

    def test_no_categories_pair(self):
        assert strongest_and_weakest([]) is None


class TestCustomClause:
    def test_unmet_listed(self):
        reconciled = [
            _custom("Talking head", 8, True),
            _custom("Outdoor setting", 2, False),
        ]
        summary = summarize([_cat("Clarity", 8)], 8.0, reconciled)
        assert summary.endswith(
            " The following custom categories still need attention: Outdoor setting."
        )

    def test_all_met_with_merchant_wording(self):
        reconciled = [_custom("Logo", 9, True)]
        summary = summarize([_cat("Clarity", 8)], 8.0, reconciled, MERCHANT_FRAMING)
        assert summary.endswith(" All merchant requirements were met.")

    def test_no_clause_without_declarations(self):
        assert "still need attention" not in summarize([_cat("Clarity", 2)], 2.0)
