"""Tests for category and total score extraction."""

import logging

from video_review.parser.categories import extract_categories, extract_total_score


class TestExtractTotalScore:
    def test_plain(self):
        assert extract_total_score("Total Score: 8") == 8

    def test_bold_with_denominator(self):
        assert extract_total_score("**Total Score:** 7/10") == 7

    def test_parenthetical_label(self):
        assert extract_total_score("1. Total Score (out of 10): 6") == 6

    def test_case_insensitive_without_colon(self):
        assert extract_total_score("total score 9") == 9

    def test_missing(self):
        assert extract_total_score("Clarity: 7/10") is None
        assert extract_total_score("") is None

    def test_clamped(self):
        assert extract_total_score("Total Score: 42") == 10

    def test_very_long_digit_run_clamped(self):
        assert extract_total_score("Total Score: " + "9" * 5000) == 10


class TestScoreSection:
    def test_one_result_per_bullet(self, sample_response):
        categories = extract_categories(sample_response)
        assert [(c.name, c.score) for c in categories] == [
            ("Honesty and Authenticity", 8),
            ("Clarity and Presentation", 6),
            ("Engagement", 5),
            ("Detail and Information", 7),
            ("Structure and Organization", 9),
        ]

    def test_assessments_from_justification_clauses(self, sample_response):
        by_name = {c.name: c for c in extract_categories(sample_response)}
        assert by_name["Clarity and Presentation"].assessment == (
            "Audio is clear but the lighting is dim."
        )
        assert by_name["Engagement"].assessment == "The delivery is flat in places."
        assert by_name["Detail and Information"].assessment == ""

    def test_bold_name_without_assessment(self):
        text = "Total Score: 8\n\n## Individual Category Scores\n- **Clarity:** 9/10\n"
        categories = extract_categories(text)
        assert len(categories) == 1
        assert categories[0].name == "Clarity"
        assert categories[0].score == 9
        assert categories[0].assessment == ""

    def test_section_stops_at_next_heading(self):
        text = (
            "# Individual Category Scores\n"
            "- Clarity: 8/10\n"
            "## Notes\n"
            "- Engagement: 4/10\n"
        )
        assert [c.name for c in extract_categories(text)] == ["Clarity"]

    def test_duplicate_names_keep_first(self):
        text = (
            "## Individual Category Scores\n"
            "- Clarity: 8/10\n"
            "- **clarity:** 3/10\n"
        )
        categories = extract_categories(text)
        assert len(categories) == 1
        assert categories[0].score == 8

    def test_out_of_range_score_clamped_and_logged(self, caplog):
        text = "## Individual Category Scores\n- Clarity: 14/10\n"
        with caplog.at_level(logging.WARNING, logger="video_review.parser.categories"):
            categories = extract_categories(text)
        assert categories[0].score == 10
        assert "clamped" in caplog.text


class TestInlineFallback:
    def test_inline_lines(self):
        text = "Clarity: 7/10\nEngagement: 3/10\n"
        categories = extract_categories(text)
        assert [(c.name, c.score) for c in categories] == [
            ("Clarity", 7),
            ("Engagement", 3),
        ]

    def test_inline_with_dash_comment(self):
        text = "**Clarity:** 7 - Clear audio and framing.\n"
        categories = extract_categories(text)
        assert categories[0].name == "Clarity"
        assert categories[0].score == 7
        assert categories[0].assessment == "Clear audio and framing."

    def test_total_line_is_not_a_category(self):
        text = "Total Score: 6/10\nClarity: 7/10\n"
        assert [c.name for c in extract_categories(text)] == ["Clarity"]

    def test_bare_number_is_ignored(self):
        assert extract_categories("Chapters: 3\n") == []


class TestNoMatch:
    def test_empty_text(self):
        assert extract_categories("") == []
        assert extract_categories("   \n") == []

    def test_prose_only(self):
        assert extract_categories("The review was fine overall.") == []


class TestCustomCategoryClauses:
    def test_clause_appends_new_category(self):
        text = "Custom Category: Talking Head - presenter is visible throughout. Score: 9"
        categories = extract_categories(text)
        assert len(categories) == 1
        assert categories[0].name == "Talking Head"
        assert categories[0].score == 9
        assert categories[0].assessment == (
            "This custom category received a score of 9/10."
        )

    def test_clause_overrides_matching_category(self):
        text = (
            "## Individual Category Scores\n"
            "- **Talking Head:** 6/10\n"
            "- **Engagement:** 5/10\n"
            "\n"
            "Custom Category: Talking Head: presenter appears on camera. Score: 9\n"
        )
        by_name = {c.name: c.score for c in extract_categories(text)}
        assert by_name == {"Talking Head": 9, "Engagement": 5}

    def test_clauses_in_full_response(self, custom_response):
        categories = extract_categories(custom_response)
        assert [(c.name, c.score) for c in categories] == [
            ("Clarity and Presentation", 7),
            ("Engagement", 5),
            ("Talking Head", 8),
            ("Outdoor Setting", 2),
        ]

    def test_total_score_is_not_the_clause_score(self):
        text = "Custom Category: Branding: logo shown. Total Score: 4"
        assert extract_categories(text) == []
