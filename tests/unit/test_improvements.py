"""Tests for improvement suggestion extraction."""

from video_review.parser.improvements import extract_improvements, split_suggestions


class TestExtractImprovements:
    def test_sample_response(self, sample_response):
        improvements = extract_improvements(sample_response)
        assert [i.category for i in improvements] == [
            "Clarity and Presentation",
            "Engagement",
        ]
        assert improvements[0].suggestions == [
            "Improve lighting in the recording space.",
            "Use a better camera or a tripod.",
        ]
        assert improvements[1].suggestions == [
            "Vary the tone of voice.",
            "Show how the product works in daily use.",
        ]

    def test_no_section(self):
        assert extract_improvements("Total Score: 9\n- Clarity: 9/10\n") == []
        assert extract_improvements("") == []

    def test_section_without_labels(self):
        text = "## Suggested Improvements\n\nNone needed, great job.\n"
        assert extract_improvements(text) == []

    def test_alternate_heading(self):
        text = "## Improvement Suggestions\n\n**Engagement:** Smile more\n"
        improvements = extract_improvements(text)
        assert improvements[0].category == "Engagement"
        assert improvements[0].suggestions == ["Smile more."]

    def test_bulleted_suggestions(self):
        text = (
            "## Suggested Improvements\n\n"
            "* **Engagement:**\n"
            "  - Vary tone\n"
            "  - Add B-roll footage\n"
        )
        improvements = extract_improvements(text)
        assert improvements[0].suggestions == ["Vary tone.", "Add B-roll footage."]

    def test_numbered_suggestions(self):
        text = (
            "## Suggested Improvements\n\n"
            "**Clarity:** 1. Improve lighting 2. Use a microphone\n"
        )
        improvements = extract_improvements(text)
        assert improvements[0].suggestions == ["Improve lighting.", "Use a microphone."]

    def test_repeated_category_merged(self):
        text = (
            "## Suggested Improvements\n\n"
            "**Clarity:** Improve lighting.\n\n"
            "**Engagement:** Smile more.\n\n"
            "**clarity:** Use a microphone.\n"
        )
        improvements = extract_improvements(text)
        assert [i.category for i in improvements] == ["Clarity", "Engagement"]
        assert improvements[0].suggestions == ["Improve lighting.", "Use a microphone."]

    def test_artifact_only_segment_dropped(self):
        text = (
            "## Suggested Improvements\n\n"
            "**Engagement:** .\n\n"
            "**Clarity:** Improve lighting.\n"
        )
        improvements = extract_improvements(text)
        assert [i.category for i in improvements] == ["Clarity"]

    def test_section_ends_at_next_heading(self):
        text = (
            "## Suggested Improvements\n\n"
            "**Clarity:** Improve lighting.\n\n"
            "## Closing Notes\n\n"
            "**Engagement:** Not an improvement.\n"
        )
        assert [i.category for i in extract_improvements(text)] == ["Clarity"]

    def test_title_mentioned_in_prose_before_heading(self):
        text = (
            "**Total Score:** 5/10\n\n"
            "The main gaps are covered under Suggested Improvements below.\n\n"
            "## Suggested Improvements\n\n"
            "* **Clarity:** Use a lapel mic. Improve lighting.\n"
        )
        improvements = extract_improvements(text)
        assert [i.category for i in improvements] == ["Clarity"]
        assert improvements[0].suggestions == ["Use a lapel mic.", "Improve lighting."]

    def test_title_in_prose_without_heading(self):
        text = "Here are my Suggested Improvements for you:\n**Clarity:** Use a tripod.\n"
        improvements = extract_improvements(text)
        assert improvements[0].category == "Clarity"
        assert improvements[0].suggestions == ["Use a tripod."]


class TestSplitSuggestions:
    def test_terminal_punctuation_kept(self):
        assert split_suggestions("Is the hook strong enough? Try a question!") == [
            "Is the hook strong enough? Try a question!",
        ]

    def test_bullet_characters(self):
        assert split_suggestions("• Add captions • Trim the intro") == [
            "Add captions.",
            "Trim the intro.",
        ]

    def test_bold_markup_removed(self):
        assert split_suggestions("Use a **tripod**. ") == ["Use a tripod."]
