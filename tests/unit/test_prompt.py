"""Tests for prompt template loading and filling."""

from pathlib import Path

import pytest

from video_review.analyzer.prompt import (
    NO_CUSTOM_SECTION,
    build_custom_score_lines,
    build_prompt,
    load_prompt_template,
)


class TestLoadPromptTemplate:
    def test_version_hash(self, tmp_path):
        path = tmp_path / "prompt.txt"
        path.write_text("Review {video_url}", encoding="utf-8")
        content, version = load_prompt_template(path)
        assert content == "Review {video_url}"
        assert len(version) == 12
        assert version == load_prompt_template(path)[1]

    def test_missing_template(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_prompt_template(tmp_path / "missing.txt")


class TestBuildPrompt:
    def test_with_custom_categories(self, template_path: Path):
        template, _ = load_prompt_template(template_path)
        prompt = build_prompt(template, "gs://bucket/video.mp4", ["Talking head", "Logo"])
        assert "   - Custom Category: Talking head" in prompt
        assert "   - Custom Category: Logo" in prompt
        assert "              * Talking head" in prompt
        assert "MUST be evaluated separately" in prompt
        assert prompt.rstrip().endswith("The video is available at: gs://bucket/video.mp4")

    def test_without_custom_categories(self, template_path: Path):
        template, _ = load_prompt_template(template_path)
        prompt = build_prompt(template, "gs://bucket/video.mp4", [])
        assert NO_CUSTOM_SECTION in prompt
        assert "Custom Category:" not in prompt

    def test_blank_criteria_ignored(self):
        assert build_custom_score_lines([]) == ""
        prompt = build_prompt("{custom_score_lines}|{custom_section}|{video_url}", "u", ["", " "])
        assert prompt == f"|{NO_CUSTOM_SECTION}|u"
