"""Enhanced Markdown report rendering for a parsed analysis.

Rendering reads an immutable AnalysisResult and produces presentation text
only; nothing here feeds back into the record.  Reports can be written to
disk with YAML frontmatter carrying the headline numbers.

Public API:
    render_report(result) -> str
    write_report_file(path, result) -> Path
    resolve_report_path(target, reports_dir) -> Path
"""

from __future__ import annotations

import datetime
import logging
import re
from pathlib import Path

import frontmatter

from video_review.parser.framing import CategoryFraming
from video_review.parser.schemas import AnalysisResult

logger = logging.getLogger(__name__)

PASS_THRESHOLD = 7

FOOTER = (
    '<div align="center">🚀 **Enhance clarity, engagement & quality for a '
    "stronger impact!** 🚀</div>"
)
FALLBACK_SECOND_LINE = (
    "Focus on these key areas to significantly improve viewer engagement "
    "and effectiveness."
)

# Checked in order; first substring hit wins.
_CATEGORY_EMOJI = (
    ("clarity", "🔍"),
    ("relevance", "🎯"),
    ("engagement", "💫"),
    ("quality", "🎬"),
    ("authenticity", "✨"),
    ("persuasiveness", "🔊"),
    ("talking head", "👤"),
    ("product demonstration", "🔍"),
)
_DEFAULT_EMOJI = "📌"

_KEY_PHRASES = (
    "product or service",
    "brand",
    "relevant details",
    "irrelevant tangents",
    "demonstrate the product",
    "features and benefits",
    "improve lighting",
    "better camera",
    "video quality",
    "clearly show",
    "demonstrate its features",
    "how the product works",
    "benefits it provides",
    "professionalism",
    "viewer retention",
    "product messaging",
    "effectiveness",
)
# Longest first so a phrase is never bolded inside a longer bolded phrase.
_KEY_PHRASE_RE = re.compile(
    "|".join(re.escape(p) for p in sorted(_KEY_PHRASES, key=len, reverse=True)),
    re.IGNORECASE,
)

_SENTENCE_BREAK_RE = re.compile(r"(?<=\.)\s+")


def _format_score(score: float) -> str:
    return str(int(score)) if float(score).is_integer() else f"{score:.1f}"


def score_description(score: float) -> str:
    """Describe an overall score in one sentence."""
    if score >= 9:
        return "This video is excellent and highly effective."
    if score >= 7:
        return "This video is good with minor areas for improvement."
    if score >= 5:
        return "This video is average and has several areas for improvement."
    if score >= 3:
        return "This video requires significant improvements to be effective."
    return "This video needs a complete overhaul to be effective."


def category_emoji(name: str) -> str:
    """Pick an emoji for a category by keyword."""
    lowered = name.lower()
    for keyword, emoji in _CATEGORY_EMOJI:
        if keyword in lowered:
            return emoji
    return _DEFAULT_EMOJI


def bold_key_phrases(text: str) -> str:
    """Wrap known key phrases in ``**bold**``, preserving their case."""
    return _KEY_PHRASE_RE.sub(lambda m: f"**{m.group(0)}**", text)


def split_summary_lines(summary: str) -> tuple[str, str]:
    """Split a summary into a headline sentence and the remainder.

    A single-sentence summary gets a generic second line.
    """
    parts = _SENTENCE_BREAK_RE.split(summary.strip(), maxsplit=1)
    if len(parts) == 2 and parts[1]:
        return parts[0], parts[1]
    return summary.strip(), FALLBACK_SECOND_LINE


def _is_displayable(suggestion: str) -> bool:
    stripped = suggestion.strip()
    return len(stripped) > 1 and stripped not in (".", "-.")


def _table_cell(text: str) -> str:
    return " ".join(text.split()).replace("|", "\\|") or "-"


def _format_date(value: datetime.datetime) -> str:
    return f"{value:%B} {value.day}, {value.year}"


def render_report(result: AnalysisResult, framing: CategoryFraming | None = None) -> str:
    """Render the enhanced Markdown report for *result*.

    Args:
        result: Parsed analysis record.
        framing: Wording for the declared-category table; defaults to the
            framing the record was parsed with.

    Returns:
        The report as a Markdown string.
    """
    framing = framing or result.framing
    lines: list[str] = [
        "# 📽️ Video Analysis Report",
        "",
        f"*Analyzed on {_format_date(result.analysis_date)}*",
        "",
        "## 📊 Overall Assessment",
        "",
    ]

    if result.total_score is None:
        lines += ["**Total Score: N/A**", "", "❔ *No score data was found in the response.*"]
    else:
        mark = "✅" if result.total_score >= PASS_THRESHOLD else "❌"
        lines += [
            f"**Total Score: {_format_score(result.total_score)}/10**",
            "",
            f"{mark} *{score_description(result.total_score)}*",
        ]

    lines += ["", "---", "", "## 📋 Category Breakdown", ""]
    if result.categories:
        lines += [
            "| **Category** | **Score** | **Assessment** |",
            "|-------------|:--------:|---------------|",
        ]
        for category in result.categories:
            lines.append(
                f"| {category_emoji(category.name)} **{_table_cell(category.name)}** "
                f"| **{category.score}/10** | {_table_cell(category.assessment)} |"
            )
    else:
        lines.append("No category scores were found.")

    if result.custom_categories:
        lines += [
            "",
            f"### 🧩 {framing.label.title()}",
            "",
            "| **Requirement** | **Score** | **Met** |",
            "|-------------|:--------:|:-------:|",
        ]
        for custom in result.custom_categories:
            met = "✅" if custom.fulfilled else "❌"
            lines.append(
                f"| {_table_cell(custom.name)} | **{_format_score(custom.score)}/10** | {met} |"
            )

    lines += ["", "---", "", "## 🚀 Improvement Recommendations", ""]
    if result.improvements:
        for improvement in result.improvements:
            lines += [
                f"### {category_emoji(improvement.category)} "
                f"**{improvement.category} Enhancements**",
                "",
            ]
            suggestions = [s for s in improvement.suggestions if _is_displayable(s)]
            if suggestions:
                lines += [f"✅ {bold_key_phrases(s)}  " for s in suggestions]
            else:
                lines.append("No specific suggestions provided.")
            lines.append("")
    else:
        lines += ["No specific improvements needed at this time.", ""]

    first, second = split_summary_lines(result.summary)
    lines += [
        "---",
        "",
        "## 📝 Summary",
        "",
        f"📌 {first}  ",
        f"🔹 {second}  ",
        "",
        "---",
        "",
        FOOTER,
        "",
    ]
    return "\n".join(lines)


def write_report_file(
    report_path: Path,
    result: AnalysisResult,
    framing: CategoryFraming | None = None,
) -> Path:
    """Write the rendered report to disk with YAML frontmatter metadata.

    Frontmatter fields:

    - ``total_score``: Overall score, or null when none was found
    - ``analysis_date``: ISO-8601 timestamp of the analysis
    - ``category_count``: Number of extracted categories
    - ``generated_at``: UTC ISO-8601 timestamp of report generation

    Args:
        report_path: Destination path for the Markdown file.
        result: Parsed analysis record.
        framing: Optional framing override for the report wording.

    Returns:
        The path written.
    """
    post = frontmatter.Post(render_report(result, framing))
    post.metadata["total_score"] = result.total_score
    post.metadata["analysis_date"] = result.analysis_date.isoformat()
    post.metadata["category_count"] = len(result.categories)
    post.metadata["generated_at"] = datetime.datetime.now(datetime.UTC).isoformat()

    report_path.parent.mkdir(parents=True, exist_ok=True)
    with open(report_path, "w", encoding="utf-8") as f:
        f.write(frontmatter.dumps(post))

    logger.info(
        "Wrote report to %s (total=%s, %d categories)",
        report_path,
        result.total_score,
        len(result.categories),
    )
    return report_path


def resolve_report_path(
    target: str,
    reports_dir: Path,
    now: datetime.datetime | None = None,
) -> Path:
    """Turn a ``--report`` argument into a destination path.

    An empty target names a timestamped file in *reports_dir*, a bare file
    name is placed in *reports_dir*, and anything with a directory part is
    used as given.
    """
    if not target:
        now = now or datetime.datetime.now(datetime.UTC)
        return reports_dir / f"review_{now:%Y%m%d_%H%M%S}.md"
    path = Path(target)
    if path.is_absolute() or path.parent != Path("."):
        return path
    return reports_dir / path
