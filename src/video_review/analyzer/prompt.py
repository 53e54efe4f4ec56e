"""Prompt template management for video review analysis.

Loads the prompt template from disk, computes a version hash for
traceability, and fills the template placeholders with the video URL and
the requester's custom categories.
"""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Sequence
from pathlib import Path

logger = logging.getLogger(__name__)

NO_CUSTOM_SECTION = """\
II. Custom Categories Evaluation:
      * No custom categories provided for this evaluation."""


def load_prompt_template(template_path: Path) -> tuple[str, str]:
    """Load prompt template from disk and compute its version hash.

    Args:
        template_path: Absolute or relative path to the template file.

    Returns:
        Tuple of (template_content, version_hash) where version_hash is
        the first 12 hex characters of the SHA-256 digest.

    Raises:
        FileNotFoundError: If the template file does not exist.
    """
    if not template_path.exists():
        msg = f"Prompt template not found: {template_path}"
        raise FileNotFoundError(msg)

    content = template_path.read_text(encoding="utf-8")
    version_hash = hashlib.sha256(content.encode("utf-8")).hexdigest()[:12]
    logger.info(
        "Loaded prompt template: %s (version %s, %d chars)",
        template_path.name,
        version_hash,
        len(content),
    )
    return content, version_hash


def build_custom_section(custom_criteria: Sequence[str]) -> str:
    """Render section II of the prompt for the declared custom categories.

    The model is asked to score each declared category separately so that
    the response carries one ``Custom Category`` score per declaration.
    """
    if not custom_criteria:
        return NO_CUSTOM_SECTION

    listed = "\n".join(f"              * {c}" for c in custom_criteria)
    return (
        "II. Custom Categories Evaluation:\n\n"
        "   IMPORTANT: The following custom categories MUST be evaluated "
        "separately with individual scores:\n"
        f"{listed}\n\n"
        "   For EACH custom category listed above:\n"
        "      * Evaluate to what extent the video meets this specific category requirement\n"
        "      * Assign a separate score (1-10) to EACH custom category\n"
        "      * Provide specific feedback on how well each requirement is satisfied\n"
        "      * Give actionable advice for improvement if needed"
    )


def build_custom_score_lines(custom_criteria: Sequence[str]) -> str:
    """Render one ``- Custom Category: <name>`` score line per declaration."""
    return "\n".join(f"   - Custom Category: {c}" for c in custom_criteria)


def build_prompt(
    template: str,
    video_url: str,
    custom_criteria: Sequence[str] = (),
) -> str:
    """Fill template placeholders with the video URL and custom categories.

    Args:
        template: Raw template string with ``{variable}`` placeholders.
        video_url: URL of the video under review, as submitted.
        custom_criteria: Concise custom category names, possibly empty.

    Returns:
        The fully populated prompt string.
    """
    criteria = [c for c in custom_criteria if c and c.strip()]
    return template.format(
        video_url=video_url,
        custom_section=build_custom_section(criteria),
        custom_score_lines=build_custom_score_lines(criteria),
    )
