"""Shared fixtures: model responses in the dialect Gemini answers with."""

from __future__ import annotations

from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]

SAMPLE_RESPONSE = """\
## Video Review Evaluation

**Total Score:** 7/10

## Individual Category Scores:

- **Honesty and Authenticity:** 8/10
- **Clarity and Presentation:** 6/10
- **Engagement:** 5/10
- **Detail and Information:** 7/10
- **Structure and Organization:** 9/10

### Justification

* **Honesty and Authenticity:** The reviewer shares both positives and negatives.
* **Clarity and Presentation:** Audio is clear but the lighting is dim.
* **Engagement:** The delivery is flat in places.

## Suggested Improvements

**Clarity and Presentation:** Improve lighting in the recording space. Use a better camera or a tripod.

**Engagement:** Vary the tone of voice. Show how the product works in daily use.
"""

CUSTOM_RESPONSE = """\
**Total Score:** 6/10

## Individual Category Scores:

- **Clarity and Presentation:** 7/10
- **Engagement:** 5/10

Custom Category: Talking Head: The presenter is on camera for most of the video. Score: 8

Custom Category: Outdoor Setting - Filmed indoors only. Score: 2
"""


@pytest.fixture
def sample_response() -> str:
    return SAMPLE_RESPONSE


@pytest.fixture
def custom_response() -> str:
    return CUSTOM_RESPONSE


@pytest.fixture
def template_path() -> Path:
    return PROJECT_ROOT / "config" / "prompts" / "video_review.txt"
