"""Video URL and request validation.

Only two sources are accepted: Google Drive share links and Google Cloud
Storage object URIs.  Drive links are rewritten to their direct-download
form before they reach the model.
"""

from __future__ import annotations

import logging
import re

from video_review.errors import AnalysisRequestError

logger = logging.getLogger(__name__)

_DRIVE_URL_RE = re.compile(r"^https://drive\.google\.com/(file/d/|open\?id=)([a-zA-Z0-9_-]+)")
_GCS_URL_RE = re.compile(r"^gs://([a-zA-Z0-9_.-]+)/(.+)")

_DRIVE_FILE_PATH_RE = re.compile(r"/file/d/([a-zA-Z0-9_-]+)")
_DRIVE_ID_PARAM_RE = re.compile(r"[?&]id=([a-zA-Z0-9_-]+)")

DRIVE_DOWNLOAD_URL = "https://drive.google.com/uc?export=download&id={file_id}"


def is_valid_drive_url(url: object) -> bool:
    """Return True for ``drive.google.com/file/d/<id>`` or ``open?id=<id>`` links."""
    return isinstance(url, str) and bool(_DRIVE_URL_RE.match(url))


def is_valid_gcs_url(url: object) -> bool:
    """Return True for ``gs://<bucket>/<object>`` URIs."""
    return isinstance(url, str) and bool(_GCS_URL_RE.match(url))


def extract_drive_file_id(url: str) -> str:
    """Pull the file id out of a Google Drive URL.

    Raises:
        AnalysisRequestError: If no file id is present.
    """
    match = _DRIVE_FILE_PATH_RE.search(url) or _DRIVE_ID_PARAM_RE.search(url)
    if match is None:
        raise AnalysisRequestError("Could not extract file ID from Google Drive URL")
    return match.group(1)


def resolve_file_uri(video_url: str) -> str:
    """Return the URI handed to the model for *video_url*.

    Drive links become direct-download URLs; when no file id can be found
    the original URL is used.  GCS and other URLs pass through unchanged.
    """
    if "drive.google.com" not in video_url:
        return video_url
    try:
        file_id = extract_drive_file_id(video_url)
    except AnalysisRequestError:
        logger.warning("No Drive file id in %s, using URL as given", video_url)
        return video_url
    return DRIVE_DOWNLOAD_URL.format(file_id=file_id)


def validate_analysis_request(video_url: object, custom_criteria: object = None) -> None:
    """Check an analysis request before any model call is made.

    Args:
        video_url: Submitted video URL.
        custom_criteria: Submitted custom categories; must be a list when given.

    Raises:
        AnalysisRequestError: On a missing URL, an unsupported URL, or
            criteria that are not a list.
    """
    if not video_url:
        raise AnalysisRequestError("Video URL is required")

    if not (is_valid_drive_url(video_url) or is_valid_gcs_url(video_url)):
        raise AnalysisRequestError(
            "Invalid URL format. Please provide a valid Google Drive or "
            "Google Cloud Storage URL"
        )

    if custom_criteria and not isinstance(custom_criteria, list):
        raise AnalysisRequestError("Custom criteria must be an array")
