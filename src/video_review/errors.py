"""
Analyzer exceptions.

Provides a small hierarchy for failures that reach the caller:
- VideoReviewError: Base exception for the package
- AnalysisError: Failure with an HTTP-style status code for the service layer
- AnalysisRequestError: Malformed caller input (always 400)

The response parser never raises these; malformed model text degrades to
empty facets instead.
"""

from __future__ import annotations


class VideoReviewError(Exception):
    """Base exception for all video review errors."""


class AnalysisError(VideoReviewError):
    """Analysis failed in a way the caller must report.

    Attributes:
        status_code: HTTP-style status (400, 403, 404, 500).
        message: Human-readable explanation safe to show to end users.
    """

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        self.message = message
        super().__init__(f"{status_code}: {message}")

    def to_envelope(self) -> dict:
        """Return the ``{status, statusCode, message}`` error envelope."""
        return {
            "status": "error",
            "statusCode": self.status_code,
            "message": self.message,
        }


class AnalysisRequestError(AnalysisError):
    """The analysis request itself is invalid (missing URL, bad criteria)."""

    def __init__(self, message: str):
        super().__init__(400, message)
