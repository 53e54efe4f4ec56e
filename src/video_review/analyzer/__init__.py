"""Gemini video analysis: prompt, request validation, model call.

Public API:
    create_client(settings) -> genai.Client
    analyze_video(video_url, custom_criteria, client=..., settings=...)
        -> VideoAnalysis
"""

from __future__ import annotations

from video_review.analyzer.service import analyze_video, create_client
from video_review.analyzer.types import VideoAnalysis

__all__ = ["VideoAnalysis", "analyze_video", "create_client"]
