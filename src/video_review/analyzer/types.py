"""Shared types for the video analysis service."""

from dataclasses import dataclass

from video_review.parser.schemas import AnalysisResult


@dataclass
class VideoAnalysis:
    """Result of analyzing a single video via Gemini.

    Attributes:
        structured_data: Parsed record built from the model's answer.
        raw_text: Raw Markdown text returned by the model.
        model: Gemini model name used.
        prompt_version: SHA-256 hash prefix of the prompt template file.
        processing_time_seconds: Wall-clock time for the model call.
        timestamp: ISO 8601 timestamp of analysis completion.
    """

    structured_data: AnalysisResult
    raw_text: str = ""
    model: str = ""
    prompt_version: str = ""
    processing_time_seconds: float = 0.0
    timestamp: str = ""

    def to_envelope(self) -> dict:
        """Return the ``{status, data}`` success envelope."""
        return {
            "status": "success",
            "data": {
                "structuredData": self.structured_data.to_json_dict(),
                "rawText": self.raw_text,
                "model": self.model,
                "promptVersion": self.prompt_version,
                "processingTimeSeconds": round(self.processing_time_seconds, 3),
                "timestamp": self.timestamp,
            },
        }
