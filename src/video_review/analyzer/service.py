"""Core analysis service: Gemini invocation and response parsing.

Sends the review prompt plus the video file reference to Gemini on Vertex
AI, takes the Markdown answer, and runs it through the response parser.
The ``genai.Client`` is built once by the caller (see :func:`create_client`)
and passed in, so tests can substitute a fake with the same
``client.models.generate_content`` surface.
"""

from __future__ import annotations

import datetime
import logging
import time

from google import genai
from google.genai import types

from video_review.analyzer.prompt import build_prompt, load_prompt_template
from video_review.analyzer.types import VideoAnalysis
from video_review.analyzer.validator import resolve_file_uri, validate_analysis_request
from video_review.config.settings import PROJECT_ROOT, AnalysisSettings, ScoringSettings
from video_review.errors import AnalysisError
from video_review.parser import declarations_from_criteria, get_framing, parse_analysis

logger = logging.getLogger(__name__)

VIDEO_MIME_TYPE = "video/mp4"

_ACCESS_MARKERS = ("permission", "access", "cannot fetch content from the provided url")
_NOT_FOUND_MARKERS = ("not found", "invalid")


def create_client(settings: AnalysisSettings) -> genai.Client:
    """Build the Vertex AI Gemini client once at process start."""
    logger.info(
        "Creating Gemini client: project=%s, location=%s",
        settings.project_id or "<default>",
        settings.location,
    )
    return genai.Client(
        vertexai=True,
        project=settings.project_id or None,
        location=settings.location,
    )


def _map_model_error(exc: Exception, video_url: str, sample_url: str) -> AnalysisError:
    """Translate a model-call failure into an AnalysisError with a status code."""
    message = str(exc).lower()
    code = getattr(exc, "code", None)

    if code == 403 or any(marker in message for marker in _ACCESS_MARKERS):
        if "drive.google.com" in video_url:
            return AnalysisError(
                403,
                "Unable to access the Google Drive video. Please use a Google "
                "Cloud Storage URL instead (gs://). For testing, you can use: "
                f"{sample_url}",
            )
        return AnalysisError(
            403, "Unable to access the video. Please check the URL and permissions."
        )

    if code == 404 or any(marker in message for marker in _NOT_FOUND_MARKERS):
        return AnalysisError(404, "Video not found or invalid URL format.")

    return AnalysisError(500, "Error analyzing video. Please try again later.")


def _generate(
    client: genai.Client,
    settings: AnalysisSettings,
    prompt: str,
    file_uri: str,
) -> str:
    """Call Gemini with the prompt and video part; return the answer text."""
    contents = [
        types.Content(
            role="user",
            parts=[
                types.Part.from_text(text=prompt),
                types.Part.from_uri(file_uri=file_uri, mime_type=VIDEO_MIME_TYPE),
            ],
        )
    ]
    config = None
    if settings.temperature is not None:
        config = types.GenerateContentConfig(temperature=settings.temperature)

    logger.info("Sending request to Gemini: model=%s, file_uri=%s", settings.model, file_uri)
    resp = client.models.generate_content(
        model=settings.model, contents=contents, config=config
    )
    return (resp.text or "").strip()


def analyze_video(
    video_url: str,
    custom_criteria: list[str] | None = None,
    *,
    client: genai.Client,
    settings: AnalysisSettings,
    scoring: ScoringSettings | None = None,
    use_sample_video: bool = False,
) -> VideoAnalysis:
    """Analyze a review video with Gemini and return the structured result.

    This is the main public function.  It validates the request, builds the
    prompt from the template, invokes the model, and parses the Markdown
    answer into an AnalysisResult.

    Args:
        video_url: Google Drive or GCS URL of the video.
        custom_criteria: Requester-declared categories, as typed.
        client: Gemini client (or a stand-in with the same surface).
        settings: Analysis configuration (model, template, sample video).
        scoring: Parsing configuration; defaults are used when None.
        use_sample_video: Ignore *video_url* and analyze the public sample.

    Returns:
        VideoAnalysis with the parsed record and call metadata.

    Raises:
        AnalysisRequestError: If the request is invalid (400).
        AnalysisError: If the model call fails (403, 404 or 500).
    """
    scoring = scoring or ScoringSettings()

    if use_sample_video:
        video_url = settings.sample_video_url
        logger.info("Using sample video for testing: %s", video_url)
    else:
        validate_analysis_request(video_url, custom_criteria)

    declarations = declarations_from_criteria(list(custom_criteria or []))
    concise = [d.display_name for d in declarations]

    # --- Build the prompt ---
    template, version_hash = load_prompt_template(PROJECT_ROOT / settings.template_path)
    prompt = build_prompt(template, video_url, concise)
    file_uri = resolve_file_uri(video_url)

    # --- Invoke Gemini ---
    start = time.monotonic()
    try:
        raw_text = _generate(client, settings, prompt, file_uri)
    except Exception as exc:
        logger.exception("Gemini call failed for %s", video_url)
        raise _map_model_error(exc, video_url, settings.sample_video_url) from exc
    processing_time = time.monotonic() - start

    if not raw_text:
        logger.error("Gemini returned an empty response for %s", video_url)
        raise AnalysisError(500, "Error analyzing video. Please try again later.")

    # --- Parse the Markdown answer ---
    structured = parse_analysis(
        raw_text,
        declarations,
        framing=get_framing(scoring.framing),
        default_score=scoring.default_custom_score,
        fulfilled_threshold=scoring.fulfilled_threshold,
    )

    logger.info(
        "Video analysis complete in %.1fs (model=%s, total=%s)",
        processing_time,
        settings.model,
        structured.total_score,
    )

    return VideoAnalysis(
        structured_data=structured,
        raw_text=raw_text,
        model=settings.model,
        prompt_version=version_hash,
        processing_time_seconds=processing_time,
        timestamp=datetime.datetime.now(datetime.timezone.utc).isoformat(),
    )
