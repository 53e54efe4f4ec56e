"""Video Review Analyzer -- command-line entry point.

Startup sequence:
    1. Parse arguments
    2. Load pipeline configuration (needed for log_dir)
    3. Setup logging (must happen before any code that logs)
    4. Load analysis and scoring configuration
    5. Either parse a saved model response offline, or call Gemini
    6. Print the JSON envelope, optionally write the Markdown report

Exit code is 0 on success and 1 when the analysis fails.
"""

import argparse
import datetime
import json
import logging
import sys
from pathlib import Path

from video_review.analyzer import VideoAnalysis, analyze_video, create_client
from video_review.analyzer.validator import validate_analysis_request
from video_review.config import load_all_settings
from video_review.config.settings import PROJECT_ROOT
from video_review.errors import AnalysisError
from video_review.formatter import resolve_report_path, write_report_file
from video_review.logging import setup_logging
from video_review.parser import declarations_from_criteria, get_framing, parse_analysis

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Score a product review video with Gemini and print structured results.",
    )
    parser.add_argument(
        "video_url",
        nargs="?",
        default="",
        help="Google Drive or gs:// URL of the review video",
    )
    parser.add_argument(
        "-c",
        "--criterion",
        dest="criteria",
        action="append",
        default=[],
        help="Custom category to evaluate (repeatable)",
    )
    parser.add_argument(
        "--sample",
        action="store_true",
        help="Analyze the public sample video instead of VIDEO_URL",
    )
    parser.add_argument(
        "--response-file",
        type=Path,
        help="Parse a saved model response instead of calling Gemini",
    )
    parser.add_argument(
        "--report",
        nargs="?",
        const="",
        help=(
            "Also write an enhanced Markdown report. A bare file name (or no "
            "value) is placed in the configured reports directory"
        ),
    )
    parser.add_argument(
        "--framing",
        choices=("custom", "merchant"),
        help="Override the configured custom-category framing",
    )
    return parser


def _parse_saved_response(path: Path, criteria: list[str], scoring) -> VideoAnalysis:
    """Run the parser over a response saved to disk (no model call)."""
    if not path.exists():
        raise AnalysisError(404, f"Response file not found: {path}")
    raw_text = path.read_text(encoding="utf-8")
    logger.info("Parsing saved response %s (%d chars)", path, len(raw_text))
    structured = parse_analysis(
        raw_text,
        declarations_from_criteria(criteria),
        framing=get_framing(scoring.framing),
        default_score=scoring.default_custom_score,
        fulfilled_threshold=scoring.fulfilled_threshold,
    )
    return VideoAnalysis(
        structured_data=structured,
        raw_text=raw_text,
        model="offline",
        timestamp=datetime.datetime.now(datetime.UTC).isoformat(),
    )


def main(argv: list[str] | None = None) -> int:
    """Run one video analysis from the command line."""
    args = build_parser().parse_args(argv)

    # 1. Load config first -- pipeline settings are needed for logging
    analysis, scoring, pipeline = load_all_settings()

    # 2. Setup logging BEFORE anything else logs
    setup_logging(
        log_dir=pipeline.log_dir,
        max_bytes=pipeline.log_max_bytes,
        backup_count=pipeline.log_backup_count,
    )
    logger.info("Video Review Analyzer starting")

    if args.framing:
        scoring = scoring.model_copy(update={"framing": args.framing})

    logger.info(
        "Config loaded -- analysis: model=%s, location=%s; scoring: framing=%s, threshold=%s",
        analysis.model,
        analysis.location,
        scoring.framing,
        scoring.fulfilled_threshold,
    )

    try:
        if args.response_file:
            if args.video_url:
                validate_analysis_request(args.video_url, args.criteria)
            result = _parse_saved_response(args.response_file, args.criteria, scoring)
        else:
            client = create_client(analysis)
            result = analyze_video(
                args.video_url,
                args.criteria,
                client=client,
                settings=analysis,
                scoring=scoring,
                use_sample_video=args.sample,
            )
    except AnalysisError as e:
        logger.error("Analysis failed: %s", e)
        print(json.dumps(e.to_envelope(), indent=2, ensure_ascii=False))
        return 1

    print(json.dumps(result.to_envelope(), indent=2, ensure_ascii=False))

    if args.report is not None:
        report_path = resolve_report_path(args.report, PROJECT_ROOT / pipeline.reports_dir)
        write_report_file(report_path, result.structured_data)

    logger.info("Run complete")
    return 0


if __name__ == "__main__":
    sys.exit(main() or 0)
