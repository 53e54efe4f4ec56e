"""Logging for the analyzer CLI and smoke runs.

Two handlers hang off the root logger:
    1. ``<log_dir>/analysis.log`` -- JSON lines (timestamp, level, component,
       message) at DEBUG, rotated by size. Parser fallback decisions, score
       clamping warnings and Gemini call timings all land here.
    2. stderr -- short text lines at INFO. stdout is reserved for the JSON
       envelope printed by ``main.py``, so the console handler never writes
       there.

``main.py`` calls setup_logging() once with the ``PipelineSettings`` values;
the smoke script points ``log_dir`` at its own directory. Modules under
``video_review`` only call logging.getLogger(__name__).
"""

import logging
import logging.handlers
import sys
from pathlib import Path

from pythonjsonlogger.json import JsonFormatter


def setup_logging(
    log_dir: str = "logs",
    log_level_file: int = logging.DEBUG,
    log_level_console: int = logging.INFO,
    max_bytes: int = 10_485_760,  # 10MB
    backup_count: int = 5,
    log_filename: str = "analysis.log",
) -> None:
    """Attach the JSON file handler and the stderr console handler.

    Creates *log_dir* if needed. Existing root handlers are removed first,
    so a second call replaces the setup instead of doubling every line.

    Args:
        log_dir: Directory for log files.
        log_level_file: Logging level for the file handler (default DEBUG).
        log_level_console: Logging level for the console handler (default INFO).
        max_bytes: Maximum size per log file before rotation (default 10MB).
        backup_count: Number of rotated backup files to keep (default 5).
        log_filename: Name of the JSON log file inside *log_dir*.
    """
    Path(log_dir).mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture everything; handlers filter
    root_logger.handlers.clear()

    # --- File handler: JSON format, rotating ---
    file_handler = logging.handlers.RotatingFileHandler(
        filename=str(Path(log_dir) / log_filename),
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    file_handler.setLevel(log_level_file)

    json_formatter = JsonFormatter(
        fmt="%(asctime)s %(name)s %(levelname)s %(message)s",
        rename_fields={
            "asctime": "timestamp",
            "levelname": "level",
            "name": "component",
        },
        datefmt="%Y-%m-%dT%H:%M:%S",
    )
    file_handler.setFormatter(json_formatter)

    # --- Console handler: human-readable text ---
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level_console)

    text_formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    console_handler.setFormatter(text_formatter)

    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)
