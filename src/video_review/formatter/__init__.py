"""Presentation formatting for parsed analyses."""

from .markdown import render_report, resolve_report_path, write_report_file

__all__ = ["render_report", "resolve_report_path", "write_report_file"]
