"""Logging configuration for the CLI and smoke runs."""

from .setup import setup_logging

__all__ = ["setup_logging"]
