"""Configuration package -- typed, validated settings from YAML + .env."""

from .settings import AnalysisSettings, PipelineSettings, ScoringSettings

__all__ = [
    "AnalysisSettings",
    "PipelineSettings",
    "ScoringSettings",
    "load_all_settings",
]


def load_all_settings() -> tuple[AnalysisSettings, ScoringSettings, PipelineSettings]:
    """Load and return all configuration objects.

    Returns a tuple of (AnalysisSettings, ScoringSettings, PipelineSettings),
    each populated from its own YAML file with environment variable overrides.
    """
    return AnalysisSettings(), ScoringSettings(), PipelineSettings()
