"""Pydantic settings models for the video review analyzer.

Three settings classes load from separate YAML config files with environment
variable override support. Source priority (highest to lowest):

    1. Environment variables (with prefix, e.g., ANALYSIS_MODEL)
    2. .env file (for deployment-specific values, e.g., ANALYSIS_PROJECT_ID)
    3. YAML config file (e.g., config/analysis.yaml)
    4. Default values defined here

Config paths are resolved relative to PROJECT_ROOT so the application works
regardless of the current working directory.
"""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

# Resolve project root: settings.py -> config/ -> video_review/ -> src/ -> repo root
PROJECT_ROOT = Path(__file__).resolve().parents[3]

_CONFIG_DIR = PROJECT_ROOT / "config"
_ENV_FILE = PROJECT_ROOT / ".env"


class _YamlSettings(BaseSettings):
    """Shared source ordering: init > env > .env > YAML > defaults."""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )


class AnalysisSettings(_YamlSettings):
    """Model invocation: Vertex AI project, Gemini model, prompt template.

    ``project_id`` is deployment-specific and normally comes from .env or
    the ``ANALYSIS_PROJECT_ID`` environment variable.
    """

    project_id: str = ""
    location: str = "us-central1"
    model: str = "gemini-1.5-flash-001"
    temperature: float | None = None
    template_path: str = "config/prompts/video_review.txt"
    sample_video_url: str = "gs://cloud-samples-data/generative-ai/video/pixel8.mp4"

    model_config = SettingsConfigDict(
        yaml_file=str(_CONFIG_DIR / "analysis.yaml"),
        env_file=str(_ENV_FILE),
        env_prefix="ANALYSIS_",
        extra="ignore",
    )


class ScoringSettings(_YamlSettings):
    """Response parsing: category framing and custom-category thresholds."""

    framing: str = "custom"  # "custom" -> customCategories, "merchant" -> merchantRequirements
    default_custom_score: int = 5
    fulfilled_threshold: int = 6

    model_config = SettingsConfigDict(
        yaml_file=str(_CONFIG_DIR / "scoring.yaml"),
        env_prefix="SCORING_",
        extra="ignore",
    )

    @field_validator("framing")
    @classmethod
    def framing_must_be_known(cls, v: str) -> str:
        """Validate that framing names one of the built-in presets."""
        value = v.strip().lower()
        if value not in ("custom", "merchant"):
            raise ValueError("framing must be 'custom' or 'merchant'")
        return value


class PipelineSettings(_YamlSettings):
    """Operations: logging and report output paths."""

    log_dir: str = "logs"
    log_max_bytes: int = 10_485_760  # 10MB
    log_backup_count: int = 5
    reports_dir: str = "data/reports"

    model_config = SettingsConfigDict(
        yaml_file=str(_CONFIG_DIR / "pipeline.yaml"),
        env_prefix="PIPELINE_",
        extra="ignore",
    )
