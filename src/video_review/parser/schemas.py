"""Pydantic v2 models for the structured analysis record.

These schemas define the contract between the response parser and its
consumers (the CLI, the report formatter, any UI rendering the JSON).  All
models are frozen: a record is built once per analysis and never mutated.
JSON output uses the camelCase field names the UI expects.
"""

from __future__ import annotations

import datetime
import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from video_review.parser.framing import CUSTOM_FRAMING, CategoryFraming

# Leading requirement phrasing stripped from declared custom categories,
# e.g. "Must include a talking head" -> "Talking head".
_DECLARATION_PREFIXES = (
    re.compile(r"^must\s+(have|include|contain|show)\s+(?:an?\s+)?", re.IGNORECASE),
    re.compile(r"^should\s+(have|include|contain|show)\s+(?:an?\s+)?", re.IGNORECASE),
    re.compile(r"^needs?\s+to\s+(have|include|contain|show)\s+(?:an?\s+)?", re.IGNORECASE),
    re.compile(r"^requires?\s+(?:an?\s+)?", re.IGNORECASE),
    re.compile(r"^includes?\s+(?:an?\s+)?", re.IGNORECASE),
    re.compile(r"^has\s+(?:an?\s+)?", re.IGNORECASE),
    re.compile(r"^add\s+(?:an?\s+)?", re.IGNORECASE),
)


def format_declaration(text: str) -> str:
    """Shorten a requester-typed category into a concise display name."""
    if not text:
        return ""
    formatted = text.strip()
    for pattern in _DECLARATION_PREFIXES:
        formatted = pattern.sub("", formatted)
    return formatted[:1].upper() + formatted[1:]


class CategoryResult(BaseModel):
    """One scored evaluation axis as reported by the model.

    Attributes:
        name: Category name as the model wrote it (not mapped to an enum).
        score: Integer score 0-10.
        assessment: Free-text justification, empty if none was found.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    score: int = Field(ge=0, le=10)
    assessment: str = ""

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        """Validate that name is a non-empty string."""
        if not v.strip():
            raise ValueError("category name must be a non-empty string")
        return v.strip()


class CustomCategoryDeclaration(BaseModel):
    """A requester-declared category, as typed and in concise form."""

    model_config = ConfigDict(frozen=True)

    raw: str
    formatted: str

    @classmethod
    def from_raw(cls, raw: str) -> CustomCategoryDeclaration:
        """Build a declaration, deriving ``formatted`` from *raw*."""
        return cls(raw=raw, formatted=format_declaration(raw))

    @property
    def display_name(self) -> str:
        """Concise name if available, else the raw text."""
        return self.formatted.strip() or self.raw.strip()


def declarations_from_criteria(criteria: list[str] | None) -> list[CustomCategoryDeclaration]:
    """Turn raw criteria strings into declarations, dropping blank entries."""
    if not criteria:
        return []
    return [
        CustomCategoryDeclaration.from_raw(item)
        for item in criteria
        if item and item.strip()
    ]


class ReconciledCustomCategory(BaseModel):
    """A declared category with the score attached during reconciliation.

    Attributes:
        declaration: The requester's declaration.
        score: Score inherited from a matching model category, the overall
            score, or the neutral default.
        fulfilled: Whether the score meets the fulfilment threshold.
        matched_category: Name of the model category the score came from,
            None when a fallback was used.
    """

    model_config = ConfigDict(frozen=True)

    declaration: CustomCategoryDeclaration
    score: int | float
    fulfilled: bool
    matched_category: str | None = None

    @property
    def name(self) -> str:
        return self.declaration.display_name

    def to_json_dict(self) -> dict:
        return {"name": self.name, "score": self.score, "fulfilled": self.fulfilled}


class Improvement(BaseModel):
    """Suggestions for one category from the improvements section."""

    model_config = ConfigDict(frozen=True)

    category: str
    suggestions: list[str] = Field(default_factory=list)


class AnalysisResult(BaseModel):
    """Complete structured record for one analysis.

    ``total_score`` is None only when the response carried no explicit total
    and there was nothing to compute one from (no categories, no declared
    custom categories).

    ``framing`` is not serialized; it decides the JSON field name used for
    ``custom_categories`` in :meth:`to_json_dict`.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total_score: float | None = Field(default=None, alias="totalScore")
    categories: list[CategoryResult] = Field(default_factory=list)
    custom_categories: list[ReconciledCustomCategory] = Field(
        default_factory=list, alias="customCategories"
    )
    improvements: list[Improvement] = Field(default_factory=list)
    summary: str = ""
    analysis_date: datetime.datetime = Field(
        default_factory=lambda: datetime.datetime.now(datetime.timezone.utc),
        alias="analysisDate",
    )
    framing: CategoryFraming = Field(default=CUSTOM_FRAMING, exclude=True)

    @field_validator("total_score")
    @classmethod
    def total_in_range(cls, v: float | None) -> float | None:
        """Validate that a present total lies in [0, 10]."""
        if v is not None and not 0 <= v <= 10:
            raise ValueError("totalScore must lie in [0, 10]")
        return v

    def to_json_dict(self) -> dict:
        """Serialize to the JSON shape consumed by the UI."""
        return {
            "totalScore": self.total_score,
            "categories": [c.model_dump(mode="json") for c in self.categories],
            self.framing.field_name: [c.to_json_dict() for c in self.custom_categories],
            "improvements": [i.model_dump(mode="json") for i in self.improvements],
            "summary": self.summary,
            "analysisDate": self.analysis_date.isoformat(),
        }
