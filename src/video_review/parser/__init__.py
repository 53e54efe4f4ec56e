"""Response parser: model Markdown in, structured AnalysisResult out.

Public API:
    parse_analysis(text, declarations, framing=...) -> AnalysisResult
"""

from .categories import extract_categories, extract_total_score
from .framing import CUSTOM_FRAMING, MERCHANT_FRAMING, CategoryFraming, get_framing
from .improvements import extract_improvements
from .reconciler import reconcile
from .schemas import (
    AnalysisResult,
    CategoryResult,
    CustomCategoryDeclaration,
    Improvement,
    ReconciledCustomCategory,
    declarations_from_criteria,
)
from .scoring import compute_total
from .service import parse_analysis
from .summary import summarize

__all__ = [
    "AnalysisResult",
    "CUSTOM_FRAMING",
    "CategoryFraming",
    "CategoryResult",
    "CustomCategoryDeclaration",
    "Improvement",
    "MERCHANT_FRAMING",
    "ReconciledCustomCategory",
    "compute_total",
    "declarations_from_criteria",
    "extract_categories",
    "extract_improvements",
    "extract_total_score",
    "get_framing",
    "parse_analysis",
    "reconcile",
    "summarize",
]
