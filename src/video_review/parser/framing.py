"""Custom vs. merchant category framing.

The same reconciliation logic serves two product framings: requesters
declaring "custom categories" and merchants declaring "requirements".  They
differ only in wording, the JSON field the reconciled list is reported
under, and which model-reported category names count as the single
catch-all bucket.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CategoryFraming:
    """Configuration for one framing of requester-declared categories.

    Attributes:
        name: Preset name used in configuration ("custom", "merchant").
        label: Plural wording used in summaries and reports.
        field_name: JSON field the reconciled list is serialized under.
        bucket_keywords: A model-reported category whose name contains any
            of these is treated as one score for all declared categories.
    """

    name: str
    label: str
    field_name: str
    bucket_keywords: tuple[str, ...] = ("merchant", "custom", "specific")


CUSTOM_FRAMING = CategoryFraming(
    name="custom",
    label="custom categories",
    field_name="customCategories",
)

MERCHANT_FRAMING = CategoryFraming(
    name="merchant",
    label="merchant requirements",
    field_name="merchantRequirements",
)

_FRAMINGS = {f.name: f for f in (CUSTOM_FRAMING, MERCHANT_FRAMING)}


def get_framing(name: str) -> CategoryFraming:
    """Resolve a framing preset by name.

    Raises:
        ValueError: If *name* is not a known preset.
    """
    try:
        return _FRAMINGS[name.strip().lower()]
    except KeyError:
        msg = f"Unknown category framing: {name!r} (expected one of {sorted(_FRAMINGS)})"
        raise ValueError(msg) from None
