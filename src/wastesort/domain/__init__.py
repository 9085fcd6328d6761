"""Core domain models and catalogs."""

from .models import (
    WasteCategory,
    Bucket,
    ResultSource,
    BucketDecision,
    ClassificationResult,
)
from .catalog import WASTE_CATALOG, CatalogEntry, entry_for

__all__ = [
    "WasteCategory",
    "Bucket",
    "ResultSource",
    "BucketDecision",
    "ClassificationResult",
    "WASTE_CATALOG",
    "CatalogEntry",
    "entry_for",
]
