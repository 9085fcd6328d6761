"""Core domain models for waste classification."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

class WasteCategory(Enum):
    """User-facing waste categories."""
    WET = "wet"
    DRY = "dry"
    HAZARDOUS = "hazardous"

    @property
    def label(self) -> str:
        return f"{self.value.capitalize()} Waste"


class Bucket(Enum):
    """Internal classification outcomes, each mapped onto a waste category."""
    ORGANIC = "organic"
    RECYCLABLE = "recyclable"
    ELECTRONIC = "electronic"
    GENERAL = "general"

    @property
    def category(self) -> WasteCategory:
        return _BUCKET_CATEGORIES[self]


_BUCKET_CATEGORIES = {
    Bucket.ORGANIC: WasteCategory.WET,
    Bucket.RECYCLABLE: WasteCategory.DRY,
    Bucket.ELECTRONIC: WasteCategory.HAZARDOUS,
    Bucket.GENERAL: WasteCategory.DRY,
}


class ResultSource(Enum):
    """Tier that produced a classification."""
    MODEL = "model"
    PIXEL = "pixel"
    DEFAULT = "default"


def _clamp01(value: float) -> float:
    if value != value:  # NaN
        return 0.0
    return max(0.0, min(1.0, float(value)))


@dataclass(frozen=True)
class BucketDecision:
    """What a classification tier hands back to the orchestrator."""
    bucket: Bucket
    source: ResultSource
    confidence: float
    item_count: int
    score: Optional[float] = None       # raw top score (model) or winning ratio (pixel)
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ClassificationResult:
    """Result of classifying one image.

    ``category`` is always a ``WasteCategory`` and ``confidence`` is clamped
    to [0, 1] at construction.
    """
    category: WasteCategory
    confidence: float
    items: List[str]
    recommendations: List[str]
    bucket: Optional[Bucket] = None
    source: Optional[ResultSource] = None

    def __post_init__(self):
        if not isinstance(self.category, WasteCategory):
            object.__setattr__(self, "category", WasteCategory(self.category))
        object.__setattr__(self, "confidence", _clamp01(self.confidence))
        object.__setattr__(self, "items", list(self.items))
        object.__setattr__(self, "recommendations", list(self.recommendations))

    @property
    def confidence_percent(self) -> int:
        # halves round up
        return int(self.confidence * 100 + 0.5)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "category": self.category.value,
            "confidence": self.confidence,
            "items": list(self.items),
            "recommendations": list(self.recommendations),
            "bucket": self.bucket.value if self.bucket else None,
            "source": self.source.value if self.source else None,
        }
