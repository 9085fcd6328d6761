# results/assemblers.py
"""Turn a tier's BucketDecision into the ClassificationResult callers see."""
from typing import Mapping, Optional

from wastesort.domain.catalog import CatalogEntry, entry_for
from wastesort.domain.models import Bucket, BucketDecision, ClassificationResult

def build_result(
        decision: BucketDecision,
        catalog: Optional[Mapping[Bucket, CatalogEntry]] = None) -> ClassificationResult:
    """
    Look up the bucket's catalog entry and keep the first ``item_count``
    labels. At least one label is always reported.
    """
    entry = catalog[decision.bucket] if catalog is not None else entry_for(decision.bucket)
    count = max(1, min(decision.item_count, len(entry.items)))
    return ClassificationResult(
        category=entry.category,
        confidence=decision.confidence,
        items=list(entry.items[:count]),
        recommendations=list(entry.recommendations),
        bucket=decision.bucket,
        source=decision.source,
    )

def summary_line(result: ClassificationResult) -> str:
    """One-line notification text for a finished analysis."""
    return (
        f"Detected {result.category.value} waste with "
        f"{result.confidence_percent}% confidence"
    )
