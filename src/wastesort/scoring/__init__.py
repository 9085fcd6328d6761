"""Confidence scoring helpers."""

from .confidence import (
    clamp01,
    boosted_confidence,
    jittered_confidence,
    item_count,
    confidence_bin,
)

__all__ = [
    "clamp01",
    "boosted_confidence",
    "jittered_confidence",
    "item_count",
    "confidence_bin",
]
