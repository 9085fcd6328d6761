"""Synthetic confidence helpers.

Reported confidences are presentation values, not calibrated probabilities:
model scores are scaled upward and capped, pixel-tier scores are a jittered
constant.
"""

import math
import random
from typing import Optional

def _isnum(x):
    return x is not None and not (isinstance(x, float) and math.isnan(x))

def _nz(x, default=0.0):
    return x if _isnum(x) else default

def clamp01(x: Optional[float]) -> float:
    return 0.0 if not _isnum(x) else max(0.0, min(1.0, float(x)))

def boosted_confidence(score: Optional[float], boost: float = 1.2, cap: float = 0.95) -> float:
    """Scale a raw top score upward, never past ``cap``."""
    return clamp01(min(_nz(score, 0.0) * boost, cap))

def jittered_confidence(rng: random.Random, base: float = 0.7, spread: float = 0.2) -> float:
    """``base`` plus a uniform draw from [0, spread)."""
    return clamp01(base + rng.random() * spread)

def item_count(rng: random.Random, low: int, high: int) -> int:
    """How many catalog labels to report, drawn from [low, high]."""
    if high <= low:
        return low
    return rng.randint(low, high)

BIN_RULES = [
    ("high",      0.85),
    ("medium",    0.65),
    ("low",       0.40),
]

def confidence_bin(confidence: Optional[float]) -> str:
    """Bin a confidence using standard thresholds."""
    value = clamp01(confidence)
    for label, thr in BIN_RULES:
        if value >= thr:
            return label
    return "very_low"
