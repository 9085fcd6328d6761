"""Colour-band heuristic over a downsampled copy of the image."""

import logging
import random
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
from PIL import Image

from wastesort.classification.strategy import ClassificationStrategy, is_degenerate
from wastesort.config.settings import PixelSettings
from wastesort.domain.models import Bucket, BucketDecision, ResultSource
from wastesort.scoring.confidence import jittered_confidence, item_count

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class PixelStats:
    """Fraction of sampled pixels in each colour band, plus mean brightness (0..255)."""
    green: float
    brown: float
    yellow: float
    metallic: float
    dark: float
    brightness: float
    total: int

def compute_pixel_stats(image: Image.Image, settings: PixelSettings) -> PixelStats:
    n = settings.sample_size
    rgb = image.convert("RGB").resize((n, n), Image.Resampling.BILINEAR)
    arr = np.asarray(rgb, dtype=np.int16)
    r, g, b = arr[..., 0], arr[..., 1], arr[..., 2]
    lo = arr.min(axis=-1)
    hi = arr.max(axis=-1)

    green = (g > r) & (g > b)
    brown = (r > 100) & (g > 60) & (b < 100)
    yellow = (r > 150) & (g > 150) & (b < 100)
    metallic = (lo > settings.metallic_channel_min) & ((hi - lo) <= settings.metallic_max_spread)
    dark = hi < settings.dark_channel_max

    total = r.size
    return PixelStats(
        green=float(green.sum()) / total,
        brown=float(brown.sum()) / total,
        yellow=float(yellow.sum()) / total,
        metallic=float(metallic.sum()) / total,
        dark=float(dark.sum()) / total,
        brightness=float(arr.mean()),
        total=total,
    )

def decide_bucket(stats: PixelStats, settings: PixelSettings) -> Tuple[Bucket, float]:
    """
    Fixed decision order; returns the bucket and the ratio that decided it.

    Anything that matches no band is treated as organic, the common case for
    kitchen scraps.
    """
    organic_ratio = max(stats.green, stats.brown, stats.yellow)
    if (stats.green > settings.green_ratio
            or stats.brown > settings.brown_ratio
            or stats.yellow > settings.yellow_ratio):
        return Bucket.ORGANIC, organic_ratio
    if stats.metallic > settings.metallic_ratio:
        return Bucket.RECYCLABLE, stats.metallic
    if stats.dark > settings.dark_ratio and stats.brightness < settings.dark_brightness_max:
        return Bucket.ELECTRONIC, stats.dark
    return Bucket.ORGANIC, organic_ratio

class PixelHeuristicTier(ClassificationStrategy):
    """Second tier, and the only one when no model is available."""
    name = "pixel"

    def __init__(self, settings: PixelSettings, rng: random.Random):
        self.settings = settings
        self.rng = rng

    def attempt(self, image: Image.Image) -> Optional[BucketDecision]:
        if is_degenerate(image):
            return None

        stats = compute_pixel_stats(image, self.settings)
        bucket, ratio = decide_bucket(stats, self.settings)
        logger.debug(
            "Pixel stats green=%.2f brown=%.2f yellow=%.2f metallic=%.2f dark=%.2f "
            "brightness=%.1f -> %s",
            stats.green, stats.brown, stats.yellow, stats.metallic, stats.dark,
            stats.brightness, bucket.value,
        )
        s = self.settings
        return BucketDecision(
            bucket=bucket,
            source=ResultSource.PIXEL,
            confidence=jittered_confidence(self.rng, s.base_confidence, s.confidence_spread),
            item_count=item_count(self.rng, s.min_items, s.max_items),
            score=ratio,
            details={"brightness": stats.brightness},
        )
