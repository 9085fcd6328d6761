"""Pretrained ImageNet classifier, bucketed by class-index band."""

import logging
import random
from typing import Optional, Sequence, Tuple

import numpy as np
from PIL import Image

from wastesort.classification.provider import ModelProvider
from wastesort.classification.strategy import ClassificationStrategy
from wastesort.config.settings import ModelSettings
from wastesort.domain.exceptions import InferenceError
from wastesort.domain.models import Bucket, BucketDecision, ResultSource
from wastesort.scoring.confidence import boosted_confidence, item_count
from wastesort.utils.timing import section_timer

logger = logging.getLogger(__name__)

def preprocess(
        image: Image.Image,
        size: int = 224,
        mean: Sequence[float] = (0.485, 0.456, 0.406),
        std: Sequence[float] = (0.229, 0.224, 0.225)) -> np.ndarray:
    """Resize to ``size`` square, scale to [0, 1], normalise, return a 1xCxHxW batch."""
    rgb = image.convert("RGB").resize((size, size), Image.Resampling.BILINEAR)
    arr = np.asarray(rgb, dtype=np.float32) / 255.0
    arr = (arr - np.asarray(mean, dtype=np.float32)) / np.asarray(std, dtype=np.float32)
    return arr.transpose(2, 0, 1)[np.newaxis, ...]

def bucket_for_index(index: int, band_edges: Tuple[int, int, int] = (200, 600, 800)) -> Bucket:
    """
    Map an ImageNet class index to a bucket.

    Low indices are mostly animals/food, the middle range manufactured
    containers and objects, the upper-middle range devices. None of this is
    curated; the bands are coarse.
    """
    organic_end, recyclable_end, electronic_end = band_edges
    if index < organic_end:
        return Bucket.ORGANIC
    if index < recyclable_end:
        return Bucket.RECYCLABLE
    if index < electronic_end:
        return Bucket.ELECTRONIC
    return Bucket.GENERAL

def top_prediction(scores: np.ndarray) -> Tuple[int, float]:
    flat = np.asarray(scores, dtype=np.float64).reshape(-1)
    if flat.size == 0 or not np.all(np.isfinite(flat)):
        raise InferenceError(f"Model returned unusable scores (size={flat.size})")
    index = int(np.argmax(flat))
    return index, float(flat[index])

class ModelTier(ClassificationStrategy):
    """First tier: one forward pass through the pretrained classifier."""
    name = "model"

    def __init__(self, provider: ModelProvider, settings: ModelSettings, rng: random.Random):
        self.provider = provider
        self.settings = settings
        self.rng = rng

    def attempt(self, image: Image.Image) -> Optional[BucketDecision]:
        model = self.provider.get()
        if model is None:
            return None

        s = self.settings
        try:
            batch = preprocess(image, s.input_size, s.mean, s.std)
            with section_timer("model inference", logger) as timing:
                scores = model(batch)
        except InferenceError:
            raise
        except Exception as e:
            raise InferenceError(f"Forward pass failed: {e}") from e

        index, score = top_prediction(scores)
        if score < s.min_score:
            logger.debug("Top score %.3f (class %d) below min_score %.3f", score, index, s.min_score)
            return None

        bucket = bucket_for_index(index, s.band_edges)
        logger.debug("Top class %d (score %.3f) -> %s", index, score, bucket.value)
        return BucketDecision(
            bucket=bucket,
            source=ResultSource.MODEL,
            confidence=boosted_confidence(score, s.confidence_boost, s.confidence_cap),
            item_count=item_count(self.rng, s.min_items, s.max_items),
            score=score,
            details={"class_index": index, "inference_seconds": round(timing.seconds, 4)},
        )
