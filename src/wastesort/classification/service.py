"""Waste classification service: an ordered chain of tiers behind one coroutine."""

import asyncio
import logging
import random
from functools import partial
from pathlib import Path
from typing import List, Optional, Union

from PIL import Image

from wastesort.classification.default_tier import FixedDefaultTier
from wastesort.classification.model_tier import ModelTier
from wastesort.classification.pixel_tier import PixelHeuristicTier
from wastesort.classification.provider import ModelProvider, load_mobilenet
from wastesort.classification.strategy import ClassificationStrategy, is_degenerate
from wastesort.config.settings import Settings
from wastesort.domain.exceptions import ImageDecodeError
from wastesort.domain.models import ClassificationResult
from wastesort.results.assemblers import build_result
from wastesort.upload.decode import decode_image

logger = logging.getLogger(__name__)

class WasteClassifier:
    """
    Classify images into wet, dry or hazardous waste.

    Tiers are tried in order (model, pixel heuristic, fixed default) and the
    first decision wins. ``classify`` never raises: a tier that errors is
    logged and skipped, and the fixed default always answers.

    The model is owned by this object through a ``ModelProvider``; pass one
    in to share a loaded model or to substitute a fake in tests.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        provider: Optional[ModelProvider] = None,
        rng: Optional[random.Random] = None,
    ):
        self.settings = settings or Settings()
        self.rng = rng or random.Random(self.settings.seed)
        self.default_tier = FixedDefaultTier(self.settings.default)

        if provider is None and self.settings.model.enabled:
            provider = ModelProvider(
                partial(load_mobilenet, self.settings.model),
                name=self.settings.model.architecture,
            )
        self.provider = provider

        self.tiers: List[ClassificationStrategy] = []
        if self.provider is not None:
            self.tiers.append(ModelTier(self.provider, self.settings.model, self.rng))
        self.tiers.append(PixelHeuristicTier(self.settings.pixel, self.rng))
        self.tiers.append(self.default_tier)

    async def initialize(self) -> bool:
        """Load the model ahead of the first classification; True if it is usable."""
        if self.provider is None:
            return False
        await asyncio.to_thread(self.provider.get)
        return self.provider.is_loaded

    async def classify(self, image: Optional[Image.Image]) -> ClassificationResult:
        """Classify a decoded image."""
        return await asyncio.to_thread(self.classify_sync, image)

    async def classify_bytes(self, data: bytes) -> ClassificationResult:
        """Decode and classify; undecodable data yields the default result."""
        try:
            image = await asyncio.to_thread(decode_image, data)
        except ImageDecodeError as e:
            logger.warning("Undecodable image (%s bytes): %s", len(data or b""), e.message)
            return self.default_result()
        return await self.classify(image)

    async def classify_path(self, path: Union[str, Path]) -> ClassificationResult:
        try:
            data = await asyncio.to_thread(Path(path).read_bytes)
        except OSError as e:
            logger.warning("Could not read %s: %s", path, e)
            return self.default_result()
        return await self.classify_bytes(data)

    def default_result(self) -> ClassificationResult:
        return build_result(self.default_tier.decision())

    def classify_sync(self, image: Optional[Image.Image]) -> ClassificationResult:
        """Blocking form of ``classify``."""
        try:
            if is_degenerate(image):
                logger.info("Degenerate image; returning default classification")
                return self.default_result()

            for tier in self.tiers:
                try:
                    decision = tier.attempt(image)
                except Exception as e:
                    logger.warning("Tier %s failed, falling back: %s", tier.name, e)
                    continue
                if decision is None:
                    logger.debug("Tier %s unavailable for this image", tier.name)
                    continue
                return build_result(decision)
        except Exception:
            logger.exception("Unexpected classification failure")

        return self.default_result()
