"""Last tier: a fixed, low-confidence answer."""
from typing import Optional

from PIL import Image

from wastesort.classification.strategy import ClassificationStrategy
from wastesort.config.settings import DefaultSettings
from wastesort.domain.models import BucketDecision, ResultSource

class FixedDefaultTier(ClassificationStrategy):
    name = "default"

    def __init__(self, settings: Optional[DefaultSettings] = None):
        self.settings = settings or DefaultSettings()

    def decision(self) -> BucketDecision:
        return BucketDecision(
            bucket=self.settings.bucket,
            source=ResultSource.DEFAULT,
            confidence=self.settings.confidence,
            item_count=self.settings.item_count,
        )

    def attempt(self, image: Optional[Image.Image]) -> BucketDecision:
        return self.decision()
