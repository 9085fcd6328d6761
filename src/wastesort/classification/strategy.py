"""Common interface for the tiers of the classification chain."""
from abc import ABC, abstractmethod
from typing import Optional

from PIL import Image

from wastesort.domain.models import BucketDecision

class ClassificationStrategy(ABC):
    """
    One tier of the fallback chain.

    ``attempt`` returns a decision, or ``None`` when the tier cannot answer
    for this image (model missing, score too low, degenerate raster). It may
    raise; the orchestrator logs the error and moves to the next tier.
    """
    name: str = "strategy"

    @abstractmethod
    def attempt(self, image: Image.Image) -> Optional[BucketDecision]:
        ...

def is_degenerate(image: Optional[Image.Image]) -> bool:
    """True for a missing or zero-area raster."""
    if image is None:
        return True
    width, height = image.size
    return width <= 0 or height <= 0
