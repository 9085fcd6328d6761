"""Waste image classification."""

from .strategy import ClassificationStrategy
from .provider import ModelProvider, ModelState, load_mobilenet
from .model_tier import ModelTier
from .pixel_tier import PixelHeuristicTier
from .default_tier import FixedDefaultTier
from .service import WasteClassifier

__all__ = [
    "ClassificationStrategy",
    "ModelProvider",
    "ModelState",
    "load_mobilenet",
    "ModelTier",
    "PixelHeuristicTier",
    "FixedDefaultTier",
    "WasteClassifier",
]
