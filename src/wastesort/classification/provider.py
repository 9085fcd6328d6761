"""Lazy, memoized access to the pretrained ImageNet model."""

import logging
from enum import Enum
from typing import Callable, Optional, Protocol

import numpy as np

from wastesort.config.resolvers import ensure_model_cache_dir
from wastesort.config.settings import ModelSettings
from wastesort.domain.exceptions import ModelLoadError
from wastesort.utils.suppress import setup_clean_logging
from wastesort.utils.timing import section_timer

logger = logging.getLogger(__name__)

class Predictor(Protocol):
    """Maps a normalised NCHW float32 batch to class probabilities."""

    def __call__(self, batch: np.ndarray) -> np.ndarray:
        ...

class ModelState(Enum):
    NOT_LOADED = "not_loaded"
    LOADED = "loaded"
    FAILED = "failed"

class TorchPredictor:
    """Wrap a torchvision classifier so callers deal in numpy only."""

    def __init__(self, model, torch_module):
        self.model = model
        self._torch = torch_module

    def __call__(self, batch: np.ndarray) -> np.ndarray:
        torch = self._torch
        with torch.no_grad():
            logits = self.model(torch.from_numpy(np.ascontiguousarray(batch, dtype=np.float32)))
            probs = torch.nn.functional.softmax(logits, dim=1)
        return probs.cpu().numpy()

def load_mobilenet(settings: ModelSettings) -> TorchPredictor:
    """Build a pretrained torchvision MobileNet, downloading weights on first use."""
    setup_clean_logging()
    try:
        import torch
        from torchvision import models
    except ImportError as e:
        raise ModelLoadError(
            f"torch/torchvision are not importable: {e}",
            architecture=settings.architecture
        ) from e

    builders = {
        "mobilenet_v2": (models.mobilenet_v2, models.MobileNet_V2_Weights.IMAGENET1K_V1),
        "mobilenet_v3_small": (models.mobilenet_v3_small, models.MobileNet_V3_Small_Weights.IMAGENET1K_V1),
        "mobilenet_v3_large": (models.mobilenet_v3_large, models.MobileNet_V3_Large_Weights.IMAGENET1K_V1),
    }
    builder, weights = builders[settings.architecture]

    cache_dir = ensure_model_cache_dir(settings.cache_dir)
    torch.hub.set_dir(str(cache_dir))
    logger.info("Loading %s weights (cache: %s)", settings.architecture, cache_dir)

    try:
        model = builder(weights=weights)
    except Exception as e:
        raise ModelLoadError(
            f"Could not load pretrained {settings.architecture}: {e}",
            architecture=settings.architecture,
            location=str(cache_dir)
        ) from e
    model.eval()
    return TorchPredictor(model, torch)

class ModelProvider:
    """
    Owns the one-shot model lifecycle: NOT_LOADED -> LOADED or FAILED.

    The state is set on first use and never reset. Two first calls racing
    each other both run the loader; whichever succeeds is assigned, and a
    failure never replaces a model that is already loaded.
    """

    def __init__(self, loader: Callable[[], Predictor], name: str = "model"):
        self._loader = loader
        self.name = name
        self._model: Optional[Predictor] = None
        self._state = ModelState.NOT_LOADED
        self.load_attempts = 0
        self.last_error: Optional[BaseException] = None

    @property
    def state(self) -> ModelState:
        return self._state

    @property
    def is_loaded(self) -> bool:
        return self._state is ModelState.LOADED

    def get(self) -> Optional[Predictor]:
        """Return the loaded model, loading it if this is the first call."""
        if self._state is ModelState.LOADED:
            return self._model
        if self._state is ModelState.FAILED:
            return None

        self.load_attempts += 1
        try:
            with section_timer(f"load {self.name}", logger):
                model = self._loader()
        except Exception as e:
            self.last_error = e
            logger.warning("Model unavailable, using pixel heuristic for this session: %s", e)
            if self._state is not ModelState.LOADED:
                self._state = ModelState.FAILED
            return self._model

        self._model = model
        self._state = ModelState.LOADED
        logger.info("Model %s loaded", self.name)
        return model
