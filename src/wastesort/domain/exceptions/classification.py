"""Classification tier exceptions.

These never reach callers of ``WasteClassifier.classify``; the service logs
them and degrades to the next tier.
"""

from typing import Optional
from .base import WastesortError, ExternalResourceError

class ClassificationError(WastesortError):
    """Base class for classification tier errors."""

    def __init__(self, message: str, *, tier: Optional[str] = None, **kwargs):
        kwargs.setdefault('recoverable', True)
        super().__init__(message, **kwargs)
        if tier:
            self.add_context('tier', tier)

    def _get_default_error_code(self) -> str:
        return "CLASSIFICATION_ERROR"


class ModelLoadError(ExternalResourceError):
    """Raised when the pretrained model cannot be acquired."""

    def __init__(self, message: str, *, architecture: Optional[str] = None, **kwargs):
        super().__init__(message, resource_name=architecture, **kwargs)
        self.add_suggestion("Check network access for the first weights download")
        self.add_suggestion("Use --no-model to run the pixel heuristic only")

    def _get_default_error_code(self) -> str:
        return "MODEL_LOAD_FAILED"


class InferenceError(ClassificationError):
    """Raised when preprocessing or a forward pass fails."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, tier="model", **kwargs)

    def _get_default_error_code(self) -> str:
        return "INFERENCE_FAILED"
