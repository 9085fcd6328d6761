"""Custom exceptions for the wastesort package."""

# Base exceptions
from .base import (
    WastesortError,
    ConfigurationError,
    ResourceError,
    ExternalResourceError,
)

# Processing exceptions
from .processing import (
    ProcessingError,
    PipelineConfigurationError,
)

# Validation exceptions
from .validation import (
    ValidationError,
    FileValidationError,
    UploadFileNotFoundError,
    UnsupportedMediaTypeError,
    FileTooLargeError,
    ImageDecodeError,
)

# Classification exceptions
from .classification import (
    ClassificationError,
    ModelLoadError,
    InferenceError,
)

__all__ = [
    # Base
    "WastesortError",
    "ConfigurationError",
    "ResourceError",
    "ExternalResourceError",

    # Processing
    "ProcessingError",
    "PipelineConfigurationError",

    # Validation
    "ValidationError",
    "FileValidationError",
    "UploadFileNotFoundError",
    "UnsupportedMediaTypeError",
    "FileTooLargeError",
    "ImageDecodeError",

    # Classification
    "ClassificationError",
    "ModelLoadError",
    "InferenceError",
]
