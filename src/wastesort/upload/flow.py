"""Upload-to-result flow: validate, read, classify."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from wastesort.classification.service import WasteClassifier
from wastesort.domain.exceptions import FileValidationError
from wastesort.domain.models import ClassificationResult
from wastesort.upload.validation import UploadValidator

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class AnalysisOutcome:
    """One analysed upload: either a result or the reason it was rejected."""
    path: str
    result: Optional[ClassificationResult] = None
    error: Optional[FileValidationError] = None

    @property
    def success(self) -> bool:
        return self.result is not None and self.error is None

    def to_dict(self) -> dict:
        return {
            "path": self.path,
            "result": self.result.to_dict() if self.result else None,
            "error": self.error.message if self.error else None,
            "error_code": self.error.error_code if self.error else None,
        }

class UploadAnalysis:
    """Runs one selected file through validation and the classifier."""

    def __init__(self, classifier: WasteClassifier, validator: Optional[UploadValidator] = None):
        self.classifier = classifier
        self.validator = validator or UploadValidator(classifier.settings.upload)

    async def analyze(self, path: Union[str, Path]) -> AnalysisOutcome:
        try:
            valid_path = self.validator.validate(path)
        except FileValidationError as e:
            logger.info("Rejected %s: %s", path, e.message)
            return AnalysisOutcome(path=str(path), error=e)

        result = await self.classifier.classify_path(valid_path)
        logger.info(
            "%s -> %s (%d%%, %s tier)",
            valid_path, result.category.value, result.confidence_percent,
            result.source.value if result.source else "unknown",
        )
        return AnalysisOutcome(path=str(valid_path), result=result)
