"""Processing pipeline exceptions."""

from typing import Optional
from .base import WastesortError

class ProcessingError(WastesortError):
    """Base class for processing pipeline errors."""

    def __init__(
        self,
        message: str,
        *,
        stage: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        if stage:
            self.add_context('processing_stage', stage)


class PipelineConfigurationError(ProcessingError):
    """Raised when pipeline configuration is invalid."""

    def __init__(
        self,
        message: str,
        *,
        config_field: Optional[str] = None,
        expected_type: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, stage="configuration", **kwargs)
        self.config_field = config_field
        if config_field:
            self.add_context('config_field', config_field)
        if expected_type:
            self.add_context('expected_type', expected_type)

        self.add_suggestion("Check the command-line options")
        self.add_suggestion("Verify all thresholds are within range")

    def _get_default_error_code(self) -> str:
        return "PIPELINE_CONFIG_INVALID"
