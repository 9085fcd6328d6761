from typing import Optional, Dict, Any, List
from datetime import datetime
from abc import ABC
import logging

logger = logging.getLogger(__name__)

class WastesortError(Exception, ABC):
    """Base exception for all wastesort-related errors."""

    def __init__(
        self,
        message: str,
        *,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
        recoverable: bool = False
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self._get_default_error_code()
        self.context: Dict[str, Any] = context or {}
        self.suggestions: List[str] = suggestions or []
        self.recoverable = recoverable
        self.timestamp = datetime.now()

    def _get_default_error_code(self) -> str:
        return "WASTESORT_ERROR"

    def add_context(self, key: str, value: Any) -> "WastesortError":
        if key:
            self.context[key] = value
        return self

    def add_suggestion(self, suggestion: str) -> "WastesortError":
        if suggestion:
            self.suggestions.append(suggestion)
        return self

    def __str__(self) -> str:
        base = self.message or ""
        if self.suggestions:
            return f"{base} -- Suggestions: {'; '.join(self.suggestions)}"
        return base


class ConfigurationError(WastesortError):
    def __init__(self, message: str, *, config_field: str | None = None, **kwargs):
        super().__init__(message, **kwargs)
        self.config_field = config_field

    def _get_default_error_code(self) -> str:
        return "CONFIGURATION_ERROR"

    def __str__(self) -> str:
        base = self.message or ""
        if getattr(self, "config_field", None):
            base = f"[{self.config_field}] {base}"
        if self.suggestions:
            return f"{base} -- Suggestions: {'; '.join(self.suggestions)}"
        return base


class ResourceError(WastesortError):
    def _get_default_error_code(self) -> str:
        return "RESOURCE_ERROR"


class ExternalResourceError(ResourceError):
    """Raised when an artifact fetched from outside the process is unusable."""

    def __init__(
        self,
        message: str,
        *,
        resource_name: Optional[str] = None,
        location: Optional[str] = None,
        **kwargs
    ):
        super().__init__(message, recoverable=True, **kwargs)
        if resource_name:
            self.add_context('resource_name', resource_name)
        if location:
            self.add_context('location', location)

    def _get_default_error_code(self) -> str:
        return "EXTERNAL_RESOURCE_ERROR"
