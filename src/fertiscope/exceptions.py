"""
Exception hierarchy for FertiScope.

The decision rules themselves never raise; these cover the configuration
and serialization boundaries.
"""

from typing import Any, Dict, Optional


class FertiScopeError(Exception):
    """Base exception for all FertiScope errors."""

    def __init__(
        self,
        message: str,
        code: str = "UNKNOWN_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for callers that log or display it."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details
        }


class ConfigurationError(FertiScopeError):
    """Invalid threshold or environment configuration."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, code="CONFIGURATION_ERROR", details=details)


class SummarySerializationError(FertiScopeError):
    """A diagnostic summary payload could not be decoded."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, code="SERIALIZATION_ERROR", details=details)
