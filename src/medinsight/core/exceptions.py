"""
Exception hierarchy for MedInsight.

Every failure is local to one submission and never fatal to the process.
"""

from typing import Optional, Dict, Any


class MedInsightError(Exception):
    """Base exception for all MedInsight errors."""

    def __init__(self, message: str, error_code: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        """
        Initialize base exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            context: Additional error context
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            'error_type': self.__class__.__name__,
            'error_code': self.error_code,
            'message': self.message,
            'context': self.context
        }


class ClassificationFailed(MedInsightError):
    """The external classification call did not produce a usable result."""

    def __init__(self, reason: str, original_error: Optional[Exception] = None):
        message = f"Review classification failed: {reason}"
        context = {'reason': reason}
        if original_error is not None:
            context['original_error'] = str(original_error)
        super().__init__(message, context=context)
