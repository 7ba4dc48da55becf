"""
Logbook Shared Errors
Custom exception classes
"""

from typing import Any, Dict, Optional


class LogbookError(Exception):
    """Base exception for the logbook services"""

    error_code = "LOGBOOK_ERROR"

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(LogbookError):
    """Validation error (400)"""

    error_code = "VALIDATION_ERROR"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, status_code=400, details=details)


class AnnotationContractError(ValidationError):
    """The caller handed over something that is not an OCR annotation at all"""

    error_code = "ANNOTATION_CONTRACT_VIOLATION"
