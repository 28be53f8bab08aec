"""
Error handling utilities and custom exceptions
"""

import traceback
from enum import Enum
from typing import Optional, Dict, Any


class ErrorType(Enum):
    """Error type enumeration"""
    CONFIGURATION_ERROR = "configuration_error"
    STASH_ERROR = "stash_error"
    GENERATION_API_ERROR = "generation_api_error"
    INVALID_RESPONSE = "invalid_response"
    BACKUP_NOT_FOUND = "backup_not_found"
    UNKNOWN_ERROR = "unknown_error"


class CodeCleanupError(Exception):
    """Base exception for the code cleanup server"""

    def __init__(
        self,
        error_type: ErrorType,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ):
        self.error_type = error_type
        self.message = message
        self.details = details or {}
        self.original_exception = original_exception
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for serialization"""
        return {
            "error_type": self.error_type.value,
            "message": self.message,
            "details": self.details,
            "traceback": "".join(traceback.format_exception(self.original_exception))
            if self.original_exception else None
        }

    @classmethod
    def from_exception(cls, exc: Exception, error_type: ErrorType = ErrorType.UNKNOWN_ERROR) -> 'CodeCleanupError':
        """Create CodeCleanupError from generic exception"""
        return cls(
            error_type=error_type,
            message=str(exc),
            original_exception=exc
        )


class ConfigurationError(CodeCleanupError):
    """Invalid or missing settings"""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(
            error_type=ErrorType.CONFIGURATION_ERROR,
            message=message,
            details={"field": field}
        )
        self.field = field


class StashError(CodeCleanupError):
    """Stash directory could not be created or written"""

    def __init__(self, message: str, path: Optional[str] = None, original_exception: Optional[Exception] = None):
        super().__init__(
            error_type=ErrorType.STASH_ERROR,
            message=message,
            details={"path": path},
            original_exception=original_exception
        )
        self.path = path


class GenerationAPIError(CodeCleanupError):
    """Errors returned by the text-generation API"""

    def __init__(self, message: str, status_code: Optional[int] = None, model: Optional[str] = None,
                 original_exception: Optional[Exception] = None):
        super().__init__(
            error_type=ErrorType.GENERATION_API_ERROR,
            message=message,
            details={"status_code": status_code, "model": model},
            original_exception=original_exception
        )
        self.status_code = status_code
        self.model = model


class InvalidResponseError(CodeCleanupError):
    """Generation API answered without usable text"""

    def __init__(self, message: str = "Invalid response structure from AI", model: Optional[str] = None):
        super().__init__(
            error_type=ErrorType.INVALID_RESPONSE,
            message=message,
            details={"model": model}
        )


class BackupNotFoundError(CodeCleanupError):
    """No stashed backup matches the request"""

    def __init__(self, identifier: str):
        super().__init__(
            error_type=ErrorType.BACKUP_NOT_FOUND,
            message=f"No backup found for {identifier}",
            details={"identifier": identifier}
        )
        self.identifier = identifier


def format_error_for_user(error: Exception) -> str:
    """Format an error message for MCP clients"""
    if isinstance(error, CodeCleanupError):
        return f"❌ {error.message}"
    return f"❌ Tool execution failed: {error}"
