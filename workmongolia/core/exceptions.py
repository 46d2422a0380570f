"""Custom exception classes"""

from typing import Any, Optional


class WorkMongoliaException(Exception):
    """Base exception for WorkMongolia"""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationException(WorkMongoliaException):
    """Exception for validation errors"""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, status_code=400, details=details)


class NotFoundException(WorkMongoliaException):
    """Exception for resource not found errors"""

    def __init__(self, message: str):
        super().__init__(message, status_code=404)


class ConflictException(WorkMongoliaException):
    """Exception for resource conflict errors"""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message, status_code=409, details=details)


class RequestFailedError(WorkMongoliaException):
    """Raised by the admin client when a backend request does not succeed.

    ``status_code`` is 0 for transport failures and timeouts, where no
    response was received.
    """

    def __init__(self, message: str, status_code: int = 0, details: Optional[dict[str, Any]] = None):
        super().__init__(message, status_code=status_code, details=details)
