"""
Error Definitions

Defines custom exception classes used in the application for unified error handling.
"""

from typing import Any, Optional


class AppError(Exception):
    """
    Application Base Exception

    Base class for all custom exceptions, containing error message, type, and code.
    """

    def __init__(
        self,
        message: str,
        error_type: str = "app_error",
        code: str = "internal_error",
        details: Optional[dict[str, Any]] = None,
        status_code: int = 500,
    ):
        """
        Initialize exception

        Args:
            message: Error message
            error_type: Error type
            code: Error code
            details: Extra error details
            status_code: HTTP status code
        """
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.code = code
        self.details = details or {}
        self.status_code = status_code

    def to_dict(self, include_details: bool = True) -> dict[str, Any]:
        """
        Convert to dictionary format (for logging and debug responses)

        Args:
            include_details: Whether to include the extra details

        Returns:
            dict: Error information dictionary
        """
        result = {
            "error": {
                "message": self.message,
                "type": self.error_type,
                "code": self.code,
            }
        }
        if include_details and self.details:
            result["error"]["details"] = self.details
        return result


class StoreError(AppError):
    """
    Store Error

    Raised when communication with the key-value store fails
    (transport, permission or throttling errors).
    """

    def __init__(
        self,
        message: str = "Store operation failed",
        code: str = "store_error",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="store_error",
            code=code,
            details=details,
            status_code=400,
        )


class MalformedRecordError(StoreError):
    """
    Malformed Record Error

    Raised when a stored record is missing an attribute or holds a value
    of the wrong type and cannot be mapped to a Todo.
    """

    def __init__(
        self,
        message: str = "Malformed record in store",
        code: str = "malformed_record",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, details=details)


class NotFoundError(AppError):
    """
    Resource Not Found Error

    Raised when the requested Todo does not exist.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        code: str = "not_found",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="not_found_error",
            code=code,
            details=details,
            status_code=404,
        )


class ValidationError(AppError):
    """
    Parameter Validation Error

    Raised when input does not meet requirements (e.g. persisting a Todo without an id).
    """

    def __init__(
        self,
        message: str = "Validation failed",
        code: str = "validation_error",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="validation_error",
            code=code,
            details=details,
            status_code=422,
        )


class InvariantViolationError(AppError):
    """
    Invariant Violation Error

    Raised when the store returns data that breaks a structural guarantee,
    such as two records sharing one partition key. Never reported as a client error.
    """

    def __init__(
        self,
        message: str = "Internal invariant violated",
        code: str = "invariant_violation",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message,
            error_type="internal_error",
            code=code,
            details=details,
            status_code=500,
        )
