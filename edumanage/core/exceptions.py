# edumanage/core/exceptions.py
"""Custom exceptions for the EduManage application."""
from typing import Any, Dict, Optional


class EduManageException(Exception):
    """Base exception rendered as an ``{error, message}`` JSON body."""
    status_code: int = 500
    error: str = "Server Error"

    def __init__(self, error: Optional[str] = None, message: Optional[str] = None):
        if error is not None:
            self.error = error
        self.message = message
        super().__init__(message or self.error)

    def to_dict(self) -> Dict[str, Any]:
        body = {"error": self.error}
        if self.message is not None:
            body["message"] = self.message
        return body


class NotFoundError(EduManageException):
    """Raised when a requested record does not exist."""
    status_code = 404
    error = "Not Found"


class InvalidIdError(EduManageException):
    """Raised when a path identifier is not an integer."""
    status_code = 400
    error = "Invalid ID format"


class ValidationError(EduManageException):
    """Raised for payloads that fail validation."""
    status_code = 400
    error = "Validation error"

    def __init__(self, message: str, errors: Optional[list] = None):
        super().__init__(message=message)
        self.errors = errors

    def to_dict(self) -> Dict[str, Any]:
        body = super().to_dict()
        if self.errors is not None:
            body["errors"] = self.errors
        return body


class ConflictError(EduManageException):
    """Raised when a write violates a unique or foreign key constraint."""
    status_code = 409
    error = "Conflict"


class DatabaseError(EduManageException):
    """Raised for database errors."""
    status_code = 500
    error = "Database error"

    def __init__(self, message: str):
        super().__init__(message=message)


def parse_id(raw: str) -> int:
    """Convert a path segment to an integer id."""
    try:
        return int(raw)
    except (TypeError, ValueError):
        raise InvalidIdError()
