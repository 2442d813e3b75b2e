"""
Custom exceptions for consistent error reporting.

Provides standardized error codes so callers can branch on the kind of
failure. Storage errors raised by SQLAlchemy are never wrapped here; they
reach the caller unchanged.
"""

from typing import Any, Dict


class AppException(Exception):
    """Base application exception."""
    
    def __init__(self, message: str, error_code: str, details: Dict[str, Any] = None):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        super().__init__(message)


class ResourceNotFoundError(AppException):
    """Raised when requested resource is not found."""
    
    def __init__(self, resource: str, resource_id: Any = None):
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with ID {resource_id} not found"
        super().__init__(
            message=message,
            error_code="ERR_NOT_FOUND_001",
            details={"resource": resource, "id": resource_id}
        )


class ParcelNotFoundError(ResourceNotFoundError):
    """Raised when no parcel row matches the requested number."""
    
    def __init__(self, number: int):
        self.number = number
        super().__init__(resource="Parcel", resource_id=number)


class InvalidStatusTransitionError(AppException):
    """Raised when a parcel status change breaks the registered → sent → delivered flow."""
    
    def __init__(self, number: int, current: str, requested: str = None):
        if requested is None:
            message = f"Parcel {number} has no status after '{current}'"
        else:
            message = f"Parcel {number} cannot move from '{current}' to '{requested}'"
        super().__init__(
            message=message,
            error_code="ERR_PARCEL_001",
            details={"number": number, "current": current, "requested": requested}
        )


class ParcelNotModifiableError(AppException):
    """Raised when a parcel is changed after it has left the registered state."""
    
    def __init__(self, number: int, status: str, operation: str):
        super().__init__(
            message=f"Cannot {operation} parcel {number} in status '{status}'",
            error_code="ERR_PARCEL_002",
            details={"number": number, "status": status, "operation": operation}
        )
