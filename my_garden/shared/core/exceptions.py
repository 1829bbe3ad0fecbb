# 📄 File: my_garden/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# Defines the special error types the garden app uses to say clearly what went wrong,
# like a plant that does not exist or a photo that is not really an image.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with HTTP status codes,
# error details, and serialization for result values and API error responses.
# 🔗 Dependencies:
# typing, FastAPI HTTP status constants
# 🔄 Connected Modules / Calls From:
# Domain services, repositories, storage backends, application handlers, main.py

from typing import Any, Dict, List, Optional

from fastapi import status


class GardenException(Exception):
    """
    Base exception class for the My Garden application.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "status_code": self.status_code
            }
        }


# =============================================================================
# VALIDATION & LOOKUP EXCEPTIONS
# =============================================================================

class ValidationError(GardenException):
    """
    Exception raised for data validation failures.
    Used when input data doesn't meet validation requirements.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        if constraint:
            details["constraint"] = constraint

        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details,
            error_code="VALIDATION_ERROR"
        )

    @classmethod
    def from_errors(
        cls,
        errors: List[Dict[str, Any]],
        message: str = "Request validation failed"
    ) -> "ValidationError":
        """Build from pydantic-style error dicts (``exc.errors()``)."""
        reported = []
        for error in errors:
            location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path", "form")]
            reported.append({
                "field": ".".join(location),
                "message": error.get("msg", ""),
                "type": error.get("type", ""),
            })
        field = reported[0]["field"] if reported else None
        return cls(message, field=field or None, details={"errors": reported})


class NotFoundError(GardenException):
    """
    Exception raised when requested resource is not found.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code="NOT_FOUND"
        )


class PlantNotFoundError(NotFoundError):
    """Raised when a plant id is not in the collection."""

    def __init__(self, plant_id: str):
        super().__init__(
            message=f"Plant {plant_id} not found",
            resource_type="plant",
            resource_id=plant_id,
        )
        self.error_code = "PLANT_NOT_FOUND"


class InvalidImageError(GardenException):
    """
    Exception raised when an uploaded image cannot be decoded or is too large.
    """

    def __init__(
        self,
        message: str = "Invalid image",
        size: Optional[int] = None,
        max_size: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if size is not None:
            details["size"] = size
        if max_size is not None:
            details["max_size"] = max_size

        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details,
            error_code="INVALID_IMAGE"
        )


# =============================================================================
# PERSISTENCE EXCEPTIONS
# =============================================================================

class StorageError(GardenException):
    """
    Exception raised when the key-value storage backend fails.
    """

    def __init__(
        self,
        message: str = "Storage operation failed",
        backend: Optional[str] = None,
        key: Optional[str] = None,
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if backend:
            details["backend"] = backend
        if key:
            details["key"] = key
        if operation:
            details["operation"] = operation

        super().__init__(
            message=message,
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            details=details,
            error_code="STORAGE_ERROR"
        )


class EncodingError(GardenException):
    """Raised when a collection cannot be serialized."""

    def __init__(self, message: str = "Failed to encode data", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="ENCODING_ERROR"
        )


class DecodingError(GardenException):
    """Raised when a persisted blob cannot be deserialized."""

    def __init__(self, message: str = "Failed to decode data", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="DECODING_ERROR"
        )


# =============================================================================
# NOTIFICATION EXCEPTIONS
# =============================================================================

class NotificationError(GardenException):
    """
    Exception raised when a reminder cannot be handed to the notification service.
    """

    def __init__(
        self,
        message: str = "Notification scheduling failed",
        reminder_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}
        if reminder_id:
            details["reminder_id"] = reminder_id

        super().__init__(
            message=message,
            status_code=status.HTTP_502_BAD_GATEWAY,
            details=details,
            error_code="NOTIFICATION_ERROR"
        )
