# 📄 File: my_garden/shared/core/__init__.py
# 🧭 Purpose (Layman Explanation):
# Core building blocks: the app's error types and the "outcome" values handlers return.
# 🧪 Purpose (Technical Summary):
# Exports the exception hierarchy and result types of the shared kernel.

from .exceptions import (
    GardenException,
    ValidationError,
    NotFoundError,
    PlantNotFoundError,
    InvalidImageError,
    StorageError,
    EncodingError,
    DecodingError,
    NotificationError,
)
from .result import Result, PersistResult

__all__ = [
    "GardenException",
    "ValidationError",
    "NotFoundError",
    "PlantNotFoundError",
    "InvalidImageError",
    "StorageError",
    "EncodingError",
    "DecodingError",
    "NotificationError",
    "Result",
    "PersistResult",
]
