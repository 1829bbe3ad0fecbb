# 📄 File: my_garden/shared/utils/__init__.py
# 🧭 Purpose (Layman Explanation):
# Small helper tools shared across the app: logging setup and input checkers.
# 🧪 Purpose (Technical Summary):
# Utility package exporting structured logging helpers and validators.

from .logging import get_logger, setup_logging, log_context
from .validators import (
    ValidationResult,
    validate_plant_name,
    validate_plant_description,
    validate_watering_frequency,
    validate_image_payload,
)

__all__ = [
    "get_logger",
    "setup_logging",
    "log_context",
    "ValidationResult",
    "validate_plant_name",
    "validate_plant_description",
    "validate_watering_frequency",
    "validate_image_payload",
]
