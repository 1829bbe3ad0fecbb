# 📄 File: my_garden/shared/utils/validators.py
# 🧭 Purpose (Layman Explanation):
# Checkers that make sure what the user typed on the "add plant" form makes sense
# before anything is saved, like a plant having a name and a sensible watering interval.
# 🧪 Purpose (Technical Summary):
# Reusable validation functions returning ValidationResult objects for plant names,
# descriptions, watering frequencies and image payload sizes.
# 🔗 Dependencies:
# typing
# 🔄 Connected Modules / Calls From:
# Plant commands, AddPlantCommandHandler, image processor

from typing import List

PLANT_NAME_MAX_LENGTH = 100
PLANT_DESCRIPTION_MAX_LENGTH = 500


class ValidationResult:
    """Result object for validation operations"""
    def __init__(self, is_valid: bool, errors: List[str] = None, warnings: List[str] = None):
        self.is_valid = is_valid
        self.errors = errors or []
        self.warnings = warnings or []

    def add_error(self, error: str):
        """Add validation error"""
        self.errors.append(error)
        self.is_valid = False

    def add_warning(self, warning: str):
        """Add validation warning"""
        self.warnings.append(warning)

    @property
    def error_message(self) -> str:
        return "; ".join(self.errors)


def validate_plant_name(name: str) -> ValidationResult:
    """
    Validate plant name presence and length

    Args:
        name: Plant name to validate

    Returns:
        ValidationResult with validation status and errors
    """
    result = ValidationResult(True)

    if not name or not isinstance(name, str) or not name.strip():
        result.add_error("Plant name is required")
        return result

    if len(name.strip()) > PLANT_NAME_MAX_LENGTH:
        result.add_error(f"Plant name must be at most {PLANT_NAME_MAX_LENGTH} characters")

    return result


def validate_plant_description(description: str) -> ValidationResult:
    result = ValidationResult(True)

    if description and len(description) > PLANT_DESCRIPTION_MAX_LENGTH:
        result.add_error(f"Description must be at most {PLANT_DESCRIPTION_MAX_LENGTH} characters")

    return result


def validate_watering_frequency(days: int, min_days: int = 1, max_days: int = 30) -> ValidationResult:
    """
    Validate a watering interval expressed in days

    Args:
        days: Interval between waterings
        min_days: Shortest allowed interval
        max_days: Longest allowed interval

    Returns:
        ValidationResult with validation status and errors
    """
    result = ValidationResult(True)

    if isinstance(days, bool) or not isinstance(days, int):
        result.add_error("Watering frequency must be a whole number of days")
        return result

    if days < min_days or days > max_days:
        result.add_error(f"Watering frequency must be between {min_days} and {max_days} days")

    return result


def validate_image_payload(data: bytes, max_size: int) -> ValidationResult:
    result = ValidationResult(True)

    if not data:
        result.add_error("Image is empty")
        return result

    if len(data) > max_size:
        result.add_error(f"Image is larger than {max_size} bytes")

    return result
