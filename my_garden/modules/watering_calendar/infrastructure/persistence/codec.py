# 📄 File: my_garden/modules/watering_calendar/infrastructure/persistence/codec.py
# 🧭 Purpose (Layman Explanation):
# Turns the list of watered days into bytes for saving, and back.
# 🧪 Purpose (Technical Summary):
# TypeAdapter-based JSON codec for List[WateredMark] (ISO dates).

from typing import List

from pydantic import TypeAdapter, ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from my_garden.modules.watering_calendar.domain.models.calendar import WateredMark
from my_garden.shared.core.exceptions import DecodingError, EncodingError


class WateredMarkCodec:
    def __init__(self):
        self._adapter = TypeAdapter(List[WateredMark])

    def encode(self, marks: List[WateredMark]) -> bytes:
        try:
            return self._adapter.dump_json(marks)
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise EncodingError(f"Could not encode watered marks: {e}") from e

    def decode(self, blob: bytes) -> List[WateredMark]:
        try:
            return self._adapter.validate_json(blob)
        except (PydanticValidationError, ValueError) as e:
            raise DecodingError(
                "Stored watered marks are not readable",
                details={"errors": str(e)[:500]},
            ) from e
