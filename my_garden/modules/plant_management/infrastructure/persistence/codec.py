# 📄 File: my_garden/modules/plant_management/infrastructure/persistence/codec.py
# 🧭 Purpose (Layman Explanation):
# Turns the list of plants (photos included) into one blob of bytes for saving,
# and back again when the app starts.
# 🧪 Purpose (Technical Summary):
# JSON codec for List[Plant] built on a pydantic TypeAdapter; image bytes are carried
# as base64. Pydantic failures are translated into EncodingError / DecodingError.
# 🔗 Dependencies:
# pydantic (TypeAdapter, ValidationError), pydantic_core (PydanticSerializationError)
# 🔄 Connected Modules / Calls From:
# SnapshotPlantRepository (through SnapshotSlot)

from typing import List

from pydantic import TypeAdapter, ValidationError as PydanticValidationError
from pydantic_core import PydanticSerializationError

from my_garden.modules.plant_management.domain.models.plant import Plant
from my_garden.shared.core.exceptions import DecodingError, EncodingError


class PlantListCodec:
    """Encode/decode the whole plant collection."""

    def __init__(self):
        self._adapter = TypeAdapter(List[Plant])

    def encode(self, plants: List[Plant]) -> bytes:
        try:
            return self._adapter.dump_json(plants)
        except (PydanticSerializationError, TypeError, ValueError) as e:
            raise EncodingError(f"Could not encode plant list: {e}") from e

    def decode(self, blob: bytes) -> List[Plant]:
        try:
            return self._adapter.validate_json(blob)
        except (PydanticValidationError, ValueError) as e:
            raise DecodingError(
                "Stored plant list is not readable",
                details={"errors": str(e)[:500]},
            ) from e
