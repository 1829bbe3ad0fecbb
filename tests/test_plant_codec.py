import base64
import json
from datetime import date

import pytest

from my_garden.modules.plant_management.domain.models.plant import Plant
from my_garden.modules.plant_management.infrastructure.persistence.codec import PlantListCodec
from my_garden.shared.core.exceptions import DecodingError


def plant_with_images(images) -> Plant:
    return Plant(
        name="Monstera",
        description="Living room",
        images=images,
        watering_frequency_days=5,
        last_watered_date=date(2024, 2, 29),
    )


@pytest.mark.parametrize("images", [[], [b"\xff\xd8one"], [b"\xff\xd8one", b"\x00\x01two", b""]])
def test_round_trip_preserves_plants(images):
    codec = PlantListCodec()
    plants = [plant_with_images(images), plant_with_images([])]

    decoded = codec.decode(codec.encode(plants))

    assert decoded == plants
    assert decoded[0].images == images


def test_images_are_base64_inside_json():
    codec = PlantListCodec()

    payload = json.loads(codec.encode([plant_with_images([b"\x00\xffraw"])]))

    encoded = payload[0]["images"][0]
    assert isinstance(encoded, str)
    assert base64.b64decode(encoded + "=" * (-len(encoded) % 4), altchars=b"-_") == b"\x00\xffraw"
    assert payload[0]["last_watered_date"] == "2024-02-29"


def test_empty_list_round_trip():
    codec = PlantListCodec()

    assert codec.decode(codec.encode([])) == []


@pytest.mark.parametrize("blob", [b"not json", b'{"name": "x"}', b'[{"name": ""}]'])
def test_unreadable_blob_raises_decoding_error(blob):
    with pytest.raises(DecodingError):
        PlantListCodec().decode(blob)
