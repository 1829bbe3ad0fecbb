import io

import pytest
from PIL import Image

from conftest import make_huge_png, make_image
from my_garden.shared.core.exceptions import InvalidImageError
from my_garden.shared.infrastructure.images.image_processor import ImageProcessor


def test_png_with_alpha_is_reencoded_as_jpeg(png_bytes):
    encoded = ImageProcessor().to_jpeg(png_bytes)

    assert encoded.startswith(b"\xff\xd8")
    with Image.open(io.BytesIO(encoded)) as image:
        assert image.format == "JPEG"
        assert image.mode == "RGB"
        assert image.size == (8, 6)


def test_grayscale_keeps_its_mode():
    encoded = ImageProcessor().to_jpeg(make_image("PNG", mode="L"))

    with Image.open(io.BytesIO(encoded)) as image:
        assert image.mode == "L"


@pytest.mark.parametrize("payload", [b"", b"definitely not an image", b"\x89PNG\r\n\x1a\ntruncated"])
def test_unreadable_payload_is_rejected(payload):
    with pytest.raises(InvalidImageError):
        ImageProcessor().to_jpeg(payload)


def test_oversized_payload_is_rejected(png_bytes):
    with pytest.raises(InvalidImageError) as excinfo:
        ImageProcessor(max_size=10).to_jpeg(png_bytes)

    assert excinfo.value.status_code == 422


def test_image_over_pixel_cap_is_rejected():
    payload = make_image("PNG", size=(100, 100))

    with pytest.raises(InvalidImageError) as excinfo:
        ImageProcessor(max_pixels=5000).to_jpeg(payload)

    assert excinfo.value.details["pixels"] == 10000
    assert excinfo.value.details["max_pixels"] == 5000


def test_decompression_bomb_is_rejected():
    payload = make_huge_png()

    assert len(payload) < ImageProcessor().max_size
    with pytest.raises(InvalidImageError):
        ImageProcessor().to_jpeg(payload)
