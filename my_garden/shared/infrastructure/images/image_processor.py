# 📄 File: my_garden/shared/infrastructure/images/image_processor.py

# 🧭 Purpose (Layman Explanation):
# Takes a photo picked from the library or taken with the camera and turns it into a
# compact JPEG, refusing anything that is too big or is not really a picture.

# 🧪 Purpose (Technical Summary):
# Image normalisation at the image source boundary: size check, decode/verify with
# Pillow, EXIF orientation fix, RGB conversion and JPEG re-encoding at the configured
# quality. The plant domain stores the output as opaque bytes.

# 🔗 Dependencies:
# - PIL (Pillow): Image decoding, validation and JPEG encoding
# - io: In-memory byte streams

# 🔄 Connected Modules / Calls From:
# AddPlantCommandHandler, AddPlantImageCommandHandler

import io

from PIL import Image, ImageOps, UnidentifiedImageError

from my_garden.shared.core.exceptions import InvalidImageError
from my_garden.shared.utils.logging import get_logger
from my_garden.shared.utils.validators import validate_image_payload

logger = get_logger(__name__)

DEFAULT_MAX_PIXELS = 50_000_000


class ImageProcessor:
    """
    Converts raw uploaded image bytes to JPEG bytes.
    """

    def __init__(
        self,
        jpeg_quality: int = 80,
        max_size: int = 5 * 1024 * 1024,
        max_pixels: int = DEFAULT_MAX_PIXELS,
    ):
        self.jpeg_quality = jpeg_quality
        self.max_size = max_size
        self.max_pixels = max_pixels

    def to_jpeg(self, data: bytes) -> bytes:
        """
        Validate and re-encode an image.

        Args:
            data: Raw bytes from the picker or camera

        Returns:
            JPEG encoded bytes

        Raises:
            InvalidImageError: If the payload is empty, too large, has too many pixels
                or is not an image
        """
        validation = validate_image_payload(data, self.max_size)
        if not validation.is_valid:
            raise InvalidImageError(validation.error_message, size=len(data or b""), max_size=self.max_size)

        try:
            # verify() leaves the image unusable, so it is opened twice
            with Image.open(io.BytesIO(data)) as probe:
                probe.verify()
                width, height = probe.size

            if width * height > self.max_pixels:
                logger.warning(f"Rejected image of {width}x{height} pixels", size=len(data))
                raise InvalidImageError(
                    "Image has too many pixels",
                    size=len(data),
                    details={"pixels": width * height, "max_pixels": self.max_pixels},
                )

            with Image.open(io.BytesIO(data)) as image:
                image = ImageOps.exif_transpose(image)
                if image.mode not in ("RGB", "L"):
                    image = image.convert("RGB")

                output = io.BytesIO()
                image.save(output, format="JPEG", quality=self.jpeg_quality, optimize=True)
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as e:
            logger.warning(f"Rejected image payload: {e}", size=len(data))
            raise InvalidImageError("Payload is not a readable image", size=len(data)) from e

        encoded = output.getvalue()
        logger.debug(
            "Image re-encoded as JPEG",
            original_size=len(data),
            encoded_size=len(encoded),
            quality=self.jpeg_quality,
        )
        return encoded
