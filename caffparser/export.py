import logging

import numpy as np
from PIL import Image

from . import validator
from .config import Config
from .constants import BYTES_PER_PIXEL
from .errors import ExportError, SizeMismatchError
from .records import CaffContainer, CiffImage

logger = logging.getLogger(__name__)


def write_jpeg(pixels: bytes, width: int, height: int, output_path: str,
               quality: int = Config.JPEG_QUALITY) -> None:
    """
    Encode a row-major RGB buffer as a JPEG file.

    :param pixels: width * height * 3 bytes.
    :param width: Image width, must be nonzero.
    :param height: Image height, must be nonzero.
    :param output_path: Destination file.
    :param quality: JPEG quality passed to Pillow.
    """
    validator.check_dimensions(width, height, len(pixels))
    if width == 0 or height == 0:
        raise ExportError(f"Cannot export an empty {width}x{height} image")

    expected = validator.expected_content_size(width, height)
    if len(pixels) != expected:
        raise SizeMismatchError(
            f"Pixel buffer holds {len(pixels)} bytes, {width}x{height} RGB needs {expected}"
        )

    array = np.frombuffer(pixels, dtype=np.uint8).reshape(height, width, BYTES_PER_PIXEL)
    try:
        Image.fromarray(array).save(output_path, format="JPEG", quality=quality)
    except OSError as exc:
        raise ExportError(f"Failed to write {output_path}: {exc}") from exc
    logger.debug("Wrote %dx%d JPEG to %s", width, height, output_path)


def export_ciff(image: CiffImage, output_path: str, **kwargs) -> str:
    write_jpeg(image.pixels, image.width, image.height, output_path, **kwargs)
    return output_path


def export_caff(container: CaffContainer, output_path: str, **kwargs) -> str:
    """Export the first animation frame of a CAFF container."""
    if not container.animations:
        raise ExportError("CAFF container holds no animation frames")
    return export_ciff(container.animations[0].image, output_path, **kwargs)
