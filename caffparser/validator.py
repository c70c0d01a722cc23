"""
Cross-field consistency checks shared by the CIFF and CAFF decoders.

The checks only look at values that were already read; they never touch
the stream. Each raises the specific error for the rule it enforces.
"""

from .constants import BYTES_PER_PIXEL, FIXED_CIFF_HEADER_OVERHEAD
from .errors import (
    InvalidDimensionsError,
    SizeMismatchError,
    TagBoundaryMismatchError,
)
from .records import CiffHeader


def tag_region_size(header_size: int, caption_length: int, offset: int = None) -> int:
    """Bytes left for tags once the fixed fields and caption are accounted for."""
    region = header_size - FIXED_CIFF_HEADER_OVERHEAD - caption_length
    if region < 0:
        raise TagBoundaryMismatchError(
            f"Header size {header_size} is smaller than fixed fields plus caption "
            f"({FIXED_CIFF_HEADER_OVERHEAD + caption_length})",
            offset,
        )
    return region


def check_tag_boundary(consumed: int, region: int, offset: int = None) -> None:
    if consumed > region:
        raise TagBoundaryMismatchError(
            f"Tags overrun the tag region by {consumed - region} bytes", offset
        )


def check_header_size(header: CiffHeader) -> None:
    computed = header.computed_header_size
    if computed != header.header_size:
        raise TagBoundaryMismatchError(
            f"Declared header size {header.header_size} != computed {computed}"
        )


def expected_content_size(width: int, height: int) -> int:
    return width * height * BYTES_PER_PIXEL


def check_content_size(width: int, height: int, content_size: int, offset: int = None) -> None:
    expected = expected_content_size(width, height)
    if content_size != expected:
        raise SizeMismatchError(
            f"Content size {content_size} does not match {width}x{height} RGB ({expected})",
            offset,
        )


def check_dimensions(width: int, height: int, pixel_count: int) -> None:
    """A zero-area image must carry no pixel bytes."""
    if (width == 0 or height == 0) and pixel_count != 0:
        raise InvalidDimensionsError(
            f"Image is {width}x{height} but carries {pixel_count} pixel bytes"
        )


def check_remaining(remaining: int, content_size: int, offset: int = None) -> None:
    """A standalone CIFF must end exactly after its pixel buffer."""
    if remaining != content_size:
        raise SizeMismatchError(
            f"Content size {content_size} but {remaining} bytes remain", offset
        )


def block_length_matches(declared: int, consumed: int) -> bool:
    return declared == consumed
