import logging

from . import validator
from .config import Config
from .constants import (
    CAPTION_DELIMITER,
    CIFF_MAGIC,
    MAGIC_SIZE,
    TAG_DELIMITER,
)
from .errors import BadMagicError
from .reader import ByteReader
from .records import CiffHeader, CiffImage, decode_text
from .scanner import locate_magic

logger = logging.getLogger(__name__)


class CiffDecoder:
    """
    Decodes CIFF images: a header (dimensions, caption, tags) followed by a
    raw row-major RGB pixel buffer.
    """

    @staticmethod
    def decode_header(reader: ByteReader, strict_content_size: bool = None) -> CiffHeader:
        """
        Read a CIFF header starting at the reader's cursor.

        :param reader: Cursor positioned at the "CIFF" magic.
        :param strict_content_size: Require content_size == width * height * 3.
                                    Defaults to Config.STRICT_CONTENT_SIZE.
        :return: The validated header; the cursor is left at the pixel buffer.
        """
        if strict_content_size is None:
            strict_content_size = Config.STRICT_CONTENT_SIZE

        start = reader.position
        magic = reader.read_fixed(MAGIC_SIZE)
        if magic != CIFF_MAGIC:
            raise BadMagicError(f"Expected {CIFF_MAGIC!r}, found {magic!r}", start)

        header_size = reader.read_le64()
        content_size = reader.read_le64()
        width = reader.read_le64()
        height = reader.read_le64()
        if strict_content_size:
            validator.check_content_size(width, height, content_size, start)

        caption_raw = reader.read_delimited(CAPTION_DELIMITER)
        region = validator.tag_region_size(header_size, len(caption_raw), start)

        # Each tag is terminated by a NUL; together they must fill the region exactly
        tags = []
        consumed = 0
        while consumed < region:
            tag_start = reader.position
            tag_raw = reader.read_delimited(TAG_DELIMITER)
            consumed += len(tag_raw) + len(TAG_DELIMITER)
            validator.check_tag_boundary(consumed, region, tag_start)
            tags.append(decode_text(tag_raw))

        header = CiffHeader(
            magic=magic,
            header_size=header_size,
            content_size=content_size,
            width=width,
            height=height,
            caption=decode_text(caption_raw),
            tags=tuple(tags),
        )
        validator.check_header_size(header)
        logger.debug(
            "CIFF header at %d: %dx%d, content %d bytes, %d tags",
            start, width, height, content_size, len(tags),
        )
        return header

    @staticmethod
    def decode_pixels(reader: ByteReader, header: CiffHeader) -> bytes:
        return reader.read_exact(header.content_size)

    @staticmethod
    def decode(
        reader: ByteReader,
        standalone: bool = False,
        strict_content_size: bool = None,
    ) -> CiffImage:
        """
        Decode one CIFF image at the reader's cursor.

        :param reader: Cursor positioned at the "CIFF" magic.
        :param standalone: The CIFF is a whole file, so exactly content_size
                           bytes must follow the header. Embedded CIFFs skip
                           this check.
        :param strict_content_size: See decode_header.
        :return: CiffImage
        """
        header = CiffDecoder.decode_header(reader, strict_content_size)

        if standalone:
            validator.check_remaining(reader.remaining, header.content_size, reader.position)

        pixels = CiffDecoder.decode_pixels(reader, header)
        validator.check_dimensions(header.width, header.height, len(pixels))
        return CiffImage(header=header, pixels=pixels)

    @staticmethod
    def decode_file(file_data: bytes, strict_content_size: bool = None) -> CiffImage:
        """
        Decode a standalone CIFF file given as bytes.

        Leading bytes before the "CIFF" magic are skipped.
        """
        reader = ByteReader(file_data)
        locate_magic(reader, CIFF_MAGIC)
        return CiffDecoder.decode(
            reader, standalone=True, strict_content_size=strict_content_size
        )
