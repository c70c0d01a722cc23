"""
Configuration constants for caffparser.
"""


class Config:
    """Defaults shared by the decoders, the exporter and the CLI."""

    # Export
    JPEG_QUALITY = 95
    OUTPUT_EXTENSION = ".jpg"

    # Decoding
    STRICT_CONTENT_SIZE = False  # require content_size == width * height * 3
    ENFORCE_BLOCK_LENGTH = False  # CAFF block_length is advisory by default

    # Logging
    LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
