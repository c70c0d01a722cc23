"""
Exception classes for caffparser.

Every decode failure is malformed input, so the hierarchy is rooted in
ValueError. Each error records the stream offset where it was detected
when one is known.
"""


class CaffParserError(ValueError):
    """Base exception for all caffparser errors."""

    def __init__(self, message: str = "", offset: int = None):
        self.message = message
        self.offset = offset
        if offset is not None:
            message = f"{message} (at offset {offset})"
        super().__init__(message)


class InputReadError(CaffParserError):
    """The source file could not be opened or read."""


class TruncatedInputError(CaffParserError):
    """Fewer bytes remain than a read requires."""


class MagicNotFoundError(CaffParserError):
    """The top-level magic token never appears in the stream."""


class BadMagicError(CaffParserError):
    """The magic token at a fixed position is not the expected one."""


class TagBoundaryMismatchError(CaffParserError):
    """The CIFF tag region does not partition exactly per the declared header size."""


class InvalidDimensionsError(CaffParserError):
    """A zero-area image carries pixel data."""


class SizeMismatchError(CaffParserError):
    """A declared size disagrees with the bytes actually present."""


class UnknownBlockIdError(CaffParserError):
    """A CAFF block id outside the known block kinds."""

    def __init__(self, block_id: int, offset: int = None):
        self.block_id = block_id
        super().__init__(f"Unknown CAFF block id {block_id}", offset)


class TruncatedContainerError(TruncatedInputError):
    """The CAFF stream ended before all declared animation blocks were read."""


class ExportError(CaffParserError):
    """A decoded image could not be exported."""
