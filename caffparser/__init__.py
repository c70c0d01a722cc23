from .caff import BlockKind, CaffDecoder, DecoderState
from .ciff import CiffDecoder
from .config import Config
from .constants import FIXED_CIFF_HEADER_OVERHEAD
from .errors import (
    BadMagicError,
    CaffParserError,
    ExportError,
    InputReadError,
    InvalidDimensionsError,
    MagicNotFoundError,
    SizeMismatchError,
    TagBoundaryMismatchError,
    TruncatedContainerError,
    TruncatedInputError,
    UnknownBlockIdError,
)
from .export import export_caff, export_ciff, write_jpeg
from .reader import ByteReader
from .records import (
    CaffAnimation,
    CaffContainer,
    CaffCredits,
    CaffHeader,
    CiffHeader,
    CiffImage,
)
from .scanner import locate_magic
from .utils import load_caff, load_ciff, output_path_for, read_source

__all__ = [
    "BlockKind",
    "CaffDecoder",
    "DecoderState",
    "CiffDecoder",
    "Config",
    "FIXED_CIFF_HEADER_OVERHEAD",
    "BadMagicError",
    "CaffParserError",
    "ExportError",
    "InputReadError",
    "InvalidDimensionsError",
    "MagicNotFoundError",
    "SizeMismatchError",
    "TagBoundaryMismatchError",
    "TruncatedContainerError",
    "TruncatedInputError",
    "UnknownBlockIdError",
    "export_caff",
    "export_ciff",
    "write_jpeg",
    "ByteReader",
    "CaffAnimation",
    "CaffContainer",
    "CaffCredits",
    "CaffHeader",
    "CiffHeader",
    "CiffImage",
    "locate_magic",
    "load_caff",
    "load_ciff",
    "output_path_for",
    "read_source",
]
