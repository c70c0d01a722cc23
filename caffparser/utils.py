import os

from .caff import CaffDecoder
from .ciff import CiffDecoder
from .config import Config
from .errors import InputReadError
from .records import CaffContainer, CiffImage


def read_source(filepath: str) -> bytes:
    """Read a whole input file into memory."""
    try:
        with open(filepath, "rb") as f:
            return f.read()
    except OSError as exc:
        raise InputReadError(f"Failed to open {filepath}: {exc.strerror}") from exc


def load_ciff(filepath: str, **options) -> CiffImage:
    """Load and decode a standalone .ciff file."""
    return CiffDecoder.decode_file(read_source(filepath), **options)


def load_caff(filepath: str, **options) -> CaffContainer:
    """Load and decode a .caff file."""
    return CaffDecoder.decode_file(read_source(filepath), **options)


def output_path_for(filepath: str, extension: str = Config.OUTPUT_EXTENSION) -> str:
    """Replace the input's extension, e.g. "frames/a.caff" -> "frames/a.jpg"."""
    root, _ = os.path.splitext(filepath)
    return root + extension
