import logging

from .errors import MagicNotFoundError
from .reader import ByteReader

logger = logging.getLogger(__name__)


def locate_magic(reader: ByteReader, token: bytes) -> int:
    """
    Advance ``reader`` to the first occurrence of ``token``.

    A window of ``len(token)`` bytes slides over the stream; on a match the
    cursor is rewound to the window's first byte, so the token itself is
    read again by the header decoder.

    :return: The offset of the token.
    """
    window = bytearray()
    start = reader.position
    while not reader.at_end():
        window += reader.read_fixed(1)
        if len(window) > len(token):
            del window[0]
        if window == token:
            found = reader.position - len(token)
            reader.rewind(found)
            if found > start:
                logger.debug("Skipped %d bytes before %r", found - start, token)
            return found
    raise MagicNotFoundError(f"Magic {token!r} not found", start)
