import struct

from .errors import TruncatedInputError


class ByteReader:
    """
    Forward-only cursor over an in-memory byte buffer.

    All reads are bounds-checked and raise TruncatedInputError instead of
    returning short data. The only backwards movement is ``rewind`` to a
    previously observed position, used when scanning for a magic token.
    """

    __slots__ = ("_data", "_pos")

    def __init__(self, data: bytes, offset: int = 0):
        self._data = bytes(data)
        self._pos = offset

    @property
    def position(self) -> int:
        return self._pos

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def at_end(self) -> bool:
        return self._pos >= len(self._data)

    def rewind(self, mark: int) -> None:
        """Move the cursor back to ``mark``, a position already passed."""
        if not 0 <= mark <= self._pos:
            raise ValueError(f"Cannot rewind from {self._pos} to {mark}")
        self._pos = mark

    def read_fixed(self, n: int) -> bytes:
        """Read exactly ``n`` bytes."""
        if n > self.remaining:
            raise TruncatedInputError(
                f"Need {n} bytes, only {self.remaining} remain", self._pos
            )
        chunk = self._data[self._pos : self._pos + n]
        self._pos += n
        return chunk

    # Pixel buffers use the same bounds-checked path
    read_exact = read_fixed

    def read_le64(self) -> int:
        return struct.unpack("<Q", self.read_fixed(8))[0]

    def read_le16(self) -> int:
        return struct.unpack("<H", self.read_fixed(2))[0]

    def read_u8(self) -> int:
        return self.read_fixed(1)[0]

    def read_delimited(self, delim: bytes) -> bytes:
        """
        Read up to and including ``delim``.

        :param delim: A single terminator byte.
        :return: The bytes before the terminator; the terminator is consumed.
        """
        start = self._pos
        end = self._data.find(delim, start)
        if end < 0:
            raise TruncatedInputError(
                f"Stream ended before terminator {delim!r}", start
            )
        value = self._data[start:end]
        self._pos = end + len(delim)
        return value
