import enum
import logging

from . import validator
from .ciff import CiffDecoder
from .config import Config
from .constants import CAFF_HEADER_SIZE, CAFF_MAGIC, MAGIC_SIZE
from .errors import (
    BadMagicError,
    SizeMismatchError,
    TruncatedContainerError,
    TruncatedInputError,
    UnknownBlockIdError,
)
from .reader import ByteReader
from .records import CaffAnimation, CaffContainer, CaffCredits, CaffHeader, decode_text
from .scanner import locate_magic

logger = logging.getLogger(__name__)


class DecoderState(enum.Enum):
    AWAIT_HEADER_BLOCK = 1
    AWAIT_BLOCKS = 2
    DONE = 3


class BlockKind(enum.IntEnum):
    CREDITS = 2
    ANIMATION = 3


class CaffDecoder:
    """
    Block-sequencing decoder for CAFF containers.

    The header declares how many animation blocks follow, but not the total
    stream length, so decoding is driven block by block until the declared
    count is reached. One instance decodes one stream.
    """

    def __init__(
        self,
        reader: ByteReader,
        strict_content_size: bool = None,
        enforce_block_length: bool = None,
    ):
        if enforce_block_length is None:
            enforce_block_length = Config.ENFORCE_BLOCK_LENGTH
        self.reader = reader
        self.strict_content_size = strict_content_size
        self.enforce_block_length = enforce_block_length

        self.header = None
        self.credits = None
        self.animations = []
        self._block_handlers = {
            BlockKind.CREDITS: self._read_credits_block,
            BlockKind.ANIMATION: self._read_animation_block,
        }
        self.next_state(DecoderState.AWAIT_HEADER_BLOCK)

    def next_state(self, state: DecoderState) -> None:
        logger.debug(" -> %s", state)
        self.state = state

    def decode(self) -> CaffContainer:
        while self.state != DecoderState.DONE:
            if self.state == DecoderState.AWAIT_HEADER_BLOCK:
                self._read_header()
                self.next_state(DecoderState.AWAIT_BLOCKS)
            elif self.state == DecoderState.AWAIT_BLOCKS:
                self._read_blocks()
                self.next_state(DecoderState.DONE)

        return CaffContainer(
            header=self.header,
            credits=self.credits,
            animations=tuple(self.animations),
        )

    def _read_header(self) -> None:
        reader = self.reader
        start = locate_magic(reader, CAFF_MAGIC)
        magic = reader.read_fixed(MAGIC_SIZE)
        if magic != CAFF_MAGIC:
            raise BadMagicError(f"Expected {CAFF_MAGIC!r}, found {magic!r}", start)
        header_size = reader.read_le64()
        num_animations = reader.read_le64()
        if header_size != CAFF_HEADER_SIZE:
            logger.warning(
                "CAFF header declares %d bytes, expected %d", header_size, CAFF_HEADER_SIZE
            )
        self.header = CaffHeader(
            magic=magic, header_size=header_size, num_animations=num_animations
        )
        logger.debug("CAFF header at %d: %d animations", start, num_animations)

    def _read_blocks(self) -> None:
        reader = self.reader
        expected = self.header.num_animations
        while True:
            if reader.at_end():
                if len(self.animations) < expected:
                    raise TruncatedContainerError(
                        f"Stream ended after {len(self.animations)} of "
                        f"{expected} animation blocks",
                        reader.position,
                    )
                return
            try:
                self._read_block()
            except TruncatedInputError as exc:
                raise TruncatedContainerError(
                    f"Block truncated after {len(self.animations)} of "
                    f"{expected} animation blocks: {exc.message}",
                    exc.offset,
                ) from exc
            if len(self.animations) == expected:
                if not reader.at_end():
                    logger.warning(
                        "Ignoring %d bytes after the last animation block", reader.remaining
                    )
                return

    def _read_block(self) -> None:
        reader = self.reader
        block_start = reader.position
        block_id = reader.read_u8()
        block_length = reader.read_le64()
        try:
            kind = BlockKind(block_id)
        except ValueError:
            raise UnknownBlockIdError(block_id, block_start) from None

        logger.debug("Block %s at %d, length %d", kind.name, block_start, block_length)
        payload_start = reader.position
        self._block_handlers[kind]()

        consumed = reader.position - payload_start
        if not validator.block_length_matches(block_length, consumed):
            if self.enforce_block_length:
                raise SizeMismatchError(
                    f"{kind.name} block declares {block_length} bytes, "
                    f"payload used {consumed}",
                    block_start,
                )
            logger.warning(
                "%s block at %d declares %d bytes, payload used %d",
                kind.name, block_start, block_length, consumed,
            )

    def _read_credits_block(self) -> None:
        reader = self.reader
        year = reader.read_le16()
        month = reader.read_u8()
        day = reader.read_u8()
        hour = reader.read_u8()
        minute = reader.read_u8()
        creator_length = reader.read_le64()
        creator = decode_text(reader.read_fixed(creator_length))

        if self.credits is not None:
            logger.warning("Repeated credits block, replacing earlier credits")
        self.credits = CaffCredits(
            year=year, month=month, day=day, hour=hour, minute=minute, creator=creator
        )

    def _read_animation_block(self) -> None:
        duration = self.reader.read_le64()
        image = CiffDecoder.decode(
            self.reader, standalone=False, strict_content_size=self.strict_content_size
        )
        self.animations.append(CaffAnimation(duration=duration, image=image))
        logger.debug(
            "Animation %d/%d: %dx%d, duration %d",
            len(self.animations), self.header.num_animations,
            image.width, image.height, duration,
        )

    @staticmethod
    def decode_file(
        file_data: bytes,
        strict_content_size: bool = None,
        enforce_block_length: bool = None,
    ) -> CaffContainer:
        """
        Decode a CAFF file given as bytes.

        Leading bytes before the "CAFF" magic are skipped; bytes after the
        last declared animation block are ignored.
        """
        decoder = CaffDecoder(
            ByteReader(file_data),
            strict_content_size=strict_content_size,
            enforce_block_length=enforce_block_length,
        )
        return decoder.decode()
