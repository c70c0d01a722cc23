import logging
from datetime import datetime

import pytest

from caffparser import (
    BadMagicError,
    ByteReader,
    CaffDecoder,
    DecoderState,
    MagicNotFoundError,
    SizeMismatchError,
    TruncatedContainerError,
    TruncatedInputError,
    UnknownBlockIdError,
)
from builders import (
    animation_block,
    block,
    caff_header,
    ciff_bytes,
    credits_block,
    solid_pixels,
)

RED = solid_pixels(2, 2, (255, 0, 0))
BLUE = solid_pixels(3, 1, (0, 0, 255))


def two_frame_caff():
    return (
        caff_header(2)
        + credits_block(2020, 7, 2, 14, 50, b"Test Creator")
        + animation_block(ciff_bytes(2, 2, caption=b"first", pixels=RED), duration=1000)
        + animation_block(ciff_bytes(3, 1, tags=(b"blue",), pixels=BLUE), duration=500)
    )


def test_two_animations_with_credits():
    container = CaffDecoder.decode_file(two_frame_caff())

    assert container.header.num_animations == 2
    assert container.header.header_size == 20
    assert len(container.images) == 2
    first, second = container.images
    assert (first.width, first.height, first.pixels) == (2, 2, RED)
    assert first.header.caption == "first"
    assert (second.width, second.height, second.pixels) == (3, 1, BLUE)
    assert second.header.tags == ("blue",)
    assert container.durations == (1000, 500)

    credits = container.credits
    assert (credits.year, credits.month, credits.day) == (2020, 7, 2)
    assert (credits.hour, credits.minute) == (14, 50)
    assert credits.creator == "Test Creator"
    assert credits.created == datetime(2020, 7, 2, 14, 50)


def test_trailing_bytes_after_last_animation_are_ignored():
    data = two_frame_caff() + animation_block(ciff_bytes(1, 1)) + b"\x09garbage"

    container = CaffDecoder.decode_file(data)

    assert len(container.images) == 2, "Only the declared animations are decoded"


def test_leading_junk_is_skipped():
    container = CaffDecoder.decode_file(b"\x00\x00CAF" + two_frame_caff())

    assert len(container.images) == 2


def test_credits_after_animations():
    data = (
        caff_header(1)
        + animation_block(ciff_bytes(1, 1))
        + credits_block(creator=b"late")
    )

    container = CaffDecoder.decode_file(data)

    assert len(container.images) == 1
    assert container.credits is None, "Blocks after the last animation are not read"


def test_repeated_credits_overwrite(caplog):
    data = (
        caff_header(1)
        + credits_block(creator=b"first")
        + credits_block(creator=b"second")
        + animation_block(ciff_bytes(1, 1))
    )

    with caplog.at_level(logging.WARNING, logger="caffparser"):
        container = CaffDecoder.decode_file(data)

    assert container.credits.creator == "second"
    assert "Repeated credits block" in caplog.text


def test_invalid_credits_date():
    data = caff_header(1) + credits_block(month=13) + animation_block(ciff_bytes(1, 1))

    container = CaffDecoder.decode_file(data)

    assert container.credits.month == 13
    assert container.credits.created is None


def test_zero_animations():
    container = CaffDecoder.decode_file(caff_header(0) + credits_block())

    assert container.images == ()
    assert container.credits.creator == "Test Creator"


def test_zero_animations_header_only():
    container = CaffDecoder.decode_file(caff_header(0))

    assert container.animations == ()
    assert container.credits is None


def test_unknown_block_id():
    data = caff_header(1) + credits_block() + block(7, b"\x00" * 4)

    with pytest.raises(UnknownBlockIdError) as info:
        CaffDecoder.decode_file(data)

    assert info.value.block_id == 7


def test_stream_ends_before_all_animations():
    data = caff_header(3) + credits_block() + animation_block(ciff_bytes(1, 1))

    with pytest.raises(TruncatedContainerError):
        CaffDecoder.decode_file(data)


def test_stream_ends_mid_block():
    data = caff_header(2) + credits_block() + animation_block(ciff_bytes(2, 2))
    data = data[:-5]

    with pytest.raises(TruncatedContainerError) as info:
        CaffDecoder.decode_file(data)

    assert isinstance(info.value, TruncatedInputError)
    assert isinstance(info.value.__cause__, TruncatedInputError)


def test_truncated_caff_header():
    with pytest.raises(TruncatedInputError):
        CaffDecoder.decode_file(caff_header(1)[:10])


def test_missing_caff_magic():
    with pytest.raises(MagicNotFoundError):
        CaffDecoder.decode_file(ciff_bytes(1, 1))


def test_embedded_ciff_bad_magic():
    data = caff_header(1) + animation_block(ciff_bytes(1, 1, magic=b"CIFX"))

    with pytest.raises(BadMagicError):
        CaffDecoder.decode_file(data)


def test_embedded_ciff_skips_trailing_check():
    # Declares 100 content bytes: a standalone file holding 90 would be rejected
    embedded = ciff_bytes(5, 5, pixels=b"", content_size=100)
    pixels = bytes(range(100))
    data = caff_header(1) + animation_block(embedded + pixels) + credits_block()

    container = CaffDecoder.decode_file(data)

    assert container.images[0].pixels == pixels


def test_block_length_is_advisory_by_default(caplog):
    data = (
        caff_header(1)
        + credits_block(block_length=999)
        + animation_block(ciff_bytes(1, 1), block_length=1)
    )

    with caplog.at_level(logging.WARNING, logger="caffparser"):
        container = CaffDecoder.decode_file(data)

    assert len(container.images) == 1
    assert "declares 999 bytes" in caplog.text


def test_enforced_block_length():
    good = caff_header(1) + credits_block() + animation_block(ciff_bytes(1, 1))
    bad = caff_header(1) + credits_block() + animation_block(ciff_bytes(1, 1), block_length=5)

    assert len(CaffDecoder.decode_file(good, enforce_block_length=True).images) == 1
    with pytest.raises(SizeMismatchError):
        CaffDecoder.decode_file(bad, enforce_block_length=True)


def test_decoder_reaches_done():
    decoder = CaffDecoder(ByteReader(two_frame_caff()))
    assert decoder.state == DecoderState.AWAIT_HEADER_BLOCK

    decoder.decode()

    assert decoder.state == DecoderState.DONE
