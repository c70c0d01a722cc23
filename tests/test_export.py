import numpy as np
import pytest
from PIL import Image

from caffparser import (
    CaffDecoder,
    CiffDecoder,
    ExportError,
    InputReadError,
    InvalidDimensionsError,
    SizeMismatchError,
    export_caff,
    export_ciff,
    load_caff,
    load_ciff,
    output_path_for,
    write_jpeg,
)
from builders import animation_block, caff_header, ciff_bytes, credits_block, example_ciff, solid_pixels


def test_output_path_for():
    assert output_path_for("images/example.ciff") == "images/example.jpg"
    assert output_path_for("anim.v2.caff") == "anim.v2.jpg"
    assert output_path_for("noextension") == "noextension.jpg"


def test_export_white_ciff(tmp_path):
    image = CiffDecoder.decode_file(example_ciff())
    output = tmp_path / "example.jpg"

    export_ciff(image, str(output))

    with Image.open(output) as jpg:
        assert jpg.format == "JPEG"
        assert jpg.size == (200, 200)
        pixels = np.array(jpg.convert("RGB"))
    # JPEG is lossy, white stays (almost) white
    assert pixels.min() >= 250, "Decoded JPEG should be white"


def test_export_caff_first_frame(tmp_path):
    data = (
        caff_header(2)
        + credits_block()
        + animation_block(ciff_bytes(16, 8, pixels=solid_pixels(16, 8, (255, 0, 0))))
        + animation_block(ciff_bytes(4, 4, pixels=solid_pixels(4, 4, (0, 0, 255))))
    )
    container = CaffDecoder.decode_file(data)
    output = tmp_path / "anim.jpg"

    export_caff(container, str(output))

    with Image.open(output) as jpg:
        assert jpg.size == (16, 8), "The first frame is exported"
        r, g, b = np.array(jpg.convert("RGB")).reshape(-1, 3).mean(axis=0)
    assert r > 200 and g < 50 and b < 50


def test_export_caff_without_frames(tmp_path):
    container = CaffDecoder.decode_file(caff_header(0) + credits_block())

    with pytest.raises(ExportError):
        export_caff(container, str(tmp_path / "empty.jpg"))


def test_write_jpeg_rejects_zero_area_with_pixels(tmp_path):
    with pytest.raises(InvalidDimensionsError):
        write_jpeg(b"\x00" * 3, 0, 1, str(tmp_path / "bad.jpg"))


def test_write_jpeg_rejects_empty_image(tmp_path):
    with pytest.raises(ExportError):
        write_jpeg(b"", 0, 0, str(tmp_path / "empty.jpg"))


def test_write_jpeg_rejects_short_buffer(tmp_path):
    with pytest.raises(SizeMismatchError):
        write_jpeg(b"\x00" * 10, 2, 2, str(tmp_path / "short.jpg"))


def test_write_jpeg_to_missing_directory(tmp_path):
    with pytest.raises(ExportError):
        write_jpeg(b"\x00" * 12, 2, 2, str(tmp_path / "missing" / "out.jpg"))


def test_load_from_files(tmp_path):
    ciff_path = tmp_path / "example.ciff"
    ciff_path.write_bytes(example_ciff())
    caff_path = tmp_path / "example.caff"
    caff_path.write_bytes(caff_header(1) + credits_block() + animation_block(example_ciff()))

    assert load_ciff(str(ciff_path)).width == 200
    assert len(load_caff(str(caff_path)).images) == 1


def test_load_missing_file(tmp_path):
    with pytest.raises(InputReadError):
        load_ciff(str(tmp_path / "missing.ciff"))
