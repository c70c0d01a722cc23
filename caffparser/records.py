from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

import numpy as np

from .constants import BYTES_PER_PIXEL, FIXED_CIFF_HEADER_OVERHEAD

TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "surrogateescape"


def decode_text(raw: bytes) -> str:
    return raw.decode(TEXT_ENCODING, TEXT_ERRORS)


def encoded_length(text: str) -> int:
    return len(text.encode(TEXT_ENCODING, TEXT_ERRORS))


@dataclass(frozen=True)
class CiffHeader:
    magic: bytes
    header_size: int
    content_size: int
    width: int
    height: int
    caption: str
    tags: Tuple[str, ...] = ()

    @property
    def computed_header_size(self) -> int:
        """Header size implied by the caption and tags actually present."""
        return (
            FIXED_CIFF_HEADER_OVERHEAD
            + encoded_length(self.caption)
            + sum(encoded_length(tag) + 1 for tag in self.tags)
        )


@dataclass(frozen=True)
class CiffImage:
    header: CiffHeader
    pixels: bytes

    @property
    def width(self) -> int:
        return self.header.width

    @property
    def height(self) -> int:
        return self.header.height

    def to_array(self) -> np.ndarray:
        """Pixel buffer as a read-only (height, width, 3) uint8 array."""
        return np.frombuffer(self.pixels, dtype=np.uint8).reshape(
            self.height, self.width, BYTES_PER_PIXEL
        )


@dataclass(frozen=True)
class CaffHeader:
    magic: bytes
    header_size: int
    num_animations: int


@dataclass(frozen=True)
class CaffCredits:
    year: int
    month: int
    day: int
    hour: int
    minute: int
    creator: str

    @property
    def created(self) -> Optional[datetime]:
        """Creation time, or None when the fields are not a valid date."""
        try:
            return datetime(self.year, self.month, self.day, self.hour, self.minute)
        except ValueError:
            return None


@dataclass(frozen=True)
class CaffAnimation:
    duration: int
    image: CiffImage


@dataclass(frozen=True)
class CaffContainer:
    header: CaffHeader
    credits: Optional[CaffCredits]
    animations: Tuple[CaffAnimation, ...] = ()

    @property
    def images(self) -> Tuple[CiffImage, ...]:
        return tuple(animation.image for animation in self.animations)

    @property
    def durations(self) -> Tuple[int, ...]:
        return tuple(animation.duration for animation in self.animations)
