"""Conversion of PNG artwork into the RGB565 binary image format used by the game."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO

from PIL import Image as PILImage

#: Colour written for fully transparent pixels (pure green in RGB565).
TRANSPARENT_565 = 0x07E0

# x, y, w, h, dw, dh as little-endian unsigned 16-bit values, then the type byte.
_HEADER = struct.Struct("<6HB")

# Name prefixes of sprite sheets that are sliced into square frames on one row.
_STRIP_PREFIXES = {"scene", "icon", "shadow"}


@dataclass
class Image:
    """A cropped RGB565 image placed at (x, y) inside a w-by-h frame."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0
    dw: int = 0
    dh: int = 0
    type: int = 0
    data: list[int] = field(default_factory=list)
    alpha: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        size = self.dw * self.dh
        if len(self.data) != size or len(self.alpha) != size:
            raise ValueError(
                f"image of {self.dw}x{self.dh} needs {size} pixels, "
                f"got {len(self.data)} colours and {len(self.alpha)} alpha values"
            )


def rgb888_to_565(r: int, g: int, b: int) -> int:
    """Pack 8-bit red, green and blue into one RGB565 value."""
    return (((r & 0xF8) << 8) + ((g & 0xFC) << 3) + ((b & 0xF8) >> 3)) & 0xFFFF


def rgb565_to_888(color: int) -> tuple[int, int, int]:
    """Expand an RGB565 value into an (r, g, b) triple of 8-bit channels."""
    r = (color & 0xF800) >> 8
    g = (color & 0x07E0) >> 3
    b = (color & 0x001F) << 3
    return r, g, b


def clip_alpha(image: PILImage.Image) -> tuple[int, int, int, int]:
    """Return (left, top, width, height) of the area holding non-transparent pixels.

    A fully transparent image yields (0, 0, 0, 0).
    """
    bbox = image.convert("RGBA").getchannel("A").getbbox()
    if bbox is None:
        return 0, 0, 0, 0
    left, top, right, bottom = bbox
    return left, top, right - left, bottom - top


def clip(image: PILImage.Image, x: int, y: int) -> list[PILImage.Image]:
    """Cut an image into an x-by-y grid of equal tiles, row by row."""
    if x <= 0 or y <= 0:
        raise ValueError("grid dimensions must be positive")
    w = image.width // x
    h = image.height // y
    return [
        image.crop((i * w, j * h, i * w + w, j * h + h))
        for j in range(y)
        for i in range(x)
    ]


def load_image565(source: PILImage.Image) -> Image:
    """Convert a picture into an Image of RGB565 colours and alpha values."""
    rgba = source.convert("RGBA")
    data: list[int] = []
    alpha: list[int] = []
    for r, g, b, a in rgba.getdata():
        data.append(TRANSPARENT_565 if a == 0 else rgb888_to_565(r, g, b))
        alpha.append(a)
    return Image(
        x=0,
        y=0,
        w=rgba.width,
        h=rgba.height,
        dw=rgba.width,
        dh=rgba.height,
        type=0,
        data=data,
        alpha=alpha,
    )


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    chunk = stream.read(size)
    if len(chunk) != size:
        raise ValueError("truncated image data")
    return chunk


def load_bin(path: str | Path) -> Image:
    """Read the first image record stored in a binary image file."""
    with open(path, "rb") as stream:
        x, y, w, h, dw, dh, kind = _HEADER.unpack(_read_exact(stream, _HEADER.size))
        size = dw * dh
        data = list(struct.unpack(f"<{size}H", _read_exact(stream, 2 * size)))
        alpha = list(_read_exact(stream, size))
    return Image(x=x, y=y, w=w, h=h, dw=dw, dh=dh, type=kind, data=data, alpha=alpha)


def save_bin(image: Image, target: str | Path) -> None:
    """Append one image record to a binary image file."""
    with open(target, "ab") as stream:
        stream.write(
            _HEADER.pack(
                image.x, image.y, image.w, image.h, image.dw, image.dh, image.type
            )
        )
        stream.write(struct.pack(f"<{len(image.data)}H", *image.data))
        stream.write(bytes(image.alpha))


def convert(source: str | Path, target: str | Path) -> None:
    """Convert a PNG into binary image records appended to ``target``.

    Files named ``scene_*``, ``icon_*`` or ``shadow_*`` are cut into square
    frames along one row, ``part_*`` files into a 3x3 grid; anything else is
    kept whole. Each frame is cropped to its visible area before saving.
    """
    prefix = Path(source).name.split(".")[0].split("_")[0]
    with PILImage.open(source) as opened:
        picture = opened.convert("RGBA")
    if prefix in _STRIP_PREFIXES:
        frames = clip(picture, picture.width // picture.height, 1)
    elif prefix == "part":
        frames = clip(picture, 3, 3)
    else:
        frames = [picture]
    for frame in frames:
        left, top, width, height = clip_alpha(frame)
        cropped = frame.crop((left, top, left + width, top + height))
        result = load_image565(cropped)
        result.x = left
        result.y = top
        result.w = frame.width
        result.h = frame.height
        save_bin(result, target)