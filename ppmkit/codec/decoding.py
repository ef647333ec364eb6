from __future__ import annotations

import logging
from typing import BinaryIO, List

from ..errors import FormatError, TruncatedDataError
from ..raster import Pixel, Raster, make_raster

logger = logging.getLogger(__name__)

MAGIC = b"P6"
MAX_VALUE = 255
_WHITESPACE = b" \t\n\v\f\r"


class _HeaderReader:
    """Cursor over the ASCII header of a P6 file."""

    def __init__(self, data: bytes) -> None:
        self._data = data
        self.pos = 0

    def _skip_whitespace(self) -> None:
        while self.pos < len(self._data) and self._data[self.pos] in _WHITESPACE:
            self.pos += 1

    def _skip_comments(self) -> None:
        while True:
            self._skip_whitespace()
            if self.pos >= len(self._data) or self._data[self.pos] != ord("#"):
                return
            end = self._data.find(b"\n", self.pos)
            self.pos = len(self._data) if end < 0 else end + 1

    def read_token(self) -> bytes:
        self._skip_whitespace()
        start = self.pos
        while self.pos < len(self._data) and self._data[self.pos] not in _WHITESPACE:
            self.pos += 1
        return self._data[start : self.pos]

    def read_int(self, field: str) -> int:
        self._skip_comments()
        start = self.pos
        if self.pos < len(self._data) and self._data[self.pos] in b"+-":
            self.pos += 1
        digits_start = self.pos
        while self.pos < len(self._data) and 0x30 <= self._data[self.pos] <= 0x39:
            self.pos += 1
        if self.pos == digits_start:
            raise FormatError(f"Failed to read {field} from header")
        return int(self._data[start : self.pos])

    def read_separator(self) -> None:
        """Consume the single whitespace byte between header and pixel data."""
        if self.pos >= len(self._data):
            return
        if self._data[self.pos] not in _WHITESPACE:
            raise FormatError("Missing whitespace after header")
        self.pos += 1


def _read_pixels(data: bytes, offset: int, count: int) -> List[Pixel]:
    return [
        Pixel(data[i], data[i + 1], data[i + 2])
        for i in range(offset, offset + count * 3, 3)
    ]


def decode_bytes(data: bytes) -> Raster:
    """Decode a complete P6 file held in memory."""
    reader = _HeaderReader(data)
    tag = reader.read_token()
    if tag != MAGIC:
        raise FormatError(f"Not a P6 raster (bad tag {tag[:19]!r})")
    cols = reader.read_int("width")
    rows = reader.read_int("height")
    max_value = reader.read_int("maximum value")
    if max_value != MAX_VALUE:
        raise FormatError(f"Maximum channel value must be {MAX_VALUE}, got {max_value}")
    if cols <= 0 or rows <= 0:
        raise FormatError(f"Non-positive dimensions {cols}x{rows}")
    reader.read_separator()

    needed = rows * cols * 3
    available = len(data) - reader.pos
    if available < needed:
        raise TruncatedDataError(f"Expected {needed} bytes of pixel data, got {available}")
    if available > needed:
        logger.debug("Ignoring %d trailing bytes after pixel data", available - needed)

    raster = make_raster(rows, cols)
    raster.pixels[:] = _read_pixels(data, reader.pos, rows * cols)
    logger.debug("Decoded %dx%d raster", cols, rows)
    return raster


def decode(stream: BinaryIO) -> Raster:
    """Read a P6 raster from a binary file object."""
    return decode_bytes(stream.read())
