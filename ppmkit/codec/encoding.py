from __future__ import annotations

import logging
from typing import BinaryIO, Optional

from ..errors import EncodeError
from ..raster import Raster, require_raster

logger = logging.getLogger(__name__)


def encode_header(rows: int, cols: int) -> bytes:
    return f"P6\n{cols} {rows}\n255\n".encode("ascii")


def encode_pixels(raster: Raster) -> bytes:
    out = bytearray()
    for pixel in raster.pixels:
        out += pixel.as_bytes()
    return bytes(out)


def encode_bytes(raster: Optional[Raster]) -> bytes:
    """Serialize a raster to a complete P6 file."""
    raster = require_raster(raster)
    return encode_header(raster.rows, raster.cols) + encode_pixels(raster)


def encode(raster: Optional[Raster], stream: BinaryIO) -> None:
    """Write a raster to a binary file object, failing on a short write."""
    data = encode_bytes(raster)
    try:
        written = stream.write(data)
    except OSError as exc:
        raise EncodeError(f"Failed to write raster: {exc}") from exc
    if written is not None and written != len(data):
        raise EncodeError(f"Short write: {written} of {len(data)} bytes")
    logger.debug("Encoded %dx%d raster (%d bytes)", raster.cols, raster.rows, len(data))
