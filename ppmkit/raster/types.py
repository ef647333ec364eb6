from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..errors import AllocationError, InvalidRasterError


@dataclass(frozen=True)
class Pixel:
    r: int
    g: int
    b: int

    def as_bytes(self) -> bytes:
        return bytes((self.r, self.g, self.b))


BLACK = Pixel(0, 0, 0)
WHITE = Pixel(255, 255, 255)


@dataclass
class Raster:
    """Row-major RGB pixel grid; pixel (r, c) lives at index r * cols + c."""

    rows: int
    cols: int
    pixels: Optional[List[Pixel]]

    def validate(self) -> None:
        """Check dimensions against the backing storage."""
        if self.pixels is None:
            raise InvalidRasterError("Raster storage has been released")
        if self.rows <= 0 or self.cols <= 0:
            raise InvalidRasterError(f"Invalid raster dimensions {self.rows}x{self.cols}")
        if len(self.pixels) != self.rows * self.cols:
            raise InvalidRasterError(
                f"Raster holds {len(self.pixels)} pixels, expected {self.rows * self.cols}"
            )

    @property
    def size(self) -> Tuple[int, int]:
        return self.rows, self.cols

    @property
    def is_released(self) -> bool:
        return self.pixels is None

    def index(self, row: int, col: int) -> int:
        return row * self.cols + col

    def get(self, row: int, col: int) -> Pixel:
        return self.pixels[self.index(row, col)]

    def set(self, row: int, col: int, pixel: Pixel) -> None:
        self.pixels[self.index(row, col)] = pixel

    def replace_with(self, other: "Raster") -> None:
        """Move the storage and dimensions of a fully built raster into this one.

        The donor is left released so the two never share storage.
        """
        other.validate()
        self.rows = other.rows
        self.cols = other.cols
        self.pixels = other.pixels
        other.pixels = None


def require_raster(raster: Optional[Raster]) -> Raster:
    if raster is None:
        raise InvalidRasterError("No raster given")
    if not isinstance(raster, Raster):
        raise InvalidRasterError(f"Expected a Raster, got {type(raster).__name__}")
    raster.validate()
    return raster


def make_raster(rows: int, cols: int) -> Raster:
    """Allocate a rows x cols raster filled with black."""
    if rows <= 0 or cols <= 0:
        raise AllocationError(f"Cannot allocate a {rows}x{cols} raster")
    try:
        pixels = [BLACK] * (rows * cols)
    except MemoryError as exc:
        raise AllocationError(f"Out of memory allocating a {rows}x{cols} raster") from exc
    return Raster(rows, cols, pixels)


def copy_raster(src: Optional[Raster]) -> Raster:
    src = require_raster(src)
    copy = make_raster(src.rows, src.cols)
    copy.pixels[:] = src.pixels
    return copy


def release_raster(raster: Optional[Raster]) -> None:
    if raster is not None:
        raster.pixels = None
