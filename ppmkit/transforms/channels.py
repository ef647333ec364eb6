from __future__ import annotations

from typing import Optional

from ..raster import Pixel, Raster, require_raster


def pixel_to_gray(pixel: Pixel) -> int:
    """Weighted luma floor(0.30 R + 0.59 G + 0.11 B), truncated to an 8-bit value.

    Computed in hundredths so a gray pixel maps back to its own level.
    """
    return (30 * pixel.r + 59 * pixel.g + 11 * pixel.b) // 100


def grayscale(raster: Optional[Raster]) -> None:
    """Replace every pixel with its luma in all three channels."""
    raster = require_raster(raster)
    pixels = raster.pixels
    for i, pixel in enumerate(pixels):
        level = pixel_to_gray(pixel)
        pixels[i] = Pixel(level, level, level)


def swap_channels(raster: Optional[Raster]) -> None:
    """Rotate channels so red takes green, green takes blue and blue takes red."""
    raster = require_raster(raster)
    pixels = raster.pixels
    for i, pixel in enumerate(pixels):
        pixels[i] = Pixel(pixel.g, pixel.b, pixel.r)


def invert(raster: Optional[Raster]) -> None:
    raster = require_raster(raster)
    pixels = raster.pixels
    for i, pixel in enumerate(pixels):
        pixels[i] = Pixel(255 - pixel.r, 255 - pixel.g, 255 - pixel.b)
