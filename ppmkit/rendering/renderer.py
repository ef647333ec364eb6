from __future__ import annotations

from typing import Optional

from PIL import Image

from ..codec import encode_pixels
from ..raster import Pixel, Raster, make_raster, require_raster


def raster_to_image(raster: Optional[Raster]) -> Image.Image:
    raster = require_raster(raster)
    return Image.frombytes("RGB", (raster.cols, raster.rows), encode_pixels(raster))


def raster_from_image(img: Image.Image) -> Raster:
    if img.mode != "RGB":
        img = img.convert("RGB")
    width, height = img.size
    data = img.tobytes()
    raster = make_raster(height, width)
    raster.pixels[:] = [Pixel(data[i], data[i + 1], data[i + 2]) for i in range(0, len(data), 3)]
    return raster


def show_raster(raster: Optional[Raster], title: Optional[str] = None) -> None:
    """Open the platform image viewer on a raster."""
    raster_to_image(raster).show(title=title)
