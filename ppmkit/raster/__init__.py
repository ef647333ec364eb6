from .types import (
    BLACK,
    WHITE,
    Pixel,
    Raster,
    copy_raster,
    make_raster,
    release_raster,
    require_raster,
)

__all__ = [
    "BLACK",
    "copy_raster",
    "make_raster",
    "Pixel",
    "Raster",
    "release_raster",
    "require_raster",
    "WHITE",
]
