from __future__ import annotations

import math
from typing import Optional, Tuple

from ..errors import ArgumentRangeError
from ..raster import BLACK, Pixel, Raster, make_raster, require_raster

CENTER = -1


def downsample_half(raster: Optional[Raster]) -> None:
    """Zoom out by 2, averaging each 2x2 block.

    An odd last row or column is dropped.
    """
    raster = require_raster(raster)
    out = make_raster(raster.rows // 2, raster.cols // 2)
    src = raster.pixels
    cols = raster.cols
    for r in range(out.rows):
        top = 2 * r * cols
        bottom = top + cols
        for c in range(out.cols):
            block = (src[top + 2 * c], src[top + 2 * c + 1], src[bottom + 2 * c], src[bottom + 2 * c + 1])
            out.pixels[r * out.cols + c] = Pixel(
                sum(p.r for p in block) // 4,
                sum(p.g for p in block) // 4,
                sum(p.b for p in block) // 4,
            )
    raster.replace_with(out)


def rotate_90_cw(raster: Optional[Raster]) -> None:
    raster = require_raster(raster)
    out = make_raster(raster.cols, raster.rows)
    for r in range(raster.rows):
        for c in range(raster.cols):
            out.set(c, out.cols - 1 - r, raster.get(r, c))
    raster.replace_with(out)


def _swirl_source(r: int, c: int, cx: float, cy: float, strength: float) -> Optional[Tuple[int, int]]:
    """Return the (row, col) an output pixel samples from, or None if it is not finite."""
    dx = c - cx
    dy = r - cy
    alpha = math.hypot(dx, dy) / strength
    if not math.isfinite(alpha):
        return None
    cos_a = math.cos(alpha)
    sin_a = math.sin(alpha)
    src_c = dx * cos_a - dy * sin_a + cx
    src_r = dx * sin_a + dy * cos_a + cy
    if not (math.isfinite(src_c) and math.isfinite(src_r)):
        return None
    # int() truncates toward zero
    return int(src_r), int(src_c)


def swirl(raster: Optional[Raster], cx: float, cy: float, strength: float) -> None:
    """Inverse-map each output pixel through a rotation that grows with radius.

    A center coordinate of -1 selects the middle of the raster. Sources that
    fall outside the raster become black.
    """
    raster = require_raster(raster)
    if strength == 0:
        raise ArgumentRangeError("Swirl strength must be non-zero")
    if cx == CENTER:
        cx = raster.cols // 2
    if cy == CENTER:
        cy = raster.rows // 2

    out = make_raster(raster.rows, raster.cols)
    for r in range(raster.rows):
        for c in range(raster.cols):
            source = _swirl_source(r, c, cx, cy, strength)
            if source and 0 <= source[0] < raster.rows and 0 <= source[1] < raster.cols:
                out.set(r, c, raster.get(*source))
            else:
                out.set(r, c, BLACK)
    raster.replace_with(out)
