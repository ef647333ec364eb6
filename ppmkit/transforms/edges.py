from __future__ import annotations

import math
from typing import Optional

from ..raster import BLACK, WHITE, Pixel, Raster, make_raster, require_raster
from .channels import grayscale


def _is_boundary(raster: Raster, r: int, c: int) -> bool:
    return r == 0 or c == 0 or r == raster.rows - 1 or c == raster.cols - 1


def detect_edges(raster: Optional[Raster], threshold: float) -> None:
    """Classify interior pixels as edge (black) or not (white).

    The raster is converted to grayscale in place first, so the caller's
    colors are lost even if the caller only wanted the edge map. Boundary
    pixels keep their gray value.

    The horizontal gradient compares the left neighbour with the pixel one
    row down and one column right, not the pixel directly to the right.
    """
    raster = require_raster(raster)
    grayscale(raster)

    out = make_raster(raster.rows, raster.cols)
    for r in range(raster.rows):
        for c in range(raster.cols):
            if _is_boundary(raster, r, c):
                level = raster.get(r, c).r
                out.set(r, c, Pixel(level, level, level))
                continue
            left = raster.get(r, c - 1).g
            diagonal = raster.get(r + 1, c + 1).g
            up = raster.get(r - 1, c).g
            down = raster.get(r + 1, c).g
            gradient_x = (left - diagonal) / 2
            gradient_y = (up - down) / 2
            magnitude = math.sqrt(gradient_x ** 2 + gradient_y ** 2)
            out.set(r, c, WHITE if magnitude < threshold else BLACK)
    raster.replace_with(out)
