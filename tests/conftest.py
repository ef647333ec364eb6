import pytest

from ppmkit.codec import encode_bytes
from ppmkit.raster import Pixel, make_raster


@pytest.fixture
def patterned_raster():
    """Factory for a raster whose pixels all differ from their neighbours."""

    def build(rows, cols):
        raster = make_raster(rows, cols)
        for r in range(rows):
            for c in range(cols):
                raster.set(r, c, Pixel((r * 37 + c * 11) % 256, (r * 13 + c * 59) % 256, (r * 71 + c * 5) % 256))
        return raster

    return build


@pytest.fixture
def solid_raster():
    def build(rows, cols, pixel):
        raster = make_raster(rows, cols)
        raster.pixels[:] = [pixel] * (rows * cols)
        return raster

    return build


@pytest.fixture
def ppm_file(tmp_path):
    """Write a raster to a .ppm file under tmp_path and return its path."""

    def write(raster, name="input.ppm"):
        path = tmp_path / name
        path.write_bytes(encode_bytes(raster))
        return path

    return write
