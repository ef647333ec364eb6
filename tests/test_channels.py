import pytest

from ppmkit.errors import InvalidRasterError
from ppmkit.raster import Pixel, copy_raster, make_raster, release_raster
from ppmkit.transforms import grayscale, invert, pixel_to_gray, swap_channels


class TestPixelToGray:
    @pytest.mark.parametrize(
        "pixel, expected",
        [
            (Pixel(0, 0, 0), 0),
            (Pixel(255, 255, 255), 255),
            (Pixel(100, 150, 200), 140),
            (Pixel(255, 0, 0), 76),
            (Pixel(0, 255, 0), 150),
            (Pixel(0, 0, 255), 28),
        ],
    )
    def test_weighted_luma(self, pixel, expected):
        assert pixel_to_gray(pixel) == expected

    def test_truncates_instead_of_rounding(self):
        # 0.11 * 9 = 0.99 and 0.30 * 5 = 1.5
        assert pixel_to_gray(Pixel(0, 0, 9)) == 0
        assert pixel_to_gray(Pixel(5, 0, 0)) == 1

    def test_gray_pixels_are_fixed_points(self):
        for level in range(256):
            assert pixel_to_gray(Pixel(level, level, level)) == level


class TestGrayscale:
    def test_uses_original_channels(self, patterned_raster):
        raster = patterned_raster(3, 4)
        expected = [pixel_to_gray(p) for p in raster.pixels]
        grayscale(raster)
        assert [p.r for p in raster.pixels] == expected
        assert all(p.r == p.g == p.b for p in raster.pixels)

    def test_idempotent(self, patterned_raster):
        raster = patterned_raster(5, 6)
        grayscale(raster)
        once = copy_raster(raster)
        grayscale(raster)
        assert raster == once

    def test_keeps_storage(self, patterned_raster):
        raster = patterned_raster(2, 2)
        storage = raster.pixels
        grayscale(raster)
        assert raster.pixels is storage


class TestSwapChannels:
    def test_rotates_channels(self, solid_raster):
        raster = solid_raster(2, 2, Pixel(1, 2, 3))
        swap_channels(raster)
        assert raster.pixels == [Pixel(2, 3, 1)] * 4

    def test_order_three(self, patterned_raster):
        raster = patterned_raster(4, 3)
        original = copy_raster(raster)
        swap_channels(raster)
        assert raster != original
        swap_channels(raster)
        swap_channels(raster)
        assert raster == original


class TestInvert:
    def test_inverts_every_channel(self, solid_raster):
        raster = solid_raster(1, 3, Pixel(0, 100, 255))
        invert(raster)
        assert raster.pixels == [Pixel(255, 155, 0)] * 3

    def test_involution(self, patterned_raster):
        raster = patterned_raster(3, 3)
        original = copy_raster(raster)
        invert(raster)
        invert(raster)
        assert raster == original


@pytest.mark.parametrize("transform", [grayscale, swap_channels, invert])
def test_rejects_missing_raster(transform):
    with pytest.raises(InvalidRasterError):
        transform(None)


@pytest.mark.parametrize("transform", [grayscale, swap_channels, invert])
def test_rejects_released_raster(transform):
    raster = make_raster(2, 2)
    release_raster(raster)
    with pytest.raises(InvalidRasterError):
        transform(raster)
