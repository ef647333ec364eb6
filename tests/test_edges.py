import pytest

from ppmkit.errors import InvalidRasterError
from ppmkit.raster import BLACK, WHITE, Pixel, copy_raster, make_raster
from ppmkit.transforms import detect_edges, grayscale, pixel_to_gray


def _gray_raster(levels):
    raster = make_raster(len(levels), len(levels[0]))
    for r, row in enumerate(levels):
        for c, level in enumerate(row):
            raster.set(r, c, Pixel(level, level, level))
    return raster


def _is_boundary(raster, r, c):
    return r in (0, raster.rows - 1) or c in (0, raster.cols - 1)


class TestDetectEdges:
    def test_uniform_raster(self, solid_raster):
        color = Pixel(10, 200, 30)
        raster = solid_raster(4, 5, color)
        level = pixel_to_gray(color)
        detect_edges(raster, 1)
        for r in range(4):
            for c in range(5):
                if _is_boundary(raster, r, c):
                    assert raster.get(r, c) == Pixel(level, level, level)
                else:
                    assert raster.get(r, c) == WHITE

    def test_zero_threshold_marks_interior_as_edges(self, solid_raster):
        raster = solid_raster(3, 3, Pixel(40, 40, 40))
        detect_edges(raster, 0)
        assert raster.get(1, 1) == BLACK
        assert raster.get(0, 0) == Pixel(40, 40, 40)

    def test_horizontal_gradient_samples_diagonal(self):
        raster = _gray_raster([[0, 0, 0], [0, 0, 0], [0, 0, 200]])
        detect_edges(raster, 50)
        assert raster.get(1, 1) == BLACK

    def test_direct_right_neighbour_is_not_sampled(self):
        raster = _gray_raster([[0, 0, 0], [0, 0, 200], [0, 0, 0]])
        detect_edges(raster, 50)
        assert raster.get(1, 1) == WHITE
        assert raster.get(1, 2) == Pixel(200, 200, 200)

    def test_vertical_gradient(self):
        raster = _gray_raster([[0, 100, 0], [0, 0, 0], [0, 0, 0]])
        # |gy| = 50, so the threshold decides
        low = copy_raster(raster)
        detect_edges(low, 50)
        assert low.get(1, 1) == BLACK
        detect_edges(raster, 50.5)
        assert raster.get(1, 1) == WHITE

    def test_thin_raster_is_all_boundary(self, patterned_raster):
        raster = patterned_raster(2, 6)
        expected = copy_raster(raster)
        grayscale(expected)
        detect_edges(raster, 10)
        assert raster == expected

    def test_single_pixel(self, solid_raster):
        raster = solid_raster(1, 1, Pixel(255, 0, 0))
        detect_edges(raster, 3)
        assert raster.pixels == [Pixel(76, 76, 76)]

    def test_keeps_dimensions(self, patterned_raster):
        raster = patterned_raster(6, 7)
        detect_edges(raster, 20)
        assert raster.size == (6, 7)
        for r in range(1, 5):
            for c in range(1, 6):
                assert raster.get(r, c) in (WHITE, BLACK)

    def test_rejects_missing_raster(self):
        with pytest.raises(InvalidRasterError):
            detect_edges(None, 1)
