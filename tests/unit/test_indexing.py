"""
Unit tests for coordinate conversion and border-aware element access.
"""
import pytest
import numpy as np

from pyrefscale.rastermanip import (
    BorderMode, index_to_coord, coord_to_index, element_at, bilinear_at
)


class TestCoordinateConversion:
    """Flat offset <-> (x, y, *rest) conversion."""

    @pytest.mark.unit
    def test_index_to_coord(self):
        shape = (2, 3, 4)
        assert index_to_coord(shape, 0) == (0, 0, 0)
        assert index_to_coord(shape, 5) == (1, 1, 0)
        assert index_to_coord(shape, 13) == (1, 0, 1)
        assert index_to_coord(shape, 23) == (3, 2, 1)

    @pytest.mark.unit
    def test_coord_to_index_matches_numpy(self):
        """Offsets agree with NumPy's C-order flat index."""
        shape = (2, 3, 4)
        raster = np.arange(24).reshape(shape)
        for offset in range(raster.size):
            coord = index_to_coord(shape, offset)
            assert coord_to_index(shape, coord) == offset
            x, y, b = coord
            assert raster[b, y, x] == offset

    @pytest.mark.unit
    def test_index_out_of_range(self):
        with pytest.raises(IndexError):
            index_to_coord((3, 4), 12)
        with pytest.raises(IndexError):
            index_to_coord((3, 4), -1)

    @pytest.mark.unit
    def test_coord_outside_shape(self):
        with pytest.raises(IndexError):
            coord_to_index((3, 4), (4, 0))
        with pytest.raises(IndexError):
            coord_to_index((3, 4), (0, -1))

    @pytest.mark.unit
    def test_coord_rank_mismatch(self):
        with pytest.raises(ValueError):
            coord_to_index((3, 4), (0, 0, 0))


class TestElementAt:
    """Border handling of single element reads."""

    @pytest.fixture
    def raster(self):
        return np.arange(12, dtype=np.int16).reshape(3, 4)

    @pytest.mark.unit
    def test_inside(self, raster):
        assert element_at(raster, (2, 1), BorderMode.CONSTANT, -1) == raster[1, 2]

    @pytest.mark.unit
    @pytest.mark.parametrize("coord", [(-1, 0), (4, 0), (0, -1), (0, 3), (-3, 7)])
    def test_constant_outside(self, raster, coord):
        assert element_at(raster, coord, BorderMode.CONSTANT, -1) == -1

    @pytest.mark.unit
    def test_undefined_outside_gives_constant(self, raster):
        assert element_at(raster, (-1, -1), BorderMode.UNDEFINED, 9) == 9

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "coord, expected",
        [((-1, -1), 0), ((5, -2), 3), ((-4, 3), 8), ((10, 10), 11), ((2, 7), 10)],
    )
    def test_replicate_clamps_to_edge(self, raster, coord, expected):
        assert element_at(raster, coord, BorderMode.REPLICATE, -1) == expected

    @pytest.mark.unit
    def test_batch_axes_pass_through(self):
        raster = np.arange(24, dtype=np.float32).reshape(2, 3, 4)
        assert element_at(raster, (1, 2, 1), BorderMode.CONSTANT, 0) == raster[1, 2, 1]
        assert element_at(raster, (-1, 9, 1), BorderMode.REPLICATE, 0) == raster[1, 2, 0]


class TestBilinearAt:
    """2x2 neighbourhood blending."""

    @pytest.fixture
    def raster(self):
        return np.array([[0.0, 10.0], [20.0, 30.0]], dtype=np.float32)

    @pytest.mark.unit
    def test_centre_of_block(self, raster):
        value = bilinear_at(raster, (0, 0), 0.5, 0.5, BorderMode.CONSTANT, 0)
        assert value == np.float32(15.0)
        assert value.dtype == np.float32

    @pytest.mark.unit
    def test_on_grid_point(self, raster):
        assert bilinear_at(raster, (0, 0), 1.0, 0.0, BorderMode.CONSTANT, 0) == 10.0

    @pytest.mark.unit
    def test_neighbours_use_border_mode(self, raster):
        # Half way past the right edge of the top row
        constant = bilinear_at(raster, (0, 0), 1.5, 0.0, BorderMode.CONSTANT, 0)
        replicate = bilinear_at(raster, (0, 0), 1.5, 0.0, BorderMode.REPLICATE, 0)
        assert constant == np.float32(5.0)
        assert replicate == np.float32(10.0)
