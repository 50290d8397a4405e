"""
Coordinate helpers and border-aware element access for rasters.

Rasters are NumPy arrays of shape (..., ny, nx). Coordinates are given in
raster order, i.e. (x, y, *rest) where x indexes the last NumPy axis, y the
one before it and ``rest`` the leading batch/channel axes from the innermost
outwards. With that convention the flat offset of a coordinate is the same
as the C-order flat index of the NumPy array.
"""

import numpy as np

from .. import constants as cte
from .policies import BorderMode


def index_to_coord(shape, index: int) -> tuple:
    """
    Decode a flat offset into a coordinate.

    Args:
        shape: NumPy shape of the raster, (..., ny, nx)
        index: Flat offset in [0, prod(shape))

    Returns:
        tuple: Coordinate (x, y, *rest)
    """
    size = int(np.prod(shape, dtype=np.int64))
    if not 0 <= index < size:
        raise IndexError(f"Flat index {index} out of range for shape {tuple(shape)}")

    coord = []
    for extent in reversed(shape):
        coord.append(index % extent)
        index //= extent
    return tuple(coord)


def coord_to_index(shape, coord) -> int:
    """
    Encode a coordinate (x, y, *rest) into a flat offset.

    The coordinate must lie inside the raster; border handling is the job of
    element_at.
    """
    if len(coord) != len(shape):
        raise ValueError(
            f"Coordinate {tuple(coord)} does not match a {len(shape)}D shape"
        )

    index = 0
    stride = 1
    for c, extent in zip(coord, reversed(shape)):
        if not 0 <= c < extent:
            raise IndexError(f"Coordinate {tuple(coord)} outside shape {tuple(shape)}")
        index += c * stride
        stride *= extent
    return index


def element_at(raster: np.ndarray, coord, border_mode, constant_border_value):
    """
    Fetch one element, applying border handling when (x, y) leaves the raster.

    REPLICATE clamps x and y to the raster edges; CONSTANT and UNDEFINED return
    ``constant_border_value``. Only the two spatial coordinates are checked,
    the remaining ones are passed through.

    Args:
        raster: Source raster of shape (..., ny, nx)
        coord: Coordinate (x, y, *rest), x and y may be out of bounds
        border_mode: BorderMode member
        constant_border_value: Value substituted outside the raster

    Returns:
        Element of the raster dtype (or the constant value)
    """
    ny, nx = raster.shape[-2:]
    x, y = coord[0], coord[1]

    if x < 0 or y < 0 or x >= nx or y >= ny:
        if border_mode == BorderMode.REPLICATE:
            x = min(max(x, 0), nx - 1)
            y = min(max(y, 0), ny - 1)
            coord = (x, y) + tuple(coord[2:])
        else:
            return constant_border_value

    return raster.flat[coord_to_index(raster.shape, coord)]


def bilinear_at(
    raster: np.ndarray,
    coord,
    x_src,
    y_src,
    border_mode,
    constant_border_value,
):
    """
    Bilinear blend of the 2x2 neighbourhood around (x_src, y_src).

    Neighbours are read with element_at so border handling applies to each of
    them. Weights and the blend are float32; the four terms are summed in the
    order top-left, top-right, bottom-left, bottom-right.

    Args:
        raster: Source raster of shape (..., ny, nx)
        coord: Coordinate supplying the non-spatial indices (x and y are ignored)
        x_src: Source x location (float32)
        y_src: Source y location (float32)
        border_mode: BorderMode member
        constant_border_value: Value substituted outside the raster

    Returns:
        numpy.float32: Interpolated value
    """
    f32 = cte.COORD_FLOAT_TYPE
    x_src = f32(x_src)
    y_src = f32(y_src)

    xi = int(np.floor(x_src))
    yi = int(np.floor(y_src))

    dx = x_src - f32(xi)
    dy = y_src - f32(yi)
    dx_1 = f32(1.0) - dx
    dy_1 = f32(1.0) - dy

    rest = tuple(coord[2:])
    tl = f32(element_at(raster, (xi, yi) + rest, border_mode, constant_border_value))
    tr = f32(element_at(raster, (xi + 1, yi) + rest, border_mode, constant_border_value))
    bl = f32(element_at(raster, (xi, yi + 1) + rest, border_mode, constant_border_value))
    br = f32(element_at(raster, (xi + 1, yi + 1) + rest, border_mode, constant_border_value))

    return tl * (dx_1 * dy_1) + tr * (dx * dy_1) + bl * (dx_1 * dy) + br * (dx * dy)


__all__ = ["index_to_coord", "coord_to_index", "element_at", "bilinear_at"]
