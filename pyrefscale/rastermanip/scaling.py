"""
Reference raster scaling.

Slow, literal resampling used as ground truth for optimized scaling kernels.
Every destination element is computed on its own with float32 coordinate
arithmetic; only the final value is converted to the raster element type
(truncation for integer types, rounding for float16). Supports nearest
neighbour, bilinear and area (box average) interpolation together with
constant, replicate and undefined border handling.

Rasters are NumPy arrays of shape (..., ny, nx). The last two axes are
rescaled, leading axes are batch/channel dimensions copied as they are.
"""

from dataclasses import dataclass

import numpy as np

from .. import constants as cte
from ..exceptions import InvalidScaleRequestError, UnsupportedPolicyError
from .indexing import bilinear_at, coord_to_index, element_at, index_to_coord
from .policies import (
    BorderMode,
    InterpolationPolicy,
    resolve_border_mode,
    resolve_policy,
)

_F32 = cte.COORD_FLOAT_TYPE
_HALF = _F32(0.5)
_MINUS_ONE = _F32(-1.0)


def _scaled_extent(extent: int, factor: float) -> int:
    # float32 product truncated towards zero
    return int(_F32(extent) * _F32(factor))


def _check_factor(name, value):
    try:
        value = float(value)
    except (TypeError, ValueError):
        raise InvalidScaleRequestError(f"{name} must be a number, got {value!r}") from None
    if not np.isfinite(value) or value <= 0:
        raise InvalidScaleRequestError(f"{name} must be > 0, got {value}")
    return value


@dataclass
class ScaleRequest:
    """
    Parameter set of one scale() call, validated on construction.

    Attributes:
        raster: Input raster (..., ny, nx), never modified
        scale_x: Factor applied to the width (> 0)
        scale_y: Factor applied to the height (> 0)
        policy: InterpolationPolicy member or name
        border_mode: BorderMode member or name
        constant_border_value: Border value, converted to the raster dtype
    """

    raster: np.ndarray
    scale_x: float
    scale_y: float
    policy: InterpolationPolicy = cte.DEFAULT_POLICY
    border_mode: BorderMode = cte.DEFAULT_BORDER_MODE
    constant_border_value: object = cte.DEFAULT_CONSTANT_BORDER_VALUE

    def __post_init__(self):
        if not isinstance(self.raster, np.ndarray):
            raise TypeError("raster must be a numpy array")
        if self.raster.ndim < 2:
            raise InvalidScaleRequestError(
                f"raster must have at least 2 dimensions, got {self.raster.ndim}"
            )
        if self.raster.dtype not in cte.SUPPORTED_DTYPES:
            names = [str(dt) for dt in cte.SUPPORTED_DTYPES]
            raise InvalidScaleRequestError(
                f"raster dtype must be one of {names}, got '{self.raster.dtype}'"
            )

        self.scale_x = _check_factor("scale_x", self.scale_x)
        self.scale_y = _check_factor("scale_y", self.scale_y)
        self.policy = resolve_policy(self.policy)
        self.border_mode = resolve_border_mode(self.border_mode)

        try:
            self.constant_border_value = self.raster.dtype.type(self.constant_border_value)
        except (OverflowError, ValueError, TypeError) as e:
            raise InvalidScaleRequestError(
                f"constant_border_value {self.constant_border_value!r} is not "
                f"representable as {self.raster.dtype}: {e}"
            ) from None

        out_ny, out_nx = self.output_shape[-2:]
        if out_nx < 1 or out_ny < 1:
            raise InvalidScaleRequestError(
                f"Scaling ({self.input_height}, {self.input_width}) by "
                f"({self.scale_y}, {self.scale_x}) gives an empty raster "
                f"({out_ny}, {out_nx})"
            )

    @property
    def input_width(self) -> int:
        return self.raster.shape[-1]

    @property
    def input_height(self) -> int:
        return self.raster.shape[-2]

    @property
    def output_shape(self) -> tuple:
        """NumPy shape of the scaled raster."""
        return self.raster.shape[:-2] + (
            _scaled_extent(self.input_height, self.scale_y),
            _scaled_extent(self.input_width, self.scale_x),
        )


@dataclass(frozen=True)
class _Sampler:
    """State shared by every destination element of one call."""

    raster: np.ndarray
    width: int
    height: int
    wr: np.float32
    hr: np.float32
    border_mode: BorderMode
    constant_border_value: object

    def fetch(self, coord):
        return element_at(self.raster, coord, self.border_mode, self.constant_border_value)

    def in_window(self, x_src, y_src):
        # Axes are OR-ed together, so this accepts nearly every location
        return x_src >= -1 or y_src >= -1 or x_src <= self.width or y_src <= self.height


def _clamp_truncated(value, extent: int) -> int:
    # NaN goes to the low edge
    if np.isnan(value) or value < 0:
        return 0
    if value >= extent:
        return extent - 1
    return int(value)


def _resolve_out_of_window(sampler, coord, x_src, y_src):
    """
    Value for a source location rejected by the validity window.

    CONSTANT gives the constant value, REPLICATE reads the edge pixel after
    clamping the truncated location. UNDEFINED gives None, which leaves the
    destination element at its initial zero.

    scale() only gets here with NaN source locations, the window accepts
    every finite one.
    """
    if sampler.border_mode == BorderMode.CONSTANT:
        return sampler.constant_border_value
    if sampler.border_mode == BorderMode.REPLICATE:
        x = _clamp_truncated(x_src, sampler.width)
        y = _clamp_truncated(y_src, sampler.height)
        return sampler.raster.flat[
            coord_to_index(sampler.raster.shape, (x, y) + tuple(coord[2:]))
        ]
    return None


def _nearest_neighbor(sampler, coord, x_src, y_src):
    # Dropping the -0.5 and truncating rounds the centred location
    x_src = (_F32(coord[0]) + _HALF) * sampler.wr
    y_src = (_F32(coord[1]) + _HALF) * sampler.hr

    if sampler.in_window(x_src, y_src):
        return sampler.fetch((int(x_src), int(y_src)) + tuple(coord[2:]))
    return _resolve_out_of_window(sampler, coord, x_src, y_src)


def _bilinear(sampler, coord, x_src, y_src):
    if sampler.in_window(x_src, y_src):
        return bilinear_at(
            sampler.raster,
            coord,
            x_src,
            y_src,
            sampler.border_mode,
            sampler.constant_border_value,
        )
    return _resolve_out_of_window(sampler, coord, x_src, y_src)


def _area(sampler, coord, x_src, y_src):
    """
    Average of the source box covered by one destination pixel.

    The box offsets are computed relative to the floored source location and
    clamped so the box reaches at most one pixel past the low edge and never
    past the high edge. Rows are summed outer, columns inner, both ascending.
    """
    idx, idy = coord[0], coord[1]

    x_from = int(np.floor(_F32(idx) * sampler.wr - _HALF - x_src))
    y_from = int(np.floor(_F32(idy) * sampler.hr - _HALF - y_src))
    x_to = int(np.ceil(_F32(idx + 1) * sampler.wr - _HALF - x_src))
    y_to = int(np.ceil(_F32(idy + 1) * sampler.hr - _HALF - y_src))
    xi = int(np.floor(x_src))
    yi = int(np.floor(y_src))

    x_src = max(_MINUS_ONE, min(x_src, _F32(sampler.width)))
    y_src = max(_MINUS_ONE, min(y_src, _F32(sampler.height)))

    if x_src + _F32(x_from) < _MINUS_ONE:
        x_from = -1
    if y_src + _F32(y_from) < _MINUS_ONE:
        y_from = -1
    if x_src + _F32(x_to) > sampler.width:
        x_to = int(_F32(sampler.width) - x_src)
    if y_src + _F32(y_to) > sampler.height:
        y_to = int(_F32(sampler.height) - y_src)

    box_width = x_to - x_from + 1
    box_height = y_to - y_from + 1
    if box_width <= 0 or box_height <= 0:
        raise InvalidScaleRequestError(
            f"AREA box for destination ({idx}, {idy}) covers no source element "
            f"(x: [{x_from}, {x_to}], y: [{y_from}, {y_to}])"
        )

    rest = tuple(coord[2:])
    total = _F32(0.0)
    for j in range(yi + y_from, yi + y_to + 1):
        for i in range(xi + x_from, xi + x_to + 1):
            total += _F32(sampler.fetch((i, j) + rest))

    return total / _F32(box_width * box_height)


_INTERPOLATORS = {
    InterpolationPolicy.NEAREST_NEIGHBOR: _nearest_neighbor,
    InterpolationPolicy.BILINEAR: _bilinear,
    InterpolationPolicy.AREA: _area,
}


def scale_request(request: ScaleRequest) -> np.ndarray:
    """Run the reference resampler on an already validated ScaleRequest."""
    raster = request.raster
    width = request.input_width
    height = request.input_height

    out = np.zeros(request.output_shape, dtype=raster.dtype)
    out_ny, out_nx = out.shape[-2:]

    # Source-to-destination extent ratios
    wr = _F32(width) / _F32(out_nx)
    hr = _F32(height) / _F32(out_ny)

    policy = request.policy
    # Area averaging degenerates to nearest neighbour when up-sampling
    if policy == InterpolationPolicy.AREA and wr <= 1 and hr <= 1:
        policy = InterpolationPolicy.NEAREST_NEIGHBOR

    interpolate = _INTERPOLATORS.get(policy)
    if interpolate is None:
        raise UnsupportedPolicyError(f"Unsupported interpolation policy: {policy!r}")

    sampler = _Sampler(
        raster=raster,
        width=width,
        height=height,
        wr=wr,
        hr=hr,
        border_mode=request.border_mode,
        constant_border_value=request.constant_border_value,
    )

    for offset in range(out.size):
        coord = index_to_coord(out.shape, offset)
        x_src = (_F32(coord[0]) + _HALF) * wr - _HALF
        y_src = (_F32(coord[1]) + _HALF) * hr - _HALF

        value = interpolate(sampler, coord, x_src, y_src)
        if value is not None:
            out.flat[offset] = value

    return out


def scale(
    raster: np.ndarray,
    scale_x: float,
    scale_y: float,
    policy=cte.DEFAULT_POLICY,
    border_mode=cte.DEFAULT_BORDER_MODE,
    constant_border_value=cte.DEFAULT_CONSTANT_BORDER_VALUE,
) -> np.ndarray:
    """
    Resample a raster by independent x and y factors.

    The output width is the float32 product of the input width and
    ``scale_x`` truncated to an integer, likewise for the height. Leading
    (batch/channel) axes and the dtype are kept. The input is not modified.

    Args:
        raster: Input raster of shape (..., ny, nx) with dtype uint8, int16,
                float16 or float32
        scale_x: Width factor (>0). Values >1 upscale, <1 downscale.
        scale_y: Height factor (>0)
        policy: 'nearest', 'bilinear', 'area' or an InterpolationPolicy
                (default: 'bilinear'). AREA falls back to nearest neighbour
                when neither axis is down-sampled.
        border_mode: 'constant', 'replicate', 'undefined' or a BorderMode
                     (default: 'constant')
        constant_border_value: Value used outside the raster with CONSTANT
                               (and UNDEFINED) border mode (default: 0)

    Returns:
        numpy.ndarray: Newly allocated scaled raster

    Raises:
        TypeError: If raster is not a numpy array
        InvalidScaleRequestError: Bad factors, shape, dtype, constant value or
                                  a degenerate AREA box
        UnsupportedPolicyError: Unknown policy or border mode

    Example:
        # Replicate each pixel into a 2x2 block
        up = scale(image, 2.0, 2.0, policy='nearest')

        # Box-average down to half size, repeating edge pixels
        down = scale(image, 0.5, 0.5, policy='area', border_mode='replicate')
    """
    request = ScaleRequest(
        raster=raster,
        scale_x=scale_x,
        scale_y=scale_y,
        policy=policy,
        border_mode=border_mode,
        constant_border_value=constant_border_value,
    )
    return scale_request(request)


__all__ = ["ScaleRequest", "scale", "scale_request"]
