"""
Comparison of candidate rasters against the reference scaler.

Used to check the output of an optimized scaling kernel against the oracle in
rastermanip.scaling. Comparisons are element-wise with an absolute
tolerance; NaNs compare equal only to NaNs.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np

from .. import constants as cte
from ..exceptions import InvalidScaleRequestError
from ..rastermanip.scaling import ScaleRequest, scale_request


@dataclass
class ValidationReport:
    """Outcome of comparing a candidate raster with a reference raster."""

    num_compared: int
    num_mismatches: int
    max_abs_difference: float
    first_mismatch: Optional[tuple] = None

    @property
    def passed(self) -> bool:
        return self.num_mismatches == 0

    def summary(self) -> str:
        status = "PASSED" if self.passed else "FAILED"
        text = (
            f"{status}: {self.num_mismatches}/{self.num_compared} mismatching elements, "
            f"max abs difference {self.max_abs_difference:g}"
        )
        if self.first_mismatch is not None:
            text += f", first mismatch at (x, y, ...) = {self.first_mismatch}"
        return text


def _border_mask(shape, ignore_border: int) -> np.ndarray:
    mask = np.ones(shape, dtype=bool)
    if ignore_border > 0:
        mask[..., :ignore_border, :] = False
        mask[..., -ignore_border:, :] = False
        mask[..., :, :ignore_border] = False
        mask[..., :, -ignore_border:] = False
    return mask


def compare_rasters(
    reference: np.ndarray,
    target: np.ndarray,
    absolute_tolerance: float = cte.DEFAULT_ABSOLUTE_TOLERANCE,
    ignore_border: int = cte.DEFAULT_IGNORE_BORDER,
) -> ValidationReport:
    """
    Compare ``target`` with ``reference`` element by element.

    Args:
        reference: Reference raster (..., ny, nx)
        target: Raster under test, same shape as reference
        absolute_tolerance: Largest accepted |reference - target| (default: 0)
        ignore_border: Number of pixels skipped along each spatial edge,
                       useful when border pixels are undefined (default: 0)

    Returns:
        ValidationReport: Mismatch count, largest difference and the raster
        coordinate (x, y, *rest) of the first mismatch in flat order
    """
    reference = np.asarray(reference)
    target = np.asarray(target)

    if reference.shape != target.shape:
        raise InvalidScaleRequestError(
            f"Shape mismatch: reference {reference.shape} vs target {target.shape}"
        )
    if reference.ndim < 2:
        raise InvalidScaleRequestError("Rasters must have at least 2 dimensions")
    if absolute_tolerance < 0:
        raise InvalidScaleRequestError("absolute_tolerance must be >= 0")
    if ignore_border < 0:
        raise InvalidScaleRequestError("ignore_border must be >= 0")

    ref = reference.astype(np.float64)
    tgt = target.astype(np.float64)
    mask = _border_mask(reference.shape, ignore_border)

    same = (ref == tgt) | (np.isnan(ref) & np.isnan(tgt))
    with np.errstate(invalid="ignore"):
        diff = np.abs(ref - tgt)
    diff[same] = 0.0
    # A lone NaN always counts as a mismatch
    mismatch = ((diff > absolute_tolerance) | np.isnan(diff)) & mask

    compared = diff[mask]
    finite = compared[np.isfinite(compared)]
    max_diff = float(finite.max()) if finite.size else 0.0

    first = None
    if mismatch.any():
        np_index = np.unravel_index(int(np.flatnonzero(mismatch)[0]), mismatch.shape)
        first = tuple(int(i) for i in reversed(np_index))

    return ValidationReport(
        num_compared=int(mask.sum()),
        num_mismatches=int(mismatch.sum()),
        max_abs_difference=max_diff,
        first_mismatch=first,
    )


def validate_scale(
    raster: np.ndarray,
    candidate: np.ndarray,
    scale_x: float,
    scale_y: float,
    policy=cte.DEFAULT_POLICY,
    border_mode=cte.DEFAULT_BORDER_MODE,
    constant_border_value=cte.DEFAULT_CONSTANT_BORDER_VALUE,
    absolute_tolerance: float = cte.DEFAULT_ABSOLUTE_TOLERANCE,
    ignore_border: int = cte.DEFAULT_IGNORE_BORDER,
) -> ValidationReport:
    """
    Scale ``raster`` with the reference implementation and compare ``candidate``.

    Args:
        raster: Input raster given to the kernel under test
        candidate: Output produced by the kernel under test
        scale_x, scale_y, policy, border_mode, constant_border_value:
            Scaling parameters, as in rastermanip.scale
        absolute_tolerance: Largest accepted element difference (default: 0)
        ignore_border: Pixels skipped along each spatial edge (default: 0)

    Returns:
        ValidationReport

    Example:
        report = validate_scale(image, fast_output, 0.5, 0.5, policy='area')
        assert report.passed, report.summary()
    """
    request = ScaleRequest(
        raster=raster,
        scale_x=scale_x,
        scale_y=scale_y,
        policy=policy,
        border_mode=border_mode,
        constant_border_value=constant_border_value,
    )
    reference = scale_request(request)
    return compare_rasters(
        reference,
        candidate,
        absolute_tolerance=absolute_tolerance,
        ignore_border=ignore_border,
    )


__all__ = ["ValidationReport", "compare_rasters", "validate_scale"]
