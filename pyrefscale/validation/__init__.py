"""
Validation helpers for pyrefscale.

Compare the output of an optimized scaling kernel against the reference
implementation and report how far it deviates.

Usage:
    import pyrefscale as prs

    report = prs.validation.validate_scale(
        image, kernel_output, 0.5, 0.5, policy="area", absolute_tolerance=1
    )
    print(report.summary())
"""

from .compare import ValidationReport, compare_rasters, validate_scale

__all__ = ["ValidationReport", "compare_rasters", "validate_scale"]
