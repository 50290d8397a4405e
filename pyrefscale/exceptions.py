"""
Exceptions raised by pyrefscale.

Every error derives from ValueError so callers that only guard against bad
arguments keep working.
"""


class ScaleError(ValueError):
    """Base class for rejected resampling requests."""


class InvalidScaleRequestError(ScaleError):
    """The request parameters cannot produce a well-defined output.

    Raised for non-positive scale factors, rasters with fewer than two
    dimensions, unsupported element types, empty output extents and AREA
    boxes that cover no source element.
    """


class UnsupportedPolicyError(ScaleError):
    """Unknown interpolation policy or border mode."""


__all__ = ["ScaleError", "InvalidScaleRequestError", "UnsupportedPolicyError"]
