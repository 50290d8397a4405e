"""
Interpolation policies and border modes for raster resampling.

Both are integer enums so they can be passed around as plain codes. The
``resolve_*`` helpers accept an enum member, its integer value or one of the
short names used on the command line ("nearest", "bilinear", "area",
"constant", "replicate", "undefined").
"""

from enum import IntEnum

from ..exceptions import UnsupportedPolicyError


class InterpolationPolicy(IntEnum):
    NEAREST_NEIGHBOR = 0
    BILINEAR = 1
    AREA = 2


class BorderMode(IntEnum):
    """How a source coordinate outside the raster is turned into a value.

    CONSTANT substitutes the constant border value, REPLICATE clamps the
    coordinate to the nearest edge pixel. UNDEFINED makes no promise about
    border pixels; the accessor returns the constant value for them.
    """

    CONSTANT = 0
    REPLICATE = 1
    UNDEFINED = 2


_POLICY_MAP = {
    "nearest": InterpolationPolicy.NEAREST_NEIGHBOR,
    "nearest_neighbor": InterpolationPolicy.NEAREST_NEIGHBOR,
    "bilinear": InterpolationPolicy.BILINEAR,
    "area": InterpolationPolicy.AREA,
}

_BORDER_MAP = {
    "constant": BorderMode.CONSTANT,
    "replicate": BorderMode.REPLICATE,
    "undefined": BorderMode.UNDEFINED,
}


def _resolve(value, enum_cls, name_map, label):
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        key = value.strip().lower()
        if key not in name_map:
            raise UnsupportedPolicyError(
                f"{label} must be one of {sorted(name_map)}, got '{value}'"
            )
        return name_map[key]
    if isinstance(value, bool):
        raise UnsupportedPolicyError(f"Unsupported {label}: {value!r}")
    try:
        return enum_cls(value)
    except (ValueError, TypeError):
        raise UnsupportedPolicyError(f"Unsupported {label}: {value!r}") from None


def resolve_policy(policy) -> InterpolationPolicy:
    """Turn ``policy`` into an InterpolationPolicy or raise UnsupportedPolicyError."""
    return _resolve(policy, InterpolationPolicy, _POLICY_MAP, "interpolation policy")


def resolve_border_mode(border_mode) -> BorderMode:
    """Turn ``border_mode`` into a BorderMode or raise UnsupportedPolicyError."""
    return _resolve(border_mode, BorderMode, _BORDER_MAP, "border mode")


__all__ = [
    "InterpolationPolicy",
    "BorderMode",
    "resolve_policy",
    "resolve_border_mode",
]
