"""Raster manipulation module for pyrefscale.

Provides the reference (ground-truth) 2D raster scaling used to validate
optimized resampling kernels, together with the coordinate and border-aware
access helpers it is built on. Functions take NumPy arrays of shape
(..., ny, nx) and return newly allocated arrays.

Usage:
    import numpy as np
    import pyrefscale as prs

    image = np.arange(16, dtype=np.float32).reshape(4, 4)

    # Nearest neighbour up-sampling
    up = prs.rastermanip.scale(image, 2.0, 2.0, policy="nearest")

    # Area averaging with replicated borders
    down = prs.rastermanip.scale(
        image, 0.5, 0.5, policy="area", border_mode="replicate"
    )
"""

from .policies import (
    BorderMode,
    InterpolationPolicy,
    resolve_border_mode,
    resolve_policy,
)
from .indexing import index_to_coord, coord_to_index, element_at, bilinear_at
from .scaling import ScaleRequest, scale, scale_request

__all__ = [
    "BorderMode",
    "InterpolationPolicy",
    "resolve_border_mode",
    "resolve_policy",
    "index_to_coord",
    "coord_to_index",
    "element_at",
    "bilinear_at",
    "ScaleRequest",
    "scale",
    "scale_request",
]
