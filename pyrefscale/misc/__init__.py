"""
Miscellaneous Utilities for pyrefscale

Helpers that don't belong to the resampler itself, mainly reading and writing
rasters so the command line tools can work on files.

Available Functions:
- load_raster: Read a raster from a .npy or image file
- save_raster: Write a raster to a .npy or image file
"""

from .raster_utils import load_raster, save_raster

# Export public API
__all__ = [
    "load_raster",
    "save_raster",
]
