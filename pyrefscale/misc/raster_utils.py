"""
Raster file utilities for pyrefscale.

Load rasters from and save them to disk so the reference scaler can be driven
from files. NumPy ``.npy`` files are stored as they are; any other extension is
handled by Pillow as an image.

Images are converted to the raster axis convention: a single band image
becomes (ny, nx), a multi band image (ny, nx, bands) becomes (bands, ny, nx)
so that the spatial axes are the last two.

Dependencies:
- numpy: For array operations and .npy I/O
- Pillow: For image file reading and writing
"""

import os

import numpy as np
from PIL import Image

from .. import constants as cte


def _is_npy(path) -> bool:
    return os.fspath(path).lower().endswith(".npy")


def load_raster(path, dtype=None) -> np.ndarray:
    """
    Load a raster from a .npy file or an image file.

    Args:
        path: Path to the input file
        dtype: Optional target dtype (one of the supported raster types).
               Values are cast with NumPy's usual conversion rules.

    Returns:
        numpy.ndarray: Raster of shape (ny, nx) or (bands, ny, nx)

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file cannot be decoded or dtype is not supported
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Raster file '{path}' not found")

    if _is_npy(path):
        raster = np.load(path)
    else:
        try:
            with Image.open(path) as img:
                raster = np.array(img)
        except Exception as e:
            raise ValueError(f"Failed to read image '{path}': {e}")
        if raster.ndim == 3:
            raster = np.moveaxis(raster, -1, 0)

    if dtype is not None:
        dtype = np.dtype(dtype)
        if dtype not in cte.SUPPORTED_DTYPES:
            raise ValueError(f"Unsupported raster dtype '{dtype}'")
        raster = raster.astype(dtype)

    return np.ascontiguousarray(raster)


def save_raster(raster: np.ndarray, path) -> None:
    """
    Save a raster to a .npy file or an image file.

    Image output supports 2D rasters of any supported dtype (float16 is
    widened to float32, int16 to int32) and (bands, ny, nx) uint8 rasters
    with 3 or 4 bands. Whether a given image format accepts the resulting
    Pillow mode is up to Pillow; prefer .npy for exact storage.

    Args:
        raster: Raster to save
        path: Output file path

    Raises:
        ValueError: If the raster layout cannot be written as an image
        OSError: If the output file cannot be written
    """
    raster = np.asarray(raster)

    if _is_npy(path):
        try:
            np.save(path, raster)
        except Exception as e:
            raise OSError(f"Failed to save numpy array to '{path}': {e}")
        return

    if raster.ndim == 3 and raster.shape[0] in (3, 4) and raster.dtype == np.uint8:
        image_data = np.moveaxis(raster, 0, -1)
    elif raster.ndim == 2:
        image_data = raster
        if raster.dtype == np.float16:
            image_data = raster.astype(np.float32)
        elif raster.dtype == np.int16:
            image_data = raster.astype(np.int32)
    else:
        raise ValueError(
            f"Cannot write raster of shape {raster.shape} and dtype {raster.dtype} "
            "as an image; use a .npy output instead"
        )

    try:
        Image.fromarray(np.ascontiguousarray(image_data)).save(path)
    except Exception as e:
        raise OSError(f"Failed to save image to '{path}': {e}")
