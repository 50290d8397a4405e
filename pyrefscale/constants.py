"""
Global constants for pyrefscale.

Element types accepted by the reference resampler and the defaults used by the
rastermanip functions, the validation helpers and the command line.
"""

import numpy as np

# Element types a raster may carry
SUPPORTED_DTYPES = (
    np.dtype(np.uint8),
    np.dtype(np.int16),
    np.dtype(np.float16),
    np.dtype(np.float32),
)

# All coordinate arithmetic happens in this precision, whatever the storage type
COORD_FLOAT_TYPE = np.float32

DEFAULT_POLICY = "bilinear"
DEFAULT_BORDER_MODE = "constant"
DEFAULT_CONSTANT_BORDER_VALUE = 0

# Validation
DEFAULT_ABSOLUTE_TOLERANCE = 0.0
DEFAULT_IGNORE_BORDER = 0
