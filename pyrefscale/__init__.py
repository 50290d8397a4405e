"""
pyrefscale: reference 2D raster scaling.

A deliberately slow, literal implementation of raster resampling (nearest
neighbour, bilinear and area interpolation with constant, replicate and
undefined border handling) that serves as ground truth when validating
optimized scaling kernels.

Submodules:
- rastermanip: The reference scaler and its indexing helpers
- validation: Compare kernel outputs against the reference
- misc: Raster file I/O
- cli: Command line commands (prs-scale, prs-validate)
- constants: Supported element types and defaults
- exceptions: Error types
"""

from . import constants
from . import exceptions
from . import rastermanip
from . import validation
from . import misc
from . import cli

__version__ = "0.1.0"

__all__ = [
    "constants",
    "exceptions",
    "rastermanip",
    "validation",
    "misc",
    "cli",
    "__version__",
]
