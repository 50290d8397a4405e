"""
Command Line Interface for pyrefscale

Command line access to the reference scaler, so kernel outputs saved to disk
can be produced and checked without writing Python scripts.

Available Commands:
- raster_scale (prs-scale): Scale a raster file with the reference resampler
- raster_validate (prs-validate): Compare a kernel output against the reference
"""

_CLI_SUBMODULES = {
    "raster_scale": (".scale_commands", "raster_scale"),
    "raster_validate": (".scale_commands", "raster_validate"),
}

__all__ = list(_CLI_SUBMODULES.keys())


def __getattr__(name):
    info = _CLI_SUBMODULES.get(name)
    if info is None:
        raise AttributeError(name)
    pkg, attr = info
    import importlib
    mod = importlib.import_module(pkg, __package__)
    obj = getattr(mod, attr)
    globals()[name] = obj
    return obj
