"""CLI commands for reference raster scaling and kernel output validation."""

import sys

import click

import pyrefscale as prs

POLICY_CHOICES = ["nearest", "bilinear", "area"]
BORDER_CHOICES = ["constant", "replicate", "undefined"]
DTYPE_CHOICES = ["uint8", "int16", "float16", "float32"]


def _resolve_factors(scale, scale_x, scale_y):
    """Combine the uniform --scale with the per-axis overrides."""
    scale_x = scale if scale_x is None else scale_x
    scale_y = scale if scale_y is None else scale_y
    if scale_x is None or scale_y is None:
        raise ValueError("Provide --scale or both --scale-x and --scale-y")
    return scale_x, scale_y


def scaling_options(func):
    """Options shared by the scale and validate commands."""
    options = [
        click.option(
            "--scale",
            "-s",
            type=float,
            default=None,
            help="Scale factor applied to both axes",
        ),
        click.option(
            "--scale-x",
            "-x",
            type=float,
            default=None,
            help="Width scale factor (overrides --scale)",
        ),
        click.option(
            "--scale-y",
            "-y",
            type=float,
            default=None,
            help="Height scale factor (overrides --scale)",
        ),
        click.option(
            "--policy",
            "-p",
            type=click.Choice(POLICY_CHOICES),
            default="bilinear",
            show_default=True,
            help="Interpolation policy",
        ),
        click.option(
            "--border",
            "-b",
            type=click.Choice(BORDER_CHOICES),
            default="constant",
            show_default=True,
            help="Border handling mode",
        ),
        click.option(
            "--constant",
            "-c",
            type=float,
            default=0.0,
            show_default=True,
            help="Border value used with --border constant",
        ),
        click.option(
            "--dtype",
            type=click.Choice(DTYPE_CHOICES),
            default=None,
            help="Cast the input raster to this element type before scaling",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.command()
@click.argument("input_raster", type=click.Path(exists=True))
@click.argument("output_raster", type=click.Path())
@scaling_options
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def raster_scale(
    input_raster,
    output_raster,
    scale,
    scale_x,
    scale_y,
    policy,
    border,
    constant,
    dtype,
    verbose,
):
    """
    Scale INPUT_RASTER with the reference resampler and save to OUTPUT_RASTER.

    Rasters are read from and written to .npy files or images. Multi band
    images are scaled band by band.

    Examples:

        # Double the size with nearest neighbour
        prs-scale image.png big.png --scale 2 --policy nearest

        # Box-average to a third of the width only
        prs-scale dem.npy small.npy -x 0.33 -y 1 -p area -b replicate
    """
    try:
        scale_x, scale_y = _resolve_factors(scale, scale_x, scale_y)
        if verbose:
            click.echo(f"Loading raster '{input_raster}'...")
        raster = prs.misc.load_raster(input_raster, dtype=dtype)

        if verbose:
            click.echo(
                f"Scaling {raster.shape} ({raster.dtype}) by x={scale_x}, y={scale_y} "
                f"using policy='{policy}', border='{border}'"
            )
        result = prs.rastermanip.scale(
            raster,
            scale_x,
            scale_y,
            policy=policy,
            border_mode=border,
            constant_border_value=constant,
        )

        prs.misc.save_raster(result, output_raster)
        if verbose:
            click.echo(f"Output shape: {result.shape}")
            click.echo("Scaling completed successfully!")
        else:
            click.echo(f"Successfully scaled '{input_raster}' -> '{output_raster}'")

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.command()
@click.argument("input_raster", type=click.Path(exists=True))
@click.argument("candidate_raster", type=click.Path(exists=True))
@scaling_options
@click.option(
    "--tolerance",
    "-t",
    type=float,
    default=0.0,
    show_default=True,
    help="Largest accepted absolute difference per element",
)
@click.option(
    "--ignore-border",
    type=int,
    default=0,
    show_default=True,
    help="Number of pixels skipped along each spatial edge",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def raster_validate(
    input_raster,
    candidate_raster,
    scale,
    scale_x,
    scale_y,
    policy,
    border,
    constant,
    dtype,
    tolerance,
    ignore_border,
    verbose,
):
    """
    Check CANDIDATE_RASTER against the reference scaling of INPUT_RASTER.

    Exits with status 0 when every compared element is within the tolerance
    and 1 otherwise.

    Examples:

        prs-validate input.npy kernel_out.npy --scale 0.5 --policy area -t 1
    """
    try:
        scale_x, scale_y = _resolve_factors(scale, scale_x, scale_y)
        raster = prs.misc.load_raster(input_raster, dtype=dtype)
        candidate = prs.misc.load_raster(candidate_raster)
        if verbose:
            click.echo(
                f"Validating '{candidate_raster}' {candidate.shape} against reference "
                f"scaling of '{input_raster}' {raster.shape}"
            )

        report = prs.validation.validate_scale(
            raster,
            candidate,
            scale_x,
            scale_y,
            policy=policy,
            border_mode=border,
            constant_border_value=constant,
            absolute_tolerance=tolerance,
            ignore_border=ignore_border,
        )
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(report.summary())
    if not report.passed:
        sys.exit(1)


__all__ = ["raster_scale", "raster_validate"]
