"""Command-line interface for brightpal."""

import json
import logging
import sys
from typing import Optional

import click

from . import __version__
from .brightness import brightness_of
from .color_utils import format_color_output, parse_color, to_rgb255
from .export import format_palette_js
from .image_generation import create_png_grid
from .palette import (
    DEFAULT_PALETTE_SIZE,
    DEFAULT_TOLERANCE,
    MAX_TOLERANCE,
    PaletteSelector,
)

DEFAULT_BRIGHTNESS = 200


@click.command()
@click.version_option(version=__version__, prog_name="brightpal")
@click.option(
    "-l",
    "--brightness",
    type=click.IntRange(0, 255),
    default=None,
    help=f"Target perceived brightness, 0-255 (default: {DEFAULT_BRIGHTNESS})",
)
@click.option(
    "-r",
    "--reference",
    type=str,
    default=None,
    help=(
        "Use the perceived brightness of this color as the target. "
        "Formats: #RRGGBB, rgb(R,G,B), hsl(H,S%,L%), or hsv(H,S%,V%)"
    ),
)
@click.option(
    "-t",
    "--tolerance",
    type=click.IntRange(0, MAX_TOLERANCE),
    default=DEFAULT_TOLERANCE,
    help=f"Allowed brightness error, +/- levels (default: {DEFAULT_TOLERANCE})",
)
@click.option(
    "-n",
    "--number",
    type=click.IntRange(min=1),
    default=DEFAULT_PALETTE_SIZE,
    help=(
        f"Number of colors sampled before the saturation filter "
        f"(default: {DEFAULT_PALETTE_SIZE})"
    ),
)
@click.option(
    "-f",
    "--format",
    type=click.Choice(["hex", "rgb", "hsl", "int"], case_sensitive=False),
    default="hex",
    help="Output format for colors (default: hex)",
)
@click.option(
    "-F",
    "--output-format",
    type=click.Choice(["grid", "json", "js", "png"], case_sensitive=False),
    default="grid",
    help="Output format (default: grid)",
)
@click.option(
    "-c",
    "--columns",
    type=click.IntRange(1, 32),
    default=4,
    help="Number of columns for grid/PNG layout (default: 4)",
)
@click.option(
    "-o", "--output", type=str, help="Output file path (required for PNG format)"
)
@click.option("--seed", type=int, default=None, help="Seed for reproducible sampling")
@click.option(
    "--swatch-width",
    type=click.IntRange(8, 512),
    default=120,
    help="Swatch width in pixels for PNG format (default: 120)",
)
@click.option(
    "--swatch-height",
    type=click.IntRange(4, 256),
    default=16,
    help="Swatch height in pixels for PNG format (default: 16)",
)
@click.option(
    "--swatch-margin",
    type=click.IntRange(0, 64),
    default=8,
    help="Gap between swatches in pixels for PNG format (default: 8)",
)
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr")
def main(
    brightness: Optional[int],
    reference: Optional[str],
    tolerance: int,
    number: int,
    format: str,
    output_format: str,
    columns: int,
    output: Optional[str],
    seed: Optional[int],
    swatch_width: int,
    swatch_height: int,
    swatch_margin: int,
    verbose: bool,
) -> None:
    """Generate a color palette for a given perceived brightness.

    brightpal samples colors whose perceived brightness lies within the
    tolerance of the target, keeps the saturated ones and sorts them by hue,
    lightness and saturation.

    The first run in a process classifies all 16.7 million RGB colors, which
    takes a moment.

    Examples:

        brightpal -l 200

        brightpal -l 128 -t 5 -n 50 -F json

        brightpal -r "#3366cc" -t 2 -F js

        brightpal -l 180 -t 3 -F png -c 6 -o palette.png

        brightpal -l 90 --seed 42 --format rgb
    """
    if verbose:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
            stream=sys.stderr,
        )

    try:
        if reference is not None:
            if brightness is not None:
                raise ValueError("Use either --brightness or --reference, not both")
            brightness = brightness_of(*to_rgb255(parse_color(reference)))
        elif brightness is None:
            brightness = DEFAULT_BRIGHTNESS

        selector = PaletteSelector(rng=seed)
        palette = selector.select(brightness, tolerance, number)

        formatted_colors = format_color_output(palette, format.lower())

        if output_format == "json":
            click.echo(json.dumps(formatted_colors, indent=2))
        elif output_format == "js":
            click.echo(format_palette_js(palette))
        elif output_format == "png":
            if not output:
                click.echo("Error: PNG output requires -o/--output filename", err=True)
                sys.exit(1)

            try:
                create_png_grid(
                    palette, columns, output, swatch_width, swatch_height, swatch_margin
                )
            except Exception as e:
                click.echo(f"Error creating PNG: {e}", err=True)
                sys.exit(1)
        else:  # grid format
            if not formatted_colors:
                click.echo(
                    f"No saturated colors found at perceived brightness "
                    f"{brightness} +/- {tolerance}."
                )
                return

            click.echo(
                f"Found {len(formatted_colors)} colors at perceived brightness "
                f"{brightness} +/- {tolerance}:"
            )
            click.echo()

            for i in range(0, len(formatted_colors), columns):
                row = formatted_colors[i : i + columns]
                click.echo("  " + "  ".join(f"{color:16}" for color in row))

    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        click.echo(f"Unexpected error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
