"""Swatch image generation for brightpal."""

import math

import click
import matplotlib.patches as patches
import matplotlib.pyplot as plt

from .color_utils import code_to_hex


def create_png_grid(
    codes: list[int],
    columns: int,
    output_file: str,
    swatch_width: int = 120,
    swatch_height: int = 16,
    swatch_margin: int = 8,
    background_color: str = "#ffffff",
) -> None:
    """Create a PNG image with palette swatches arranged in a grid."""
    n_colors = len(codes)
    if n_colors == 0:
        raise ValueError("No colors provided")

    rows = math.ceil(n_colors / columns)

    w = (columns * (swatch_width + swatch_margin)) + swatch_margin
    h = (rows * (swatch_height + swatch_margin)) + swatch_margin

    fig, ax = plt.subplots(figsize=(w / 100, h / 100), dpi=100)  # type: ignore[misc]

    fig.patch.set_facecolor(background_color)
    ax.set_facecolor(background_color)

    ax.set_xlim(0, w)
    ax.set_ylim(0, h)
    ax.axis("off")

    for i, code in enumerate(codes):
        row = i // columns
        col = i % columns

        # Rows grow downwards from the top edge
        x = swatch_margin + col * (swatch_width + swatch_margin)
        y = h - (row + 1) * (swatch_height + swatch_margin)

        rect = patches.Rectangle(
            (x, y), swatch_width, swatch_height, linewidth=0, facecolor=code_to_hex(code)
        )
        ax.add_patch(rect)

    plt.tight_layout()
    plt.savefig(output_file, bbox_inches="tight", pad_inches=0, dpi=100)  # type: ignore[misc]
    plt.close()

    click.echo(f"PNG grid saved to: {output_file}")
