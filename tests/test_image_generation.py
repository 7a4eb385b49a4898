"""Tests for swatch image generation."""

import os
import tempfile
from unittest.mock import MagicMock, patch

import pytest

from brightpal.image_generation import create_png_grid


class TestCreatePngGrid:
    """Test the create_png_grid function."""

    def test_empty_colors_raises_error(self):
        """Test that empty colors list raises ValueError."""
        with pytest.raises(ValueError, match="No colors provided"):
            create_png_grid(codes=[], columns=2, output_file="test.png")

    def test_basic_grid_creation(self):
        """Test PNG grid creation with default swatch geometry."""
        codes = [0xFF0000, 0x00FF00, 0x0000FF]

        with patch('matplotlib.pyplot.subplots') as mock_subplots, \
             patch('matplotlib.pyplot.tight_layout') as mock_tight_layout, \
             patch('matplotlib.pyplot.savefig') as mock_savefig, \
             patch('matplotlib.pyplot.close') as mock_close, \
             patch('click.echo') as mock_echo:

            mock_fig = MagicMock()
            mock_ax = MagicMock()
            mock_subplots.return_value = (mock_fig, mock_ax)

            create_png_grid(codes=codes, columns=2, output_file="palette.png")

            # 2 columns of 120px swatches, 2 rows of 16px, 8px gaps
            expected_w = 2 * (120 + 8) + 8  # 264
            expected_h = 2 * (16 + 8) + 8  # 56

            mock_subplots.assert_called_once_with(
                figsize=(expected_w / 100, expected_h / 100), dpi=100
            )
            mock_fig.patch.set_facecolor.assert_called_once_with("#ffffff")
            mock_ax.set_facecolor.assert_called_once_with("#ffffff")
            mock_ax.set_xlim.assert_called_once_with(0, expected_w)
            mock_ax.set_ylim.assert_called_once_with(0, expected_h)
            mock_ax.axis.assert_called_once_with('off')
            mock_tight_layout.assert_called_once()
            mock_savefig.assert_called_once_with(
                "palette.png", bbox_inches='tight', pad_inches=0, dpi=100
            )
            mock_close.assert_called_once()
            mock_echo.assert_called_once_with("PNG grid saved to: palette.png")

            assert mock_ax.add_patch.call_count == 3

    def test_swatch_positions_and_colors(self):
        """Swatches fill rows left to right from the top."""
        codes = [0xFF0000, 0x00FF00, 0x0000FF]

        with patch('matplotlib.pyplot.subplots') as mock_subplots, \
             patch('matplotlib.pyplot.tight_layout'), \
             patch('matplotlib.pyplot.savefig'), \
             patch('matplotlib.pyplot.close'), \
             patch('click.echo'), \
             patch('matplotlib.patches.Rectangle') as mock_rect:

            mock_subplots.return_value = (MagicMock(), MagicMock())

            create_png_grid(
                codes=codes,
                columns=2,
                output_file="palette.png",
                swatch_width=10,
                swatch_height=4,
                swatch_margin=2,
            )

            # w = 2 * 12 + 2 = 26, h = 2 * 6 + 2 = 14
            calls = mock_rect.call_args_list
            assert [c.args for c in calls] == [
                ((2, 8), 10, 4),
                ((14, 8), 10, 4),
                ((2, 2), 10, 4),
            ]
            assert [c.kwargs["facecolor"] for c in calls] == [
                "#ff0000",
                "#00ff00",
                "#0000ff",
            ]

    def test_custom_background(self):
        """Background color is applied to figure and axes."""
        with patch('matplotlib.pyplot.subplots') as mock_subplots, \
             patch('matplotlib.pyplot.tight_layout'), \
             patch('matplotlib.pyplot.savefig'), \
             patch('matplotlib.pyplot.close'), \
             patch('click.echo'):

            mock_fig = MagicMock()
            mock_ax = MagicMock()
            mock_subplots.return_value = (mock_fig, mock_ax)

            create_png_grid([0x123456], 1, "x.png", background_color="#000000")

            mock_fig.patch.set_facecolor.assert_called_once_with("#000000")
            mock_ax.set_facecolor.assert_called_once_with("#000000")

    def test_actual_file_creation(self):
        """Test that a PNG file is actually written."""
        import matplotlib

        matplotlib.use("Agg")

        with tempfile.TemporaryDirectory() as tmpdir:
            output_file = os.path.join(tmpdir, "palette.png")
            with patch('click.echo'):
                create_png_grid([0xFF0000, 0x00FF00], 2, output_file)

            assert os.path.exists(output_file)
            with open(output_file, "rb") as f:
                assert f.read(8) == b"\x89PNG\r\n\x1a\n"
