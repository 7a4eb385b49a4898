"""Textual palette export."""

from .color_utils import code_to_hex

__all__ = ["format_palette_js"]


def format_palette_js(codes: list[int], name: str = "palette") -> str:
    """Render a palette as a JavaScript array assignment.

    Each color is a quoted ``#rrggbb`` literal on its own line, indented by
    two spaces and followed by a comma. Palette order is kept.

    Example:
        >>> print(format_palette_js([0xFF0000, 0x00FF00]))
        const palette = [
          '#ff0000',
          '#00ff00',
        ]
    """
    lines = [f"const {name} = ["]
    lines.extend(f"  '{code_to_hex(code)}'," for code in codes)
    lines.append("]")
    return "\n".join(lines)
