from .compositor import (
    MODE_CONTENT,
    MODE_MASK,
    MODE_SINGLE,
    composite_layers,
    composite_pixels,
    is_mask_layer,
)
from .styles import background_style, clear_line, foreground_style, reset_style
from .terminal import TerminalSettings, render_lines, render_text
from .types import Pixel, Raster, TRANSPARENT

__all__ = [
    "MODE_CONTENT",
    "MODE_MASK",
    "MODE_SINGLE",
    "Pixel",
    "Raster",
    "TRANSPARENT",
    "TerminalSettings",
    "background_style",
    "clear_line",
    "composite_layers",
    "composite_pixels",
    "foreground_style",
    "is_mask_layer",
    "render_lines",
    "render_text",
    "reset_style",
]
