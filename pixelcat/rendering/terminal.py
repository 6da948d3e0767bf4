from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from .styles import background_style, clear_line, foreground_style, reset_style
from .types import Pixel, Raster

DEFAULT_GLYPH = "▄"
DEFAULT_ALPHA_THRESHOLD = 32


@dataclass(frozen=True)
class TerminalSettings:
    glyph: str = DEFAULT_GLYPH
    alpha_threshold: int = DEFAULT_ALPHA_THRESHOLD
    trailing_blank: bool = True


def _visible(pixel: Pixel, threshold: int) -> Pixel:
    if pixel[3] < threshold:
        return (0, 0, 0, pixel[3])
    return pixel


def row_pairs(height: int) -> List[Tuple[Optional[int], int]]:
    """Return (top_row, bottom_row) per output line; top is None when absent.

    Odd heights shift the pairing down by one so the first line only has a
    bottom row.
    """
    if height % 2:
        pairs: List[Tuple[Optional[int], int]] = [(None, 0)]
        pairs.extend((2 * k - 1, 2 * k) for k in range(1, (height + 1) // 2))
        return pairs
    return [(2 * k, 2 * k + 1) for k in range(height // 2)]


def render_cell(top: Optional[Pixel], bottom: Pixel, settings: TerminalSettings) -> str:
    bottom = _visible(bottom, settings.alpha_threshold)
    fg = foreground_style(bottom[0], bottom[1], bottom[2])
    if top is None:
        return fg + settings.glyph
    top = _visible(top, settings.alpha_threshold)
    return background_style(top[0], top[1], top[2]) + fg + settings.glyph


def render_lines(raster: Raster, settings: Optional[TerminalSettings] = None) -> List[str]:
    """Render a raster as styled text, two source rows per line."""
    settings = settings or TerminalSettings()
    raster.validate()
    lines: List[str] = []
    for top_row, bottom_row in row_pairs(raster.height):
        cells = []
        for x in range(raster.width):
            top = None if top_row is None else raster.pixel_at(x, top_row)
            cells.append(render_cell(top, raster.pixel_at(x, bottom_row), settings))
        lines.append("".join(cells) + reset_style() + clear_line())
    if settings.trailing_blank:
        lines.append("")
    return lines


def render_text(raster: Raster, settings: Optional[TerminalSettings] = None) -> str:
    return "\n".join(render_lines(raster, settings))
