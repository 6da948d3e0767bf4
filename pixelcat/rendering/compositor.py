from __future__ import annotations

from typing import List, Sequence, Tuple

from .types import Pixel, Raster, TRANSPARENT, pixels_from_bytes

MODE_SINGLE = "single"
MODE_MASK = "mask"
MODE_CONTENT = "content"


def _is_black(pixel: Pixel) -> bool:
    return pixel[0] == 0 and pixel[1] == 0 and pixel[2] == 0


def is_mask_layer(pixels: Sequence[Pixel]) -> bool:
    """Return True when no pixel is both non-black and visible (alpha > 0)."""
    for pixel in pixels:
        if pixel[3] > 0 and not _is_black(pixel):
            return False
    return True


def composite_single(pixels: Sequence[Pixel]) -> List[Pixel]:
    """Copy a lone layer, treating pure black as transparent background."""
    return [(0, 0, 0, 0) if _is_black(p) else p for p in pixels]


def composite_mask(layers: Sequence[Sequence[Pixel]]) -> List[Pixel]:
    """Layer 0 is an exclusion mask over layers 1..N-1 (later layers win)."""
    mask = layers[0]
    out: List[Pixel] = []
    for index, cutout in enumerate(mask):
        if cutout[3] != 0:
            out.append(TRANSPARENT)
            continue
        pixel = layers[1][index]
        for layer in layers[2:]:
            candidate = layer[index]
            if candidate[3] > 0:
                pixel = candidate
        out.append(pixel)
    return out


def composite_content(layers: Sequence[Sequence[Pixel]]) -> List[Pixel]:
    """Hard-replace bottom-up: the lowest-index visible layer wins."""
    bottom = layers[-1]
    out: List[Pixel] = []
    for index in range(len(bottom)):
        pixel = bottom[index]
        for layer in reversed(layers[:-1]):
            candidate = layer[index]
            if candidate[3] > 0:
                pixel = candidate
        out.append(pixel)
    return out


def composite_pixels(layers: Sequence[Sequence[Pixel]]) -> Tuple[List[Pixel], str]:
    """Composite decoded pixel layers, returning (pixels, mode)."""
    if not layers:
        raise ValueError("At least one layer is required")
    if len(layers) == 1:
        return composite_single(layers[0]), MODE_SINGLE
    if is_mask_layer(layers[0]):
        return composite_mask(layers), MODE_MASK
    return composite_content(layers), MODE_CONTENT


def composite_layers(layers: Sequence[bytes], width: int, height: int) -> Tuple[Raster, str]:
    """Composite raw RGBA layer buffers (index 0 topmost) into one raster."""
    expected = width * height * 4
    for buffer in layers:
        if len(buffer) != expected:
            raise ValueError(f"Layer size {len(buffer)} does not match {width}x{height}")
    pixels, mode = composite_pixels([pixels_from_bytes(buffer) for buffer in layers])
    return Raster(width, height, pixels), mode
