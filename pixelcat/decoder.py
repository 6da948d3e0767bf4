from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional

from .container import DEFAULT_FORMAT, ContainerFormat, extract_layers, find_stream_offsets, read_canvas_size
from .errors import DecodeError, InvalidDimensions, NoCompressedStreamsFound, NoValidLayers
from .rendering import Raster, composite_layers


@dataclass(frozen=True)
class DecodedImage:
    raster: Raster
    layer_count: int
    mode: str

    @property
    def width(self) -> int:
        return self.raster.width

    @property
    def height(self) -> int:
        return self.raster.height


@dataclass(frozen=True)
class DecodeResult:
    path: str
    image: Optional[DecodedImage] = None
    error: Optional[DecodeError] = None

    @property
    def ok(self) -> bool:
        return self.image is not None


def decode_bytes(data: bytes, fmt: ContainerFormat = DEFAULT_FORMAT) -> DecodedImage:
    """Decode a container into its composited raster.

    Raises a DecodeError subclass when the file has no usable image.
    """
    width, height = read_canvas_size(data, fmt)
    if width <= 0 or height <= 0:
        raise InvalidDimensions(f"Invalid canvas size {width}x{height}")
    offsets = find_stream_offsets(data, fmt)
    if not offsets:
        raise NoCompressedStreamsFound("No compressed streams found")
    layers = extract_layers(data, width, height, fmt, offsets)
    if not layers:
        raise NoValidLayers(
            f"None of {len(offsets)} compressed stream(s) decoded to a {width}x{height} layer"
        )
    raster, mode = composite_layers(layers, width, height)
    return DecodedImage(raster, len(layers), mode)


def decode_file(path: str, fmt: ContainerFormat = DEFAULT_FORMAT) -> DecodeResult:
    with open(path, "rb") as handle:
        data = handle.read()
    try:
        return DecodeResult(path, image=decode_bytes(data, fmt))
    except DecodeError as exc:
        return DecodeResult(path, error=exc)


def iter_artwork_paths(
    path: str, fmt: ContainerFormat = DEFAULT_FORMAT, recursive: bool = False
) -> List[str]:
    """Return the artwork files named by ``path`` (a file or a directory)."""
    if os.path.isfile(path):
        return [path]
    if not os.path.isdir(path):
        raise FileNotFoundError(f"File not found: {path}")
    ext = fmt.extension.lower()
    found: List[str] = []
    if recursive:
        for root, dirs, files in os.walk(path):
            dirs.sort()
            for name in sorted(files):
                if os.path.splitext(name)[1].lower() == ext:
                    found.append(os.path.join(root, name))
        return found
    for name in sorted(os.listdir(path)):
        full = os.path.join(path, name)
        if os.path.isfile(full) and os.path.splitext(name)[1].lower() == ext:
            found.append(full)
    return found
