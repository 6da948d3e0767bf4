from .decoder import DecodedImage, DecodeResult, decode_bytes, decode_file, iter_artwork_paths
from .errors import (
    DecodeError,
    DecompressionFailure,
    InvalidDimensions,
    MalformedHeader,
    NoCompressedStreamsFound,
    NoValidLayers,
)
from .rendering import Raster, TerminalSettings, render_lines, render_text

__all__ = [
    "DecodeError",
    "DecodeResult",
    "DecodedImage",
    "DecompressionFailure",
    "InvalidDimensions",
    "MalformedHeader",
    "NoCompressedStreamsFound",
    "NoValidLayers",
    "Raster",
    "TerminalSettings",
    "decode_bytes",
    "decode_file",
    "iter_artwork_paths",
    "render_lines",
    "render_text",
]
