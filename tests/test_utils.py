import struct
import zlib
from typing import Sequence

MAGIC = b"PXART\x00\x01\x00"
IDENTIFIER = b"layered-art"


def make_header(width: int, height: int, identifier: bytes = IDENTIFIER) -> bytes:
    """Leading header block, identifier string and canvas size."""
    return MAGIC + struct.pack("<Q", len(identifier)) + identifier + struct.pack("<II", width, height)


def make_container(
    width: int,
    height: int,
    layers: Sequence[bytes],
    level: int = 6,
    identifier: bytes = IDENTIFIER,
    padding: bytes = b"\x00\x10\x20\x30",
) -> bytes:
    """Container with each layer zlib-compressed and separated by padding."""
    out = bytearray(make_header(width, height, identifier))
    for layer in layers:
        out += padding
        out += zlib.compress(bytes(layer), level)
    out += padding
    return bytes(out)


def solid_layer(width: int, height: int, rgba: Sequence[int]) -> bytes:
    return bytes(rgba) * (width * height)
