from __future__ import annotations

import struct
from typing import Tuple

from ..errors import MalformedHeader
from .formats import DEFAULT_FORMAT, ContainerFormat

_ID_LENGTH = struct.Struct("<Q")
_CANVAS_SIZE = struct.Struct("<II")


def read_id_length(data: bytes, fmt: ContainerFormat = DEFAULT_FORMAT) -> int:
    """Return the identifier string length stored in the leading header."""
    if len(data) < fmt.header_size or len(data) < fmt.id_length_offset + _ID_LENGTH.size:
        raise MalformedHeader(f"Container too short for header ({len(data)} bytes)")
    return _ID_LENGTH.unpack_from(data, fmt.id_length_offset)[0]


def size_field_offset(data: bytes, fmt: ContainerFormat = DEFAULT_FORMAT) -> int:
    """Return the offset of the width/height pair (after the identifier)."""
    return fmt.header_size + read_id_length(data, fmt)


def read_canvas_size(data: bytes, fmt: ContainerFormat = DEFAULT_FORMAT) -> Tuple[int, int]:
    """Return (width, height) as unsigned 32-bit values.

    Dimensions are returned as stored; callers reject zero values.
    """
    offset = size_field_offset(data, fmt)
    if len(data) < offset + _CANVAS_SIZE.size:
        raise MalformedHeader(
            f"Container too short for canvas size at offset {offset} ({len(data)} bytes)"
        )
    width, height = _CANVAS_SIZE.unpack_from(data, offset)
    return width, height
