from __future__ import annotations

import logging
import zlib
from typing import List, Optional

from ..errors import DecompressionFailure
from .formats import DEFAULT_FORMAT, ContainerFormat

logger = logging.getLogger(__name__)

SIGNATURE_SIZE = 2

# Upper bound on deflate output per input byte.
MAX_INFLATE_RATIO = 1032


def find_stream_offsets(data: bytes, fmt: ContainerFormat = DEFAULT_FORMAT) -> List[int]:
    """Return every offset where a compressed-stream signature starts, ascending."""
    offsets: List[int] = []
    start = 0
    marker = bytes([fmt.stream_marker])
    while True:
        pos = data.find(marker, start)
        if pos < 0 or pos + 1 >= len(data):
            break
        if fmt.matches_signature(data[pos], data[pos + 1]):
            offsets.append(pos)
        start = pos + 1
    return offsets


def inflate_at(data: bytes, offset: int, limit: int = 0) -> bytes:
    """Raw-inflate the stream following the 2-byte signature at ``offset``.

    ``limit`` caps the output size (0 means unbounded). Raises
    DecompressionFailure for corrupt or truncated streams.
    """
    inflater = zlib.decompressobj(-zlib.MAX_WBITS)
    try:
        out = inflater.decompress(data[offset + SIGNATURE_SIZE :], limit)
    except zlib.error as exc:
        raise DecompressionFailure(f"Corrupt stream at offset {offset}: {exc}") from exc
    if not inflater.eof and not (limit and len(out) >= limit):
        raise DecompressionFailure(f"Truncated stream at offset {offset}")
    return out


def extract_layers(
    data: bytes,
    width: int,
    height: int,
    fmt: ContainerFormat = DEFAULT_FORMAT,
    offsets: Optional[List[int]] = None,
) -> List[bytes]:
    """Return every decompressed layer of exactly width*height*4 bytes."""
    expected = width * height * 4
    if expected > len(data) * MAX_INFLATE_RATIO:
        logger.debug("Canvas %dx%d cannot fit in %d bytes of streams", width, height, len(data))
        return []
    if offsets is None:
        offsets = find_stream_offsets(data, fmt)
    layers: List[bytes] = []
    for offset in offsets:
        try:
            buffer = inflate_at(data, offset, expected + 1)
        except DecompressionFailure as exc:
            logger.debug("%s", exc)
            continue
        if len(buffer) != expected:
            logger.debug(
                "Discarding stream at offset %d: %d bytes, expected %d",
                offset,
                len(buffer),
                expected,
            )
            continue
        layers.append(buffer)
    return layers
