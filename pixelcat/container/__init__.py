from .blobs import extract_layers, find_stream_offsets, inflate_at
from .formats import DEFAULT_FORMAT, ContainerFormat
from .header import read_canvas_size, read_id_length, size_field_offset

__all__ = [
    "ContainerFormat",
    "DEFAULT_FORMAT",
    "extract_layers",
    "find_stream_offsets",
    "inflate_at",
    "read_canvas_size",
    "read_id_length",
    "size_field_offset",
]
