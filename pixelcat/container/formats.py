from __future__ import annotations

from dataclasses import dataclass
from typing import FrozenSet


@dataclass(frozen=True)
class ContainerFormat:
    header_size: int = 16
    id_length_offset: int = 8
    stream_marker: int = 0x78
    stream_levels: FrozenSet[int] = frozenset({0x01, 0x5E, 0x9C, 0xDA})
    extension: str = ".pxart"

    def matches_signature(self, first: int, second: int) -> bool:
        return first == self.stream_marker and second in self.stream_levels


DEFAULT_FORMAT = ContainerFormat()
