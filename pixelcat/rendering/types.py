from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from PIL import Image

Pixel = Tuple[int, int, int, int]

TRANSPARENT: Pixel = (0, 0, 0, 0)


@dataclass(frozen=True)
class Raster:
    """Row-major RGBA pixel grid, top row first."""

    width: int
    height: int
    pixels: List[Pixel]

    def validate(self) -> None:
        """Validate dimensions against the pixel count."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Width and height must be greater than zero")
        if len(self.pixels) != self.width * self.height:
            raise ValueError("Pixels length must equal width * height")

    def pixel_at(self, x: int, y: int) -> Pixel:
        """Return the pixel at (x, y), or TRANSPARENT outside the canvas."""
        if x < 0 or y < 0 or x >= self.width or y >= self.height:
            return TRANSPARENT
        index = y * self.width + x
        if index >= len(self.pixels):
            return TRANSPARENT
        return self.pixels[index]

    def rows(self) -> Iterator[List[Pixel]]:
        for y in range(self.height):
            yield self.pixels[y * self.width : (y + 1) * self.width]

    def to_bytes(self) -> bytes:
        out = bytearray()
        for pixel in self.pixels:
            out += bytes(pixel)
        return bytes(out)

    def to_image(self) -> Image.Image:
        self.validate()
        return Image.frombytes("RGBA", (self.width, self.height), self.to_bytes())

    def save_png(self, path: str) -> None:
        self.to_image().save(path, format="PNG")

    @classmethod
    def from_image(cls, img: Image.Image) -> "Raster":
        if img.mode != "RGBA":
            img = img.convert("RGBA")
        data = img.tobytes()
        return cls(img.width, img.height, pixels_from_bytes(data))


def pixels_from_bytes(data: bytes) -> List[Pixel]:
    """Split an interleaved RGBA buffer into pixel tuples."""
    return [
        (data[i], data[i + 1], data[i + 2], data[i + 3])
        for i in range(0, len(data) - len(data) % 4, 4)
    ]
