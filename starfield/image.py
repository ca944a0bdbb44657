"""RGBA images held in memory, and a registry of images by name."""

from __future__ import annotations

from typing import Dict, Optional

_BYTES_PER_PIXEL = 4
_PLACEHOLDER_PIXEL = bytes((255, 0, 0, 255))
_OPAQUE = 255
_TRANSPARENT = 0


class Image:
    """A ``width`` by ``height`` image stored as four bytes per pixel, row by row."""

    def __init__(self, width: int = 0, height: int = 0) -> None:
        if width < 0 or height < 0:
            raise ValueError("image dimensions must not be negative")
        self.width = width
        self.height = height
        self.pixels = bytearray(_BYTES_PER_PIXEL * width * height)

    @property
    def num_pixels(self) -> int:
        return self.width * self.height

    @classmethod
    def from_region(cls, image: Image, x: int, y: int, width: int, height: int) -> Image:
        """Copy the ``width`` by ``height`` region of ``image`` whose corner is at ``(x, y)``."""
        if x < 0 or y < 0 or x + width > image.width or y + height > image.height:
            raise ValueError("region lies outside the source image")
        region = cls(width, height)
        region.pixels[:] = _PLACEHOLDER_PIXEL * region.num_pixels
        row_bytes = _BYTES_PER_PIXEL * width
        for row in range(height):
            src = _BYTES_PER_PIXEL * (x + (y + row) * image.width)
            dst = row * row_bytes
            region.pixels[dst:dst + row_bytes] = image.pixels[src:src + row_bytes]
        return region

    def set_transparent_colour(self, r: int, g: int, b: int) -> None:
        """Make pixels of colour ``(r, g, b)`` transparent and all others opaque."""
        colour = bytes((r, g, b))
        for alpha in range(3, len(self.pixels), _BYTES_PER_PIXEL):
            matches = self.pixels[alpha - 3:alpha] == colour
            self.pixels[alpha] = _TRANSPARENT if matches else _OPAQUE


class ImageManager:
    """Keeps images by name; the first image registered under a name is kept."""

    def __init__(self) -> None:
        self._images: Dict[str, Image] = {}

    def create_image_from_image(
        self, name: str, image: Image, x: int, y: int, width: int, height: int
    ) -> Image:
        """Cut a region out of ``image``, register it under ``name`` and return it."""
        region = Image.from_region(image, x, y, width, height)
        self._images.setdefault(name, region)
        return region

    def get_image_by_name(self, name: str) -> Optional[Image]:
        """Return the image registered under ``name``, or ``None``."""
        return self._images.get(name)