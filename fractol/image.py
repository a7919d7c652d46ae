"""An in-memory 32-bit pixel image and the demo drawings rendered into it."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

WIDTH = 800
HEIGHT = 800

TRIANGLE_LEFT_COLOR = 0x05FF5500
TRIANGLE_RIGHT_COLOR = 0x055FF33
TRIANGLE_BASE_COLOR = 0x087965A

_PIXEL_MASK = 0xFFFFFFFF


@dataclass
class Image:
    """A width × height grid of 32-bit pixel values, initially all zero."""

    width: int = WIDTH
    height: int = HEIGHT
    pixels: list[int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("image dimensions must be positive")
        self.pixels = [0] * (self.width * self.height)

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        return y * self.width + x

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` as an unsigned 32-bit value at ``(x, y)``."""
        self.pixels[self._offset(x, y)] = color & _PIXEL_MASK

    def get_pixel(self, x: int, y: int) -> int:
        """Return the 32-bit value stored at ``(x, y)``."""
        return self.pixels[self._offset(x, y)]

    def rows(self) -> Iterator[tuple[int, ...]]:
        """Yield the image one row at a time, top to bottom."""
        for y in range(self.height):
            start = y * self.width
            yield tuple(self.pixels[start:start + self.width])


def create_color(r: int, g: int, b: int) -> int:
    """Pack red, green and blue channels into a 0xRRGGBB value."""
    return r << 16 | g << 8 | b


def draw_gradient(image: Image) -> None:
    """Fill ``image`` with a gradient: red grows with x, green with y, blue fades."""
    width, height = image.width, image.height
    for y in range(height):
        green = (y * 255) // height
        for x in range(width):
            red = (x * 255) // width
            blue = 255 - ((x + y) * 255) // (width + height)
            image.put_pixel(x, y, create_color(red, green, blue))


def draw_triangle(image: Image) -> None:
    """Draw two diagonals spreading from the top centre and a horizontal base.

    The base is drawn on row ``width // 2``, so the image must be taller than
    half its width.
    """
    width, height = image.width, image.height
    apex = width // 2
    if apex >= height:
        raise ValueError("image is too short for the triangle base")
    for y in range(height):
        left = apex - y
        if left > 0:
            image.put_pixel(left, y, TRIANGLE_LEFT_COLOR)
        right = apex + 1 + y
        if right < width:
            image.put_pixel(right, y, TRIANGLE_RIGHT_COLOR)
    for x in range(width):
        image.put_pixel(x, apex, TRIANGLE_BASE_COLOR)