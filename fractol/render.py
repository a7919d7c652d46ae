"""Escape-time fractal state, colouring, rendering and view controls."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from fractol.complex_math import map_range, square_complex, sum_complex
from fractol.image import HEIGHT, WIDTH, Image

BLACK = 0x000000
WHITE = 0xFFFFFF
RED = 0xFF0000
GREEN = 0x00FF00
BLUE = 0x0000FF

MAGENTA_BURST = 0xFF00FF
LIME_SHOCK = 0xCCFF00
NEON_ORANGE = 0xFF6600
PSYCHEDELIC_PURPLE = 0x660066
AQUA_DREAM = 0x33CCCC
HOT_PINK = 0xFF66B2
ELECTRIC_BLUE = 0x0066FF
LAVA_RED = 0xFF3300

SCROLL_UP = 4
SCROLL_DOWN = 5
KEY_ESCAPE = 53

ZOOM_IN_FACTOR = 1.1
ZOOM_OUT_FACTOR = 0.9


class FractalKind(enum.Enum):
    """The fractals that can be drawn."""

    MANDELBROT = "mandelbrot"
    JULIA = "julia"


def get_color(iterations: int, max_iterations: int) -> int:
    """Colour for a point that escaped after ``iterations`` steps.

    Points that never escaped are black.
    """
    if iterations == max_iterations:
        return BLACK
    return ELECTRIC_BLUE + iterations * 10


@dataclass
class Fractal:
    """The fractal being viewed together with its view parameters."""

    kind: FractalKind = FractalKind.MANDELBROT
    julia: complex = 0j
    title: str = ""
    escape_value: float = 4.0
    max_iterations: int = 100
    shift_x: float = 0.0
    shift_y: float = 0.0
    zoom: float = 1.0
    width: int = WIDTH
    height: int = HEIGHT

    def __post_init__(self) -> None:
        if not self.title:
            self.title = self.kind.value

    def pixel_to_complex(self, x: int, y: int) -> complex:
        """Map a pixel position to its point on the complex plane."""
        real = map_range(x, -2, 2, 0, self.width) / self.zoom + self.shift_x
        imag = map_range(y, 2, -2, 0, self.height) / self.zoom + self.shift_y
        return complex(real, imag)

    def escape_time(self, x: int, y: int) -> int:
        """Return the number of iterations before the pixel's orbit escapes."""
        z = self.pixel_to_complex(x, y)
        if self.kind is FractalKind.JULIA:
            c = self.julia
        else:
            c, z = z, 0j
        iterations = 0
        while iterations < self.max_iterations:
            z = sum_complex(square_complex(z), c)
            if z.real * z.real + z.imag * z.imag > self.escape_value:
                break
            iterations += 1
        return iterations

    def render(self, image: Image) -> None:
        """Colour every pixel of ``image`` by its escape time."""
        if (image.width, image.height) != (self.width, self.height):
            raise ValueError("image size does not match the fractal view")
        for y in range(self.height):
            for x in range(self.width):
                color = get_color(self.escape_time(x, y), self.max_iterations)
                image.put_pixel(x, y, color)

    def handle_mouse(self, button: int) -> bool:
        """Zoom on scroll; return True when the zoom changed."""
        if button == SCROLL_DOWN:
            self.zoom *= ZOOM_OUT_FACTOR
        elif button == SCROLL_UP:
            self.zoom *= ZOOM_IN_FACTOR
        else:
            return False
        return True

    def handle_key(self, keysym: int) -> bool:
        """Return True when the key asks for the viewer to close."""
        return keysym == KEY_ESCAPE