"""Command line entry point: choose a fractal and show it in a window."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from fractol.image import Image
from fractol.parse import USAGE_MESSAGE, ParseError, parse_julia
from fractol.render import KEY_ESCAPE, Fractal, FractalKind
from fractol.textutil import strncmp


def parse_args(argv: Sequence[str]) -> Fractal:
    """Build the fractal described by the arguments (program name excluded)."""
    if len(argv) == 1 and strncmp(argv[0], "mandelbrot", 10) == 0:
        return Fractal(kind=FractalKind.MANDELBROT, title=argv[0])
    if len(argv) == 3 and strncmp(argv[0], "julia", 5) == 0:
        constant = parse_julia(argv[1], argv[2])
        return Fractal(kind=FractalKind.JULIA, julia=constant, title=argv[0])
    raise ParseError(USAGE_MESSAGE)


def _image_bytes(image: Image) -> bytes:
    return bytes(
        channel
        for pixel in image.pixels
        for channel in ((pixel >> 16) & 0xFF, (pixel >> 8) & 0xFF, pixel & 0xFF)
    )


def run_viewer(fractal: Fractal) -> int:
    """Open a window showing ``fractal`` and run until it is closed."""
    import pygame

    pygame.init()
    try:
        size = (fractal.width, fractal.height)
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption(fractal.title)
        image = Image(fractal.width, fractal.height)

        def redraw() -> None:
            fractal.render(image)
            surface = pygame.image.frombuffer(_image_bytes(image), size, "RGB")
            screen.blit(surface, (0, 0))
            pygame.display.flip()

        redraw()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return 0
            if event.type == pygame.KEYDOWN:
                keysym = KEY_ESCAPE if event.key == pygame.K_ESCAPE else event.key
                if fractal.handle_key(keysym):
                    return 0
            elif event.type == pygame.MOUSEBUTTONDOWN:
                fractal.handle_mouse(event.button)
                redraw()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments and start the viewer; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        fractal = parse_args(args)
    except ParseError as exc:
        sys.stderr.write(str(exc))
        return 1
    return run_viewer(fractal)


if __name__ == "__main__":
    sys.exit(main())