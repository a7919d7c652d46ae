# fractol

An interactive viewer for the Mandelbrot and Julia sets, together with the
small toolkit it is built on: complex-number helpers, an in-memory pixel
image, an XPM pixmap reader, an X11 colour-name table, and a handful of text
and formatting utilities.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Running the viewer

```
fractol mandelbrot
fractol julia -0.7 0.27015
```

The window is 800 × 800 pixels. Scrolling the mouse wheel up zooms in by a
factor of 1.1, scrolling down zooms out by 0.9; every mouse click redraws the
view. Pressing Escape or closing the window quits. (The `5` key shares the
internal code used for Escape, so it quits too.)

The first argument is matched by prefix: anything starting with `mandelbrot`
selects the Mandelbrot set, anything starting with `julia` (followed by two
numbers) selects the Julia set. Julia parameters must be plain decimal numbers
with an optional sign, at least one digit and at most one decimal point.
Any other arguments print a short usage message to standard error and the
command exits with status 1.

## Using the library

```python
from fractol.render import Fractal, FractalKind
from fractol.image import Image

fractal = Fractal(FractalKind.MANDELBROT)
image = Image(800, 800)
fractal.render(image)
print(hex(image.get_pixel(400, 400)))
```

Points that never escape are black; the others are coloured
`0x0066FF + 10 * iterations`, with at most 100 iterations and an escape
threshold of 4 on the squared magnitude.

Modules:

- `fractol.render`: `Fractal` (with `pixel_to_complex`, `escape_time`,
  `render`, `handle_mouse`, `handle_key`), `FractalKind` and `get_color`.
- `fractol.cli`: `parse_args`, `run_viewer` and `main`, the command above.
- `fractol.complex_math`: `map_range`, `sum_complex`, `square_complex`.
- `fractol.parse`: `parse_float`, `validate_julia_params`, `is_space` and
  `parse_julia`, which raises `ParseError` on bad input.
- `fractol.image`: `Image` (`put_pixel`, `get_pixel`, `rows`), `create_color`,
  and two demo drawings, `draw_gradient` and `draw_triangle`.
- `fractol.xpm`: `xpm_file_to_image` and `xpm_data_to_image` read XPM pixmaps
  into an `Image`; `XpmError` is raised when the data cannot be read or is
  malformed. Colours named `none` become `0xFF000000`.
- `fractol.colornames`: `color_by_name("LightSkyBlue")` looks up X11 colour
  names without regard to case and raises `KeyError` for unknown names.
- `fractol.printf`: `format_string("%d %x %s", ...)` and `printf` support the
  `c s p d i u x X %` conversions; `format_base`, `format_pointer` and
  `format_int` render single values.
- `fractol.textutil`: `atoi`, `itoa`, `split`, `strtrim`, `substr`, `strnstr`,
  `strncmp` and ASCII character tests such as `isalpha` and `toupper`.
- `fractol.wordtab`: `str_to_wordtab`, `find_substring` and
  `find_substring_unquoted`, used by the XPM reader.

## What it does not do

The viewer only zooms. It has no panning, no keyboard zoom, no choice of
colour scheme or iteration count at run time, and no way to save the rendered
image to a file. Zooming is always about the centre of the view, not the
mouse position.