"""Mandelbrot and Julia set viewer with an XPM reader, X11 colour names and text utilities."""

__version__ = "0.1.0"