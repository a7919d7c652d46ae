"""Linear range mapping and the complex arithmetic used by the escape-time loop."""

from __future__ import annotations


def map_range(
    value: float,
    new_min: float,
    new_max: float,
    old_min: float,
    old_max: float,
) -> float:
    """Map ``value`` linearly from ``[old_min, old_max]`` onto ``[new_min, new_max]``."""
    return (new_max - new_min) * (value - old_min) / (old_max - old_min) + new_min


def sum_complex(z1: complex, z2: complex) -> complex:
    """Return the component-wise sum of two complex numbers."""
    return complex(z1.real + z2.real, z1.imag + z2.imag)


def square_complex(z: complex) -> complex:
    """Return ``z`` squared, computed as ``(x² - y², 2xy)``."""
    x, y = z.real, z.imag
    return complex(x * x - y * y, 2 * x * y)