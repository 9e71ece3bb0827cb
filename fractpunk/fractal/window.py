"""
Complex-plane window: maps pixel coordinates onto the rectangle the fractal is sampled from.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class ComplexPlaneWindow:
    """Pixel grid laid over [xmin, xmax) x [ymin, ymax)."""
    xmin: float = -2.0
    xmax: float = 2.0
    ymin: float = -2.0
    ymax: float = 2.0
    width: int = 1024
    height: int = 1024


DEFAULT_WINDOW = ComplexPlaneWindow()


def pixel_to_complex(px: int, py: int, window: ComplexPlaneWindow = DEFAULT_WINDOW) -> complex:
    """Linear map; (0, 0) lands on (xmin, ymin), the last pixel just short of (xmax, ymax)."""
    x = px / window.width * (window.xmax - window.xmin) + window.xmin
    y = py / window.height * (window.ymax - window.ymin) + window.ymin
    return complex(x, y)
