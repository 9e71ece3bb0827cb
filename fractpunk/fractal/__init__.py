# Escape-time fractal: plane window + renderer

from .window import ComplexPlaneWindow, DEFAULT_WINDOW, pixel_to_complex
from .renderer import (
    MAX_ITERATIONS,
    draw_perturbation,
    escape_mask,
    escape_time,
    render_fractal,
)

__all__ = [
    "ComplexPlaneWindow",
    "DEFAULT_WINDOW",
    "pixel_to_complex",
    "MAX_ITERATIONS",
    "draw_perturbation",
    "escape_mask",
    "escape_time",
    "render_fractal",
]
