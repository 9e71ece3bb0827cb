"""
Fixed color palette (RGBA 0-255). Shared by the fractal renderer and the overlay.
"""
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import numpy as np

# Order matters: tests and callers index into it
PALETTE: list[tuple[int, int, int, int]] = [
    (255, 69, 0, 255),    # red-orange
    (255, 215, 0, 255),   # gold
    (138, 43, 226, 255),  # blue-violet
    (0, 255, 127, 255),   # spring green
    (255, 20, 147, 255),  # deep pink
]

BLACK: tuple[int, int, int, int] = (0, 0, 0, 255)
WHITE: tuple[int, int, int, int] = (255, 255, 255, 255)


def random_color(rng: "np.random.Generator") -> tuple[int, int, int, int]:
    """Uniformly random palette entry."""
    return PALETTE[int(rng.integers(len(PALETTE)))]
