"""
Speckle clusters: small random scatters of one palette color around an anchor pixel.
"""
import numpy as np

from ..palette import random_color

CLUSTER_COUNT = 5
CLUSTER_POINTS = 50
CLUSTER_RADIUS = 10


def stamp_speckle_cluster(
    image: np.ndarray,
    x: int,
    y: int,
    color: tuple[int, int, int, int],
    rng: np.random.Generator,
    *,
    points: int = CLUSTER_POINTS,
    radius: int = CLUSTER_RADIUS,
) -> list[tuple[int, int]]:
    """
    Write `points` pixels at offsets in [-radius, radius) from (x, y).
    Offsets that fall outside the image are skipped (not clamped).
    Returns the (x, y) coordinates actually written.
    """
    h, w = image.shape[:2]
    written: list[tuple[int, int]] = []
    for _ in range(points):
        rx = x + int(rng.integers(2 * radius)) - radius
        ry = y + int(rng.integers(2 * radius)) - radius
        if 0 <= rx < w and 0 <= ry < h:
            image[ry, rx] = color
            written.append((rx, ry))
    return written


def add_speckles(
    image: np.ndarray,
    rng: np.random.Generator,
    *,
    clusters: int = CLUSTER_COUNT,
) -> list[tuple[int, int]]:
    """Stamp `clusters` clusters, each at a random in-bounds anchor with a random palette color."""
    h, w = image.shape[:2]
    written: list[tuple[int, int]] = []
    for _ in range(clusters):
        x = int(rng.integers(w))
        y = int(rng.integers(h))
        color = random_color(rng)
        written.extend(stamp_speckle_cluster(image, x, y, color, rng))
    return written
