"""
Escape-time Mandelbrot renderer with per-pixel random perturbation.
Each pixel draws one offset delta and iterates v -> v^2 + z + delta from v = 0.
Escaped pixels get a random palette color (escape count is not used); the rest stay black.
"""
import logging

import numpy as np

from ..palette import BLACK, PALETTE
from .window import DEFAULT_WINDOW, ComplexPlaneWindow

logger = logging.getLogger(__name__)

MAX_ITERATIONS = 200
ESCAPE_RADIUS = 2.0
PERTURBATION_SCALE = 0.1


def _offset(u, v, scale: float):
    """Map uniform [0, 1) draws to an offset in [-scale/2, scale/2) on each axis. Scalars or arrays."""
    return (u * scale - scale / 2) + 1j * (v * scale - scale / 2)


def draw_perturbation(rng: np.random.Generator, scale: float = PERTURBATION_SCALE) -> complex:
    """One offset; the same draws perturbation_grid makes for a single pixel."""
    u, v = rng.random(), rng.random()
    return complex(_offset(u, v, scale))


def escape_time(z: complex, perturbation: complex = 0j, max_iter: int = MAX_ITERATIONS) -> int | None:
    """Iteration (1-based) at which |v| first exceeds the escape radius, or None if it never does."""
    v = 0j
    for n in range(1, max_iter + 1):
        v = v * v + z + perturbation
        if abs(v) > ESCAPE_RADIUS:
            return n
    return None


def complex_grid(window: ComplexPlaneWindow = DEFAULT_WINDOW) -> np.ndarray:
    """(H, W) complex array; element [py, px] is the plane point for that pixel."""
    x = np.arange(window.width, dtype=np.float64) / window.width * (window.xmax - window.xmin) + window.xmin
    y = np.arange(window.height, dtype=np.float64) / window.height * (window.ymax - window.ymin) + window.ymin
    xx, yy = np.meshgrid(x, y)
    return xx + 1j * yy


def perturbation_grid(
    rng: np.random.Generator,
    shape: tuple[int, int],
    scale: float = PERTURBATION_SCALE,
) -> np.ndarray:
    """Independent per-pixel offsets, same distribution as draw_perturbation."""
    return _offset(rng.random(shape), rng.random(shape), scale)


def escape_mask(c: np.ndarray, delta: np.ndarray, max_iter: int = MAX_ITERATIONS) -> np.ndarray:
    """
    Vectorized escape test. Returns a bool array shaped like c: True where the orbit escapes.
    Escaped points are dropped from the working set so they never overflow.
    """
    flat_c = (c + delta).ravel()
    escaped = np.zeros(flat_c.shape, dtype=bool)
    idx = np.arange(flat_c.size)
    v = np.zeros_like(flat_c)
    for _ in range(max_iter):
        if idx.size == 0:
            break
        v = v * v + flat_c
        out = np.abs(v) > ESCAPE_RADIUS
        if out.any():
            escaped[idx[out]] = True
            keep = ~out
            idx, v, flat_c = idx[keep], v[keep], flat_c[keep]
    return escaped.reshape(c.shape)


def render_fractal(
    rng: np.random.Generator,
    window: ComplexPlaneWindow = DEFAULT_WINDOW,
    *,
    max_iter: int = MAX_ITERATIONS,
    perturbation_scale: float = PERTURBATION_SCALE,
) -> np.ndarray:
    """
    Render the full grid into an (H, W, 4) uint8 RGBA image.
    perturbation_scale=0 gives the plain Mandelbrot set (deterministic membership).
    """
    c = complex_grid(window)
    if perturbation_scale:
        delta = perturbation_grid(rng, c.shape, perturbation_scale)
    else:
        delta = np.zeros_like(c)
    escaped = escape_mask(c, delta, max_iter)

    image = np.empty((window.height, window.width, 4), dtype=np.uint8)
    image[:, :] = BLACK
    palette = np.array(PALETTE, dtype=np.uint8)
    picks = rng.integers(len(PALETTE), size=int(escaped.sum()))
    image[escaped] = palette[picks]
    logger.debug(
        "Rendered %dx%d fractal: %d escaped, %d inside",
        window.width, window.height, int(escaped.sum()), int(escaped.size - escaped.sum()),
    )
    return image
