# fractpunk: one perturbed Mandelbrot image, speckled and annotated, written as PNG

from .pipeline import generate_image, make_rng

__all__ = ["generate_image", "make_rng"]
