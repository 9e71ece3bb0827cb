"""
Fractal renderer: plane mapping, reference escape points, output colors.
Run from project root: python -m pytest tests/ -v
"""
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import numpy as np


def _small_window():
    from fractpunk.fractal import ComplexPlaneWindow
    return ComplexPlaneWindow(width=64, height=64)


def _color_set(image):
    return {tuple(int(c) for c in px) for px in image.reshape(-1, 4)}


class TestPlaneMapping(unittest.TestCase):
    """Pixel to complex-plane mapping."""

    def test_origin_pixel_maps_to_min_corner(self):
        """Pixel (0, 0) maps to (xmin, ymin)."""
        from fractpunk.fractal import pixel_to_complex
        self.assertEqual(pixel_to_complex(0, 0), complex(-2, -2))

    def test_last_pixel_just_under_max_corner(self):
        """The last pixel maps just short of (xmax, ymax)."""
        from fractpunk.fractal import DEFAULT_WINDOW, pixel_to_complex
        z = pixel_to_complex(DEFAULT_WINDOW.width - 1, DEFAULT_WINDOW.height - 1)
        self.assertLess(z.real, 2.0)
        self.assertLess(z.imag, 2.0)
        self.assertAlmostEqual(z.real, 2.0 - 4.0 / 1024)
        self.assertAlmostEqual(z.imag, 2.0 - 4.0 / 1024)

    def test_linear_formula(self):
        """pixel_to_complex follows px/width*(xmax-xmin)+xmin on both axes."""
        from fractpunk.fractal import DEFAULT_WINDOW, pixel_to_complex
        w = DEFAULT_WINDOW
        for px, py in [(1, 2), (100, 900), (512, 512), (1023, 0)]:
            z = pixel_to_complex(px, py)
            self.assertAlmostEqual(z.real, px / w.width * (w.xmax - w.xmin) + w.xmin)
            self.assertAlmostEqual(z.imag, py / w.height * (w.ymax - w.ymin) + w.ymin)

    def test_center_pixel_is_origin(self):
        """The center pixel of the default window is 0."""
        from fractpunk.fractal import pixel_to_complex
        self.assertEqual(pixel_to_complex(512, 512), 0j)

    def test_complex_grid_matches_scalar_mapping(self):
        """complex_grid agrees with pixel_to_complex element by element."""
        from fractpunk.fractal import pixel_to_complex
        from fractpunk.fractal.renderer import complex_grid
        window = _small_window()
        grid = complex_grid(window)
        self.assertEqual(grid.shape, (64, 64))
        for px, py in [(0, 0), (5, 40), (63, 63)]:
            self.assertAlmostEqual(grid[py, px], pixel_to_complex(px, py, window))


class TestEscapeTime(unittest.TestCase):
    """Scalar and vectorized escape tests against known points."""

    def test_origin_never_escapes(self):
        """z = 0 stays bounded for all iterations."""
        from fractpunk.fractal import escape_time
        self.assertIsNone(escape_time(0j))

    def test_far_corner_escapes_on_first_iteration(self):
        """z = 2+2i escapes on iteration 1."""
        from fractpunk.fractal import escape_time
        self.assertEqual(escape_time(complex(2, 2)), 1)

    def test_known_points(self):
        """Bulb and cardioid points stay bounded; far points escape."""
        from fractpunk.fractal import escape_time
        self.assertIsNone(escape_time(complex(-1, 0)))      # period-2 bulb
        self.assertIsNone(escape_time(complex(-0.1, 0.1)))  # main cardioid
        self.assertIsNotNone(escape_time(complex(1, 1)))
        self.assertIsNotNone(escape_time(complex(-2, -2)))

    def test_perturbation_shifts_the_point(self):
        """A perturbation moves the iterated point, changing membership."""
        from fractpunk.fractal import escape_time
        # 0.3 is outside the set; shifting it to 0.2 puts it inside
        self.assertIsNotNone(escape_time(complex(0.3, 0)))
        self.assertIsNone(escape_time(complex(0.3, 0), perturbation=complex(-0.1, 0)))

    def test_escape_mask_agrees_on_reference_points(self):
        """Vectorized escape_mask matches the scalar reference points."""
        from fractpunk.fractal import escape_mask
        c = np.array([[0j, complex(2, 2)], [complex(-1, 0), complex(1, 1)]])
        mask = escape_mask(c, np.zeros_like(c))
        self.assertEqual(mask.tolist(), [[False, True], [False, True]])


class TestPerturbation(unittest.TestCase):
    """Per-pixel perturbation draws."""

    def test_draw_perturbation_range(self):
        """draw_perturbation stays within [-0.05, 0.05) on both axes."""
        from fractpunk.fractal import draw_perturbation
        rng = np.random.default_rng(3)
        for _ in range(500):
            d = draw_perturbation(rng)
            self.assertTrue(-0.05 <= d.real < 0.05)
            self.assertTrue(-0.05 <= d.imag < 0.05)

    def test_perturbation_grid_range_and_shape(self):
        """perturbation_grid has the requested shape and range."""
        from fractpunk.fractal.renderer import perturbation_grid
        grid = perturbation_grid(np.random.default_rng(4), (32, 16))
        self.assertEqual(grid.shape, (32, 16))
        self.assertTrue(np.all(grid.real >= -0.05) and np.all(grid.real < 0.05))
        self.assertTrue(np.all(grid.imag >= -0.05) and np.all(grid.imag < 0.05))

    def test_grid_matches_scalar_draw(self):
        """For one pixel, perturbation_grid yields exactly what draw_perturbation does from the same seed."""
        from fractpunk.fractal import draw_perturbation
        from fractpunk.fractal.renderer import perturbation_grid
        for seed in range(5):
            scalar = draw_perturbation(np.random.default_rng(seed))
            grid = perturbation_grid(np.random.default_rng(seed), (1, 1))
            self.assertEqual(complex(grid[0, 0]), scalar)


class TestRenderFractal(unittest.TestCase):
    """Full-grid rendering into an RGBA buffer."""

    def test_shape_and_dtype(self):
        """render_fractal returns an (H, W, 4) uint8 image."""
        from fractpunk.fractal import render_fractal
        image = render_fractal(np.random.default_rng(0), _small_window())
        self.assertEqual(image.shape, (64, 64, 4))
        self.assertEqual(image.dtype, np.uint8)

    def test_only_palette_colors_or_black(self):
        """Every pixel is a palette color or black, fully opaque."""
        from fractpunk.fractal import render_fractal
        from fractpunk.palette import BLACK, PALETTE
        image = render_fractal(np.random.default_rng(1), _small_window())
        allowed = set(PALETTE) | {BLACK}
        self.assertTrue(_color_set(image) <= allowed)
        self.assertTrue(np.all(image[:, :, 3] == 255))

    def test_zero_perturbation_matches_membership(self):
        """With no perturbation, black pixels are exactly the bounded points."""
        from fractpunk.fractal import escape_time, pixel_to_complex, render_fractal
        from fractpunk.palette import BLACK, PALETTE
        window = _small_window()
        image = render_fractal(np.random.default_rng(2), window, perturbation_scale=0)
        self.assertEqual(tuple(image[32, 32]), BLACK)   # origin
        self.assertIn(tuple(int(c) for c in image[0, 0]), PALETTE)
        for px, py in [(32, 32), (16, 32), (0, 0), (60, 10)]:
            inside = escape_time(pixel_to_complex(px, py, window)) is None
            is_black = tuple(image[py, px]) == BLACK
            self.assertEqual(inside, is_black, (px, py))

    def test_escaped_colors_are_random_not_banded(self):
        """Escaped pixels use all five palette colors."""
        from fractpunk.fractal import render_fractal
        from fractpunk.palette import PALETTE
        image = render_fractal(np.random.default_rng(5), _small_window(), perturbation_scale=0)
        used = _color_set(image) & set(PALETTE)
        self.assertEqual(used, set(PALETTE))

    def test_same_seed_same_image(self):
        """Same seed, same image."""
        from fractpunk.fractal import render_fractal
        a = render_fractal(np.random.default_rng(9), _small_window())
        b = render_fractal(np.random.default_rng(9), _small_window())
        self.assertTrue(np.array_equal(a, b))
