"""
Annotation marks: how a phrase is put on the image.
The placeholder draws a fixed-length line; the glyph variant draws real text with Pillow
on top of the same line, so both leave the same deterministic mark at the origin.
"""
from abc import ABC, abstractmethod

import numpy as np

MARK_LENGTH = 50
FONT_SIZE = 20


class MarkRenderer(ABC):
    """Places one annotation at (x, y) in the given color, in place."""

    @abstractmethod
    def draw(
        self,
        image: np.ndarray,
        text: str,
        x: int,
        y: int,
        color: tuple[int, int, int, int],
    ) -> None:
        ...


def _draw_line(image: np.ndarray, x: int, y: int, color: tuple[int, int, int, int]) -> None:
    h, w = image.shape[:2]
    if 0 <= y < h and x < w:
        image[y, max(0, x):x + MARK_LENGTH] = color


class PlaceholderLineMark(MarkRenderer):
    """Horizontal run of MARK_LENGTH pixels, whatever the text says."""

    def draw(self, image, text, x, y, color):
        print(f"Drawing text '{text}' at ({x}, {y})")
        _draw_line(image, x, y, color)


class GlyphRenderedMark(MarkRenderer):
    """Pillow-rendered text with the placeholder line as its underline."""

    def __init__(self, font_size: int = FONT_SIZE):
        self.font_size = font_size

    def _font(self):
        from PIL import ImageFont

        try:
            return ImageFont.truetype("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf", self.font_size)
        except (OSError, IOError):
            return ImageFont.load_default()

    def draw(self, image, text, x, y, color):
        from PIL import Image, ImageDraw

        print(f"Drawing text '{text}' at ({x}, {y})")
        pil = Image.fromarray(image)
        draw = ImageDraw.Draw(pil)
        # Text sits above the line so the line pixels stay exactly `color`
        draw.text((x, y - self.font_size - 2), text, font=self._font(), fill=tuple(color))
        image[...] = np.asarray(pil)
        _draw_line(image, x, y, color)


MARK_RENDERERS: dict[str, type[MarkRenderer]] = {
    "line": PlaceholderLineMark,
    "glyph": GlyphRenderedMark,
}


def get_mark_renderer(name: str | None) -> MarkRenderer:
    """Renderer by config name ("line" or "glyph"); None means the placeholder line."""
    key = (name or "line").strip().lower()
    if key not in MARK_RENDERERS:
        raise ValueError(f"Unknown mark renderer {name!r}; expected one of {sorted(MARK_RENDERERS)}")
    return MARK_RENDERERS[key]()
