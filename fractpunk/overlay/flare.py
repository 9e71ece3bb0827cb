"""
Flare: speckle clusters plus one annotation phrase, applied after the fractal is rendered.
"""
import logging
from dataclasses import dataclass

import numpy as np

from ..palette import WHITE
from .marks import MarkRenderer, PlaceholderLineMark
from .speckles import add_speckles

logger = logging.getLogger(__name__)

ANNOTATION_PHRASES: list[str] = [
    "Fnord!",
    "Kallisti!",
    "Ewige Blumenkraft",
    "Hail Eris!",
]

# Placement box the annotation origin must leave room for
BOX_WIDTH = 100
BOX_HEIGHT = 50


@dataclass
class Annotation:
    """Where the phrase went."""
    text: str
    x: int
    y: int


def choose_phrase(rng: np.random.Generator, oracle_text: str | None) -> str:
    """Uniform pick among the fixed phrases and the oracle phrase (if there is one)."""
    candidates = list(ANNOTATION_PHRASES)
    if oracle_text is not None:
        candidates.append(oracle_text)
    return candidates[int(rng.integers(len(candidates)))]


def add_flare(
    image: np.ndarray,
    rng: np.random.Generator,
    oracle_text: str | None,
    *,
    mark: MarkRenderer | None = None,
) -> Annotation:
    """Speckles first, then the annotation mark in white. Mutates image in place."""
    h, w = image.shape[:2]
    written = add_speckles(image, rng)
    logger.debug("Speckles wrote %d pixels", len(written))

    text = choose_phrase(rng, oracle_text)
    x = int(rng.integers(max(1, w - BOX_WIDTH)))
    y = int(rng.integers(max(1, h - BOX_HEIGHT)))
    (mark or PlaceholderLineMark()).draw(image, text, x, y, WHITE)
    return Annotation(text=text, x=x, y=y)
