"""
Pipeline: oracle phrase -> fractal -> flare -> PNG. One image per call, fully sequential.
The oracle runs before any image work, so an oracle failure leaves no file behind.
"""
import logging
from pathlib import Path
from typing import Any, Callable

import numpy as np

from .config import get_output_path, load_config
from .errors import OracleError
from .fractal import DEFAULT_WINDOW, render_fractal
from .image_writer import write_png
from .oracle import fetch_phrase
from .overlay import MarkRenderer, add_flare, get_mark_renderer

logger = logging.getLogger(__name__)

Oracle = Callable[[dict[str, Any]], str]


def make_rng(seed: int | None = None) -> np.random.Generator:
    """Random source threaded through every stage. No seed means OS entropy (not reproducible)."""
    return np.random.default_rng(seed)


def _oracle_text(config: dict[str, Any], oracle: Oracle | None) -> str | None:
    settings = config.get("oracle", {})
    if not settings.get("enabled", True):
        logger.info("Oracle disabled; using fixed phrases only")
        return None
    fetch = oracle or fetch_phrase
    try:
        return fetch(settings)
    except OracleError as e:
        if e.recoverable and settings.get("fallback_on_error", False):
            logger.warning("Oracle failed (%s); using fixed phrases only", e)
            return None
        raise


def generate_image(
    config: dict[str, Any] | None = None,
    *,
    rng: np.random.Generator | None = None,
    oracle: Oracle | None = None,
    output_path: Path | None = None,
    mark: MarkRenderer | None = None,
) -> Path:
    """
    Produce one annotated fractal PNG and return its path.
    oracle: callable taking the `oracle` config section and returning a phrase (default: HTTP fetch).
    """
    if config is None:
        config = load_config()
    if rng is None:
        rng = make_rng(config.get("render", {}).get("seed"))
    if mark is None:
        mark = get_mark_renderer(config.get("render", {}).get("mark"))

    text = _oracle_text(config, oracle)

    image = render_fractal(rng, DEFAULT_WINDOW)
    annotation = add_flare(image, rng, text, mark=mark)
    logger.info("Annotation %r at (%d, %d)", annotation.text, annotation.x, annotation.y)

    path = Path(output_path) if output_path is not None else get_output_path(config)
    return write_png(image, path)
