"""
PNG output via Pillow. Creates or truncates the target file.
"""
import logging
from pathlib import Path

import numpy as np

from .errors import ImageWriteError

logger = logging.getLogger(__name__)


def write_png(image: np.ndarray, path: Path) -> Path:
    """
    Encode an (H, W, 4) uint8 RGBA buffer as PNG at path.
    The file handle is closed whether encoding succeeds or not; failures raise ImageWriteError.
    """
    from PIL import Image

    path = Path(path)
    if image.ndim != 3 or image.shape[-1] != 4 or image.dtype != np.uint8:
        raise ImageWriteError(f"Expected (H, W, 4) uint8 RGBA image, got {image.shape} {image.dtype}", path=str(path))
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        pil = Image.fromarray(image)
        with open(path, "wb") as f:
            pil.save(f, format="PNG")
    except (OSError, ValueError) as e:
        raise ImageWriteError(f"Writing {path} failed: {e}", path=str(path)) from e
    logger.info("Wrote %dx%d PNG to %s", image.shape[1], image.shape[0], path)
    return path
