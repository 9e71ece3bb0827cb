# Overlay: speckle clusters and the annotation mark

from .flare import ANNOTATION_PHRASES, Annotation, add_flare, choose_phrase
from .marks import (
    MARK_LENGTH,
    GlyphRenderedMark,
    MarkRenderer,
    PlaceholderLineMark,
    get_mark_renderer,
)
from .speckles import add_speckles, stamp_speckle_cluster

__all__ = [
    "ANNOTATION_PHRASES",
    "Annotation",
    "add_flare",
    "choose_phrase",
    "MARK_LENGTH",
    "GlyphRenderedMark",
    "MarkRenderer",
    "PlaceholderLineMark",
    "get_mark_renderer",
    "add_speckles",
    "stamp_speckle_cluster",
]
