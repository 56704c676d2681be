"""Color model: representation, palettes and degradation."""

from termtint.core.color import (
    Color,
    ColorMode,
    degrade_indexed_to_16,
    degrade_truecolor_to_16,
    degrade_truecolor_to_256,
)
from termtint.core.palette import decode_indexed_rgb, nearest_16, nearest_256

__all__ = [
    "Color",
    "ColorMode",
    "decode_indexed_rgb",
    "degrade_indexed_to_16",
    "degrade_truecolor_to_16",
    "degrade_truecolor_to_256",
    "nearest_16",
    "nearest_256",
]
