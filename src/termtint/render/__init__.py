"""Renderers from logical colors to terminal escape sequences."""

from termtint.render.sgr import (
    colorize,
    render_background,
    render_foreground,
    sgr,
    sgr_params,
)
from termtint.render.image import render_image

__all__ = [
    "colorize",
    "render_background",
    "render_foreground",
    "render_image",
    "sgr",
    "sgr_params",
]
