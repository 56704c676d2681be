"""Render images as half-block terminal art at the active color tier.

Each character cell shows two pixels with the upper half block (▀): the
foreground is the top pixel and the background is the bottom pixel. Pixels
start out as true color and are degraded to whatever the terminal supports,
so the same image comes out as 24-bit, 256-color or 16-color output.
Without color support it falls back to shade characters.

Example:
    from termtint.render.image import render_image

    print(render_image("logo.png", width=60))
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from termtint.control.capability import CapabilityResolver, ColorTier, get_resolver
from termtint.core.color import Color
from termtint.core.constants import RESET
from termtint.render.sgr import render_background, render_foreground, sgr

try:
    from PIL import Image, ImageEnhance, ImageFilter
    HAS_PIL = True
except ImportError:
    HAS_PIL = False


UPPER_HALF = "▀"  # FG = top pixel, BG = bottom pixel

# Shades from light to dark, used when no color is available
SHADES = (" ", "░", "▒", "▓", "█")


def _check_pil() -> None:
    """Raise ImportError if PIL is not available."""
    if not HAS_PIL:
        raise ImportError(
            "Pillow is required for image rendering. "
            "Install with: pip install termtint[image]"
        )


def _luminance(rgb: tuple[int, int, int]) -> float:
    r, g, b = rgb
    return 0.299 * r + 0.587 * g + 0.114 * b


def _shade(top: tuple[int, int, int], bottom: tuple[int, int, int]) -> str:
    level = (_luminance(top) + _luminance(bottom)) / 2
    return SHADES[min(int(level / 256 * len(SHADES)), len(SHADES) - 1)]


def _load(input_path: Path, width: int, sharpen: bool, color_boost: float, contrast_boost: float) -> "Image.Image":
    img = Image.open(input_path).convert("RGB")

    # Calculate new height maintaining aspect ratio
    aspect_ratio = img.height / img.width
    new_height = max(1, int(width * aspect_ratio))

    # Downscale with Lanczos (high quality, preserves edges)
    img = img.resize((width, new_height), Image.Resampling.LANCZOS)

    # Restore crispness lost during downscale
    if sharpen:
        img = img.filter(ImageFilter.UnsharpMask(radius=1.0, percent=200, threshold=5))

    if color_boost != 1.0:
        img = ImageEnhance.Color(img).enhance(color_boost)
    if contrast_boost != 1.0:
        img = ImageEnhance.Contrast(img).enhance(contrast_boost)
    return img


def render_image(
    input_path: Union[str, Path],
    width: int = 78,
    *,
    resolver: CapabilityResolver | None = None,
    output_path: Union[str, Path, None] = None,
    sharpen: bool = True,
    color_boost: float = 1.0,
    contrast_boost: float = 1.0,
) -> str:
    """
    Render an image as terminal art for the active color tier.

    Args:
        input_path: Path to input PNG/JPG/GIF image
        width: Target width in characters (default: 78, leaves room for margins)
        resolver: Capability state to consult (default: process-wide resolver)
        output_path: Also write the result to this file if given
        sharpen: Apply unsharp mask to restore crispness after downscale
        color_boost: Saturation multiplier (default: 1.0, unchanged)
        contrast_boost: Contrast multiplier (default: 1.0, unchanged)

    Returns:
        The rendered art, one line per pair of pixel rows

    Raises:
        ImportError: If Pillow is not installed
        OSError: If the input image cannot be opened
    """
    _check_pil()
    resolver = resolver or get_resolver()
    tier = resolver.current_tier()

    img = _load(Path(input_path), width, sharpen, color_boost, contrast_boost)
    pixels = img.load()

    # Degradation is per distinct pixel color, not per pixel
    fg_cache: dict[tuple[int, int, int], str] = {}
    bg_cache: dict[tuple[int, int, int], str] = {}

    lines: list[str] = []

    # Process two rows at a time
    for y in range(0, img.height, 2):
        line_parts: list[str] = []
        last_fg: str | None = None
        last_bg: str | None = None

        for x in range(img.width):
            top = pixels[x, y][:3]
            bottom = pixels[x, y + 1][:3] if y + 1 < img.height else (0, 0, 0)

            if tier == ColorTier.NONE:
                line_parts.append(_shade(top, bottom))
                continue

            if top not in fg_cache:
                fg_cache[top] = render_foreground(Color.from_rgb(*top), resolver)
            if bottom not in bg_cache:
                bg_cache[bottom] = render_background(Color.from_rgb(*bottom), resolver)
            fg = fg_cache[top]
            bg = bg_cache[bottom]

            # Emit color codes only when they change
            params = [p for p, last in ((fg, last_fg), (bg, last_bg)) if p != last]
            if params:
                line_parts.append(sgr(";".join(params)))
                last_fg, last_bg = fg, bg

            line_parts.append(UPPER_HALF)

        if tier != ColorTier.NONE:
            # Reset at end of line to prevent color bleeding
            line_parts.append(RESET)
        lines.append("".join(line_parts))

    art = "\n".join(lines) + "\n"

    if output_path is not None:
        Path(output_path).write_text(art, encoding="utf-8")

    return art
