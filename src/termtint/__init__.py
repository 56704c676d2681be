"""
termtint: capability-aware terminal colors

Describe colors once, in whatever richness you like, and render them to the
ANSI codes the current terminal can actually display.

Quick Start:
    >>> import termtint
    >>> red = termtint.Color.from_rgb(255, 0, 0)
    >>> termtint.render_foreground(red)   # "38;2;255;0;0", "38;5;196" or "91"
    >>> print(termtint.colorize("warning", fg=termtint.Color.from_name("yellow")))

Features:
    - 16 named colors, the 256-color palette and 24-bit true color
    - Nearest-color degradation TrueColor -> 256 -> 16
    - NO_COLOR / CLICOLOR / FORCE_COLOR / COLORTERM aware detection
    - Thread-safe process-wide override (force on, force off, auto)
    - Optional image rendering (Pillow) and CLI (typer, rich)
"""

__version__ = "0.1.0"

# Color model
from termtint.core.color import (
    Color,
    ColorMode,
    degrade_indexed_to_16,
    degrade_truecolor_to_16,
    degrade_truecolor_to_256,
)
from termtint.core.palette import decode_indexed_rgb

# Capability state
from termtint.control.capability import (
    CapabilityResolver,
    ColorTier,
    Override,
    current_tier,
    refresh_detection,
    set_override,
    set_virtual_terminal,
    should_colorize,
    unset_override,
    virtual_terminal_enabled,
)

# Rendering
from termtint.render.sgr import (
    colorize,
    render_background,
    render_foreground,
    sgr_params,
)

__all__ = [
    # Version
    "__version__",
    # Color model
    "Color",
    "ColorMode",
    "decode_indexed_rgb",
    "degrade_indexed_to_16",
    "degrade_truecolor_to_16",
    "degrade_truecolor_to_256",
    # Capability state
    "CapabilityResolver",
    "ColorTier",
    "Override",
    "current_tier",
    "refresh_detection",
    "set_override",
    "set_virtual_terminal",
    "should_colorize",
    "unset_override",
    "virtual_terminal_enabled",
    # Rendering
    "colorize",
    "render_background",
    "render_foreground",
    "sgr_params",
]
