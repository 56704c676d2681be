"""Render colors to SGR parameters for the active capability tier."""

from __future__ import annotations

from termtint.control.capability import CapabilityResolver, ColorTier, get_resolver
from termtint.core.color import Color
from termtint.core.constants import CSI, RESET


def render_foreground(color: Color, resolver: CapabilityResolver | None = None) -> str:
    """
    SGR parameters for a foreground color on the active tier.

    Args:
        color: Color to render
        resolver: Capability state to consult (default: process-wide resolver)

    Returns:
        Parameter string such as "91", "38;5;196" or "38;2;255;0;0"
    """
    tier = (resolver or get_resolver()).current_tier()
    return color.degrade(tier).to_sgr_fg()


def render_background(color: Color, resolver: CapabilityResolver | None = None) -> str:
    """SGR parameters for a background color on the active tier."""
    tier = (resolver or get_resolver()).current_tier()
    return color.degrade(tier).to_sgr_bg()


def _params_for_tier(fg: Color | None, bg: Color | None, tier: ColorTier) -> str:
    parts: list[str] = []
    if fg is not None:
        parts.append(fg.degrade(tier).to_sgr_fg())
    if bg is not None:
        parts.append(bg.degrade(tier).to_sgr_bg())
    return ";".join(parts)


def sgr_params(
    fg: Color | None = None,
    bg: Color | None = None,
    resolver: CapabilityResolver | None = None,
) -> str:
    """
    Combined ``fg;bg`` parameter list. Either side may be omitted.

    Both sides are rendered on the same tier, read once from the resolver.
    """
    tier = (resolver or get_resolver()).current_tier()
    return _params_for_tier(fg, bg, tier)


def sgr(params: str) -> str:
    """Wrap SGR parameters in a complete escape sequence."""
    return f"{CSI}{params}m"


def colorize(
    text: str,
    fg: Color | None = None,
    bg: Color | None = None,
    resolver: CapabilityResolver | None = None,
) -> str:
    """
    Wrap text in color codes followed by a reset.

    The text comes back unchanged when the resolver says not to color, or
    when neither color is given.
    """
    if fg is None and bg is None:
        return text
    tier = (resolver or get_resolver()).current_tier()
    if tier == ColorTier.NONE:
        return text
    return f"{sgr(_params_for_tier(fg, bg, tier))}{text}{RESET}"
