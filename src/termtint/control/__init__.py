"""Runtime color capability state and overrides."""

from termtint.control.capability import (
    CapabilityResolver,
    ColorTier,
    Override,
    current_tier,
    detect_tier,
    get_resolver,
    refresh_detection,
    set_override,
    set_virtual_terminal,
    should_colorize,
    unset_override,
    virtual_terminal_enabled,
)

__all__ = [
    "CapabilityResolver",
    "ColorTier",
    "Override",
    "current_tier",
    "detect_tier",
    "get_resolver",
    "refresh_detection",
    "set_override",
    "set_virtual_terminal",
    "should_colorize",
    "unset_override",
    "virtual_terminal_enabled",
]
