"""Tests for tier-aware rendering and the consumer helpers."""

import pytest

from termtint.control import capability
from termtint.control.capability import CapabilityResolver, ColorTier, Override
from termtint.core.color import Color
from termtint.render.sgr import (
    colorize,
    render_background,
    render_foreground,
    sgr,
    sgr_params,
)

from conftest import FakeStream


class FlippingResolver(CapabilityResolver):
    """Resolver that forces color off right after answering a tier query."""

    def current_tier(self) -> ColorTier:
        tier = super().current_tier()
        self.set_override(Override.NEVER)
        return tier


class TestRenderForeground:
    """Tests for render_foreground on each tier."""

    def test_truecolor_on_each_tier(self, resolver_for) -> None:
        red = Color.from_rgb(255, 0, 0)
        assert render_foreground(red, resolver_for(ColorTier.TRUE_COLOR)) == "38;2;255;0;0"
        assert render_foreground(red, resolver_for(ColorTier.ANSI_256)) == "38;5;196"
        assert render_foreground(red, resolver_for(ColorTier.ANSI_16)) == "91"

    def test_truecolor_on_none_keeps_full_fidelity(self, resolver_for) -> None:
        red = Color.from_rgb(255, 0, 0)
        assert render_foreground(red, resolver_for(ColorTier.NONE)) == "38;2;255;0;0"

    def test_indexed_on_each_tier(self, resolver_for) -> None:
        gray = Color.from_256(232)
        assert render_foreground(gray, resolver_for(ColorTier.TRUE_COLOR)) == "38;5;232"
        assert render_foreground(gray, resolver_for(ColorTier.ANSI_256)) == "38;5;232"
        assert render_foreground(gray, resolver_for(ColorTier.ANSI_16)) == "30"
        assert render_foreground(gray, resolver_for(ColorTier.NONE)) == "38;5;232"

    @pytest.mark.parametrize("tier", list(ColorTier))
    def test_named_colors_are_fixed(self, resolver_for, tier: ColorTier) -> None:
        resolver = resolver_for(tier)
        assert render_foreground(Color.YELLOW, resolver) == "33"
        assert render_foreground(Color.BRIGHT_BLUE, resolver) == "94"

    def test_forced_on_without_terminal_degrades_to_16(self, resolver_for) -> None:
        resolver = resolver_for(ColorTier.NONE)
        resolver.set_override(Override.ALWAYS)
        assert render_foreground(Color.from_rgb(255, 0, 0), resolver) == "91"

    def test_override_applies_to_later_renders(self, resolver_for) -> None:
        resolver = resolver_for(ColorTier.ANSI_256)
        color = Color.from_rgb(0, 0, 0)
        assert render_foreground(color, resolver) == "38;5;16"
        resolver.set_override(Override.NEVER)
        assert render_foreground(color, resolver) == "38;2;0;0;0"

    def test_uses_process_resolver_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FORCE_COLOR", "1")
        capability.refresh_detection()
        assert render_foreground(Color.from_rgb(255, 0, 0)) == "91"


class TestRenderBackground:
    """Tests for render_background on each tier."""

    def test_truecolor_on_each_tier(self, resolver_for) -> None:
        red = Color.from_rgb(255, 0, 0)
        assert render_background(red, resolver_for(ColorTier.TRUE_COLOR)) == "48;2;255;0;0"
        assert render_background(red, resolver_for(ColorTier.ANSI_256)) == "48;5;196"
        assert render_background(red, resolver_for(ColorTier.ANSI_16)) == "101"

    def test_named(self, resolver_for) -> None:
        assert render_background(Color.BLACK, resolver_for(ColorTier.ANSI_256)) == "40"
        assert render_background(Color.BRIGHT_WHITE, resolver_for(ColorTier.ANSI_16)) == "107"


class TestSgrHelpers:
    """Tests for sgr_params, sgr and colorize."""

    def test_sgr_params_combines(self, resolver_for) -> None:
        resolver = resolver_for(ColorTier.ANSI_16)
        assert sgr_params(Color.RED, Color.BLUE, resolver) == "31;44"
        assert sgr_params(fg=Color.RED, resolver=resolver) == "31"
        assert sgr_params(bg=Color.BLUE, resolver=resolver) == "44"
        assert sgr_params(resolver=resolver) == ""

    def test_sgr(self) -> None:
        assert sgr("31;44") == "\x1b[31;44m"

    def test_colorize(self, resolver_for) -> None:
        resolver = resolver_for(ColorTier.ANSI_256)
        result = colorize("hi", fg=Color.from_rgb(255, 0, 0), bg=Color.BLACK, resolver=resolver)
        assert result == "\x1b[38;5;196;40mhi\x1b[0m"

    def test_colorize_without_color_support(self, resolver_for) -> None:
        assert colorize("hi", fg=Color.RED, resolver=resolver_for(ColorTier.NONE)) == "hi"

    def test_colorize_forced_off(self, resolver_for) -> None:
        resolver = resolver_for(ColorTier.TRUE_COLOR)
        resolver.set_override(Override.NEVER)
        assert colorize("hi", fg=Color.RED, resolver=resolver) == "hi"

    def test_colorize_without_colors(self, resolver_for) -> None:
        assert colorize("hi", resolver=resolver_for(ColorTier.TRUE_COLOR)) == "hi"


class TestSingleTierPerCall:
    """A concurrent override change never mixes tiers within one render."""

    @pytest.fixture
    def flipping(self) -> FlippingResolver:
        return FlippingResolver(stream=FakeStream(), environ={"FORCE_COLOR": "1"})

    def test_colorize_uses_one_tier(self, flipping: FlippingResolver) -> None:
        result = colorize("hi", fg=Color.from_rgb(1, 2, 3), resolver=flipping)
        assert result == "\x1b[30mhi\x1b[0m"

    def test_sgr_params_renders_both_sides_on_one_tier(self, flipping: FlippingResolver) -> None:
        red = Color.from_rgb(255, 0, 0)
        assert sgr_params(red, red, flipping) == "91;101"
        # The override change is visible to the next call
        assert sgr_params(red, red, flipping) == "38;2;255;0;0;48;2;255;0;0"
