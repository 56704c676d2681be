"""Pytest configuration: isolated environment and capability state."""

from typing import Callable

import pytest

from termtint.control import capability
from termtint.control.capability import COLOR_ENV_VARS, CapabilityResolver, ColorTier


class FakeStream:
    """Stand-in for an output stream with a controllable isatty()."""

    def __init__(self, tty: bool = False, closed: bool = False):
        self.tty = tty
        self.closed = closed

    def isatty(self) -> bool:
        if self.closed:
            raise ValueError("I/O operation on closed file")
        return self.tty

    def write(self, text: str) -> int:
        return len(text)


# Environments that make detection land on each tier for a non-tty stream
TIER_ENVIRONMENTS: dict[ColorTier, dict[str, str]] = {
    ColorTier.NONE: {},
    ColorTier.ANSI_16: {"FORCE_COLOR": "1"},
    ColorTier.ANSI_256: {"FORCE_COLOR": "2"},
    ColorTier.TRUE_COLOR: {"FORCE_COLOR": "3"},
}


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove color-related variables so the host terminal cannot leak in."""
    for name in COLOR_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def fresh_default_resolver(monkeypatch: pytest.MonkeyPatch) -> None:
    """Give every test its own process-wide resolver."""
    monkeypatch.setattr(capability, "_default_resolver", None)


@pytest.fixture
def resolver_for() -> Callable[[ColorTier], CapabilityResolver]:
    """Factory for a resolver whose detection yields the given tier."""
    def make(tier: ColorTier) -> CapabilityResolver:
        return CapabilityResolver(stream=FakeStream(), environ=dict(TIER_ENVIRONMENTS[tier]))
    return make
