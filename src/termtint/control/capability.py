"""Terminal color capability detection and the process-wide override.

The resolver answers two questions for every render: which color tier is
active, and whether to emit color at all. Three layers decide it, highest
first: the manual override, environment/stream detection, and the
conservative default of no color.

Example:
    >>> from termtint.control import capability
    >>> capability.set_override(capability.Override.ALWAYS)
    >>> capability.current_tier() >= capability.ColorTier.ANSI_16
    True
"""

from __future__ import annotations

import logging
import os
import sys
import threading
from enum import Enum, IntEnum
from typing import Mapping, TextIO

logger = logging.getLogger(__name__)

# Environment signals consulted by detection
ENV_NO_COLOR = "NO_COLOR"
ENV_CLICOLOR = "CLICOLOR"
ENV_CLICOLOR_FORCE = "CLICOLOR_FORCE"
ENV_FORCE_COLOR = "FORCE_COLOR"
ENV_COLORTERM = "COLORTERM"
ENV_TERM = "TERM"

COLOR_ENV_VARS: tuple[str, ...] = (
    ENV_NO_COLOR,
    ENV_CLICOLOR,
    ENV_CLICOLOR_FORCE,
    ENV_FORCE_COLOR,
    ENV_COLORTERM,
    ENV_TERM,
)

_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


class ColorTier(IntEnum):
    """Richest color representation an output destination accepts."""
    NONE = 0
    ANSI_16 = 1
    ANSI_256 = 2
    TRUE_COLOR = 3


class Override(Enum):
    """Manual coloring override."""
    AUTO = "auto"      # Use detection
    ALWAYS = "always"  # Force color on
    NEVER = "never"    # Force color off

    @classmethod
    def parse(cls, value: str) -> Override:
        """Parse a command-line style value such as ``always`` or ``off``."""
        normalized = value.strip().lower()
        if normalized in ("auto", "detect"):
            return cls.AUTO
        if normalized in ("always", "on", "yes", "true", "force"):
            return cls.ALWAYS
        if normalized in ("never", "off", "no", "false", "none"):
            return cls.NEVER
        raise ValueError(f"Invalid color override: {value!r}")


def _is_tty(stream: object) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except (OSError, ValueError):
        # Closed or detached stream
        return False


def _richness_hint(environ: Mapping[str, str]) -> ColorTier:
    """Best tier advertised by COLORTERM / TERM, at least ANSI_16."""
    colorterm = environ.get(ENV_COLORTERM, "").lower()
    if "truecolor" in colorterm or "24bit" in colorterm:
        return ColorTier.TRUE_COLOR
    term = environ.get(ENV_TERM, "").lower()
    if "truecolor" in term or "direct" in term:
        return ColorTier.TRUE_COLOR
    if "256color" in term:
        return ColorTier.ANSI_256
    return ColorTier.ANSI_16


def _force_floor(environ: Mapping[str, str]) -> ColorTier | None:
    """
    Minimum tier requested by CLICOLOR_FORCE / FORCE_COLOR, or None.

    FORCE_COLOR follows the common level convention: 1 = 16 colors,
    2 = 256 colors, 3 = true color. Any other truthy value means 16 colors.
    """
    floor: ColorTier | None = None
    force = environ.get(ENV_CLICOLOR_FORCE)
    if force is not None and force.strip().lower() not in _FALSE_VALUES:
        floor = ColorTier.ANSI_16
    force = environ.get(ENV_FORCE_COLOR)
    if force is not None and force.strip().lower() not in _FALSE_VALUES:
        level = {"2": ColorTier.ANSI_256, "3": ColorTier.TRUE_COLOR}.get(
            force.strip(), ColorTier.ANSI_16
        )
        floor = level if floor is None else max(floor, level)
    return floor


def detect_tier(
    environ: Mapping[str, str] | None = None,
    stream: TextIO | None = None,
) -> ColorTier:
    """
    Detect the color tier from the environment and the output stream.

    Precedence: NO_COLOR beats a force-color request (CLICOLOR_FORCE or
    FORCE_COLOR), which beats CLICOLOR=0 and the interactive-terminal
    check. When nothing applies the result is ColorTier.NONE.

    Args:
        environ: Environment mapping (default: os.environ)
        stream: Output stream to inspect (default: sys.stdout)

    Returns:
        The detected ColorTier. Never raises.
    """
    if environ is None:
        environ = os.environ
    if stream is None:
        stream = sys.stdout

    if environ.get(ENV_NO_COLOR):
        return ColorTier.NONE

    floor = _force_floor(environ)
    if floor is not None:
        return max(floor, _richness_hint(environ))

    if environ.get(ENV_CLICOLOR, "").strip() == "0":
        return ColorTier.NONE

    if _is_tty(stream):
        if environ.get(ENV_TERM, "").lower() == "dumb":
            return ColorTier.NONE
        return _richness_hint(environ)

    return ColorTier.NONE


class CapabilityResolver:
    """
    Thread-safe capability state: override, cached detection, VT flag.

    Detection runs lazily on the first query and is cached until
    refresh_detection() is called. All state sits behind one lock, so each
    operation is atomic with respect to the others.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        environ: Mapping[str, str] | None = None,
    ):
        self._stream = stream
        self._environ = environ
        self._lock = threading.Lock()
        self._override = Override.AUTO
        self._detected: ColorTier | None = None
        self._virtual_terminal = sys.platform != "win32"

    def _detect_locked(self) -> ColorTier:
        if self._detected is None:
            self._detected = detect_tier(self._environ, self._stream)
            logger.debug("Detected color tier: %s", self._detected.name)
        return self._detected

    @property
    def override(self) -> Override:
        """Current manual override."""
        with self._lock:
            return self._override

    def set_override(self, value: Override | bool) -> None:
        """Force color on or off, or return to detection with Override.AUTO."""
        if isinstance(value, bool):
            value = Override.ALWAYS if value else Override.NEVER
        with self._lock:
            self._override = value
        logger.debug("Color override set to %s", value.value)

    def unset_override(self) -> None:
        """Return to automatic detection."""
        self.set_override(Override.AUTO)

    def detected_tier(self) -> ColorTier:
        """Tier found by detection, ignoring the override."""
        with self._lock:
            return self._detect_locked()

    def current_tier(self) -> ColorTier:
        """
        Resolved tier for rendering decisions.

        NEVER yields NONE whatever was detected. ALWAYS yields the detected
        tier but no lower than ANSI_16. AUTO yields the detected tier.
        """
        with self._lock:
            detected = self._detect_locked()
            if self._override is Override.NEVER:
                return ColorTier.NONE
            if self._override is Override.ALWAYS:
                return max(detected, ColorTier.ANSI_16)
            return detected

    def should_colorize(self) -> bool:
        """True if color codes should be emitted at all."""
        return self.current_tier() > ColorTier.NONE

    def refresh_detection(self, stream: TextIO | None = None) -> ColorTier:
        """
        Re-run detection, e.g. after stdio has been redirected.

        Args:
            stream: New stream to inspect from now on (default: keep current)

        Returns:
            The newly detected tier.
        """
        with self._lock:
            if stream is not None:
                self._stream = stream
            self._detected = None
            return self._detect_locked()

    def set_virtual_terminal(self, enabled: bool) -> None:
        """Record whether legacy-console ANSI interpretation is enabled."""
        with self._lock:
            self._virtual_terminal = enabled
        logger.debug("Virtual terminal processing %s", "enabled" if enabled else "disabled")

    def virtual_terminal_enabled(self) -> bool:
        """Whether legacy-console ANSI interpretation was requested."""
        with self._lock:
            return self._virtual_terminal


_default_resolver: CapabilityResolver | None = None
_default_lock = threading.Lock()


def get_resolver() -> CapabilityResolver:
    """Return the process-wide resolver, creating it on first use."""
    global _default_resolver
    if _default_resolver is None:
        with _default_lock:
            if _default_resolver is None:
                _default_resolver = CapabilityResolver()
    return _default_resolver


def set_override(value: Override | bool) -> None:
    """Set the process-wide override."""
    get_resolver().set_override(value)


def unset_override() -> None:
    """Return the process-wide resolver to automatic detection."""
    get_resolver().unset_override()


def current_tier() -> ColorTier:
    """Resolved process-wide color tier."""
    return get_resolver().current_tier()


def should_colorize() -> bool:
    """Whether the process should emit color codes."""
    return get_resolver().should_colorize()


def refresh_detection(stream: TextIO | None = None) -> ColorTier:
    """Re-run process-wide detection."""
    return get_resolver().refresh_detection(stream)


def set_virtual_terminal(enabled: bool) -> None:
    """Record the process-wide legacy-console flag."""
    get_resolver().set_virtual_terminal(enabled)


def virtual_terminal_enabled() -> bool:
    """Process-wide legacy-console flag."""
    return get_resolver().virtual_terminal_enabled()
