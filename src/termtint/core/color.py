"""Color representation and capability-aware degradation."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from termtint.control.capability import ColorTier
from termtint.core.constants import (
    BG_BASE,
    BG_BRIGHT_BASE,
    BG_EXTENDED,
    COLOR_ALIASES,
    COLOR_NAMES,
    EXTENDED_256,
    EXTENDED_RGB,
    FG_BASE,
    FG_BRIGHT_BASE,
    FG_EXTENDED,
)
from termtint.core.palette import (
    decode_indexed_rgb,
    nearest_16,
    nearest_256,
)

_HEX_RE = re.compile(r"#?([0-9a-fA-F]{6}|[0-9a-fA-F]{3})")


class ColorMode(Enum):
    """Color variant, from poorest to richest."""
    STANDARD_16 = "16"      # Named colors (SGR 30-37, 40-47, 90-97, 100-107)
    EXTENDED_256 = "256"    # Indexed palette (SGR 38;5;n, 48;5;n)
    TRUE_COLOR = "rgb"      # 24-bit color (SGR 38;2;r;g;b, 48;2;r;g;b)


@dataclass(frozen=True)
class Color:
    """
    An immutable logical color.

    The variant is given by ``mode``:

    - STANDARD_16: ``value`` is the palette position 0-15 of a named color
    - EXTENDED_256: ``value`` is a 256-color index
    - TRUE_COLOR: ``value`` is an ``(r, g, b)`` tuple

    Every Color renders on every tier. Richer colors are degraded to the
    nearest representable one and rendering never fails.
    """
    mode: ColorMode
    value: int | tuple[int, int, int]

    # Named colors (palette positions 0-15)
    BLACK: ClassVar["Color"]
    RED: ClassVar["Color"]
    GREEN: ClassVar["Color"]
    YELLOW: ClassVar["Color"]
    BLUE: ClassVar["Color"]
    MAGENTA: ClassVar["Color"]
    CYAN: ClassVar["Color"]
    WHITE: ClassVar["Color"]
    BRIGHT_BLACK: ClassVar["Color"]
    BRIGHT_RED: ClassVar["Color"]
    BRIGHT_GREEN: ClassVar["Color"]
    BRIGHT_YELLOW: ClassVar["Color"]
    BRIGHT_BLUE: ClassVar["Color"]
    BRIGHT_MAGENTA: ClassVar["Color"]
    BRIGHT_CYAN: ClassVar["Color"]
    BRIGHT_WHITE: ClassVar["Color"]

    @classmethod
    def named(cls, index: int) -> "Color":
        """Create one of the 16 named colors from its palette position."""
        if not 0 <= index <= 15:
            raise ValueError(f"Named color index must be 0-15, got {index}")
        return cls(ColorMode.STANDARD_16, index)

    @classmethod
    def from_sgr(cls, code: int) -> "Color":
        """Create a Color from an SGR code (30-37, 40-47, 90-97, 100-107)."""
        if FG_BASE <= code <= FG_BASE + 7:
            return cls(ColorMode.STANDARD_16, code - FG_BASE)
        elif BG_BASE <= code <= BG_BASE + 7:
            return cls(ColorMode.STANDARD_16, code - BG_BASE)
        elif FG_BRIGHT_BASE <= code <= FG_BRIGHT_BASE + 7:
            return cls(ColorMode.STANDARD_16, code - FG_BRIGHT_BASE + 8)
        elif BG_BRIGHT_BASE <= code <= BG_BRIGHT_BASE + 7:
            return cls(ColorMode.STANDARD_16, code - BG_BRIGHT_BASE + 8)
        else:
            raise ValueError(f"Invalid SGR color code: {code}")

    @classmethod
    def from_256(cls, index: int) -> "Color":
        """Create a Color from a 256-color index."""
        if not 0 <= index <= 255:
            raise ValueError(f"256-color index must be 0-255, got {index}")
        return cls(ColorMode.EXTENDED_256, index)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB values."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(ColorMode.TRUE_COLOR, (r, g, b))

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Create a Color from ``#RRGGBB`` or ``#RGB`` (leading ``#`` optional)."""
        match = _HEX_RE.fullmatch(text.strip())
        if not match:
            raise ValueError(f"Invalid hex color: {text!r}")
        digits = match.group(1)
        if len(digits) == 3:
            # Short form: F0F -> FF00FF
            digits = "".join(ch * 2 for ch in digits)
        return cls.from_rgb(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    @classmethod
    def from_name(cls, name: str) -> "Color":
        """
        Look up a named color, case-insensitively.

        Bright variants may be written "bright red", "bright_red" or
        "bright-red", and "purple" is accepted for magenta. Unrecognized
        names yield WHITE instead of raising.
        """
        key = " ".join(name.strip().lower().replace("_", " ").replace("-", " ").split())
        if key in COLOR_ALIASES:
            return cls(ColorMode.STANDARD_16, COLOR_ALIASES[key])
        try:
            return cls(ColorMode.STANDARD_16, COLOR_NAMES.index(key))
        except ValueError:
            return cls.WHITE

    @classmethod
    def parse(cls, text: str) -> "Color":
        """
        Parse a free-form color description without ever failing.

        Accepts:
            - 256-color indices: "0" through "255"
            - Hex colors: "#FF00FF", "#F0F"
            - Names: anything from_name() accepts

        Anything else yields WHITE, like from_name().
        """
        text = text.strip()
        if text.isdecimal() and len(text) <= 3 and int(text) <= 255:
            return cls.from_256(int(text))
        if text.startswith("#"):
            try:
                return cls.from_hex(text)
            except ValueError:
                return cls.WHITE
        return cls.from_name(text)

    @property
    def name(self) -> str | None:
        """Canonical name for the 16 named colors, None otherwise."""
        if self.mode == ColorMode.STANDARD_16:
            assert isinstance(self.value, int)
            return COLOR_NAMES[self.value]
        return None

    @property
    def rgb(self) -> tuple[int, int, int]:
        """RGB triple for this color (reference values for named colors)."""
        if self.mode == ColorMode.TRUE_COLOR:
            assert isinstance(self.value, tuple)
            return self.value
        assert isinstance(self.value, int)
        return decode_indexed_rgb(self.value)

    def to_16(self) -> "Color":
        """Nearest named color. Named colors are returned unchanged."""
        if self.mode == ColorMode.STANDARD_16:
            return self
        elif self.mode == ColorMode.EXTENDED_256:
            assert isinstance(self.value, int)
            return degrade_indexed_to_16(self.value)
        else:  # TRUE_COLOR
            assert isinstance(self.value, tuple)
            return degrade_truecolor_to_16(*self.value)

    def to_256(self) -> "Color":
        """Nearest 256-palette color. Named and indexed colors are unchanged."""
        if self.mode == ColorMode.TRUE_COLOR:
            assert isinstance(self.value, tuple)
            return degrade_truecolor_to_256(*self.value)
        return self

    def degrade(self, tier: ColorTier) -> "Color":
        """
        Best representation of this color for a capability tier.

        On ColorTier.NONE the color is returned unchanged. Whether color is
        emitted at all is decided by the capability resolver, not here.
        """
        if tier == ColorTier.ANSI_16:
            return self.to_16()
        elif tier == ColorTier.ANSI_256:
            return self.to_256()
        return self

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for foreground color, at full fidelity."""
        if self.mode == ColorMode.STANDARD_16:
            assert isinstance(self.value, int)
            if self.value < 8:
                return str(FG_BASE + self.value)
            else:
                return str(FG_BRIGHT_BASE + self.value - 8)
        elif self.mode == ColorMode.EXTENDED_256:
            return f"{FG_EXTENDED};{EXTENDED_256};{self.value}"
        else:  # TRUE_COLOR
            assert isinstance(self.value, tuple)
            r, g, b = self.value
            return f"{FG_EXTENDED};{EXTENDED_RGB};{r};{g};{b}"

    def to_sgr_bg(self) -> str:
        """Return SGR parameters for background color, at full fidelity."""
        if self.mode == ColorMode.STANDARD_16:
            assert isinstance(self.value, int)
            if self.value < 8:
                return str(BG_BASE + self.value)
            else:
                return str(BG_BRIGHT_BASE + self.value - 8)
        elif self.mode == ColorMode.EXTENDED_256:
            return f"{BG_EXTENDED};{EXTENDED_256};{self.value}"
        else:  # TRUE_COLOR
            assert isinstance(self.value, tuple)
            r, g, b = self.value
            return f"{BG_EXTENDED};{EXTENDED_RGB};{r};{g};{b}"


def degrade_indexed_to_16(index: int) -> Color:
    """Nearest named color for a 256-color index."""
    return Color(ColorMode.STANDARD_16, nearest_16(*decode_indexed_rgb(index)))


def degrade_truecolor_to_16(r: int, g: int, b: int) -> Color:
    """Nearest named color for an RGB triple."""
    return Color(ColorMode.STANDARD_16, nearest_16(r, g, b))


def degrade_truecolor_to_256(r: int, g: int, b: int) -> Color:
    """Nearest 256-palette color for an RGB triple."""
    return Color(ColorMode.EXTENDED_256, nearest_256(r, g, b))


# Initialize class-level color constants
Color.BLACK = Color(ColorMode.STANDARD_16, 0)
Color.RED = Color(ColorMode.STANDARD_16, 1)
Color.GREEN = Color(ColorMode.STANDARD_16, 2)
Color.YELLOW = Color(ColorMode.STANDARD_16, 3)
Color.BLUE = Color(ColorMode.STANDARD_16, 4)
Color.MAGENTA = Color(ColorMode.STANDARD_16, 5)
Color.CYAN = Color(ColorMode.STANDARD_16, 6)
Color.WHITE = Color(ColorMode.STANDARD_16, 7)
Color.BRIGHT_BLACK = Color(ColorMode.STANDARD_16, 8)
Color.BRIGHT_RED = Color(ColorMode.STANDARD_16, 9)
Color.BRIGHT_GREEN = Color(ColorMode.STANDARD_16, 10)
Color.BRIGHT_YELLOW = Color(ColorMode.STANDARD_16, 11)
Color.BRIGHT_BLUE = Color(ColorMode.STANDARD_16, 12)
Color.BRIGHT_MAGENTA = Color(ColorMode.STANDARD_16, 13)
Color.BRIGHT_CYAN = Color(ColorMode.STANDARD_16, 14)
Color.BRIGHT_WHITE = Color(ColorMode.STANDARD_16, 15)
