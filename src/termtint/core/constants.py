"""Shared constants for color rendering and capability detection."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

# SGR bases for the 16 named colors
FG_BASE = 30          # 30-37
BG_BASE = 40          # 40-47
FG_BRIGHT_BASE = 90   # 90-97
BG_BRIGHT_BASE = 100  # 100-107

# Extended color introducers
FG_EXTENDED = 38
BG_EXTENDED = 48
EXTENDED_256 = 5      # 38;5;n
EXTENDED_RGB = 2      # 38;2;r;g;b

# Reference RGB for the 16 named colors (xterm defaults), in declaration order.
# Nearest-color searches break ties by position in this table.
PALETTE_16: tuple[tuple[int, int, int], ...] = (
    (0, 0, 0),        # 0 - Black
    (205, 0, 0),      # 1 - Red
    (0, 205, 0),      # 2 - Green
    (205, 205, 0),    # 3 - Yellow
    (0, 0, 238),      # 4 - Blue
    (205, 0, 205),    # 5 - Magenta
    (0, 205, 205),    # 6 - Cyan
    (229, 229, 229),  # 7 - White
    (127, 127, 127),  # 8 - Bright Black
    (255, 0, 0),      # 9 - Bright Red
    (0, 255, 0),      # 10 - Bright Green
    (255, 255, 0),    # 11 - Bright Yellow
    (92, 92, 255),    # 12 - Bright Blue
    (255, 0, 255),    # 13 - Bright Magenta
    (0, 255, 255),    # 14 - Bright Cyan
    (255, 255, 255),  # 15 - Bright White
)

# 256-color palette layout
CUBE_START = 16
GRAY_START = 232
CUBE_STEPS: tuple[int, ...] = (0x00, 0x5F, 0x87, 0xAF, 0xD7, 0xFF)
GRAY_BASE = 8
GRAY_STEP = 10

# Canonical names, in palette order
COLOR_NAMES: tuple[str, ...] = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
    "bright black",
    "bright red",
    "bright green",
    "bright yellow",
    "bright blue",
    "bright magenta",
    "bright cyan",
    "bright white",
)

# Extra spellings accepted by name parsing
COLOR_ALIASES = {
    "purple": 5,
}

