"""Palette decoding and nearest-color search.

All searches use squared Euclidean distance in RGB space. The ordering is
the same as true Euclidean distance, without the square root.
"""

from termtint.core.constants import (
    CUBE_START,
    CUBE_STEPS,
    GRAY_BASE,
    GRAY_START,
    GRAY_STEP,
    PALETTE_16,
)

RGB = tuple[int, int, int]


def decode_indexed_rgb(index: int) -> RGB:
    """
    Return the RGB triple for a 256-color palette index.

    0-15 are the named colors, 16-231 the 6x6x6 cube and 232-255 the
    grayscale ramp.
    """
    if index < CUBE_START:
        return PALETTE_16[index]
    if index < GRAY_START:
        offset = index - CUBE_START
        return (
            CUBE_STEPS[offset // 36],
            CUBE_STEPS[(offset // 6) % 6],
            CUBE_STEPS[offset % 6],
        )
    level = GRAY_BASE + (index - GRAY_START) * GRAY_STEP
    return (level, level, level)


PALETTE_256: tuple[RGB, ...] = tuple(decode_indexed_rgb(i) for i in range(256))

# Cube and grayscale entries are searched before the 16 aliases, so an exact
# cube vertex maps back to its own index rather than to a named alias.
_SEARCH_ORDER_256: tuple[int, ...] = (*range(CUBE_START, 256), *range(CUBE_START))


def distance_sq(c1: RGB, c2: RGB) -> int:
    """Squared Euclidean distance between two RGB colors."""
    return (c1[0] - c2[0]) ** 2 + (c1[1] - c2[1]) ** 2 + (c1[2] - c2[2]) ** 2


def nearest_16(r: int, g: int, b: int) -> int:
    """Index (0-15) of the closest named color. Ties go to the earlier entry."""
    target = (r, g, b)
    best_index = 0
    best_distance = distance_sq(target, PALETTE_16[0])
    for index in range(1, len(PALETTE_16)):
        d = distance_sq(target, PALETTE_16[index])
        if d < best_distance:
            best_index = index
            best_distance = d
    return best_index


def nearest_256(r: int, g: int, b: int) -> int:
    """
    Index (0-255) of the closest 256-palette entry.

    Ties go to the lowest index among cube and grayscale entries. A named
    alias (0-15) wins only when it is strictly closer than all of them.
    """
    target = (r, g, b)
    best_index = CUBE_START
    best_distance = distance_sq(target, PALETTE_256[CUBE_START])
    for index in _SEARCH_ORDER_256[1:]:
        d = distance_sq(target, PALETTE_256[index])
        if d < best_distance:
            best_index = index
            best_distance = d
            if d == 0:
                break
    return best_index
