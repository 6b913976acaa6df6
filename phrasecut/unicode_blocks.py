"""Unicode block lookup used for the character-class features.

``BLOCK_STARTS`` lists the first code point of every block in the Unicode
Character Database's ``Blocks.txt`` (Unicode 13.0), in ascending order. The
ordinal of a character is the number of block starts that are less than or
equal to its code point, so ``U+0000..U+007F`` is block 1 (``"001"``),
Hiragana is block 108 and the CJK Unified Ideographs are block 120.

The trained weight tables were produced against this exact table; inserting
or removing an entry shifts every ordinal after it.
"""
from __future__ import annotations

from bisect import bisect_left
from typing import List

__all__ = ["BLOCK_STARTS", "unicode_block_index", "block_feature"]

BLOCK_STARTS: List[int] = [
    # Basic Multilingual Plane
    0x0000, 0x0080, 0x0100, 0x0180, 0x0250, 0x02B0, 0x0300, 0x0370,
    0x0400, 0x0500, 0x0530, 0x0590, 0x0600, 0x0700, 0x0750, 0x0780,
    0x07C0, 0x0800, 0x0840, 0x0860, 0x08A0, 0x0900, 0x0980, 0x0A00,
    0x0A80, 0x0B00, 0x0B80, 0x0C00, 0x0C80, 0x0D00, 0x0D80, 0x0E00,
    0x0E80, 0x0F00, 0x1000, 0x10A0, 0x1100, 0x1200, 0x1380, 0x13A0,
    0x1400, 0x1680, 0x16A0, 0x1700, 0x1720, 0x1740, 0x1760, 0x1780,
    0x1800, 0x18B0, 0x1900, 0x1950, 0x1980, 0x19E0, 0x1A00, 0x1A20,
    0x1AB0, 0x1B00, 0x1B80, 0x1BC0, 0x1C00, 0x1C50, 0x1C80, 0x1C90,
    0x1CC0, 0x1CD0, 0x1D00, 0x1D80, 0x1DC0, 0x1E00, 0x1F00, 0x2000,
    0x2070, 0x20A0, 0x20D0, 0x2100, 0x2150, 0x2190, 0x2200, 0x2300,
    0x2400, 0x2440, 0x2460, 0x2500, 0x2580, 0x25A0, 0x2600, 0x2700,
    0x27C0, 0x27F0, 0x2800, 0x2900, 0x2980, 0x2A00, 0x2B00, 0x2C00,
    0x2C60, 0x2C80, 0x2D00, 0x2D30, 0x2D80, 0x2DE0, 0x2E00, 0x2E80,
    0x2F00, 0x2FF0, 0x3000, 0x3040, 0x30A0, 0x3100, 0x3130, 0x3190,
    0x31A0, 0x31C0, 0x31F0, 0x3200, 0x3300, 0x3400, 0x4DC0, 0x4E00,
    0xA000, 0xA490, 0xA4D0, 0xA500, 0xA640, 0xA6A0, 0xA700, 0xA720,
    0xA800, 0xA830, 0xA840, 0xA880, 0xA8E0, 0xA900, 0xA930, 0xA960,
    0xA980, 0xA9E0, 0xAA00, 0xAA60, 0xAA80, 0xAAE0, 0xAB00, 0xAB30,
    0xAB70, 0xABC0, 0xAC00, 0xD7B0, 0xD800, 0xDB80, 0xDC00, 0xE000,
    0xF900, 0xFB00, 0xFB50, 0xFE00, 0xFE10, 0xFE20, 0xFE30, 0xFE50,
    0xFE70, 0xFF00, 0xFFF0,
    # Supplementary planes
    0x10000, 0x10080, 0x10100, 0x10140, 0x10190, 0x101D0, 0x10280, 0x102A0,
    0x102E0, 0x10300, 0x10330, 0x10350, 0x10380, 0x103A0, 0x10400, 0x10450,
    0x10480, 0x104B0, 0x10500, 0x10530, 0x10600, 0x10800, 0x10840, 0x10860,
    0x10880, 0x108E0, 0x10900, 0x10920, 0x10980, 0x109A0, 0x10A00, 0x10A60,
    0x10A80, 0x10AC0, 0x10B00, 0x10B40, 0x10B60, 0x10B80, 0x10C00, 0x10C80,
    0x10D00, 0x10E60, 0x10E80, 0x10F00, 0x10F30, 0x10FB0, 0x10FE0, 0x11000,
    0x11080, 0x110D0, 0x11100, 0x11150, 0x11180, 0x111E0, 0x11200, 0x11280,
    0x112B0, 0x11300, 0x11400, 0x11480, 0x11580, 0x11600, 0x11660, 0x11680,
    0x11700, 0x11800, 0x118A0, 0x11900, 0x119A0, 0x11A00, 0x11A50, 0x11AC0,
    0x11C00, 0x11C70, 0x11D00, 0x11D60, 0x11EE0, 0x11FB0, 0x11FC0, 0x12000,
    0x12400, 0x12480, 0x13000, 0x13430, 0x14400, 0x16800, 0x16A40, 0x16AD0,
    0x16B00, 0x16E40, 0x16F00, 0x16FE0, 0x17000, 0x18800, 0x18B00, 0x18D00,
    0x1B000, 0x1B100, 0x1B130, 0x1B170, 0x1BC00, 0x1BCA0, 0x1D000, 0x1D100,
    0x1D200, 0x1D2E0, 0x1D300, 0x1D360, 0x1D400, 0x1D800, 0x1E000, 0x1E100,
    0x1E2C0, 0x1E800, 0x1E900, 0x1EC70, 0x1ED00, 0x1EE00, 0x1F000, 0x1F030,
    0x1F0A0, 0x1F100, 0x1F200, 0x1F300, 0x1F600, 0x1F650, 0x1F680, 0x1F700,
    0x1F780, 0x1F800, 0x1F900, 0x1FA00, 0x1FA70, 0x1FB00, 0x20000, 0x2A700,
    0x2B740, 0x2B820, 0x2CEB0, 0x2F800, 0x30000, 0xE0000, 0xE0100, 0xF0000,
    0x100000,
]


def unicode_block_index(ch: str) -> int:
    """
    Returns the ordinal of the Unicode block containing ``ch``.

    A code point that is itself a block start maps to its table index plus
    one; any other code point maps to its insertion point, i.e. the number of
    block starts strictly below it. Every code point therefore receives a
    valid ordinal, unassigned ranges included.

    Args:
        ch: A single character.

    Returns:
        The block ordinal, ``1`` for ASCII.
    """
    code = ord(ch)
    pos = bisect_left(BLOCK_STARTS, code)
    if pos < len(BLOCK_STARTS) and BLOCK_STARTS[pos] == code:
        return pos + 1
    return pos


def block_feature(ch: str) -> str:
    """Renders the block ordinal of ``ch`` as a zero-padded 3-digit code."""
    return f"{unicode_block_index(ch):03d}"
