"""Game Boy 2bpp tile encoding.

A tile is an 8x8 block of 2-bit color indices. On the device every pixel row
takes two bytes: the first holds the low bit of each of the 8 pixels and the
second holds the high bit, both with the leftmost pixel in the most
significant position. Example for the row ``[1, 0, 3, 0, 2, 1, 0, 3]``::

    low bits   1 0 1 0 0 1 0 1  -> 0xA5
    high bits  0 0 1 0 1 0 0 1  -> 0x29
    row value  0xA529
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Sequence

from .errors import TileRangeError

TILE_SIZE = 8
TILE_PIXELS = TILE_SIZE * TILE_SIZE
TILE_BYTES = TILE_SIZE * 2
# Unique tiles the DMG background can address at once.
VRAM_TILE_LIMIT = 256


@dataclass
class EncodedTile:
    """One tile in device format: 8 rows of 16 bits plus a duplicate flag."""

    rows: List[int] = field(default_factory=lambda: [0] * TILE_SIZE)
    duplicate: bool = False

    def same_pixels(self, other: "EncodedTile") -> bool:
        for mine, theirs in zip(self.rows, other.rows):
            if mine != theirs:
                return False
        return True

    def to_bytes(self) -> bytes:
        data = bytearray()
        for row in self.rows:
            data.append(row >> 8)
            data.append(row & 0xFF)
        return bytes(data)


def encode_tile(pixels: Sequence[int]) -> EncodedTile:
    """Pack 64 row-major color indices into an :class:`EncodedTile`.

    Only the two lowest bits of each value are used.
    """

    if len(pixels) != TILE_PIXELS:
        raise TileRangeError(
            f"A tile needs exactly {TILE_PIXELS} pixels, got {len(pixels)}"
        )

    tile = EncodedTile()
    column = 1
    row = 0
    for value in pixels:
        low = value & 0x1
        high = (value >> 1) & 0x1
        tile.rows[row] |= low << (16 - column)
        tile.rows[row] |= high << (8 - column)

        if column == TILE_SIZE:
            column = 1
            row += 1
        else:
            column += 1

    return tile
