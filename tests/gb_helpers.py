from pathlib import Path
import sys
from typing import List, Sequence

sys.path.append(str(Path(__file__).resolve().parents[1] / "simple_gb_converter/src"))

from PIL import Image

GB_PALETTE = [
    0xE0, 0xF8, 0xD0,
    0x88, 0xC0, 0x70,
    0x34, 0x68, 0x56,
    0x08, 0x18, 0x20,
]


def solid_tile(color: int) -> List[int]:
    return [color] * 64


def decode_tile(data: bytes) -> List[int]:
    """Rebuild 64 color indices from 16 bytes of 2bpp tile data."""
    pixels: List[int] = []
    for row in range(8):
        low = data[row * 2]
        high = data[row * 2 + 1]
        for bit in range(7, -1, -1):
            pixels.append(((low >> bit) & 1) | (((high >> bit) & 1) << 1))
    return pixels


def image_from_tiles(tiles: Sequence[Sequence[int]], tile_width: int) -> Image.Image:
    """Lay out 8x8 tiles row by row into a 4-color palette image."""
    tile_height = len(tiles) // tile_width
    width, height = tile_width * 8, tile_height * 8
    pixels = bytearray(width * height)
    for index, tile in enumerate(tiles):
        col, row = index % tile_width, index // tile_width
        for y in range(8):
            for x in range(8):
                pixels[(row * 8 + y) * width + col * 8 + x] = tile[y * 8 + x]
    image = Image.frombytes("P", (width, height), bytes(pixels))
    image.putpalette(GB_PALETTE)
    return image


class ListPixelSource:
    def __init__(self, tiles: Sequence[Sequence[int]], tile_width: int):
        self.tiles = tiles
        self.tile_width = tile_width
        self.reads: List[tuple] = []

    def read_tile(self, col: int, row: int) -> Sequence[int]:
        self.reads.append((col, row))
        return self.tiles[row * self.tile_width + col]
