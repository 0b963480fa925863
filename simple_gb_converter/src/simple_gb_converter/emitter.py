"""Serialize deduplicated tiles and the tilemap as bytes or C array text."""

from __future__ import annotations

from typing import Iterator, List, Sequence

from .errors import TileRangeError
from .tiles import EncodedTile


def iter_unique_tiles(tiles: Sequence[EncodedTile]) -> Iterator[EncodedTile]:
    for tile in tiles:
        if not tile.duplicate:
            yield tile


def emit_tile_data(tiles: Sequence[EncodedTile]) -> bytes:
    """Return 16 bytes per non-duplicate tile, in scan order."""

    return b"".join(tile.to_bytes() for tile in iter_unique_tiles(tiles))


def emit_index_map(index_map: Sequence[int]) -> bytes:
    """Return the tilemap as one byte per tile.

    The device tilemap holds 8-bit indices, so an entry above 0xFF cannot be
    stored and raises :class:`TileRangeError`.
    """

    data = bytearray()
    for position, value in enumerate(index_map):
        if not 0 <= value <= 0xFF:
            raise TileRangeError(
                f"Tilemap entry {position} points at tile {value}, "
                "which does not fit in a byte"
            )
        data.append(value)
    return bytes(data)


def hex_token(value: int) -> str:
    return f"0x{value:02X}"


def format_tile_data(tiles: Sequence[EncodedTile]) -> str:
    """Render the unique tiles as the body of a C byte array, one tile per line."""

    lines: List[str] = []
    for tile in iter_unique_tiles(tiles):
        tokens = [hex_token(byte) for byte in tile.to_bytes()]
        lines.append("\t" + ", ".join(tokens))
    if not lines:
        return ""
    return ",\n".join(lines) + "\n"


def format_index_map(index_map: Sequence[int], tile_width: int) -> str:
    """Render the tilemap as the body of a C byte array.

    A line break follows every ``tile_width`` entries so the text has the same
    rows and columns as the image.
    """

    if tile_width <= 0:
        raise TileRangeError(f"Tilemap width must be positive, got {tile_width}")

    rows: List[str] = []
    for start in range(0, len(index_map), tile_width):
        row = index_map[start : start + tile_width]
        rows.append(", ".join(hex_token(value) for value in row))
    if not rows:
        return ""
    return "\t" + ",\n\t".join(rows)
