"""Duplicate tile detection and tilemap compaction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from .tiles import EncodedTile


@dataclass
class Reduction:
    unique_count: int
    index_map: List[int]
    duplicate_count: int

    @property
    def total_count(self) -> int:
        return self.unique_count + self.duplicate_count


def reduce_duplicates(tiles: List[EncodedTile]) -> Reduction:
    """Flag repeated tiles and build the compacted tilemap.

    The tiles are walked once in scan order. Each tile that has not been
    flagged yet is the canonical copy of its content: it takes the next free
    slot in the final tile array, and every later tile with identical rows is
    flagged as a duplicate and pointed at that same slot. A flagged tile does
    not get a slot of its own, so each canonical slot is its position minus
    the number of duplicates seen before it.

    Flags are written into ``tiles`` in place. Flags left over from an
    earlier reduction are cleared first, so reducing a grid twice gives the
    same result.
    """

    for encoded in tiles:
        encoded.duplicate = False

    count = len(tiles)
    index_map = list(range(count))
    previous_duplicates = 0
    duplicate_count = 0

    for tile in range(count):
        if tiles[tile].duplicate:
            previous_duplicates += 1
            continue

        index_map[tile] = tile - previous_duplicates

        for checktile in range(tile + 1, count):
            if tiles[checktile].duplicate:
                continue
            if tiles[tile].same_pixels(tiles[checktile]):
                tiles[checktile].duplicate = True
                duplicate_count += 1
                index_map[checktile] = index_map[tile]

    return Reduction(
        unique_count=count - duplicate_count,
        index_map=index_map,
        duplicate_count=duplicate_count,
    )
