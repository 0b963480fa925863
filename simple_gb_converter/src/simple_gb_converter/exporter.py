"""Tile export pipeline: read tiles, encode, deduplicate and emit."""

# Reference: Game Boy background tiles (DMG)
# Usage                 | Address Range  | Notes
# ----------------------|----------------|-----------------------------------------
# Tile data             | 8000h-97FFh    | 384 tiles x 16 bytes, 256 addressable per map
# Background map 0      | 9800h-9BFFh    | 32x32 = 1024 bytes; tile numbers placed on screen
# Background map 1      | 9C00h-9FFFh    | 32x32 = 1024 bytes

from __future__ import annotations

import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Protocol, Sequence

from PIL import Image

from .dedupe import reduce_duplicates
from .emitter import emit_index_map, emit_tile_data, format_index_map, format_tile_data
from .errors import ConversionError, ImageValidationError, TileRangeError, VramBudgetWarning
from .tiles import TILE_SIZE, VRAM_TILE_LIMIT, EncodedTile, encode_tile

IMAGE_SIZE_MIN = TILE_SIZE
IMAGE_SIZE_MAX = 256
MAX_GRID_TILES = IMAGE_SIZE_MAX // TILE_SIZE
IMAGE_COLORS = 4


class PixelSource(Protocol):
    def read_tile(self, col: int, row: int) -> Sequence[int]:
        ...


class ImagePixelSource:
    """Read 8x8 tiles of palette indices out of a Pillow "P" mode image."""

    def __init__(self, image: Image.Image):
        if image.mode != "P":
            raise ImageValidationError(
                f"Image must be palette-indexed (mode P), got mode {image.mode}"
            )
        self.width, self.height = image.size
        self.tile_width = self.width // TILE_SIZE
        self.tile_height = self.height // TILE_SIZE
        self._pixels = image.tobytes()

    def read_tile(self, col: int, row: int) -> List[int]:
        if not (0 <= col < self.tile_width and 0 <= row < self.tile_height):
            raise TileRangeError(
                f"Tile ({col}, {row}) is outside the {self.tile_width}x{self.tile_height} grid"
            )
        pixels: List[int] = []
        for y in range(row * TILE_SIZE, (row + 1) * TILE_SIZE):
            offset = y * self.width + col * TILE_SIZE
            pixels.extend(self._pixels[offset : offset + TILE_SIZE])
        return pixels


@dataclass
class ExportResult:
    tile_data: bytes
    index_map: List[int]
    unique_tile_count: int
    duplicate_count: int
    tile_width: int
    tile_height: int
    tiles: List[EncodedTile] = field(default_factory=list, repr=False)

    @property
    def total_tile_count(self) -> int:
        return self.tile_width * self.tile_height

    @property
    def pixel_width(self) -> int:
        return self.tile_width * TILE_SIZE

    @property
    def pixel_height(self) -> int:
        return self.tile_height * TILE_SIZE

    @property
    def index_map_bytes(self) -> bytes:
        return emit_index_map(self.index_map)

    def tile_data_text(self) -> str:
        return format_tile_data(self.tiles)

    def index_map_text(self) -> str:
        return format_index_map(self.index_map, self.tile_width)


def check_grid_size(tile_width: int, tile_height: int) -> None:
    for label, value in (("width", tile_width), ("height", tile_height)):
        if not 1 <= value <= MAX_GRID_TILES:
            raise TileRangeError(
                f"Tile grid {label} must be between 1 and {MAX_GRID_TILES} tiles, got {value}"
            )


def export_tiles(
    source: PixelSource,
    tile_width: int,
    tile_height: int,
    vram_limit: int = VRAM_TILE_LIMIT,
) -> ExportResult:
    """Encode every tile of ``source`` and drop the duplicates.

    Tiles are read row by row, left to right. When more unique tiles remain
    than ``vram_limit`` a :class:`VramBudgetWarning` is issued, but the result
    is still returned.
    """

    check_grid_size(tile_width, tile_height)

    tiles: List[EncodedTile] = []
    for row in range(tile_height):
        for col in range(tile_width):
            tiles.append(encode_tile(source.read_tile(col, row)))

    reduction = reduce_duplicates(tiles)

    if reduction.unique_count > vram_limit:
        warnings.warn(
            f"This image has {reduction.unique_count} unique tiles. "
            f"The Game Boy video memory can only fit up to {vram_limit} at the same time "
            "(384 using a hack). It will probably give errors.",
            VramBudgetWarning,
            stacklevel=2,
        )

    return ExportResult(
        tile_data=emit_tile_data(tiles),
        index_map=reduction.index_map,
        unique_tile_count=reduction.unique_count,
        duplicate_count=reduction.duplicate_count,
        tile_width=tile_width,
        tile_height=tile_height,
        tiles=tiles,
    )


def validate_image(image: Image.Image) -> None:
    """Check the image can be cut into whole 4-color tiles."""

    width, height = image.size
    if not (
        IMAGE_SIZE_MIN <= width <= IMAGE_SIZE_MAX
        and IMAGE_SIZE_MIN <= height <= IMAGE_SIZE_MAX
    ):
        raise ImageValidationError(
            f"Image size should be between {IMAGE_SIZE_MIN}x{IMAGE_SIZE_MIN} and "
            f"{IMAGE_SIZE_MAX}x{IMAGE_SIZE_MAX} pixels, got {width}x{height}."
        )
    if width % TILE_SIZE or height % TILE_SIZE:
        raise ImageValidationError(
            f"Both width and height should be multiples of {TILE_SIZE}, got {width}x{height}."
        )
    if image.mode != "P":
        raise ImageValidationError(
            f"The image should be indexed (palette mode), got mode {image.mode}."
        )
    highest = max(image.tobytes())
    if highest >= IMAGE_COLORS:
        raise ImageValidationError(
            f"The image should be {IMAGE_COLORS}-color only, "
            f"but palette index {highest} is used."
        )


def export_image(image: Image.Image, vram_limit: int = VRAM_TILE_LIMIT) -> ExportResult:
    validate_image(image)
    source = ImagePixelSource(image)
    return export_tiles(source, source.tile_width, source.tile_height, vram_limit)


def export_png(path: str | Path, vram_limit: int = VRAM_TILE_LIMIT) -> ExportResult:
    path = Path(path)
    try:
        with Image.open(path) as img:
            img.load()
            return export_image(img, vram_limit)
    except FileNotFoundError as exc:
        raise ConversionError(f"Input file not found: {path}") from exc
    except OSError as exc:
        raise ConversionError(f"Failed to read image: {path}") from exc
