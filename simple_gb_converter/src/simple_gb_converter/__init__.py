"""Simple PNG to Game Boy tile converter.

This package turns an indexed 4-color image into Game Boy 2bpp tile data with
duplicate tiles removed, plus the tilemap that rebuilds the image from those
tiles. It can be invoked through the CLI (``simple-gb-converter``) or imported
to export an image into bytes and C source text.
"""

from .csource import render_header, render_source, write_binaries, write_c_sources
from .dedupe import Reduction, reduce_duplicates
from .emitter import emit_index_map, emit_tile_data, format_index_map, format_tile_data
from .errors import (
    ConversionError,
    ExportError,
    ImageValidationError,
    TileRangeError,
    VramBudgetWarning,
)
from .exporter import (
    ExportResult,
    ImagePixelSource,
    PixelSource,
    export_image,
    export_png,
    export_tiles,
    validate_image,
)
from .options import ExportOptions, default_asset_name, normalize_asset_name, validate_bank
from .settings import load_last_options, save_last_options
from .tiles import VRAM_TILE_LIMIT, EncodedTile, encode_tile

__all__ = [
    "VRAM_TILE_LIMIT",
    "ConversionError",
    "EncodedTile",
    "ExportError",
    "ExportOptions",
    "ExportResult",
    "ImagePixelSource",
    "ImageValidationError",
    "PixelSource",
    "Reduction",
    "TileRangeError",
    "VramBudgetWarning",
    "default_asset_name",
    "emit_index_map",
    "emit_tile_data",
    "encode_tile",
    "export_image",
    "export_png",
    "export_tiles",
    "format_index_map",
    "format_tile_data",
    "load_last_options",
    "normalize_asset_name",
    "reduce_duplicates",
    "render_header",
    "render_source",
    "save_last_options",
    "validate_bank",
    "validate_image",
    "write_binaries",
    "write_c_sources",
]
