"""Write exported tiles as GBDK-2020 C sources or raw binaries."""

from __future__ import annotations

from pathlib import Path
from typing import List

import jinja2

from .errors import ExportError
from .exporter import ExportResult
from .options import ExportOptions

_DOC_BLOCK = """/**
 * @file  {{ name_lower }}.{{ extension }}
 * @brief {{ name }}, exported by simple_gb_converter for use with GBDK-2020 - {{ role }}.
 *
 * Unique tiles  : {{ unique_tiles }}
 * Total tiles   : {{ total_tiles }}
 * Size (tiles)  : {{ tile_width }}x{{ tile_height }}
 * Size (pixels) : {{ pixel_width }}x{{ pixel_height }}
 * Bank          : {{ bank }}
 */
"""

HEADER_TEMPLATE = (
    _DOC_BLOCK
    + """
#pragma once

{% if bank == 0 -%}
#include <stdint.h>
{%- else -%}
#include <gb/gb.h>

BANKREF_EXTERN(BACKGROUND_{{ name_upper }})
{%- endif %}

#define BACKGROUND_{{ name_upper }}_TILES {{ unique_tiles }}U /**< How many unique tiles this background has. */

#define BACKGROUND_{{ name_upper }}_SIZE_X {{ tile_width }}U /**< Width of this background, in 8x8 tiles. */
#define BACKGROUND_{{ name_upper }}_SIZE_Y {{ tile_height }}U /**< Height of this background, in 8x8 tiles. */

/** {{ name }} (data), exported by simple_gb_converter for use with GBDK-2020.
 */
extern const unsigned char BackgroundData{{ name }}[];

/** {{ name }} (map), exported by simple_gb_converter for use with GBDK-2020.
 */
extern const unsigned char BackgroundMap{{ name }}[];
"""
)

SOURCE_TEMPLATE = (
    _DOC_BLOCK
    + """
#include "{{ name_lower }}.h"

{% if bank == 0 -%}
#include <stdint.h>
{%- else -%}
#include <gb/gb.h>

BANKREF(BACKGROUND_{{ name_upper }})
{%- endif %}

const unsigned char BackgroundData{{ name }}[] =
{
{{ tile_data }}};

const unsigned char BackgroundMap{{ name }}[] =
{
{{ tile_map }}
};
"""
)

def _context(result: ExportResult, options: ExportOptions, extension: str, role: str) -> dict:
    return {
        "name": options.name,
        "name_lower": options.name_lower,
        "name_upper": options.name_upper,
        "extension": extension,
        "role": role,
        "unique_tiles": result.unique_tile_count,
        "total_tiles": result.total_tile_count,
        "tile_width": result.tile_width,
        "tile_height": result.tile_height,
        "pixel_width": result.pixel_width,
        "pixel_height": result.pixel_height,
        "bank": options.bank,
    }


def render_header(result: ExportResult, options: ExportOptions) -> str:
    template = jinja2.Template(HEADER_TEMPLATE, keep_trailing_newline=True)
    return template.render(**_context(result, options, "h", "header"))


def render_source(result: ExportResult, options: ExportOptions) -> str:
    template = jinja2.Template(SOURCE_TEMPLATE, keep_trailing_newline=True)
    return template.render(
        tile_data=result.tile_data_text(),
        tile_map=result.index_map_text(),
        **_context(result, options, "c", "data"),
    )


def output_paths(options: ExportOptions, output_format: str) -> List[Path]:
    folder = Path(options.folder)
    paths: List[Path] = []
    if output_format in ("c", "both"):
        paths.append(folder / f"{options.name_lower}.h")
        paths.append(folder / f"{options.name_lower}.c")
    if output_format in ("bin", "both"):
        paths.append(folder / f"{options.name_lower}.tiles")
        paths.append(folder / f"{options.name_lower}.map")
    return paths


def _write(target: Path, data: str | bytes) -> Path:
    try:
        if isinstance(data, bytes):
            target.write_bytes(data)
        else:
            target.write_text(data, encoding="utf-8", newline="\n")
    except OSError as exc:
        raise ExportError(
            f"Could not write file {target}, error code {exc.errno} ({exc.strerror})."
        ) from exc
    return target


def write_c_sources(result: ExportResult, options: ExportOptions) -> List[Path]:
    header_path, source_path = output_paths(options, "c")
    return [
        _write(header_path, render_header(result, options)),
        _write(source_path, render_source(result, options)),
    ]


def write_binaries(result: ExportResult, options: ExportOptions) -> List[Path]:
    tiles_path, map_path = output_paths(options, "bin")
    return [
        _write(tiles_path, result.tile_data),
        _write(map_path, result.index_map_bytes),
    ]
