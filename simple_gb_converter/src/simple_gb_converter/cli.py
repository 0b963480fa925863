"""Command line interface for the simple Game Boy tile converter."""

from __future__ import annotations

import argparse
import sys
import warnings
from pathlib import Path
from typing import List

from .csource import output_paths, write_binaries, write_c_sources
from .errors import ConversionError
from .exporter import ExportResult, export_png
from .tiles import VRAM_TILE_LIMIT
from .options import ExportOptions, normalize_asset_name, validate_bank
from .settings import default_options, load_last_options, save_last_options


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Convert an indexed 4-color PNG into Game Boy tile data and a tilemap.\n"
            "Duplicate tiles are stored once; the tilemap points every 8x8 block of the image\n"
            "at its tile. Output is a GBDK-2020 .h/.c pair, raw binaries, or both.\n"
            "Name, folder and bank are remembered per image for the next export."
        ),
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument("input", help="Indexed PNG (4 colors, 8x8 to 256x256, multiples of 8)")
    parser.add_argument(
        "-o",
        "--output-dir",
        help="Destination directory (default: last used, or the input's directory)",
    )
    parser.add_argument(
        "-n",
        "--name",
        help="Asset name, a C identifier (default: last used, or the file name)",
    )
    parser.add_argument(
        "-b",
        "--bank",
        type=int,
        help="ROM bank number to store the asset in (0 for the default bank)",
    )
    parser.add_argument(
        "--format",
        choices=["c", "bin", "both"],
        default="c",
        help="Write C sources, raw .tiles/.map binaries, or both",
    )
    parser.add_argument(
        "--vram-limit",
        type=int,
        default=VRAM_TILE_LIMIT,
        help="Warn when more unique tiles than this remain",
    )
    parser.add_argument(
        "-f",
        "--force",
        action="store_true",
        help="Overwrite existing files without prompting",
    )
    return parser


def resolve_options(input_path: Path, args: argparse.Namespace) -> ExportOptions:
    options = load_last_options(input_path)
    if options is None:
        options = default_options(input_path)

    if args.name is not None:
        options.name = args.name
    if args.output_dir is not None:
        options.folder = Path(args.output_dir)
    if args.bank is not None:
        options.bank = args.bank
    options.vram_limit = args.vram_limit

    options.name = normalize_asset_name(options.name)
    options.bank = validate_bank(options.bank)
    return options


def check_conflicts(targets: List[Path], force: bool) -> None:
    conflicts = [str(target) for target in targets if target.exists()]
    if conflicts and not force:
        raise ConversionError(
            "Output files already exist (use --force to overwrite):\n" + "\n".join(conflicts)
        )


def write_outputs(result: ExportResult, options: ExportOptions, output_format: str) -> List[Path]:
    Path(options.folder).mkdir(parents=True, exist_ok=True)
    written: List[Path] = []
    if output_format in ("c", "both"):
        written.extend(write_c_sources(result, options))
    if output_format in ("bin", "both"):
        written.extend(write_binaries(result, options))
    return written


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        input_path = Path(args.input)
        options = resolve_options(input_path, args)
        check_conflicts(output_paths(options, args.format), args.force)

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            result = export_png(input_path, vram_limit=options.vram_limit)
        for warning in caught:
            print(f"Warning: {warning.message}")

        for target in write_outputs(result, options, args.format):
            print(f"wrote {target}")
        print(
            f"{options.name}: {result.unique_tile_count} unique tiles of "
            f"{result.total_tile_count} ({result.tile_width}x{result.tile_height} tiles)"
        )

        save_last_options(input_path, options)
        return 0
    except ConversionError as exc:
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
