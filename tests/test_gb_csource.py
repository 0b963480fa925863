import pytest

from gb_helpers import ListPixelSource, solid_tile

from simple_gb_converter.csource import (
    output_paths,
    render_header,
    render_source,
    write_binaries,
    write_c_sources,
)
from simple_gb_converter.errors import ExportError
from simple_gb_converter.exporter import export_tiles
from simple_gb_converter.options import ExportOptions


def _result():
    first = [1, 0, 3, 0, 2, 1, 0, 3] * 8
    source = ListPixelSource([first, solid_tile(0), first, solid_tile(0)], 2)
    return export_tiles(source, 2, 2)


def test_header_for_default_bank() -> None:
    text = render_header(_result(), ExportOptions(name="Title"))

    assert " * @file  title.h" in text
    assert " * Unique tiles  : 2" in text
    assert " * Total tiles   : 4" in text
    assert " * Size (tiles)  : 2x2" in text
    assert " * Size (pixels) : 16x16" in text
    assert "#pragma once\n\n#include <stdint.h>\n\n#define BACKGROUND_TITLE_TILES 2U" in text
    assert "BANKREF" not in text
    assert "#define BACKGROUND_TITLE_SIZE_X 2U" in text
    assert "#define BACKGROUND_TITLE_SIZE_Y 2U" in text
    assert "extern const unsigned char BackgroundDataTitle[];" in text
    assert "extern const unsigned char BackgroundMapTitle[];" in text


def test_header_for_banked_asset() -> None:
    text = render_header(_result(), ExportOptions(name="Title", bank=3))

    assert " * Bank          : 3" in text
    assert "#include <gb/gb.h>\n\nBANKREF_EXTERN(BACKGROUND_TITLE)\n\n#define" in text
    assert "stdint.h" not in text


def test_source_contains_arrays() -> None:
    text = render_source(_result(), ExportOptions(name="Title"))

    data_row = ", ".join(["0xA5", "0x29"] * 8)
    zero_row = ", ".join(["0x00"] * 16)
    assert '#include "title.h"' in text
    assert (
        "const unsigned char BackgroundDataTitle[] =\n{\n"
        f"\t{data_row},\n\t{zero_row}\n}};\n"
    ) in text
    assert (
        "const unsigned char BackgroundMapTitle[] =\n{\n"
        "\t0x00, 0x01,\n\t0x00, 0x01\n};\n"
    ) in text


def test_banked_source_declares_bankref() -> None:
    text = render_source(_result(), ExportOptions(name="Title", bank=1))

    assert "BANKREF(BACKGROUND_TITLE)" in text


def test_output_paths() -> None:
    options = ExportOptions(name="Map_A", folder="out")

    names = [path.name for path in output_paths(options, "both")]

    assert names == ["map_a.h", "map_a.c", "map_a.tiles", "map_a.map"]


def test_write_c_sources(tmp_path) -> None:
    options = ExportOptions(name="Title", folder=tmp_path)

    written = write_c_sources(_result(), options)

    assert written == [tmp_path / "title.h", tmp_path / "title.c"]
    assert (tmp_path / "title.c").read_text().startswith("/**\n * @file  title.c")


def test_write_binaries(tmp_path) -> None:
    options = ExportOptions(name="Title", folder=tmp_path)

    write_binaries(_result(), options)

    assert (tmp_path / "title.tiles").read_bytes() == bytes([0xA5, 0x29]) * 8 + bytes(16)
    assert (tmp_path / "title.map").read_bytes() == bytes([0, 1, 0, 1])


def test_write_into_missing_folder_fails(tmp_path) -> None:
    options = ExportOptions(name="Title", folder=tmp_path / "missing")

    with pytest.raises(ExportError, match="Could not write file"):
        write_c_sources(_result(), options)
