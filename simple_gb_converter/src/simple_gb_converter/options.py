"""Export options and the checks applied to them before writing files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

from .errors import ConversionError
from .tiles import VRAM_TILE_LIMIT

ASSET_NAME_MAX = 32
# Room for the array name prefix and the terminator inside ASSET_NAME_MAX.
ASSET_NAME_MAX_LENGTH = ASSET_NAME_MAX - 4
# Last ROM bank number an asset can be placed in.
BANK_MAX = 255

_IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


@dataclass
class ExportOptions:
    """Where and how an exported asset is written."""

    name: str = ""
    folder: Path = Path(".")
    bank: int = 0
    vram_limit: int = VRAM_TILE_LIMIT

    @property
    def name_lower(self) -> str:
        return self.name.lower()

    @property
    def name_upper(self) -> str:
        return self.name.upper()


def normalize_asset_name(raw: str) -> str:
    name = raw.strip()
    if not name:
        raise ConversionError("The asset name can not be empty!")
    name = name[:ASSET_NAME_MAX_LENGTH]
    if not _IDENTIFIER.fullmatch(name):
        raise ConversionError(
            f"Asset name must be a valid C identifier (letters, digits, underscore): {raw!r}"
        )
    return name


def default_asset_name(path: str | Path) -> str:
    """Derive an asset name from a file name: stem with its first letter uppercased."""

    stem = Path(path).stem
    if not stem:
        return stem
    return stem[0].upper() + stem[1:]


def validate_bank(bank: int) -> int:
    if not 0 <= bank <= BANK_MAX:
        raise ConversionError(f"Bank number must be between 0 and {BANK_MAX}, got {bank}")
    return bank
