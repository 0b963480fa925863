"""Remember the last export options used for an image."""

from __future__ import annotations

import json
from pathlib import Path

from .errors import ExportError
from .options import ExportOptions, default_asset_name

SIDECAR_SUFFIX = ".gbexport.json"


def sidecar_path(image_path: str | Path) -> Path:
    image_path = Path(image_path)
    return image_path.with_name(image_path.name + SIDECAR_SUFFIX)


def default_options(image_path: str | Path) -> ExportOptions:
    image_path = Path(image_path)
    return ExportOptions(name=default_asset_name(image_path), folder=image_path.parent)


def load_last_options(image_path: str | Path) -> ExportOptions | None:
    """Return the options saved by the previous export, or None if there are none.

    Keys missing from the saved file keep the defaults for ``image_path``.
    """

    path = sidecar_path(image_path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return None
    if not isinstance(data, dict):
        return None

    options = default_options(image_path)
    try:
        if data.get("name"):
            options.name = str(data["name"])
        if data.get("folder"):
            options.folder = Path(data["folder"])
        if "bank" in data:
            options.bank = int(data["bank"])
    except (TypeError, ValueError):
        return None
    return options


def save_last_options(image_path: str | Path, options: ExportOptions) -> Path:
    path = sidecar_path(image_path)
    payload = {
        "name": options.name,
        "folder": str(options.folder),
        "bank": options.bank,
    }
    try:
        path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise ExportError(
            f"Could not write file {path}, error code {exc.errno} ({exc.strerror})."
        ) from exc
    return path
