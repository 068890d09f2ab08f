"""Manifest transformer.

Rewrites the ``package.json`` copied from a template: the ``name`` field is
derived from the project name and every selected axis option merges its
dependency entries, in fixed axis order.  Fields the transformer does not own
are written back untouched and in their original order.
"""

from __future__ import annotations

import asyncio
import json
import re
from pathlib import Path
from typing import Any

from create_gsp.errors import ManifestCorrupt

from .catalog import Selection

MANIFEST_FILENAME = "package.json"


def manifest_name(project_name: str) -> str:
    """Lowercase *project_name* and replace whitespace runs with hyphens.

    Examples::

        manifest_name("my-app")   -> "my-app"
        manifest_name("My  App")  -> "my-app"
    """
    return re.sub(r"\s+", "-", project_name.lower())


def transform_manifest(
    manifest: dict[str, Any], project_name: str, selection: Selection
) -> dict[str, Any]:
    """Return a transformed copy of a parsed manifest.

    Raises:
        ManifestCorrupt: If a dependency table is present but not an object.
    """
    result = dict(manifest)
    result["name"] = manifest_name(project_name)

    for option in selection.options():
        for augmentation in option.augmentations:
            table = result.get(augmentation.table)
            if table is None:
                table = {}
            if not isinstance(table, dict):
                raise ManifestCorrupt(
                    Path(MANIFEST_FILENAME),
                    f"'{augmentation.table}' must be an object, got {type(table).__name__}",
                )
            result[augmentation.table] = {**table, **augmentation.as_dict()}

    return result


def render_manifest(manifest: dict[str, Any]) -> str:
    """Serialise a manifest as 2-space indented JSON with a trailing newline."""
    return json.dumps(manifest, indent=2, ensure_ascii=False) + "\n"


async def update_manifest(
    project_dir: str | Path, project_name: str, selection: Selection
) -> Path:
    """Load, transform and rewrite ``package.json`` inside *project_dir*.

    Returns:
        Path of the rewritten manifest.

    Raises:
        ManifestCorrupt: If the manifest is missing, is not valid JSON, or is
            not a JSON object.
    """
    path = Path(project_dir) / MANIFEST_FILENAME
    manifest = await asyncio.to_thread(_read_manifest, path)
    try:
        transformed = transform_manifest(manifest, project_name, selection)
    except ManifestCorrupt as exc:
        raise ManifestCorrupt(path, exc.reason) from exc
    await asyncio.to_thread(path.write_text, render_manifest(transformed), "utf-8")
    return path


def _read_manifest(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise ManifestCorrupt(path, "file not found")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ManifestCorrupt(path, f"invalid JSON ({exc})") from exc
    if not isinstance(data, dict):
        raise ManifestCorrupt(path, f"expected a JSON object, got {type(data).__name__}")
    return data
