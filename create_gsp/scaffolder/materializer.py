"""Copy a template tree into a resolved project target."""

from __future__ import annotations

import asyncio
import shutil
from pathlib import Path

from create_gsp.errors import Cancelled, MaterializationFailed

from .catalog import TemplateInfo
from .target import ProjectTarget, TargetAction


async def materialize(
    template: TemplateInfo,
    target: ProjectTarget,
    templates_root: str | Path | None = None,
) -> Path:
    """Copy the whole template tree of *template* into *target*.

    * ``OVERWRITE`` targets are removed completely before copying.
    * In-place targets are copied over; unrelated files stay.
    * Other targets are created (with parents) if missing.

    Files are copied byte for byte with their relative layout preserved.
    Nothing is rolled back when a copy fails part way.

    Returns:
        The destination directory.

    Raises:
        Cancelled: If the target was aborted during resolution.
        MaterializationFailed: If the template tree is missing or any
            filesystem operation fails.
    """
    if target.action is TargetAction.ABORT:
        raise Cancelled()

    source = template.source_dir(Path(templates_root) if templates_root else None)
    if not source.is_dir():
        raise MaterializationFailed(
            target.path, f"template directory not found: {source}"
        )

    try:
        await asyncio.to_thread(_copy_tree, source, target)
    except (OSError, shutil.Error) as exc:
        raise MaterializationFailed(target.path, str(exc)) from exc
    return target.path


def _copy_tree(source: Path, target: ProjectTarget) -> None:
    destination = target.path
    if target.action is TargetAction.OVERWRITE and not target.in_place:
        _remove(destination)
    if not target.in_place:
        destination.mkdir(parents=True, exist_ok=True)
    shutil.copytree(source, destination, dirs_exist_ok=True)


def _remove(path: Path) -> None:
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    elif path.exists() or path.is_symlink():
        path.unlink()
