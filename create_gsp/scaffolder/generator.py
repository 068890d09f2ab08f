"""Main scaffolding orchestrator.

Takes a resolved template and a resolved ``ProjectTarget`` and produces the
final on-disk project: the template tree is materialized first, then the
copied ``package.json`` is rewritten for the selected features.
"""

from __future__ import annotations

from pathlib import Path

from .catalog import TEMPLATES_DIR
from .manifest import update_manifest
from .materializer import materialize
from .resolver import Resolution
from .target import ProjectTarget


class ProjectGenerator:
    """Materialize a template and patch its manifest.

    The two steps run strictly in order and fail fast: a manifest error
    leaves the already-copied tree in place.
    """

    def __init__(self, templates_dir: str | Path | None = None) -> None:
        self.templates_dir = Path(templates_dir) if templates_dir else TEMPLATES_DIR

    async def generate(self, resolution: Resolution, target: ProjectTarget) -> Path:
        """Generate the project described by *resolution* at *target*.

        Returns:
            Path to the generated project root.

        Raises:
            Cancelled: If *target* was aborted.
            MaterializationFailed: If copying the template tree failed.
            ManifestCorrupt: If the copied manifest could not be rewritten.
        """
        project_root = await materialize(resolution.template, target, self.templates_dir)
        await update_manifest(project_root, target.name, resolution.selection)
        return project_root
