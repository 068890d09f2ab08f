"""create-gsp scaffolder -- resolves selections and materializes templates.

The engine is split into pure decision steps and two filesystem steps:

* :mod:`.resolver` maps an explicit identifier or per-axis choices onto one
  registered template.
* :mod:`.target` decides the destination directory and how to treat what is
  already there.
* :mod:`.materializer` copies the template tree into place.
* :mod:`.manifest` rewrites the copied ``package.json``.

Quick usage::

    from create_gsp.scaffolder import ProjectGenerator, Selection, resolve_selection, settle_target

    resolution = resolve_selection(Selection("typescript", "router-formik", "tailwind"))
    target = settle_target("my-app", Path.cwd(), answer=lambda request: request.default)
    project_path = await ProjectGenerator().generate(resolution, target)
"""

from create_gsp.scaffolder.catalog import (
    AXES,
    TEMPLATE_REGISTRY,
    FeatureAxis,
    Selection,
    TemplateInfo,
)
from create_gsp.scaffolder.generator import ProjectGenerator
from create_gsp.scaffolder.manifest import manifest_name, update_manifest
from create_gsp.scaffolder.materializer import materialize
from create_gsp.scaffolder.resolver import Resolution, resolve_selection, resolve_template
from create_gsp.scaffolder.target import (
    Decision,
    DecisionRequest,
    ProjectTarget,
    TargetAction,
    resolve_target,
    settle_target,
)

__all__ = [
    "AXES",
    "TEMPLATE_REGISTRY",
    "Decision",
    "DecisionRequest",
    "FeatureAxis",
    "ProjectGenerator",
    "ProjectTarget",
    "Resolution",
    "Selection",
    "TargetAction",
    "TemplateInfo",
    "manifest_name",
    "materialize",
    "resolve_selection",
    "resolve_target",
    "resolve_template",
    "settle_target",
    "update_manifest",
]
