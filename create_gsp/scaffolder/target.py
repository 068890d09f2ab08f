"""Target path resolution.

Decides where a new project is written and what to do about whatever is
already there.  The resolver never prompts: when it needs a yes/no answer it
returns a ``DecisionRequest`` and the caller re-invokes it with the answer
added to ``answers``.  ``settle_target`` runs that loop against any answer
callback.
"""

from __future__ import annotations

import os
import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from create_gsp.errors import InvalidInput

CURRENT_DIR_SENTINEL = "."

_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")


class TargetAction(str, Enum):
    """What the materializer should do with the destination."""

    PROCEED = "proceed"
    OVERWRITE = "overwrite"
    ABORT = "abort"


class Decision(str, Enum):
    """Named yes/no questions the resolver may ask."""

    USE_CURRENT_DIR = "use_current_dir"
    OVERWRITE = "overwrite"
    CONTINUE_NONEMPTY = "continue_nonempty"


@dataclass(frozen=True)
class DecisionRequest:
    """A pending yes/no question and the answer to assume on plain Enter."""

    decision: Decision
    message: str
    default: bool


class ProjectTarget(BaseModel):
    """Resolved destination of one run."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Resolved project name")
    path: Path = Field(..., description="Absolute, normalised destination directory")
    in_place: bool = Field(default=False, description="Destination is the working directory")
    action: TargetAction = Field(default=TargetAction.PROCEED)

    @field_validator("path")
    @classmethod
    def _absolute_path(cls, value: Path) -> Path:
        if not value.is_absolute():
            raise ValueError(f"target path must be absolute, got {value}")
        return Path(os.path.normpath(value))

    @property
    def cancelled(self) -> bool:
        return self.action is TargetAction.ABORT


def validate_project_name(raw_name: str) -> str:
    """Return the stripped project name or raise ``InvalidInput``.

    Allowed: letters, digits, hyphens and underscores, or the ``"."``
    sentinel for the working directory.
    """
    name = (raw_name or "").strip()
    if not name:
        raise InvalidInput("Project name is required")
    if name == CURRENT_DIR_SENTINEL:
        return name
    if not _NAME_PATTERN.match(name):
        raise InvalidInput(
            "Project name can only contain letters, numbers, hyphens, and underscores"
        )
    return name


def resolve_target(
    raw_name: str,
    cwd: str | Path,
    answers: Mapping[Decision, bool] | None = None,
) -> ProjectTarget | DecisionRequest:
    """Resolve *raw_name* against *cwd*.

    Args:
        raw_name: Project name as typed, or ``"."`` for the working directory.
        cwd: Working directory the project name is relative to.
        answers: Answers gathered so far, keyed by ``Decision``.

    Returns:
        A ``DecisionRequest`` for the first question not yet answered, or the
        final ``ProjectTarget``.  A declined overwrite or continuation yields
        a target whose action is ``ABORT``.

    Raises:
        InvalidInput: If the name is malformed or would leave *cwd*.
    """
    answers = answers or {}
    name = validate_project_name(raw_name)
    base = Path(os.path.abspath(cwd))

    if name == CURRENT_DIR_SENTINEL:
        name = base.name
        if not name:
            raise InvalidInput(f"Cannot derive a project name from {base}")
        in_place = True
    elif name == base.name:
        if Decision.USE_CURRENT_DIR not in answers:
            return DecisionRequest(
                Decision.USE_CURRENT_DIR,
                f"Create project in current directory ({base})?",
                default=True,
            )
        in_place = answers[Decision.USE_CURRENT_DIR]
    else:
        in_place = False

    path = base if in_place else Path(os.path.normpath(base / name))
    if not in_place and path.parent != base:
        raise InvalidInput(f"Project name {name!r} resolves outside {base}")

    action = TargetAction.PROCEED
    if not in_place and path.exists():
        if Decision.OVERWRITE not in answers:
            return DecisionRequest(
                Decision.OVERWRITE,
                f"Directory {name} already exists. Overwrite?",
                default=False,
            )
        action = TargetAction.OVERWRITE if answers[Decision.OVERWRITE] else TargetAction.ABORT
    elif in_place and _has_visible_entries(path):
        if Decision.CONTINUE_NONEMPTY not in answers:
            return DecisionRequest(
                Decision.CONTINUE_NONEMPTY,
                "Current directory is not empty. Continue anyway?",
                default=False,
            )
        action = TargetAction.PROCEED if answers[Decision.CONTINUE_NONEMPTY] else TargetAction.ABORT

    return ProjectTarget(name=name, path=path, in_place=in_place, action=action)


def settle_target(
    raw_name: str,
    cwd: str | Path,
    answer: Callable[[DecisionRequest], bool],
) -> ProjectTarget:
    """Run ``resolve_target`` to completion, asking *answer* for each decision."""
    answers: dict[Decision, bool] = {}
    while True:
        outcome = resolve_target(raw_name, cwd, answers)
        if isinstance(outcome, ProjectTarget):
            return outcome
        answers[outcome.decision] = bool(answer(outcome))


def _has_visible_entries(directory: Path) -> bool:
    return any(not entry.name.startswith(".") for entry in directory.iterdir())
