"""create-gsp configuration.

Centralised, typed configuration for one scaffolding run.  Settings use
Pydantic v2 models so they are validated at construction time and can be
built from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from create_gsp.scaffolder.catalog import TEMPLATES_DIR

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip().lower() in _TRUTHY


class Config(BaseModel):
    """Global create-gsp configuration.

    Instances are created once by the CLI entry point and passed through the
    driver to the engine.
    """

    templates_dir: Path = Field(
        default=TEMPLATES_DIR,
        description="Root directory holding one template tree per identifier",
    )
    cwd: Path = Field(
        default_factory=Path.cwd,
        description="Working directory project names are resolved against",
    )
    assume_yes: bool = Field(
        default=False, description="Answer every confirmation with yes"
    )
    interactive: bool = Field(
        default=True, description="Whether missing input may be collected by prompting"
    )

    @field_validator("templates_dir", "cwd")
    @classmethod
    def _absolute(cls, value: Path) -> Path:
        return Path(os.path.abspath(value.expanduser()))

    @classmethod
    def from_env(cls, **overrides: Any) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            GSP_TEMPLATES_DIR, GSP_ASSUME_YES, GSP_NO_INPUT.

        Keyword arguments whose value is not ``None`` take precedence over
        the environment.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("GSP_TEMPLATES_DIR"):
            kwargs["templates_dir"] = Path(os.environ["GSP_TEMPLATES_DIR"])
        assume_yes = _env_flag("GSP_ASSUME_YES")
        if assume_yes is not None:
            kwargs["assume_yes"] = assume_yes
        no_input = _env_flag("GSP_NO_INPUT")
        if no_input is not None:
            kwargs["interactive"] = not no_input

        kwargs.update({key: value for key, value in overrides.items() if value is not None})
        return cls(**kwargs)
