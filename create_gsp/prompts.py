"""Answer sources for the scaffolding driver.

The engine never prompts by itself.  The driver asks a ``Prompter`` for the
project name, for one option per axis, and for each yes/no
``DecisionRequest`` the target resolver raises.
"""

from __future__ import annotations

from rich.console import Console
from rich.prompt import Confirm, Prompt

from create_gsp import utils
from create_gsp.errors import InvalidInput
from create_gsp.scaffolder.catalog import FeatureAxis
from create_gsp.scaffolder.target import DecisionRequest, validate_project_name


class Prompter:
    """Interactive answers read from the terminal with Rich prompts."""

    def __init__(self, console: Console | None = None, assume_yes: bool = False) -> None:
        self.console = console or utils.console
        self.assume_yes = assume_yes

    def project_name(self) -> str:
        """Ask for a project name until a valid one is entered."""
        while True:
            raw = Prompt.ask(
                "What is your project name? (use '.' for current directory)",
                console=self.console,
            )
            try:
                return validate_project_name(raw)
            except InvalidInput as exc:
                utils.print_error(str(exc))

    def choose(self, axis: FeatureAxis) -> str:
        """Ask for one option of *axis* and return its key."""
        self.console.print(f"\n[bold]{axis.prompt}:[/bold]")
        for index, option in enumerate(axis.options, start=1):
            self.console.print(f"  [cyan]{index}[/cyan]. {option.label}")
        answer = Prompt.ask(
            "Select",
            choices=[str(i) for i in range(1, len(axis.options) + 1)],
            default="1",
            console=self.console,
        )
        return axis.options[int(answer) - 1].key

    def confirm(self, request: DecisionRequest) -> bool:
        if self.assume_yes:
            return True
        return Confirm.ask(request.message, default=request.default, console=self.console)


class NonInteractivePrompter(Prompter):
    """Answers for ``--no-input`` runs.

    Axis choices take each axis's default option and confirmations take the
    request's default unless ``assume_yes`` is set.  A missing project name is
    an error.
    """

    def project_name(self) -> str:
        raise InvalidInput("Project name is required when prompting is disabled")

    def choose(self, axis: FeatureAxis) -> str:
        return axis.default.key

    def confirm(self, request: DecisionRequest) -> bool:
        if self.assume_yes:
            return True
        return request.default
