"""create-gsp command-line driver.

Collects whatever the invocation did not supply, feeds it through the
scaffolding engine step by step, and maps the outcome to an exit status:

* 0 -- project created, or the user cancelled.
* 1 -- any fatal error, reported on stderr.

Usage::

    create-gsp my-app
    create-gsp my-app --template typescript-tailwind
    python -m create_gsp . --yes
"""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Sequence

from create_gsp import __version__
from create_gsp.config import Config
from create_gsp.errors import Cancelled, InvalidInput, ScaffoldError, UnknownTemplate
from create_gsp.prompts import NonInteractivePrompter, Prompter
from create_gsp.scaffolder.catalog import AXES, TEMPLATE_REGISTRY, Selection
from create_gsp.scaffolder.generator import ProjectGenerator
from create_gsp.scaffolder.resolver import Resolution, resolve_selection, resolve_template
from create_gsp.scaffolder.target import (
    CURRENT_DIR_SENTINEL,
    ProjectTarget,
    settle_target,
    validate_project_name,
)
from create_gsp.utils import (
    create_progress,
    error_console,
    print_banner,
    print_error,
    print_info,
    print_steps,
    print_success,
    print_summary_table,
    print_warning,
)


def build_prompter(config: Config) -> Prompter:
    """Return the answer source matching the configuration."""
    if config.interactive:
        return Prompter(assume_yes=config.assume_yes)
    return NonInteractivePrompter(assume_yes=config.assume_yes)


def run(
    config: Config,
    project_name: str | None = None,
    template: str | None = None,
    prompter: Prompter | None = None,
) -> int:
    """Run one scaffolding session and return the process exit status."""
    prompter = prompter or build_prompter(config)
    print_banner(__version__)

    try:
        name = _project_name(config, prompter, project_name)
        if name == CURRENT_DIR_SENTINEL:
            print_info(f"Using current directory name: {config.cwd.name}")

        if template:
            resolution = resolve_template(template)
        else:
            resolution = _resolve_interactively(prompter)

        target = settle_target(name, config.cwd, prompter.confirm)
        if target.cancelled:
            raise Cancelled()

        asyncio.run(_create_project(config, resolution, target))
    except Cancelled as exc:
        print_warning(str(exc))
        return exc.exit_code
    except UnknownTemplate as exc:
        print_error(f"Invalid template: {exc.identifier}")
        error_console.print("[yellow]Available templates:[/yellow]")
        for identifier in exc.available:
            info = TEMPLATE_REGISTRY.get(identifier)
            description = info.description if info else ""
            error_console.print(f"  - {identifier}: {description}")
        return exc.exit_code
    except ScaffoldError as exc:
        print_error(f"Error creating project: {exc}")
        return exc.exit_code
    except Exception as exc:
        print_error(f"Error creating project: {exc.__class__.__name__}: {exc}")
        return 1

    return 0


def _project_name(config: Config, prompter: Prompter, project_name: str | None) -> str:
    """Validate the command-line name, asking again when interactive."""
    if project_name is None:
        return prompter.project_name()
    try:
        return validate_project_name(project_name)
    except InvalidInput as exc:
        if not config.interactive:
            raise
        print_error(str(exc))
    return prompter.project_name()


def _resolve_interactively(prompter: Prompter) -> Resolution:
    """Collect one option per axis, in axis order, and resolve them."""
    choices = {axis.key: prompter.choose(axis) for axis in AXES}
    selection = Selection(**choices)
    resolution = resolve_selection(selection)

    summary = {
        axis.title: axis.get(choices[axis.key]).name for axis in AXES
    }
    summary["Template"] = selection.key()
    print_summary_table(summary, title="Selected configuration")

    for notice in resolution.notices:
        print_warning(notice)
    return resolution


async def _create_project(
    config: Config, resolution: Resolution, target: ProjectTarget
) -> None:
    generator = ProjectGenerator(config.templates_dir)
    with create_progress() as progress:
        progress.add_task(
            f"Creating {target.name} with {resolution.template.name} template...",
            total=None,
        )
        try:
            await generator.generate(resolution, target)
        except Exception:
            print_error("Failed to create project")
            raise

    print_success(f"Project {target.name} created successfully!")
    steps = [] if target.in_place else [f"cd {target.name}"]
    steps += ["npm install", "npm run dev"]
    print_steps("Next steps:", steps)


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``create-gsp`` and ``python -m create_gsp``."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="create-gsp",
        description="Create a new React application with GSP template",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Templates:\n"
            + "".join(f"  {key}\n" for key in TEMPLATE_REGISTRY)
            + "\nExamples:\n"
            "  create-gsp my-app\n"
            "  create-gsp my-app --template typescript-tailwind\n"
            "  create-gsp . --yes\n"
        ),
    )
    parser.add_argument(
        "project_name",
        nargs="?",
        default=None,
        help="Name of the project ('.' for the current directory)",
    )
    parser.add_argument(
        "--template", "-t",
        default=None,
        help="Template variant to use (skips the interactive selection)",
    )
    parser.add_argument(
        "--templates-dir",
        default=None,
        help="Directory holding the template trees (default: bundled templates)",
    )
    parser.add_argument(
        "--yes", "-y",
        action="store_true",
        default=None,
        help="Answer yes to every confirmation",
    )
    parser.add_argument(
        "--no-input",
        action="store_true",
        default=False,
        help="Never prompt; use defaults for missing choices",
    )
    parser.add_argument(
        "--version", "-V",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args(argv)

    config = Config.from_env(
        templates_dir=args.templates_dir,
        assume_yes=args.yes,
        interactive=False if args.no_input else None,
    )
    sys.exit(run(config, project_name=args.project_name, template=args.template))


if __name__ == "__main__":
    main()
