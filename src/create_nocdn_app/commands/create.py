"""Implementation for the ``create-nocdn-app`` command.

Collects any answers the command line did not supply, then hands a validated
request to ``CreateProjectService`` and reports the outcome.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn, TypeVar

import typer

from .. import acquire, agents, config, io, log, paths
from ..exec import CommandRunner
from ..options import PROG_NAME, Options
from ..package_managers import PackageManager, select_package_manager
from ..services.create_project import CreateProjectRequest, CreateProjectService
from ..services.errors import ServiceFailure, TargetExistsError
from ..validation import validate_project_name

T = TypeVar("T")

CANCELLED_MESSAGE = "Operation cancelled"
SETUP_FAILED_MESSAGE = "Setup failed"
COMING_SOON_MESSAGE = "Vite support is coming soon"

FRAMEWORKS: tuple[tuple[str, str], ...] = (
    ("nextjs", "Next.js"),
    ("vite", "Vite (coming soon)"),
)


@dataclass(frozen=True)
class ProjectAnswers:
    project_name: str
    description: str | None = None
    agents_instruction: str | None = None


def _abort() -> NoReturn:
    log.cancel(CANCELLED_MESSAGE)
    raise typer.Exit(0)


def _answer(value: T | object) -> T:
    if io.is_cancel(value):
        _abort()
    return value  # type: ignore[return-value]


def _collect_agents_instruction() -> str | None:
    wants_file = _answer(io.confirm("Create an AGENTS.md file?", default=False))
    if not wants_file:
        return None
    mode = _answer(
        io.select("How should AGENTS.md be created?", agents.AGENTS_MODES, "minimal")
    )
    content = ""
    if agents.mode_uses_template(mode):
        runtime = _answer(
            io.select(
                "Which runtime should agents use?",
                [(runtime, runtime) for runtime in agents.RUNTIMES],
                "bun",
            )
        )
        content = agents.render_minimal_agents(runtime)
    if agents.mode_edits(mode):
        edited = _answer(io.text("Edit AGENTS.md", default=content, multiline=True))
        content = agents.resolve_edited_text(content, edited)
    return content


def collect_answers(options: Options) -> ProjectAnswers:
    """Run the interactive prompts.

    Exits with code 0 when the user cancels or picks a framework that is not
    supported yet.
    """
    framework = _answer(
        io.select("Which framework would you like to use?", FRAMEWORKS, "nextjs")
    )
    if framework != "nextjs":
        log.outro(COMING_SOON_MESSAGE)
        raise typer.Exit(0)

    project_name = options.project_name
    if project_name is None:
        project_name = _answer(
            io.text(
                "What is your project name?",
                placeholder="my-app",
                validate=validate_project_name,
            )
        )

    description = _answer(
        io.text("Project description (optional)", placeholder="press enter to skip")
    )
    return ProjectAnswers(
        project_name=project_name,
        description=description.strip() or None,
        agents_instruction=_collect_agents_instruction(),
    )


def _print_next_steps(
    project_name: str, package_manager: PackageManager, *, skip_install: bool
) -> None:
    io.say()
    io.say("Next steps:")
    io.say(f"  cd {project_name}")
    if skip_install:
        io.say(f"  {' '.join(package_manager.install)}")
    io.say(f"  {package_manager.dev_command}")


def create_project(
    options: Options,
    *,
    cwd: Path | None = None,
    runner: CommandRunner | None = None,
    fixture_dir: Path | None = None,
) -> None:
    """Create a new project from the template.

    Args:
        options: Parsed command-line options.
        cwd: Directory the project is created in; defaults to ``Path.cwd()``.
        runner: Command runner override for tests.
        fixture_dir: Template directory used by ``--testing``; defaults to the
            bundled template.

    Returns:
        None. Exits through ``typer.Exit`` on cancellation or failure.

    Example:
        $ create-nocdn-app my-app --skip-git
    """
    if options.project_name is not None:
        problem = validate_project_name(options.project_name)
        if problem:
            log.error(problem)
            raise typer.Exit(1)

    try:
        app_config = config.load_config()
    except ServiceFailure as exc:
        log.error(str(exc))
        raise typer.Exit(1) from exc

    log.intro(PROG_NAME)
    answers = collect_answers(options)

    base_dir = cwd if cwd is not None else Path.cwd()
    try:
        acquire.ensure_target_absent(paths.project_path(answers.project_name, base_dir))
    except TargetExistsError as exc:
        log.cancel(str(exc))
        raise typer.Exit(1) from exc

    request = CreateProjectRequest(
        project_name=answers.project_name,
        cwd=base_dir,
        description=answers.description,
        agents_instruction=answers.agents_instruction,
        package_manager=select_package_manager(options),
        config=app_config,
        skip_install=options.skip_install,
        skip_git=options.skip_git,
        open_editor=options.open,
        testing=options.testing,
    )
    service = CreateProjectService(runner=runner, fixture_dir=fixture_dir)
    try:
        outcome = service(request)
    except ServiceFailure as exc:
        log.error(str(exc))
        if exc.recovery_hint:
            log.info(f"hint: {exc.recovery_hint}")
        log.cancel(SETUP_FAILED_MESSAGE)
        raise typer.Exit(1) from exc

    log.outro(f"Project {answers.project_name} is ready")
    _print_next_steps(
        answers.project_name, outcome.package_manager, skip_install=options.skip_install
    )
