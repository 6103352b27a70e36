"""Create a project directory from the template and provision it."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from pydantic import BaseModel, ConfigDict, field_validator

from .. import acquire, editor, log, personalize, provision
from ..config import AppConfig
from ..exec import CommandRunner
from ..package_managers import PackageManager
from ..validation import validate_project_name
from .base import BaseService
from .errors import IoFailedError, ServiceFailure, UnexpectedStateError


class CreateProjectRequest(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    project_name: str
    cwd: Path
    description: str | None = None
    agents_instruction: str | None = None
    package_manager: PackageManager
    config: AppConfig
    skip_install: bool = False
    skip_git: bool = False
    open_editor: bool = False
    testing: bool = False

    @field_validator("project_name")
    @classmethod
    def check_project_name(cls, value: str) -> str:
        problem = validate_project_name(value)
        if problem:
            raise ValueError(problem)
        return value

    @property
    def project_dir(self) -> Path:
        return self.cwd / self.project_name


@dataclass(frozen=True)
class CreateProjectOutcome:
    project_dir: Path
    package_manager: PackageManager
    steps: tuple[str, ...]


class CreateProjectService(BaseService[CreateProjectRequest, CreateProjectOutcome]):
    """Acquire, personalize, and provision a new project.

    Each step runs under the spinner. A failing step leaves the spinner in
    its failed state and the failure propagates to the caller; nothing
    already written is rolled back.
    """

    def __init__(
        self,
        *,
        spinner: log.Spinner | None = None,
        runner: CommandRunner | None = None,
        fixture_dir: Path | None = None,
    ) -> None:
        self._spinner = spinner or log.Spinner()
        self._runner = runner
        self._fixture_dir = fixture_dir

    def _step(self, message: str, done: str, action: Callable[[], object]) -> None:
        self._spinner.start(message)
        try:
            action()
        except ServiceFailure:
            raise
        except OSError as exc:
            raise IoFailedError(str(exc)) from exc
        except Exception as exc:
            raise UnexpectedStateError(f"{message.rstrip('.')} failed: {exc}") from exc
        self._spinner.stop(done)

    def _run(self, request: CreateProjectRequest) -> CreateProjectOutcome:
        project_dir = request.project_dir
        config = request.config
        steps: list[str] = []

        if request.testing:
            self._step(
                "Copying template...",
                "Template copied",
                lambda: acquire.copy_fixture_template(
                    project_dir, source=self._fixture_dir
                ),
            )
        else:
            self._step(
                "Cloning template...",
                "Template cloned",
                lambda: acquire.clone_template(
                    project_dir,
                    repo_url=config.template_repo,
                    subdir=config.template_subdir,
                    cwd=request.cwd,
                    runner=self._runner,
                ),
            )
        steps.append("template")

        values = personalize.Personalization(
            project_name=request.project_name,
            description=request.description,
            agents_instruction=request.agents_instruction,
        )
        self._step(
            "Configuring project...",
            "Project configured",
            lambda: personalize.personalize_project(project_dir, values),
        )
        steps.append("personalize")

        if not request.skip_install:
            package_manager = request.package_manager
            self._step(
                f"Installing dependencies with {package_manager.name}...",
                "Dependencies installed",
                lambda: provision.install_dependencies(
                    project_dir, package_manager, runner=self._runner
                ),
            )
            steps.append("install")

        if not request.skip_git:
            self._step(
                "Initializing git...",
                "Git initialized",
                lambda: provision.initialize_git(
                    project_dir, config.commit_message, runner=self._runner
                ),
            )
            steps.append("git")

        if request.open_editor:
            command = editor.resolve_editor_command(config)
            self._step(
                f"Opening {command[0]}...",
                f"Opened in {command[0]}",
                lambda: provision.open_in_editor(
                    project_dir, command, runner=self._runner
                ),
            )
            steps.append("open")

        return CreateProjectOutcome(
            project_dir=project_dir,
            package_manager=request.package_manager,
            steps=tuple(steps),
        )

    def _handle_failure(self, error: ServiceFailure) -> CreateProjectOutcome:
        self._spinner.stop("Error occurred", failed=True)
        raise error
