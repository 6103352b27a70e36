"""Template acquisition: remote clone or bundled fixture copy."""

from __future__ import annotations

import shutil
from pathlib import Path

from . import exec as exec_util
from . import git, log, paths
from .services.errors import IoFailedError, TargetExistsError, UnexpectedStateError


def already_exists_message(project_name: str) -> str:
    return f"Directory {project_name} already exists"


def ensure_target_absent(project_dir: Path) -> None:
    """Raise ``TargetExistsError`` when ``project_dir`` is already present."""
    if project_dir.exists() or project_dir.is_symlink():
        raise TargetExistsError(already_exists_message(project_dir.name))


def clone_template(
    project_dir: Path,
    *,
    repo_url: str,
    subdir: str,
    cwd: Path,
    runner: exec_util.CommandRunner | None = None,
) -> None:
    """Shallow-clone ``repo_url`` and move its template directory into place.

    The staging clone is removed after a successful move. A failure before
    that point leaves it on disk.
    """
    staging = paths.temp_clone_path(cwd)
    git.shallow_clone(repo_url, staging, runner=runner)

    source = staging / subdir
    if not source.is_dir():
        raise UnexpectedStateError(
            f"template directory '{subdir}' not found in {repo_url}"
        )
    ensure_target_absent(project_dir)
    try:
        source.rename(project_dir)
    except OSError as exc:
        raise IoFailedError(f"failed to move template into {project_dir}: {exc}") from exc

    shutil.rmtree(staging, ignore_errors=True)
    log.debug(f"removed staging clone {staging}")


def copy_fixture_template(project_dir: Path, *, source: Path | None = None) -> None:
    """Copy the bundled template into ``project_dir``."""
    template_dir = source if source is not None else paths.fixture_template_dir()
    if not template_dir.is_dir():
        raise UnexpectedStateError(f"bundled template not found at {template_dir}")
    try:
        shutil.copytree(template_dir, project_dir)
    except FileExistsError as exc:
        raise TargetExistsError(already_exists_message(project_dir.name)) from exc
    except OSError as exc:
        raise IoFailedError(f"failed to copy template into {project_dir}: {exc}") from exc
