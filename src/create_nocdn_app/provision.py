"""Dependency install, git initialization, and editor launch."""

from __future__ import annotations

from pathlib import Path

from . import exec as exec_util
from . import git
from .package_managers import PackageManager


def install_dependencies(
    project_dir: Path,
    package_manager: PackageManager,
    *,
    runner: exec_util.CommandRunner | None = None,
) -> None:
    exec_util.run_command(list(package_manager.install), cwd=project_dir, runner=runner)


def initialize_git(
    project_dir: Path,
    commit_message: str,
    *,
    runner: exec_util.CommandRunner | None = None,
) -> None:
    git.init_repository(project_dir, commit_message, runner=runner)


def open_in_editor(
    project_dir: Path,
    editor_command: list[str],
    *,
    runner: exec_util.CommandRunner | None = None,
) -> None:
    """Launch the editor with the project path as its last argument."""
    exec_util.run_command([*editor_command, str(project_dir)], runner=runner)
