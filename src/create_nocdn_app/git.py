"""Git helper functions used while creating a project."""

from pathlib import Path

from . import exec as exec_util


def git_command(args: list[str]) -> list[str]:
    """Build a git command line.

    Example:
        >>> git_command(["init"])
        ['git', 'init']
    """
    return ["git", *args]


def shallow_clone(
    url: str, destination: Path, *, runner: exec_util.CommandRunner | None = None
) -> None:
    """Clone only the latest commit of ``url`` into ``destination``."""
    exec_util.run_command(
        git_command(["clone", "--depth", "1", url, str(destination)]),
        runner=runner,
    )


def init_repository(
    repo_dir: Path,
    commit_message: str,
    *,
    runner: exec_util.CommandRunner | None = None,
) -> None:
    """Initialize a repository and commit every file in ``repo_dir``.

    Any failing step aborts the rest; nothing is undone.
    """
    exec_util.run_command(git_command(["init"]), cwd=repo_dir, runner=runner)
    exec_util.run_command(git_command(["add", "."]), cwd=repo_dir, runner=runner)
    exec_util.run_command(
        git_command(["commit", "-m", commit_message]), cwd=repo_dir, runner=runner
    )
