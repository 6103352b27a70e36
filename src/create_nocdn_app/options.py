"""Command-line options and the help and version text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from . import __version__

PROG_NAME = "create-nocdn-app"

HELP_TEXT = f"""{PROG_NAME} - scaffold a new nocdn Next.js project

Usage:
  {PROG_NAME} [project-name] [options]

Options:
  -h, --help        Show this help message and exit
  -v, --version     Show the version number and exit
  --skip-install    Do not install dependencies
  --skip-git        Do not initialize a git repository
  --open            Open the project in your editor when done
  --use-npm         Use npm instead of bun
  --use-pnpm        Use pnpm instead of bun
  --testing         Copy the bundled template instead of cloning it

Examples:
  {PROG_NAME}
  {PROG_NAME} my-app
  {PROG_NAME} my-app --use-pnpm --skip-git
  {PROG_NAME} my-app --open
"""

_FLAG_FIELDS = {
    "-h": "help",
    "--help": "help",
    "-v": "version",
    "--version": "version",
    "--skip-install": "skip_install",
    "--skip-git": "skip_git",
    "--open": "open",
    "--use-npm": "use_npm",
    "--use-pnpm": "use_pnpm",
    "--testing": "testing",
}


@dataclass(frozen=True)
class Options:
    """Parsed command-line switches plus the optional positional name."""

    help: bool = False
    version: bool = False
    skip_install: bool = False
    skip_git: bool = False
    open: bool = False
    use_npm: bool = False
    use_pnpm: bool = False
    testing: bool = False
    project_name: str | None = None


def parse_args(argv: Sequence[str]) -> Options:
    """Build ``Options`` from a flat argument list.

    Unknown flags are ignored. The first argument that does not start with
    ``-`` becomes the candidate project name.

    Example:
        >>> parse_args(["--weird", "my-app", "--skip-git"]).project_name
        'my-app'
    """
    flags: dict[str, bool] = {}
    project_name: str | None = None
    for arg in argv:
        if arg.startswith("-"):
            field = _FLAG_FIELDS.get(arg)
            if field is not None:
                flags[field] = True
            continue
        if project_name is None:
            project_name = arg
    return Options(project_name=project_name, **flags)


def version_text() -> str:
    return f"{PROG_NAME} v{__version__}"
