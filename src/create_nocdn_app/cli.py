"""Command-line entry point for create-nocdn-app."""

from __future__ import annotations

import typer

from . import io
from .commands import create as create_cmd
from .options import HELP_TEXT, parse_args, version_text

# Flags are tokenized by ``parse_args`` so unknown ones can be ignored.
_CONTEXT_SETTINGS = {"ignore_unknown_options": True, "allow_extra_args": True}

app = typer.Typer(add_completion=False)


@app.command(context_settings=_CONTEXT_SETTINGS, add_help_option=False)
def create(
    args: list[str] | None = typer.Argument(
        None, metavar="[PROJECT-NAME] [OPTIONS]", show_default=False
    ),
) -> None:
    """Scaffold a new project from the nocdn template."""
    options = parse_args(args or [])
    if options.help:
        io.say(HELP_TEXT.rstrip("\n"))
        raise typer.Exit(0)
    if options.version:
        io.say(version_text())
        raise typer.Exit(0)
    create_cmd.create_project(options)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
