"""Subprocess helpers for running external commands."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from . import log
from .services.errors import DependencyMissingError, ExternalCommandFailedError


@dataclass(frozen=True)
class CommandRequest:
    """Typed command invocation request."""

    argv: tuple[str, ...]
    cwd: Path | None = None


@dataclass(frozen=True)
class CommandResult:
    """Typed command execution result."""

    argv: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str


class CommandRunner(Protocol):
    """Runtime command-execution interface."""

    def run(self, request: CommandRequest) -> CommandResult | None: ...


class SubprocessCommandRunner:
    """Default command-runner adapter backed by subprocess."""

    def run(self, request: CommandRequest) -> CommandResult | None:
        try:
            completed = subprocess.run(
                list(request.argv),
                cwd=request.cwd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except FileNotFoundError:
            return None

        return CommandResult(
            argv=request.argv,
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )


_DEFAULT_COMMAND_RUNNER: CommandRunner = SubprocessCommandRunner()


def run_with_runner(
    request: CommandRequest, *, runner: CommandRunner | None = None
) -> CommandResult | None:
    """Execute a typed command request with the given runner."""
    active_runner = runner or _DEFAULT_COMMAND_RUNNER
    log.debug(f"$ {' '.join(request.argv)}")
    return active_runner.run(request)


def _command_failure_detail(request: CommandRequest, result: CommandResult) -> str:
    output = (result.stderr or result.stdout or "").strip()
    command_text = " ".join(request.argv)
    if output:
        return f"command failed: {command_text}\n{output}"
    return f"command failed: {command_text}"


def run_command(
    cmd: list[str],
    cwd: Path | None = None,
    *,
    runner: CommandRunner | None = None,
) -> CommandResult:
    """Run a command to completion and raise on any failure.

    Args:
        cmd: Command and arguments to execute.
        cwd: Optional working directory.
        runner: Optional runner override, mainly for tests.

    Returns:
        The captured ``CommandResult``.

    Raises:
        DependencyMissingError: The executable could not be found.
        ExternalCommandFailedError: The command exited non-zero.
    """
    request = CommandRequest(argv=tuple(cmd), cwd=cwd)
    result = run_with_runner(request, runner=runner)
    if result is None:
        raise DependencyMissingError(
            f"missing required command: {cmd[0]}",
            recovery_hint=f"install {cmd[0]} and make sure it is on PATH",
        )
    if result.returncode != 0:
        raise ExternalCommandFailedError(_command_failure_detail(request, result))
    return result
