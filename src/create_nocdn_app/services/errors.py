"""Service failure contracts.

Services return typed outcomes on success and raise ServiceFailure on expected
validation, precondition and runtime failures. Programmer bugs raise normal
exceptions.
"""

from __future__ import annotations

from typing import Literal

ServiceFailureCode = Literal[
    "validation_failed",
    "target_exists",
    "dependency_missing",
    "external_command_failed",
    "io_failed",
    "unexpected_state",
]


class ServiceFailure(Exception):
    """Expected service failure: validation, precondition, or runtime error.

    Raised by services instead of returning a failure value. Use ``raise
    ServiceFailure(...) from exc`` to chain a causing exception; it is
    available as ``__cause__``. The CLI catches ServiceFailure once, reports
    the message and exits non-zero.
    """

    def __init__(
        self,
        code: ServiceFailureCode,
        message: str,
        *,
        recovery_hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.recovery_hint = recovery_hint


class ValidationFailedError(ServiceFailure):
    """Validation failed (invalid project name or other input)."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("validation_failed", message, recovery_hint=recovery_hint)


class TargetExistsError(ServiceFailure):
    """The project directory is already present on disk."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("target_exists", message, recovery_hint=recovery_hint)


class DependencyMissingError(ServiceFailure):
    """Required executable is missing or unavailable."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("dependency_missing", message, recovery_hint=recovery_hint)


class ExternalCommandFailedError(ServiceFailure):
    """External command (git, package manager, editor) failed."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("external_command_failed", message, recovery_hint=recovery_hint)


class IoFailedError(ServiceFailure):
    """I/O operation failed (read, write, copy, move)."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("io_failed", message, recovery_hint=recovery_hint)


class UnexpectedStateError(ServiceFailure):
    """Template content or layout did not match what the tool expects."""

    def __init__(self, message: str, *, recovery_hint: str | None = None) -> None:
        super().__init__("unexpected_state", message, recovery_hint=recovery_hint)
