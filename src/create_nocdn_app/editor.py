"""Editor resolution for ``--open``."""

import shlex

from .config import AppConfig
from .services.errors import ValidationFailedError


def resolve_editor_command(config: AppConfig) -> list[str]:
    """Resolve the editor launch command.

    Args:
        config: Active configuration.

    Returns:
        List of command tokens suitable for ``subprocess`` execution.

    Example:
        >>> resolve_editor_command(AppConfig(editor="code --new-window"))
        ['code', '--new-window']
    """
    try:
        command = shlex.split(config.editor)
    except ValueError as exc:
        raise ValidationFailedError(f"invalid editor command: {config.editor}") from exc
    if not command:
        raise ValidationFailedError("missing editor command")
    return command
