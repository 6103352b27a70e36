"""Project name validation shared by the CLI and the prompts."""

import re

PROJECT_NAME_PATTERN = re.compile(r"^[a-z0-9-]+$")
NAME_REQUIRED_MESSAGE = "Project name is required"
NAME_INVALID_MESSAGE = (
    "Project name must be lowercase, alphanumeric, and can contain hyphens"
)


def validate_project_name(value: str) -> str | None:
    """Return an error message for an invalid name, or ``None`` when valid.

    Example:
        >>> validate_project_name("my-app") is None
        True
        >>> validate_project_name("")
        'Project name is required'
    """
    if len(value) == 0:
        return NAME_REQUIRED_MESSAGE
    if not PROJECT_NAME_PATTERN.fullmatch(value):
        return NAME_INVALID_MESSAGE
    return None
