"""Configuration loading for create-nocdn-app.

Values come from built-in defaults, then the optional user config file, then
environment variables.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from . import paths
from .services.errors import ValidationFailedError

DEFAULT_TEMPLATE_REPO = "https://github.com/nocdn/create-nocdn-app.git"
DEFAULT_TEMPLATE_SUBDIR = "template"
DEFAULT_EDITOR = "code"
DEFAULT_COMMIT_MESSAGE = "init: initial file upload"

ENV_OVERRIDES = {
    "template_repo": "CREATE_NOCDN_APP_TEMPLATE_REPO",
    "template_subdir": "CREATE_NOCDN_APP_TEMPLATE_SUBDIR",
    "editor": "CREATE_NOCDN_APP_EDITOR",
}


class AppConfig(BaseModel):
    """Runtime configuration for project creation.

    Attributes:
        template_repo: Git URL cloned in remote mode.
        template_subdir: Directory inside the clone that holds the template.
        editor: Command used by ``--open``; the project path is appended.
        commit_message: Message of the initial commit.

    Example:
        >>> AppConfig().template_subdir
        'template'
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    template_repo: str = DEFAULT_TEMPLATE_REPO
    template_subdir: str = DEFAULT_TEMPLATE_SUBDIR
    editor: str = DEFAULT_EDITOR
    commit_message: str = DEFAULT_COMMIT_MESSAGE

    @field_validator("template_repo", "template_subdir", "editor", "commit_message")
    @classmethod
    def require_text(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("must not be empty")
        return stripped


def load_json(path: Path) -> dict | None:
    """Load a JSON file if it exists.

    Args:
        path: Path to the JSON file.

    Returns:
        Parsed payload as a dict, or ``None`` if the file does not exist.

    Example:
        >>> from pathlib import Path
        >>> load_json(Path("missing.json")) is None
        True
    """
    if not path.exists():
        return None
    with path.open("r", encoding="utf-8") as fh:
        return json.load(fh)


def _env_overrides(environ: dict[str, str]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for field, variable in ENV_OVERRIDES.items():
        value = environ.get(variable, "").strip()
        if value:
            overrides[field] = value
    return overrides


def load_config(
    path: Path | None = None, *, environ: dict[str, str] | None = None
) -> AppConfig:
    """Resolve the effective configuration.

    Args:
        path: Config file to read; defaults to the user config path.
        environ: Environment mapping; defaults to ``os.environ``.

    Returns:
        Validated ``AppConfig``.

    Raises:
        ValidationFailedError: The config file is unreadable or invalid.
    """
    config_file = path if path is not None else paths.config_path()
    env = dict(os.environ) if environ is None else environ
    try:
        payload = load_json(config_file) or {}
    except (OSError, json.JSONDecodeError) as exc:
        raise ValidationFailedError(
            f"failed to read config file {config_file}: {exc}"
        ) from exc
    if not isinstance(payload, dict):
        raise ValidationFailedError(
            f"config file {config_file} must contain a JSON object"
        )
    payload.update(_env_overrides(env))
    try:
        return AppConfig.model_validate(payload)
    except ValidationError as exc:
        raise ValidationFailedError(f"invalid configuration: {exc}") from exc
