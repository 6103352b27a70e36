"""Rewrite template files with the new project's identity."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from pathlib import Path

from . import paths
from .services.errors import IoFailedError, UnexpectedStateError

PROJECT_NAME_PLACEHOLDER = "{{project-name}}"

_STRING_LITERAL = r"""(?:"(?:[^"\\\n]|\\.)*"|'(?:[^'\\\n]|\\.)*'|`[^`]*`)"""
TITLE_PATTERN = re.compile(rf"(?P<key>\btitle:\s*){_STRING_LITERAL}")
DESCRIPTION_PATTERN = re.compile(
    rf"(?P<key>\bdescription:[ \t]*)(?:{_STRING_LITERAL}|[^,}}\n]*[^,}}\s])"
)


@dataclass(frozen=True)
class Personalization:
    """Values written into a freshly acquired template.

    Attributes:
        project_name: Validated project name.
        description: Optional description; blank means keep the template's.
        agents_instruction: AGENTS.md body; ``None`` writes no file.
    """

    project_name: str
    description: str | None = None
    agents_instruction: str | None = None


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise IoFailedError(f"failed to read {path}: not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise IoFailedError(f"failed to read {path}: {exc}") from exc


def _write_text(path: Path, content: str) -> None:
    try:
        path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise IoFailedError(f"failed to write {path}: {exc}") from exc


def _js_string(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def rename_manifest(project_dir: Path, project_name: str) -> None:
    """Set the ``name`` field of ``package.json``."""
    manifest = paths.manifest_path(project_dir)
    try:
        payload = json.loads(_read_text(manifest))
    except json.JSONDecodeError as exc:
        raise IoFailedError(f"failed to parse {manifest}: {exc}") from exc
    if not isinstance(payload, dict):
        raise UnexpectedStateError(f"{manifest} must contain a JSON object")
    payload["name"] = project_name
    _write_text(manifest, json.dumps(payload, indent=2, ensure_ascii=False) + "\n")


def apply_layout_title(content: str, project_name: str) -> str:
    """Substitute the project name into layout source.

    Every ``{{project-name}}`` placeholder is replaced. Templates without the
    placeholder get their first ``title:`` literal replaced instead.

    Example:
        >>> apply_layout_title('title: "Create Next App",', "my-app")
        'title: "my-app",'
    """
    if PROJECT_NAME_PLACEHOLDER in content:
        return content.replace(PROJECT_NAME_PLACEHOLDER, project_name)
    updated, count = TITLE_PATTERN.subn(
        lambda match: match.group("key") + _js_string(project_name), content, count=1
    )
    if count == 0:
        raise UnexpectedStateError(
            f"layout has neither a {PROJECT_NAME_PLACEHOLDER} placeholder nor a title field"
        )
    return updated


def apply_layout_description(content: str, description: str | None) -> str:
    """Substitute a trimmed description into the first ``description:`` field.

    The old value is a string literal or any expression up to the next
    top-level separator. A blank or missing description leaves ``content``
    unchanged.
    """
    if description is None or not description.strip():
        return content
    trimmed = description.strip()
    updated, count = DESCRIPTION_PATTERN.subn(
        lambda match: match.group("key") + _js_string(trimmed), content, count=1
    )
    if count == 0:
        raise UnexpectedStateError("layout has no description field")
    return updated


def rewrite_layout(
    project_dir: Path, project_name: str, description: str | None
) -> None:
    layout = paths.layout_path(project_dir)
    content = _read_text(layout)
    content = apply_layout_title(content, project_name)
    content = apply_layout_description(content, description)
    _write_text(layout, content)


def write_agents_file(project_dir: Path, instruction: str | None) -> bool:
    """Write ``AGENTS.md`` verbatim. Returns whether a file was written."""
    if instruction is None:
        return False
    _write_text(paths.agents_path(project_dir), instruction)
    return True


def personalize_project(project_dir: Path, values: Personalization) -> None:
    """Apply every template rewrite for a new project."""
    rename_manifest(project_dir, values.project_name)
    rewrite_layout(project_dir, values.project_name, values.description)
    write_agents_file(project_dir, values.agents_instruction)
