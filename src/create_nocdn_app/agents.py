"""AGENTS.md content for generated projects."""

from __future__ import annotations

from typing import Literal

AgentsMode = Literal["blank-edit", "minimal", "minimal-edit"]
AGENTS_MODES: tuple[tuple[AgentsMode, str], ...] = (
    ("blank-edit", "Create a blank AGENTS.md and edit it now"),
    ("minimal", "Create a minimal AGENTS.md and don't edit it"),
    ("minimal-edit", "Create a minimal AGENTS.md and edit it now"),
)

RUNTIMES: tuple[str, ...] = ("bun", "npm", "pnpm", "yarn")

MINIMAL_AGENTS_TEMPLATE = (
    "You must only use {runtime} for installing dependencies and running "
    "scripts in this project; never use any other package manager or runtime.\n"
)


def render_minimal_agents(runtime: str) -> str:
    """Render the one-sentence AGENTS.md for ``runtime``.

    Example:
        >>> "must only use pnpm" in render_minimal_agents("pnpm")
        True
    """
    if runtime not in RUNTIMES:
        raise ValueError(f"unsupported runtime {runtime!r}")
    return MINIMAL_AGENTS_TEMPLATE.format(runtime=runtime)


def mode_uses_template(mode: AgentsMode) -> bool:
    return mode in {"minimal", "minimal-edit"}


def mode_edits(mode: AgentsMode) -> bool:
    return mode in {"blank-edit", "minimal-edit"}


def resolve_edited_text(original: str, edited: str) -> str:
    """Return the edited text, or ``original`` when the edit came back empty."""
    if edited.strip():
        return edited
    return original
