"""Path helpers for project, staging, template, and config locations."""

import time
from importlib import resources
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "create-nocdn-app"
CONFIG_FILENAME = "config.json"
TEMPLATES_DIRNAME = "templates"
FIXTURE_TEMPLATE_NAME = "nextjs"
TEMP_CLONE_PREFIX = ".temp-"
MANIFEST_FILENAME = "package.json"
LAYOUT_RELATIVE_PATH = Path("app") / "layout.tsx"
AGENTS_FILENAME = "AGENTS.md"


def config_dir() -> Path:
    """Return the user configuration directory.

    Example:
        >>> isinstance(config_dir(), Path)
        True
    """
    return Path(user_config_dir(APP_NAME))


def config_path() -> Path:
    """Return the path to the optional user config file."""
    return config_dir() / CONFIG_FILENAME


def project_path(project_name: str, cwd: Path | None = None) -> Path:
    """Return the target directory for a new project.

    Example:
        >>> project_path("my-app", Path("/work"))
        PosixPath('/work/my-app')
    """
    base = cwd if cwd is not None else Path.cwd()
    return base / project_name


def temp_clone_path(cwd: Path | None = None, *, now: float | None = None) -> Path:
    """Return a run-specific staging directory for the template clone.

    The name embeds a millisecond timestamp so concurrent runs do not collide.

    Example:
        >>> temp_clone_path(Path("/work"), now=1.5).name
        '.temp-1500'
    """
    base = cwd if cwd is not None else Path.cwd()
    stamp = int((time.time() if now is None else now) * 1000)
    return base / f"{TEMP_CLONE_PREFIX}{stamp}"


def fixture_template_dir() -> Path:
    """Return the template directory bundled with the package."""
    return Path(
        str(
            resources.files("create_nocdn_app")
            .joinpath(TEMPLATES_DIRNAME)
            .joinpath(FIXTURE_TEMPLATE_NAME)
        )
    )


def manifest_path(project_dir: Path) -> Path:
    return project_dir / MANIFEST_FILENAME


def layout_path(project_dir: Path) -> Path:
    return project_dir / LAYOUT_RELATIVE_PATH


def agents_path(project_dir: Path) -> Path:
    return project_dir / AGENTS_FILENAME
