"""create-nocdn-app package metadata.

Exports the package version resolved from installed distribution
information.

Example:
    >>> from create_nocdn_app import __version__
    >>> isinstance(__version__, str)
    True
"""

from __future__ import annotations

__all__ = ["__version__"]

try:
    from importlib.metadata import PackageNotFoundError, version
except Exception:  # pragma: no cover - import edge cases
    __version__ = "0.0.2"
else:
    try:
        __version__ = version("create-nocdn-app")
    except PackageNotFoundError:
        __version__ = "0.0.2"
