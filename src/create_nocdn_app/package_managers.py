"""Supported package managers for dependency installation."""

from __future__ import annotations

from dataclasses import dataclass

from .options import Options


@dataclass(frozen=True)
class PackageManager:
    """A package manager the generated project can be installed with.

    Attributes:
        name: Executable and display name.
        install: Install command argv.
        dev_command: Command shown in the next-steps summary.
    """

    name: str
    install: tuple[str, ...]
    dev_command: str


BUN = PackageManager(name="bun", install=("bun", "install"), dev_command="bun run dev")
NPM = PackageManager(name="npm", install=("npm", "install"), dev_command="npm run dev")
PNPM = PackageManager(name="pnpm", install=("pnpm", "install"), dev_command="pnpm dev")

def select_package_manager(options: Options) -> PackageManager:
    """Return the package manager requested by ``options``.

    ``--use-npm`` wins over ``--use-pnpm`` when both are given.

    Example:
        >>> select_package_manager(Options(use_pnpm=True)).name
        'pnpm'
    """
    if options.use_npm:
        return NPM
    if options.use_pnpm:
        return PNPM
    return BUN
