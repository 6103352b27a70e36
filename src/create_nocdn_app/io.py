"""Console prompts with explicit cancellation results.

Every prompt returns either the answer or the ``CANCEL`` sentinel. Callers
check ``is_cancel`` after each call instead of catching an exception.
"""

from __future__ import annotations

import sys
from typing import Callable, Sequence, TypeVar

import questionary

from . import log

T = TypeVar("T")
Validator = Callable[[str], "str | None"]


class _Cancel:
    _instance: "_Cancel | None" = None

    def __new__(cls) -> "_Cancel":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "CANCEL"

    def __bool__(self) -> bool:
        return False


CANCEL = _Cancel()


def is_cancel(value: object) -> bool:
    """Return ``True`` when a prompt result means the user aborted.

    Example:
        >>> is_cancel(CANCEL)
        True
        >>> is_cancel("")
        False
    """
    return value is CANCEL


def _use_questionary() -> bool:
    return sys.stdin.isatty() and sys.stdout.isatty()


def say(message: str = "") -> None:
    """Print a normal message to stdout."""
    print(message)


def _read_line(label: str) -> str | _Cancel:
    try:
        return input(label)
    except (EOFError, KeyboardInterrupt):
        return CANCEL


def text(
    message: str,
    *,
    placeholder: str | None = None,
    default: str = "",
    validate: Validator | None = None,
    multiline: bool = False,
) -> str | _Cancel:
    """Prompt for free text.

    Args:
        message: Prompt label shown to the user.
        placeholder: Hint shown next to the label when there is no default.
        default: Editable initial value; plain input returns it for an
            empty answer.
        validate: Returns an error message for rejected values.
        multiline: Allow multi-line editing in interactive terminals.

    Returns:
        The entered text, or ``CANCEL``.
    """
    if _use_questionary():
        kwargs: dict[str, object] = {"default": default, "multiline": multiline}
        if validate is not None:
            kwargs["validate"] = lambda value: validate(value) or True
        if placeholder and not default:
            kwargs["instruction"] = f"({placeholder})"
        answer = questionary.text(message, **kwargs).ask()
        if answer is None:
            return CANCEL
        return str(answer)

    if default:
        say(f"{message} (press enter to keep):")
        say(default)
        label = "> "
    elif placeholder:
        label = f"{message} ({placeholder}): "
    else:
        label = f"{message}: "
    while True:
        raw = _read_line(label)
        if is_cancel(raw):
            return CANCEL
        value = str(raw).strip()
        if value == "" and default:
            value = default
        if validate is not None:
            problem = validate(value)
            if problem:
                log.warning(problem)
                continue
        return value


def confirm(message: str, default: bool = False) -> bool | _Cancel:
    """Prompt for a yes/no confirmation.

    Returns:
        ``True`` when the user confirms, ``False`` when they decline, or
        ``CANCEL``.
    """
    if _use_questionary():
        answer = questionary.confirm(message, default=default).ask()
        if answer is None:
            return CANCEL
        return bool(answer)
    suffix = "[Y/n]" if default else "[y/N]"
    raw = _read_line(f"{message} {suffix}: ")
    if is_cancel(raw):
        return CANCEL
    response = str(raw).strip().lower()
    if response == "":
        return default
    return response in {"y", "yes"}


def select(
    message: str,
    choices: Sequence[tuple[T, str]],
    default: T | None = None,
) -> T | _Cancel:
    """Prompt for one value out of a closed set.

    Args:
        message: Prompt label shown to the user.
        choices: ``(value, label)`` pairs in display order.
        default: Value chosen when plain input is left empty.

    Returns:
        The chosen value, or ``CANCEL``.
    """
    if not choices:
        raise ValueError("select requires at least one choice")
    if _use_questionary():
        options = [questionary.Choice(title=label, value=value) for value, label in choices]
        kwargs: dict[str, object] = {}
        if default is not None:
            kwargs["default"] = next(
                (option for option in options if option.value == default), None
            )
        answer = questionary.select(message, choices=options, **kwargs).ask()
        if answer is None:
            return CANCEL
        return answer

    fallback = default if default is not None else choices[0][0]
    say(message)
    for index, (value, label) in enumerate(choices, start=1):
        marker = "*" if value == fallback else " "
        say(f" {marker} {index}) {label}")
    while True:
        raw = _read_line("Choose an option: ")
        if is_cancel(raw):
            return CANCEL
        response = str(raw).strip()
        if response == "":
            return fallback
        if response.isdigit() and 1 <= int(response) <= len(choices):
            return choices[int(response) - 1][0]
        for value, label in choices:
            if response.lower() in {str(value).lower(), label.lower()}:
                return value
        log.warning(f"Please choose a number between 1 and {len(choices)}")
