from __future__ import annotations

import builtins
import shutil
from pathlib import Path

import pytest

from create_nocdn_app import exec as exec_util
from create_nocdn_app import paths


class FakeRunner:
    """Records command requests and answers them without spawning processes."""

    def __init__(
        self,
        *,
        fail_on: tuple[str, ...] | None = None,
        missing: tuple[str, ...] | None = None,
        template_source: Path | None = None,
    ) -> None:
        self.requests: list[exec_util.CommandRequest] = []
        self._fail_on = fail_on
        self._missing = set(missing or ())
        self._template_source = template_source or paths.fixture_template_dir()

    @property
    def argvs(self) -> list[tuple[str, ...]]:
        return [request.argv for request in self.requests]

    def run(self, request: exec_util.CommandRequest) -> exec_util.CommandResult | None:
        self.requests.append(request)
        if request.argv[0] in self._missing:
            return None
        if self._fail_on is not None and request.argv[: len(self._fail_on)] == self._fail_on:
            return exec_util.CommandResult(
                argv=request.argv, returncode=1, stdout="", stderr="boom"
            )
        if request.argv[:2] == ("git", "clone"):
            destination = Path(request.argv[-1])
            shutil.copytree(self._template_source, destination / "template")
            (destination / "README.md").write_text("root\n", encoding="utf-8")
        return exec_util.CommandResult(argv=request.argv, returncode=0, stdout="", stderr="")


def script_input(monkeypatch: pytest.MonkeyPatch, *answers: str) -> list[str]:
    """Feed ``answers`` to ``input()`` in order; EOF once they run out."""
    queue = list(answers)
    prompts: list[str] = []

    def fake_input(prompt: str = "") -> str:
        prompts.append(prompt)
        if not queue:
            raise EOFError
        return queue.pop(0)

    monkeypatch.setattr(builtins, "input", fake_input)
    return prompts
