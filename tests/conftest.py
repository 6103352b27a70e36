# ruff: noqa: E402

import builtins
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import create_nocdn_app.io as io
import create_nocdn_app.log as log
import create_nocdn_app.paths as paths

ENV_VARS = (
    "CREATE_NOCDN_APP_TEMPLATE_REPO",
    "CREATE_NOCDN_APP_TEMPLATE_SUBDIR",
    "CREATE_NOCDN_APP_EDITOR",
    "CREATE_NOCDN_APP_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def _isolated_session(
    monkeypatch: pytest.MonkeyPatch, tmp_path_factory: pytest.TempPathFactory
) -> None:
    monkeypatch.setattr(io, "_use_questionary", lambda: False)
    for name in (*ENV_VARS, "FORCE_COLOR", "TTY_COMPATIBLE"):
        monkeypatch.delenv(name, raising=False)
    config_file = tmp_path_factory.mktemp("config") / "config.json"
    monkeypatch.setattr(paths, "config_path", lambda: config_file)
    log.set_level("info")

    def fail_input(prompt: str = "") -> str:
        raise AssertionError("prompted unexpectedly")

    monkeypatch.setattr(builtins, "input", fail_input)
