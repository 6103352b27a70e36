from __future__ import annotations

import json
import shutil
from pathlib import Path

import pytest
import typer

from create_nocdn_app import paths
from create_nocdn_app.commands import create as create_cmd
from create_nocdn_app.options import Options
from tests.create_nocdn_app.helpers import FakeRunner, script_input

LOCAL = {"testing": True, "skip_install": True, "skip_git": True}


def run_create(
    options: Options, cwd: Path, runner: FakeRunner | None = None
) -> int:
    try:
        create_cmd.create_project(options, cwd=cwd, runner=runner or FakeRunner())
    except typer.Exit as exc:
        return exc.exit_code
    return 0


def test_end_to_end_local_template(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    script_input(monkeypatch, "", "  A sample app  ", "y", "2", "pnpm")

    code = run_create(Options(project_name="my-app", **LOCAL), tmp_path)

    assert code == 0
    project_dir = tmp_path / "my-app"
    manifest = json.loads(paths.manifest_path(project_dir).read_text(encoding="utf-8"))
    assert manifest["name"] == "my-app"
    layout = paths.layout_path(project_dir).read_text(encoding="utf-8")
    assert "my-app" in layout
    assert 'description: "A sample app"' in layout
    agents_text = paths.agents_path(project_dir).read_text(encoding="utf-8")
    assert "pnpm" in agents_text
    assert "must only use" in agents_text
    assert not (project_dir / "node_modules").exists()
    assert not (project_dir / ".git").exists()
    out = capsys.readouterr().out
    assert "Project my-app is ready" in out
    assert "cd my-app" in out
    assert "bun install" in out
    assert "bun run dev" in out


def test_declining_agents_file_writes_none(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    script_input(monkeypatch, "", "", "n")

    assert run_create(Options(project_name="my-app", **LOCAL), tmp_path) == 0

    project_dir = tmp_path / "my-app"
    assert project_dir.is_dir()
    assert not paths.agents_path(project_dir).exists()
    layout = paths.layout_path(project_dir).read_text(encoding="utf-8")
    assert "Created with create-nocdn-app" in layout


def test_minimal_edit_with_empty_edit_keeps_template(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    script_input(monkeypatch, "", "", "y", "3", "bun", "")

    assert run_create(Options(project_name="my-app", **LOCAL), tmp_path) == 0

    agents_text = paths.agents_path(tmp_path / "my-app").read_text(encoding="utf-8")
    assert "must only use bun" in agents_text


def test_blank_edit_writes_authored_text(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    script_input(monkeypatch, "", "", "y", "1", "Always run the linter.")

    assert run_create(Options(project_name="my-app", **LOCAL), tmp_path) == 0

    agents_text = paths.agents_path(tmp_path / "my-app").read_text(encoding="utf-8")
    assert agents_text == "Always run the linter."


def test_prompts_for_name_until_valid(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    prompts = script_input(monkeypatch, "", "Bad Name", "my-app", "", "")

    assert run_create(Options(**LOCAL), tmp_path) == 0

    assert (tmp_path / "my-app").is_dir()
    assert not (tmp_path / "Bad Name").exists()
    assert sum("What is your project name?" in prompt for prompt in prompts) == 2
    assert "lowercase, alphanumeric" in capsys.readouterr().err


def test_invalid_cli_name_exits_before_prompting(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    assert run_create(Options(project_name="My_App", **LOCAL), tmp_path) == 1

    assert "lowercase, alphanumeric" in capsys.readouterr().err
    assert list(tmp_path.iterdir()) == []


def test_cancelling_a_prompt_exits_cleanly(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    script_input(monkeypatch, "")

    assert run_create(Options(**LOCAL), tmp_path) == 0

    assert "Operation cancelled" in capsys.readouterr().out
    assert list(tmp_path.iterdir()) == []


def test_vite_is_coming_soon(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    script_input(monkeypatch, "2")

    assert run_create(Options(project_name="my-app", **LOCAL), tmp_path) == 0

    assert "coming soon" in capsys.readouterr().out
    assert list(tmp_path.iterdir()) == []


def test_existing_directory_is_left_alone(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    existing = tmp_path / "my-app"
    existing.mkdir()
    (existing / "keep.txt").write_text("mine", encoding="utf-8")
    script_input(monkeypatch, "", "", "")
    runner = FakeRunner()

    code = run_create(Options(project_name="my-app"), tmp_path, runner)

    assert code == 1
    assert "Directory my-app already exists" in capsys.readouterr().out
    assert [p.name for p in existing.iterdir()] == ["keep.txt"]
    assert (existing / "keep.txt").read_text(encoding="utf-8") == "mine"
    assert runner.argvs == []


def test_operational_failure_reports_and_exits_one(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    script_input(monkeypatch, "", "", "")
    runner = FakeRunner(fail_on=("git", "commit"))

    code = run_create(
        Options(project_name="my-app", testing=True, skip_install=True), tmp_path, runner
    )

    assert code == 1
    captured = capsys.readouterr()
    assert "Error occurred" in captured.out
    assert "Setup failed" in captured.out
    assert "command failed: git commit" in captured.err
    assert "boom" in captured.err
    assert (tmp_path / "my-app").is_dir()


def test_remote_mode_with_selected_package_manager(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    script_input(monkeypatch, "", "", "")
    runner = FakeRunner()

    code = run_create(Options(project_name="my-app", use_pnpm=True), tmp_path, runner)

    assert code == 0
    assert runner.argvs[0][:2] == ("git", "clone")
    assert ("pnpm", "install") in runner.argvs
    assert runner.argvs[-1] == ("git", "commit", "-m", "init: initial file upload")
    assert [p.name for p in tmp_path.iterdir()] == ["my-app"]
    assert "pnpm dev" in capsys.readouterr().out


def test_invalid_config_file_exits_one(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    config_file = paths.config_path()
    config_file.write_text("{broken", encoding="utf-8")

    assert run_create(Options(project_name="my-app", **LOCAL), tmp_path) == 1

    assert "failed to read config file" in capsys.readouterr().err


def test_undecodable_template_file_reports_setup_failure(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    template = tmp_path / "template"
    shutil.copytree(paths.fixture_template_dir(), template)
    paths.layout_path(template).write_bytes(b'title: "\xff\xfe",\ndescription: "x",\n')
    work = tmp_path / "work"
    work.mkdir()
    script_input(monkeypatch, "", "", "")

    with pytest.raises(typer.Exit) as excinfo:
        create_cmd.create_project(
            Options(project_name="my-app", **LOCAL),
            cwd=work,
            runner=FakeRunner(),
            fixture_dir=template,
        )

    assert excinfo.value.exit_code == 1
    captured = capsys.readouterr()
    assert "Error occurred" in captured.out
    assert "Setup failed" in captured.out
    assert "not valid UTF-8" in captured.err
