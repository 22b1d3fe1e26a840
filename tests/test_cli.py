from __future__ import annotations

import json
from pathlib import Path

import pytest

from ctsm.cli import is_directory_empty, main

from tests.fixtures.fake_runner import FakeRunner

EXPECTED_ENTRIES = {
    "package.json",
    "tsup.config.ts",
    ".prettierrc",
    "tsconfig.json",
    "LICENSE",
    "src",
    ".gitignore",
    ".git",
}


def _manifest(project: Path) -> dict:
    return json.loads((project / "package.json").read_text(encoding="utf-8"))


def test_is_directory_empty(tmp_path: Path):
    assert is_directory_empty(tmp_path)
    (tmp_path / "file.txt").write_text("content", encoding="utf-8")
    assert not is_directory_empty(tmp_path)


def test_cli_scaffolds_empty_directory_without_name(tmp_path: Path, runner: FakeRunner):
    project = tmp_path / "default-project-name"
    project.mkdir()

    assert main(["-y"], cwd=project) == 0

    assert {entry.name for entry in project.iterdir()} == EXPECTED_ENTRIES
    assert (project / "src" / "index.ts").is_file()
    manifest = _manifest(project)
    assert manifest["name"] == "default-project-name"
    assert manifest["author"] == {"name": "Ada Lovelace", "email": "ada@example.com"}
    assert "Copyright (c)" in (project / "LICENSE").read_text(encoding="utf-8")
    assert runner.commands()[0] == ("git", "config", "--get-regexp", "user.")


def test_cli_fails_in_non_empty_directory_without_name(
    tmp_path: Path, runner: FakeRunner, capsys: pytest.CaptureFixture[str]
):
    (tmp_path / "some-file.txt").write_text("content", encoding="utf-8")

    assert main(["-y"], cwd=tmp_path) == 1

    captured = capsys.readouterr()
    assert "not already empty" in captured.err
    assert runner.calls == []
    assert sorted(path.name for path in tmp_path.iterdir()) == ["some-file.txt"]


@pytest.mark.parametrize(
    "manager, build, install",
    [
        ("bun", "bun tsup", ("bun", "add", "--dev")),
        ("npm", "npx tsup", ("npm", "install", "--save-dev")),
        ("yarn", "yarn tsup", ("yarn", "add", "--dev")),
        ("pnpm", "pnpm tsup", ("pnpm", "add", "--save-dev")),
    ],
)
def test_cli_package_manager_selection(
    tmp_path: Path, runner: FakeRunner, manager: str, build: str, install: tuple[str, ...]
):
    name = f"test-project-{manager}"

    assert main([name, f"--p={manager}", "-y"], cwd=tmp_path) == 0

    project = tmp_path / name
    manifest = _manifest(project)
    assert manifest["name"] == name
    assert manifest["scripts"]["build"] == build
    assert manager in manifest["scripts"]["release"]
    assert runner.calls[1] == (install + ("prettier", "typescript", "tsup"), project.resolve())
    assert runner.calls[2] == (("git", "init"), project.resolve())


def test_cli_skips_prompt_with_y_flag(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["test-project-y-flag", "-y"], cwd=tmp_path) == 0

    out = capsys.readouterr().out
    assert "Y/n" not in out
    assert "Writing package test-project-y-flag at" in out


def test_cli_accepts_empty_answer(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, runner: FakeRunner
):
    prompts: list[str] = []

    def fake_input(message: str) -> str:
        prompts.append(message)
        return ""

    monkeypatch.setattr("builtins.input", fake_input)

    assert main(["lib", "-p=yarn"], cwd=tmp_path) == 0
    assert prompts == [f"Create 'lib' with yarn at {(tmp_path / 'lib').resolve()}? (Y/n) "]
    assert (tmp_path / "lib" / "package.json").is_file()


def test_cli_rejected_confirmation_exits_without_writing(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    runner: FakeRunner,
    capsys: pytest.CaptureFixture[str],
):
    monkeypatch.setattr("builtins.input", lambda message: "n")

    assert main(["lib"], cwd=tmp_path) == 1
    assert not (tmp_path / "lib").exists()
    assert runner.calls == []
    assert capsys.readouterr().err == ""


def test_cli_reports_failed_install(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
):
    monkeypatch.setattr("ctsm.scaffold.run_command", FakeRunner(fail_on="npm"))

    assert main(["lib", "-p=npm", "-y"], cwd=tmp_path) == 1

    assert "Command failed (1): npm install --save-dev" in capsys.readouterr().err
    assert (tmp_path / "lib" / "package.json").is_file()
    assert not (tmp_path / "lib" / ".git").exists()


def test_cli_help(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    assert main(["--help"], cwd=tmp_path) == 0
    assert "Usage: ctsm [name] [flags]" in capsys.readouterr().out
