from __future__ import annotations

import pytest

from tests.fixtures.fake_runner import FakeRunner


@pytest.fixture()
def runner() -> FakeRunner:
    """Command runner that records invocations instead of spawning processes."""

    return FakeRunner(git_config="user.name Ada Lovelace\nuser.email ada@example.com\n")


@pytest.fixture(autouse=True)
def patch_run_command(monkeypatch: pytest.MonkeyPatch, runner: FakeRunner) -> None:
    """Never spawn git or a package manager from the test-suite."""

    monkeypatch.setattr("ctsm.scaffold.run_command", runner)
    monkeypatch.setattr("ctsm.git.run_command", runner)
