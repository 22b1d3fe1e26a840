"""Thin wrappers around the ``git`` executable."""

from __future__ import annotations

import logging
from pathlib import Path

from .process import Runner, run_command

__all__ = ["USER_PREFIX", "get_git_user", "init_repository", "parse_config_listing"]


LOGGER = logging.getLogger(__name__)

USER_PREFIX = "user."


def parse_config_listing(text: str, prefix: str = USER_PREFIX) -> dict[str, str]:
    """Parse ``git config --get-regexp`` output into a ``{key: value}`` mapping.

    The first whitespace-separated token of each line is the key, with
    ``prefix`` removed; the rest of the line, re-joined with single spaces, is
    the value.
    """

    entries: dict[str, str] = {}
    for line in text.splitlines():
        if not line.strip():
            continue
        key, *value = line.split()
        entries[key.removeprefix(prefix)] = " ".join(value)
    return entries


async def get_git_user(runner: Runner | None = None) -> dict[str, str]:
    """Return the locally configured git identity (``name``, ``email``, ...).

    A non-zero exit from git, or git not being installed, means nothing is
    configured and yields ``{}``.
    """

    run = runner or run_command
    try:
        result = await run(["git", "config", "--get-regexp", USER_PREFIX], check=False)
    except FileNotFoundError:
        LOGGER.debug("git is not installed; no identity available")
        return {}
    if result.returncode != 0:
        LOGGER.debug("No git identity configured (git exited with %s)", result.returncode)
        return {}
    return parse_config_listing(result.stdout)


async def init_repository(directory: str | Path, runner: Runner | None = None) -> None:
    run = runner or run_command
    await run(["git", "init"], cwd=directory)
